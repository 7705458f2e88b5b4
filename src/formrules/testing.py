"""Assertion helpers for testing forms that use formrules.

Each assertion produces a clear error message on failure, showing the
full error map so a failing test explains itself::

    from formrules.testing import assert_field_error, assert_valid

    result = engine.validate(registry, {"email": "nope"})
    assert_field_error(result, "email", "valid email address")
"""

from formrules.result import ValidationResult


def assert_valid(result: ValidationResult) -> None:
    """Assert the run passed with an empty error map."""
    assert result.is_valid, f"Expected a valid result, got errors: {result.errors}"


def assert_invalid(result: ValidationResult, *, fields: int | None = None) -> None:
    """Assert the run failed, optionally on exactly *fields* fields."""
    assert not result.is_valid, "Expected validation to fail, but no rule failed"
    if fields is not None:
        assert len(result.errors) == fields, (
            f"Expected errors on {fields} field(s), got {len(result.errors)}.\n"
            f"Errors: {result.errors}"
        )


def assert_field_error(result: ValidationResult, field: str, contains: str | None = None) -> None:
    """Assert *field* has an error, optionally containing the given text."""
    assert field in result.errors, (
        f"Expected an error for {field!r}.\n"
        f"Errors: {result.errors}"
    )
    if contains is not None:
        assert contains in result.errors[field], (
            f"Error for {field!r} does not contain {contains!r}.\n"
            f"Error: {result.errors[field]!r}"
        )


def assert_no_field_error(result: ValidationResult, field: str) -> None:
    """Assert *field* has **no** error."""
    assert field not in result.errors, (
        f"Unexpected error for {field!r}: {result.errors[field]!r}"
    )


def assert_value(result: ValidationResult, field: str, expected: str) -> None:
    """Assert the (possibly transformed) value of *field*."""
    assert field in result.data, (
        f"Field {field!r} is not in the value map.\n"
        f"Values: {dict(result.data)}"
    )
    assert result.data[field] == expected, (
        f"Expected {field!r} to be {expected!r}, got {result.data[field]!r}"
    )

"""Tests for formrules.testing — assertion helpers."""

import pytest

from formrules.kinds import RuleKind
from formrules.result import Failure, ValidationResult
from formrules.testing import (
    assert_field_error,
    assert_invalid,
    assert_no_field_error,
    assert_valid,
    assert_value,
)

VALID = ValidationResult(data={"name": "Ada"}, errors={})
INVALID = ValidationResult(
    data={"name": ""},
    errors={"name": "Please enter the value for name"},
    failures=(Failure("name", RuleKind.REQUIRED, "Please enter the value for name"),),
)


class TestValidationResult:
    def test_truthiness(self) -> None:
        assert VALID
        assert not INVALID

    def test_is_valid(self) -> None:
        assert VALID.is_valid is True
        assert INVALID.is_valid is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            VALID.errors = {}  # type: ignore[misc]

    def test_messages_for_unknown_field(self) -> None:
        assert INVALID.messages_for("email") == []


class TestAssertions:
    def test_assert_valid(self) -> None:
        assert_valid(VALID)
        with pytest.raises(AssertionError, match="Expected a valid result"):
            assert_valid(INVALID)

    def test_assert_invalid(self) -> None:
        assert_invalid(INVALID, fields=1)
        with pytest.raises(AssertionError, match="Expected validation to fail"):
            assert_invalid(VALID)

    def test_assert_invalid_field_count(self) -> None:
        with pytest.raises(AssertionError, match="Expected errors on 2 field"):
            assert_invalid(INVALID, fields=2)

    def test_assert_field_error(self) -> None:
        assert_field_error(INVALID, "name")
        assert_field_error(INVALID, "name", "enter the value")
        with pytest.raises(AssertionError, match="does not contain"):
            assert_field_error(INVALID, "name", "email")
        with pytest.raises(AssertionError, match="Expected an error for 'email'"):
            assert_field_error(INVALID, "email")

    def test_assert_no_field_error(self) -> None:
        assert_no_field_error(VALID, "name")
        with pytest.raises(AssertionError, match="Unexpected error"):
            assert_no_field_error(INVALID, "name")

    def test_assert_value(self) -> None:
        assert_value(VALID, "name", "Ada")
        with pytest.raises(AssertionError, match="Expected 'name' to be 'ada'"):
            assert_value(VALID, "name", "ada")
        with pytest.raises(AssertionError, match="not in the value map"):
            assert_value(VALID, "email", "x")

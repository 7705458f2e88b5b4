"""Validation result — verdict, combined errors, and the cleaned values."""

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass

from formrules.kinds import RuleKind


@dataclass(frozen=True, slots=True)
class Failure:
    """One failing rule: which field, which kind, and the message chosen."""

    field: str
    kind: RuleKind
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of one validation run.

    ``is_valid`` is True when no rule failed. The result is falsy when
    invalid, so you can write::

        result = engine.validate(registry, form)
        if not result:
            return render("form.html", form=result.data, errors=result.errors)

    It also unpacks as ``(is_valid, errors, data)``::

        ok, errors, values = engine.validate(registry, form)

    ``errors`` maps each failing field to its combined message, fragments
    joined in rule order::

        {"email": "Please enter the value for email - Please provide a valid email address"}

    ``data`` is the caller's own value mapping after transforms, not a copy.
    ``failures`` keeps each failing rule separately for callers that need
    the individual fragments.
    """

    data: MutableMapping[str, str]
    errors: dict[str, str]
    failures: tuple[Failure, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def messages_for(self, field: str) -> list[str]:
        """Individual failure messages for *field*, in rule order."""
        return [f.message for f in self.failures if f.field == field]

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid

    def __iter__(self) -> Iterator[object]:
        return iter((self.is_valid, self.errors, self.data))

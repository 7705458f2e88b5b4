"""formrules exception hierarchy.

Rule failures are never raised: they end up in the error map of a
``ValidationResult``. Exceptions are reserved for mistakes in how rules
or configuration were declared, and surface at registration time.
"""

from dataclasses import dataclass


class FormRulesError(Exception):
    """Base for all formrules-specific errors."""


class ConfigurationError(FormRulesError):
    """Raised when a rule or validator configuration is invalid.

    Typically raised by ``RuleRegistry.add()`` or ``ValidatorConfig()``
    so mistakes are caught where the rules are declared, not mid-run.
    """


@dataclass(frozen=True, slots=True)
class UnknownRuleKindError(ConfigurationError):
    """The rule kind is not one of the built-in ``RuleKind`` members."""

    kind: object

    def __str__(self) -> str:
        return f"Unknown rule kind: {self.kind!r}"


@dataclass(frozen=True, slots=True)
class InvalidParameterError(ConfigurationError):
    """A rule parameter is missing or cannot be used by its kind.

    ``detail`` explains what was expected, e.g. ``"expected an integer
    length"`` or the ``re.error`` message of a broken pattern.
    """

    field: str
    kind: str
    parameter: object
    detail: str = ""

    def __str__(self) -> str:
        text = f"Invalid parameter {self.parameter!r} for {self.kind!r} rule on field {self.field!r}"
        if self.detail:
            return f"{text}: {self.detail}"
        return text

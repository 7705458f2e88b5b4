"""FormValidator — one object holding a form's rules and its last errors.

Convenience wrapper over ``RuleRegistry`` + ``ValidationEngine`` for
code that prefers the add-then-validate style::

    validator = FormValidator()
    validator.add_validation("Name", "req")
    validator.add_validation("Email", "req", message="Please fill in Email")
    validator.add_validation("Email", "email")
    validator.add_validation("Email", "lower")

    if not validator.validate(form):
        for field_name, error in validator.get_errors().items():
            print(f"{field_name} : {error}")

Keeps per-run state, so use one instance per request.
"""

from collections.abc import MutableMapping

from formrules.config import ValidatorConfig
from formrules.engine import ValidationEngine
from formrules.kinds import RuleKind
from formrules.registry import RuleRegistry
from formrules.result import ValidationResult
from formrules.rules import Rule


class FormValidator:
    __slots__ = ("_engine", "_registry", "last_result")

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._registry = RuleRegistry()
        self._engine = ValidationEngine(config)
        self.last_result: ValidationResult | None = None

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def add_validation(
        self,
        field: str,
        kind: RuleKind | str,
        parameter: object = None,
        message: str | None = None,
    ) -> Rule:
        """Register a rule. See ``RuleRegistry.add``."""
        return self._registry.add(field, kind, parameter, message)

    def validate(self, values: MutableMapping[str, str]) -> bool:
        """Validate *values* in place. Returns False if any rule failed."""
        self.last_result = self._engine.validate(self._registry, values)
        return self.last_result.is_valid

    @property
    def errors(self) -> dict[str, str]:
        """Errors from the most recent ``validate()`` call."""
        if self.last_result is None:
            return {}
        return dict(self.last_result.errors)

    def get_errors(self) -> dict[str, str]:
        return self.errors

    def reset_errors(self) -> None:
        self.last_result = None

    def reset_rules(self) -> None:
        self._registry.reset()

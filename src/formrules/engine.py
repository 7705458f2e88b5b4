"""Validation engine — runs registered rules against a value mapping.

One run is a single ordered pass over the rules:

- transform rules rewrite ``values[field]`` in place when the field is
  present (a missing field is left missing);
- check rules read the current value (a missing field reads as ``""``)
  and, on failure, add a message to that field's entry in the error map.

A failing rule never stops later rules. Nothing is raised during a run.

Usage::

    engine = ValidationEngine()
    result = engine.validate(registry, form)
    if not result:
        # result.errors == {"name": "Please enter the value for name"}
        ...
"""

import logging
from collections.abc import Iterable, MutableMapping

from formrules.checks import CHECKS, TRANSFORMS
from formrules.config import ValidatorConfig
from formrules.messages import format_message
from formrules.result import Failure, ValidationResult
from formrules.rules import Rule

logger = logging.getLogger("formrules.engine")


class ValidationEngine:
    """Evaluates rules in registration order and aggregates failures.

    The engine holds only its configuration; every call to ``validate``
    builds a fresh error map, so one engine can serve many runs. The
    value mapping passed in is mutated by transforms, so concurrent runs
    must not share it.
    """

    __slots__ = ("config",)

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self.config = config or ValidatorConfig()

    def validate(
        self,
        rules: Iterable[Rule],
        values: MutableMapping[str, str],
    ) -> ValidationResult:
        """Run *rules* (a ``RuleRegistry`` or any iterable of rules) against *values*.

        Returns a ``ValidationResult`` whose ``data`` is *values* itself.
        """
        errors: dict[str, str] = {}
        failures: list[Failure] = []
        count = 0

        for rule in rules:
            count += 1
            transform = TRANSFORMS.get(rule.kind)
            if transform is not None:
                current = values.get(rule.field)
                if current is not None:
                    values[rule.field] = transform(current)
                continue

            value = values.get(rule.field)
            if value is None:
                value = ""

            if CHECKS[rule.kind](value, rule):
                continue

            message = self._message(rule)
            failures.append(Failure(field=rule.field, kind=rule.kind, message=message))
            if rule.field in errors:
                errors[rule.field] += self.config.separator + message
            else:
                errors[rule.field] = message

            if self.config.log_failures:
                logger.debug("%s failed %s: %s", rule.field, rule.kind.name, message)

        logger.debug(
            "Validated %d rules: %d failures across %d fields",
            count,
            len(failures),
            len(errors),
        )
        return ValidationResult(data=values, errors=errors, failures=tuple(failures))

    def _message(self, rule: Rule) -> str:
        """Custom message if the rule has one, else the kind's template."""
        if rule.message:
            return rule.message
        template = self.config.message_for(rule.kind)
        return format_message(template, rule.kind, rule.field, rule.parameter)

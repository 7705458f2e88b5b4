"""Rule — a frozen binding of a field to one check or transform.

Rules are built directly or through ``make_rule()`` (called from
``RuleRegistry.add``). Either way the kind is resolved and the parameter
coerced on construction, so a typo in a form definition raises
``ConfigurationError`` at registration.
"""

import math
import re
from typing import TypeAlias
from dataclasses import dataclass

from formrules.errors import ConfigurationError, InvalidParameterError
from formrules.kinds import RuleKind

Parameter: TypeAlias = int | float | re.Pattern[str] | None


@dataclass(frozen=True, slots=True)
class Rule:
    """A single registered rule.

    Construction resolves ``kind`` and coerces ``parameter``, so every
    ``Rule`` that exists can be evaluated: ``int`` for length limits,
    ``float`` for numeric bounds, a compiled pattern for regex rules,
    ``None`` for everything else. ``message`` is ``None`` when the
    kind's default template should be used.

    Raises:
        ConfigurationError: *field* is not a non-empty string.
        UnknownRuleKindError: *kind* is not a known rule kind.
        InvalidParameterError: *parameter* is missing or unusable for *kind*.
    """

    field: str
    kind: RuleKind
    parameter: Parameter = None
    message: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field:
            msg = f"Rule field name must be a non-empty string, got {self.field!r}"
            raise ConfigurationError(msg)

        kind = RuleKind.parse(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "parameter", _coerce_parameter(self.field, kind, self.parameter))
        object.__setattr__(self, "message", self.message or None)


def make_rule(
    field: str,
    kind: RuleKind | str,
    parameter: object = None,
    message: str | None = None,
) -> Rule:
    """Build a ``Rule``; see ``Rule`` for what is checked."""
    return Rule(field=field, kind=kind, parameter=parameter, message=message)  # type: ignore[arg-type]


def _coerce_parameter(field: str, kind: RuleKind, parameter: object) -> Parameter:
    target = kind.parameter_type
    if target is None:
        # Checks like "req" and the transforms take no parameter
        return None

    if parameter is None or (isinstance(parameter, str) and not parameter.strip()):
        raise InvalidParameterError(field, kind.value, parameter, "a parameter is required")

    if target is int:
        return _coerce_length(field, kind, parameter)
    if target is float:
        return _coerce_bound(field, kind, parameter)
    return _compile_pattern(field, kind, parameter)


def _coerce_length(field: str, kind: RuleKind, parameter: object) -> int:
    if isinstance(parameter, bool):
        raise InvalidParameterError(field, kind.value, parameter, "expected an integer length")
    if isinstance(parameter, int):
        return parameter
    if isinstance(parameter, float) and parameter.is_integer():
        return int(parameter)
    if isinstance(parameter, str):
        try:
            return int(parameter.strip())
        except ValueError:
            pass
    raise InvalidParameterError(field, kind.value, parameter, "expected an integer length")


def _coerce_bound(field: str, kind: RuleKind, parameter: object) -> float:
    if isinstance(parameter, bool) or not isinstance(parameter, int | float | str):
        raise InvalidParameterError(field, kind.value, parameter, "expected a number")
    try:
        bound = float(parameter)
    except ValueError:
        raise InvalidParameterError(field, kind.value, parameter, "expected a number") from None
    if not math.isfinite(bound):
        raise InvalidParameterError(field, kind.value, parameter, "bound must be finite")
    return bound


def _compile_pattern(field: str, kind: RuleKind, parameter: object) -> re.Pattern[str]:
    if isinstance(parameter, re.Pattern):
        return parameter
    if not isinstance(parameter, str):
        raise InvalidParameterError(field, kind.value, parameter, "expected a pattern string")
    try:
        return re.compile(parameter)
    except re.error as exc:
        raise InvalidParameterError(field, kind.value, parameter, str(exc)) from exc

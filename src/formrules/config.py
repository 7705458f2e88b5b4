"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, checked
once at construction so a bad message template fails where it is declared.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from formrules.errors import ConfigurationError
from formrules.kinds import RuleKind
from formrules.messages import DEFAULT_MESSAGES, format_message

# Stand-in parameters used to dry-run message overrides
_SAMPLE_PARAMETERS: dict[type, object] = {int: 1, float: 1.0, str: "x"}


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(
            separator="; ",
            messages={"req": "{field} cannot be blank"},
        )

    ``messages`` keys may be ``RuleKind`` members or anything
    ``RuleKind.parse`` accepts; they are normalized to members.
    """

    # Joins several failures on the same field into one error string
    separator: str = " - "

    # Per-kind overrides of the default message templates
    messages: Mapping[RuleKind | str, str] = field(default_factory=dict)

    # Emit a DEBUG record for every failing rule
    log_failures: bool = True

    def __post_init__(self) -> None:
        resolved: dict[RuleKind, str] = {}
        for key, template in self.messages.items():
            kind = RuleKind.parse(key)
            if kind.is_transform:
                msg = f"{kind.name} rules never fail, there is no message to override"
                raise ConfigurationError(msg)
            if not template:
                msg = f"Message template for {kind.name} is empty"
                raise ConfigurationError(msg)
            sample = _SAMPLE_PARAMETERS.get(kind.parameter_type)  # type: ignore[arg-type]
            try:
                format_message(template, kind, "field", sample)
            except (AttributeError, KeyError, IndexError, ValueError) as exc:
                msg = f"Invalid message template for {kind.name}: {template!r} ({exc})"
                raise ConfigurationError(msg) from exc
            resolved[kind] = template
        object.__setattr__(self, "messages", MappingProxyType(resolved))

    def message_for(self, kind: RuleKind) -> str:
        """Return the active template for *kind* (override or default)."""
        if kind in self.messages:
            return self.messages[kind]
        return DEFAULT_MESSAGES.get(kind, "")

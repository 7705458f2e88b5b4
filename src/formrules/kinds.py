"""Rule kinds — the closed set of checks and transforms a rule can name.

Member values are the short rule names used in form definitions
(``"req"``, ``"maxlen"``, ``"ucfirst"``...). ``RuleKind.parse`` also
accepts member names in any case, so ``"required"``, ``"MaxLen"`` and
``"max_len"`` all resolve.
"""

from enum import Enum

from formrules.errors import UnknownRuleKindError


class RuleKind(Enum):
    """What a rule does to its field."""

    # Checks
    REQUIRED = "req"
    MAX_LEN = "maxlen"
    MIN_LEN = "minlen"
    ALPHA = "alpha"
    ALPHANUMERIC = "alphanum"
    NUMERIC = "num"
    EMAIL = "email"
    LESS_THAN = "lessthan"
    GREATER_THAN = "greaterthan"
    REGEX = "regex"

    # Transforms (rewrite the value, never fail)
    LOWERCASE = "lower"
    TRIM_WHITESPACE = "whitespace"
    UPPERCASE = "caps"
    CAPITALIZE_FIRST = "ucfirst"

    @property
    def is_transform(self) -> bool:
        return self in _TRANSFORMS

    @property
    def parameter_type(self) -> type | None:
        """The Python type a rule of this kind needs as its parameter, if any."""
        return _PARAMETER_TYPES.get(self)

    @classmethod
    def parse(cls, kind: "RuleKind | str") -> "RuleKind":
        """Resolve a member, a short name, or a member name.

        Raises ``UnknownRuleKindError`` for anything else.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            key = kind.strip().lower()
            member = _BY_NAME.get(key) or _BY_NAME.get(key.replace("_", ""))
            if member is not None:
                return member
        raise UnknownRuleKindError(kind)


_TRANSFORMS = frozenset(
    {
        RuleKind.LOWERCASE,
        RuleKind.TRIM_WHITESPACE,
        RuleKind.UPPERCASE,
        RuleKind.CAPITALIZE_FIRST,
    }
)

_PARAMETER_TYPES: dict[RuleKind, type] = {
    RuleKind.MAX_LEN: int,
    RuleKind.MIN_LEN: int,
    RuleKind.LESS_THAN: float,
    RuleKind.GREATER_THAN: float,
    RuleKind.REGEX: str,
}

# Lookup table for parse(): short values plus member names with and
# without underscores ("max_len" and "maxlen" -> MAX_LEN).
_BY_NAME: dict[str, RuleKind] = {}
for _member in RuleKind:
    _BY_NAME[_member.value] = _member
    _BY_NAME[_member.name.lower()] = _member
    _BY_NAME[_member.name.lower().replace("_", "")] = _member
del _member

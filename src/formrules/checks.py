"""Built-in checkers and transforms, and the tables that dispatch to them.

A check is a predicate over the current field value::

    def check(value: str, rule: Rule) -> bool:
        '''Return True if the value passes.'''

A transform rewrites the value and never fails::

    def transform(value: str) -> str: ...

The engine picks one from ``CHECKS`` or ``TRANSFORMS`` by ``rule.kind``.
Every ``RuleKind`` member appears in exactly one of the two tables.

Character-class checks use ASCII ranges and pass on an empty string,
since no character violates "every character is X". Pair them with a
``req`` rule when the field must be filled in.
"""

import re
from collections.abc import Callable
from typing import TypeAlias

from formrules.kinds import RuleKind
from formrules.rules import Rule

Check: TypeAlias = Callable[[str, Rule], bool]
Transform: TypeAlias = Callable[[str], str]


# ---------------------------------------------------------------------------
# Presence and length
# ---------------------------------------------------------------------------


def required(value: str, rule: Rule) -> bool:
    """Value must be non-empty. Whitespace counts as content."""
    return len(value) > 0


def max_length(value: str, rule: Rule) -> bool:
    return len(value) <= rule.parameter  # type: ignore[operator]


def min_length(value: str, rule: Rule) -> bool:
    return len(value) >= rule.parameter  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_NOT_DIGIT = re.compile(r"[^0-9]")
_NOT_ALPHA = re.compile(r"[^A-Za-z]")
_NOT_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def numeric(value: str, rule: Rule | None = None) -> bool:
    """Every character is an ASCII digit (empty passes)."""
    return _NOT_DIGIT.search(value) is None


def alpha(value: str, rule: Rule) -> bool:
    """Every character is an ASCII letter (empty passes)."""
    return _NOT_ALPHA.search(value) is None


def alphanumeric(value: str, rule: Rule) -> bool:
    """Every character is an ASCII letter or digit (empty passes)."""
    return _NOT_ALPHANUMERIC.search(value) is None


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structural check only: dot/dash/underscore local part, labels of two or
# more characters, a 2-6 letter top-level label
_EMAIL_RE = re.compile(
    r"[_.0-9a-zA-Z-]+@([0-9a-zA-Z][0-9a-zA-Z-]+\.)+[a-zA-Z]{2,6}",
    re.IGNORECASE,
)


def email(value: str, rule: Rule) -> bool:
    return _EMAIL_RE.fullmatch(value) is not None


def regex(value: str, rule: Rule) -> bool:
    """Pattern found anywhere in the value; anchor it to match the whole."""
    return rule.parameter.search(value) is not None  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Numeric bounds
# ---------------------------------------------------------------------------


def _as_number(value: str) -> float:
    # Only called on digit-only strings; the empty string counts as zero
    return float(value) if value else 0.0


def less_than(value: str, rule: Rule) -> bool:
    """Digits only, and strictly below the bound.

    A non-numeric value fails with the bound message, not the numeric one.
    """
    return numeric(value) and _as_number(value) < rule.parameter  # type: ignore[operator]


def greater_than(value: str, rule: Rule) -> bool:
    """Digits only, and strictly above the bound."""
    return numeric(value) and _as_number(value) > rule.parameter  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


def lowercase(value: str) -> str:
    return value.lower()


def trim_whitespace(value: str) -> str:
    return value.strip()


def uppercase(value: str) -> str:
    return value.upper()


def capitalize_first(value: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return value[:1].upper() + value[1:]


# ---------------------------------------------------------------------------
# Dispatch tables
# ---------------------------------------------------------------------------

CHECKS: dict[RuleKind, Check] = {
    RuleKind.REQUIRED: required,
    RuleKind.MAX_LEN: max_length,
    RuleKind.MIN_LEN: min_length,
    RuleKind.ALPHA: alpha,
    RuleKind.ALPHANUMERIC: alphanumeric,
    RuleKind.NUMERIC: numeric,
    RuleKind.EMAIL: email,
    RuleKind.LESS_THAN: less_than,
    RuleKind.GREATER_THAN: greater_than,
    RuleKind.REGEX: regex,
}

TRANSFORMS: dict[RuleKind, Transform] = {
    RuleKind.LOWERCASE: lowercase,
    RuleKind.TRIM_WHITESPACE: trim_whitespace,
    RuleKind.UPPERCASE: uppercase,
    RuleKind.CAPITALIZE_FIRST: capitalize_first,
}

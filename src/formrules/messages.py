"""Default error message templates.

Templates are ``str.format`` strings. Every template may use ``{field}``;
kinds that take a parameter also get a named placeholder for it
(``{max}``, ``{min}``, ``{bound}`` or ``{pattern}``).
"""

import re

from formrules.kinds import RuleKind

REQUIRED_VALUE = "Please enter the value for {field}"
MAXLEN_FAILED = "Maximum length exceeded for {field}."
MINLEN_FAILED = "Please enter input with length more than {min} for {field}"
ALPHANUM_FAILED = "Please provide an alpha-numeric (letters and numbers only) input for {field}"
NUM_FAILED = "Please provide numeric input for {field}"
ALPHA_FAILED = "Please provide alphabetic input for {field}"
EMAIL_FAILED = "Please provide a valid email address"
LESSTHAN_FAILED = "Enter a numeric value less than {bound} for {field}"
GREATERTHAN_FAILED = "Enter a numeric value greater than {bound} for {field}"
REGEX_FAILED = "Please provide a valid input for {field}"

DEFAULT_MESSAGES: dict[RuleKind, str] = {
    RuleKind.REQUIRED: REQUIRED_VALUE,
    RuleKind.MAX_LEN: MAXLEN_FAILED,
    RuleKind.MIN_LEN: MINLEN_FAILED,
    RuleKind.ALPHANUMERIC: ALPHANUM_FAILED,
    RuleKind.NUMERIC: NUM_FAILED,
    RuleKind.ALPHA: ALPHA_FAILED,
    RuleKind.EMAIL: EMAIL_FAILED,
    RuleKind.LESS_THAN: LESSTHAN_FAILED,
    RuleKind.GREATER_THAN: GREATERTHAN_FAILED,
    RuleKind.REGEX: REGEX_FAILED,
}

# Placeholder name under which each parameterized kind exposes its parameter
PLACEHOLDERS: dict[RuleKind, str] = {
    RuleKind.MAX_LEN: "max",
    RuleKind.MIN_LEN: "min",
    RuleKind.LESS_THAN: "bound",
    RuleKind.GREATER_THAN: "bound",
    RuleKind.REGEX: "pattern",
}


def display_parameter(parameter: object) -> str:
    """Render a rule parameter for a message.

    Whole floats drop their fractional part (``10.0`` -> ``"10"``),
    compiled patterns show their source.
    """
    if isinstance(parameter, float) and parameter.is_integer():
        return str(int(parameter))
    if isinstance(parameter, re.Pattern):
        return parameter.pattern
    return str(parameter)


def format_message(template: str, kind: RuleKind, field: str, parameter: object = None) -> str:
    """Fill *template* for a failing rule of *kind* on *field*."""
    context = {"field": field}
    name = PLACEHOLDERS.get(kind)
    if name is not None:
        context[name] = display_parameter(parameter)
    return template.format(**context)

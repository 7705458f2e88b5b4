"""formrules — declarative validation and cleaning for submitted form fields.

Register rules against field names, run them over a mapping of field
name to submitted string, and get back a verdict, one combined error
string per failing field, and the cleaned values.

Usage::

    from formrules import RuleRegistry, ValidationEngine

    registry = RuleRegistry()
    registry.add("name", "req")
    registry.add("name", "ucfirst")
    registry.add("email", "whitespace")
    registry.add("email", "email")
    registry.add("age", "lessthan", 130)

    form = {"name": "ada", "email": " ada@example.com ", "age": "36"}
    result = ValidationEngine().validate(registry, form)
    if not result:
        # result.errors == {"field": "message - message"}
        ...
    # form == {"name": "Ada", "email": "ada@example.com", "age": "36"}

Rule kinds accept their short names (``"req"``, ``"maxlen"``, ``"num"``,
``"ucfirst"``...) or ``RuleKind`` members. Unknown kinds and unusable
parameters raise ``ConfigurationError`` when the rule is added.
"""

from formrules.config import ValidatorConfig
from formrules.engine import ValidationEngine
from formrules.errors import (
    ConfigurationError,
    FormRulesError,
    InvalidParameterError,
    UnknownRuleKindError,
)
from formrules.kinds import RuleKind
from formrules.registry import RuleRegistry
from formrules.result import Failure, ValidationResult
from formrules.rules import Rule
from formrules.validator import FormValidator

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Failure",
    "FormRulesError",
    "FormValidator",
    "InvalidParameterError",
    "Rule",
    "RuleKind",
    "RuleRegistry",
    "UnknownRuleKindError",
    "ValidationEngine",
    "ValidationResult",
    "ValidatorConfig",
]

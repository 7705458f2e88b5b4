"""Rule registry — the ordered list of rules a form is validated against.

Registration order is significant: it fixes the order in which error
fragments for one field are joined, and where transforms run relative
to checks on the same field.

Not safe for concurrent mutation. Give each request its own registry,
or build one at startup and only read it afterwards.
"""

import logging
from collections.abc import Iterator

from formrules.kinds import RuleKind
from formrules.rules import Rule, make_rule

logger = logging.getLogger("formrules.registry")


class RuleRegistry:
    """Ordered, append-only collection of ``Rule`` objects.

    Usage::

        registry = RuleRegistry()
        registry.add("name", "req")
        registry.add("email", RuleKind.EMAIL, message="Please fill in Email")
        registry.add("age", "lessthan", 130)
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add(
        self,
        field: str,
        kind: RuleKind | str,
        parameter: object = None,
        message: str | None = None,
    ) -> Rule:
        """Append a rule and return it.

        Raises ``ConfigurationError`` (or a subclass) if *kind* is unknown
        or *parameter* does not suit it. Nothing is appended in that case.
        """
        rule = make_rule(field, kind, parameter, message)
        self._rules.append(rule)
        logger.debug("Registered %s rule on %r", rule.kind.name, rule.field)
        return rule

    def reset(self) -> None:
        """Remove every rule."""
        self._rules.clear()

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Snapshot of the registered rules in order."""
        return tuple(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self._rules)} rules)"

"""Tests for formrules.rules and formrules.registry — registration-time checks."""

import re

import pytest

from formrules.errors import ConfigurationError, InvalidParameterError, UnknownRuleKindError
from formrules.kinds import RuleKind
from formrules.registry import RuleRegistry
from formrules.rules import Rule, make_rule

# ---------------------------------------------------------------------------
# make_rule
# ---------------------------------------------------------------------------


class TestMakeRule:
    def test_resolves_kind(self) -> None:
        rule = make_rule("name", "req")
        assert rule == Rule(field="name", kind=RuleKind.REQUIRED)

    def test_frozen(self) -> None:
        rule = make_rule("name", "req")
        with pytest.raises(AttributeError):
            rule.field = "other"  # type: ignore[misc]

    def test_empty_message_means_default(self) -> None:
        assert make_rule("name", "req", message="").message is None

    def test_custom_message_kept(self) -> None:
        assert make_rule("name", "req", message="Name please").message == "Name please"

    def test_empty_field_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            make_rule("", "req")

    def test_parameter_ignored_for_plain_checks(self) -> None:
        assert make_rule("name", "alpha", "whatever").parameter is None


class TestLengthParameter:
    def test_int(self) -> None:
        assert make_rule("name", "maxlen", 5).parameter == 5

    def test_numeric_string(self) -> None:
        assert make_rule("name", "minlen", " 3 ").parameter == 3

    def test_whole_float(self) -> None:
        assert make_rule("name", "maxlen", 5.0).parameter == 5

    def test_missing(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            make_rule("name", "maxlen")
        assert "required" in str(exc_info.value)

    def test_blank_string(self) -> None:
        with pytest.raises(InvalidParameterError):
            make_rule("name", "maxlen", "  ")

    def test_not_a_number(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            make_rule("name", "maxlen", "five")
        err = exc_info.value
        assert err.field == "name"
        assert err.kind == "maxlen"
        assert err.parameter == "five"

    def test_fractional_float(self) -> None:
        with pytest.raises(InvalidParameterError):
            make_rule("name", "minlen", 2.5)

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            make_rule("name", "maxlen", True)


class TestBoundParameter:
    def test_int_becomes_float(self) -> None:
        rule = make_rule("age", "lessthan", 10)
        assert rule.parameter == 10.0
        assert isinstance(rule.parameter, float)

    def test_string(self) -> None:
        assert make_rule("age", "greaterthan", "2.5").parameter == 2.5

    def test_unparsable(self) -> None:
        with pytest.raises(InvalidParameterError):
            make_rule("age", "lessthan", "ten")

    def test_non_finite(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            make_rule("age", "greaterthan", "nan")
        assert "finite" in str(exc_info.value)

    def test_wrong_type(self) -> None:
        with pytest.raises(InvalidParameterError):
            make_rule("age", "lessthan", [10])


class TestPatternParameter:
    def test_compiled_from_string(self) -> None:
        rule = make_rule("code", "regex", "^[A-Z]+$")
        assert isinstance(rule.parameter, re.Pattern)
        assert rule.parameter.pattern == "^[A-Z]+$"

    def test_precompiled_kept(self) -> None:
        pattern = re.compile(r"\d+", re.ASCII)
        assert make_rule("code", "regex", pattern).parameter is pattern

    def test_broken_pattern(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            make_rule("code", "regex", "[unclosed")
        assert exc_info.value.detail


# ---------------------------------------------------------------------------
# RuleRegistry
# ---------------------------------------------------------------------------


class TestRuleRegistry:
    def test_empty(self) -> None:
        registry = RuleRegistry()
        assert len(registry) == 0
        assert not registry
        assert registry.rules == ()

    def test_add_returns_rule(self) -> None:
        registry = RuleRegistry()
        rule = registry.add("email", RuleKind.EMAIL, message="Bad email")
        assert rule.kind is RuleKind.EMAIL
        assert rule.message == "Bad email"

    def test_registration_order(self) -> None:
        registry = RuleRegistry()
        registry.add("name", "req")
        registry.add("email", "email")
        registry.add("name", "maxlen", 10)
        assert [(r.field, r.kind) for r in registry] == [
            ("name", RuleKind.REQUIRED),
            ("email", RuleKind.EMAIL),
            ("name", RuleKind.MAX_LEN),
        ]

    def test_unknown_kind_fails_fast(self) -> None:
        registry = RuleRegistry()
        with pytest.raises(UnknownRuleKindError):
            registry.add("name", "nope")
        assert len(registry) == 0

    def test_bad_parameter_not_appended(self) -> None:
        registry = RuleRegistry()
        registry.add("name", "req")
        with pytest.raises(InvalidParameterError):
            registry.add("name", "maxlen", "x")
        assert len(registry) == 1

    def test_reset(self) -> None:
        registry = RuleRegistry()
        registry.add("name", "req")
        registry.add("name", "lower")
        registry.reset()
        assert len(registry) == 0
        assert list(registry) == []

    def test_rules_snapshot_unaffected_by_later_adds(self) -> None:
        registry = RuleRegistry()
        registry.add("name", "req")
        snapshot = registry.rules
        registry.add("name", "alpha")
        assert len(snapshot) == 1
        assert len(registry) == 2

    def test_repr(self) -> None:
        registry = RuleRegistry()
        registry.add("name", "req")
        assert repr(registry) == "RuleRegistry(1 rules)"


class TestDirectConstruction:
    def test_kind_string_resolved(self) -> None:
        assert Rule(field="name", kind="req").kind is RuleKind.REQUIRED  # type: ignore[arg-type]

    def test_parameter_coerced(self) -> None:
        assert Rule(field="name", kind=RuleKind.MAX_LEN, parameter="5").parameter == 5  # type: ignore[arg-type]

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError):
            Rule(field="name", kind="phone")  # type: ignore[arg-type]

    def test_missing_parameter(self) -> None:
        with pytest.raises(InvalidParameterError):
            Rule(field="name", kind=RuleKind.MAX_LEN)

    def test_empty_field(self) -> None:
        with pytest.raises(ConfigurationError):
            Rule(field="", kind=RuleKind.REQUIRED)

    def test_empty_message_means_default(self) -> None:
        assert Rule(field="name", kind=RuleKind.REQUIRED, message="").message is None

"""Tests for vetted.errors — exception hierarchy and error messages."""

from vetted.errors import ConfigurationError, MissingRulesError, RuleViolation, VettedError
from vetted.rules import RuleFailure


class TestHierarchy:
    def test_configuration_error_is_vetted_error(self) -> None:
        assert issubclass(ConfigurationError, VettedError)

    def test_missing_rules_is_configuration_error(self) -> None:
        assert issubclass(MissingRulesError, ConfigurationError)

    def test_rule_violation_is_not_configuration_error(self) -> None:
        assert issubclass(RuleViolation, VettedError)
        assert not issubclass(RuleViolation, ConfigurationError)


class TestMissingRulesError:
    def test_attributes(self) -> None:
        spec = {"messages": {}}
        err = MissingRulesError("age", spec)
        assert err.param == "age"
        assert err.spec is spec

    def test_message(self) -> None:
        assert str(MissingRulesError("age")) == "Validation rules are missing for parameter 'age'"


class TestRuleViolation:
    def test_message_lists_identifiers(self) -> None:
        err = RuleViolation((RuleFailure("required"), RuleFailure("email")))
        assert str(err) == "Value failed rules: required, email"
        assert len(err.failures) == 2

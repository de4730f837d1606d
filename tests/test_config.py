"""Tests for vetted.config — ValidatorConfig frozen dataclass."""

import pytest

from vetted.config import ValidatorConfig


class TestValidatorConfig:
    def test_defaults(self) -> None:
        cfg = ValidatorConfig()

        assert cfg.messages == {}
        assert cfg.use_rule_messages is False
        assert cfg.missing_value == ""

    def test_override(self) -> None:
        cfg = ValidatorConfig(messages={"required": "Needed"}, use_rule_messages=True, missing_value=None)

        assert cfg.messages == {"required": "Needed"}
        assert cfg.use_rule_messages is True
        assert cfg.missing_value is None

    def test_frozen(self) -> None:
        cfg = ValidatorConfig()

        with pytest.raises(AttributeError):
            cfg.use_rule_messages = True  # type: ignore[misc]

    def test_messages_not_shared(self) -> None:
        assert ValidatorConfig().messages is not ValidatorConfig().messages

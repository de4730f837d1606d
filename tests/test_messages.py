"""Tests for vetted.messages — layer normalization and resolution."""

import pytest

from vetted.errors import ConfigurationError
from vetted.messages import normalize_messages, resolve_messages
from vetted.rules import Outcome, RuleFailure


def failed(*identifiers: str) -> Outcome:
    return Outcome(tuple(RuleFailure(i, (f"{i} text",)) for i in identifiers))


class TestNormalize:
    def test_none(self) -> None:
        assert normalize_messages(None) == {}

    def test_mapping_copied(self) -> None:
        source = {"required": "x"}
        result = normalize_messages(source)
        assert result == source
        assert result is not source

    def test_list_kept_as_identifiers(self) -> None:
        assert normalize_messages(["required", "email"]) == ("required", "email")

    def test_tuple(self) -> None:
        assert normalize_messages(("email",)) == ("email",)

    def test_string_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            normalize_messages("required")  # type: ignore[arg-type]


class TestResolve:
    def test_identifier_fallback(self) -> None:
        assert resolve_messages(failed("email"), ["required", "email"]) == ["email"]

    def test_rule_message_fallback(self) -> None:
        result = resolve_messages(failed("email"), ["required", "email"], use_rule_messages=True)
        assert result == ["email text"]

    def test_later_layers_win(self) -> None:
        result = resolve_messages(
            failed("required", "email"),
            ["required", "email"],
            {"required": "low", "email": "low"},
            {"email": "high"},
        )
        assert result == ["low", "high"]

    def test_order_follows_identifiers_not_layers(self) -> None:
        result = resolve_messages(
            failed("required", "email"),
            ["required", "email"],
            {"email": "E", "required": "R"},
        )
        assert result == ["R", "E"]

    def test_falsy_dropped(self) -> None:
        result = resolve_messages(failed("required", "email"), ["required", "email"], {"required": ""})
        assert result == ["email"]

    def test_unknown_layer_keys_ignored(self) -> None:
        result = resolve_messages(failed("email"), ["email"], {"phone": "Bad phone"})
        assert result == ["email"]

    def test_list_layer_uses_identifier_default(self) -> None:
        result = resolve_messages(failed("email"), ["email"], {"email": "low"}, ("email",))
        assert result == ["email"]

    def test_list_layer_uses_rule_message_default(self) -> None:
        result = resolve_messages(failed("email"), ["email"], {"email": "low"}, ("email",), use_rule_messages=True)
        assert result == ["email text"]

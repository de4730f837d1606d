"""Tests for vetted.result — ValidationResult snapshot."""

import pytest

from vetted.result import ValidationResult


class TestValidationResult:
    def test_is_valid_no_errors(self) -> None:
        r = ValidationResult(data={"x": "1"}, errors={})
        assert r.is_valid is True
        assert r

    def test_is_valid_with_errors(self) -> None:
        r = ValidationResult(data={}, errors={"x": ["bad"]})
        assert r.is_valid is False
        assert not r

    def test_first(self) -> None:
        r = ValidationResult(data={}, errors={"x": ["bad", "worse"], "y": []})
        assert r.first("x") == "bad"
        assert r.first("y") == ""
        assert r.first("z") == ""

    def test_to_dict(self) -> None:
        r = ValidationResult(data={"x": ""}, errors={"x": ["required"]})
        assert r.to_dict() == {"valid": False, "errors": {"x": ["required"]}}

    def test_frozen(self) -> None:
        r = ValidationResult(data={}, errors={})
        with pytest.raises(AttributeError):
            r.data = {}  # type: ignore[misc]

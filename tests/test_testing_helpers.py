"""Tests for vetted.testing — assertion helpers."""

import pytest

from vetted.rules import RuleSet, required
from vetted.testing import assert_invalid, assert_no_errors_for, assert_valid
from vetted.validator import Validator


@pytest.fixture
def failed() -> Validator:
    return Validator().validate({"age": "", "name": "alice"}, {"age": RuleSet(required), "name": RuleSet(required)})


class TestAssertions:
    def test_assert_valid(self) -> None:
        assert_valid(Validator())

    def test_assert_valid_fails(self, failed: Validator) -> None:
        with pytest.raises(AssertionError, match="Expected no errors"):
            assert_valid(failed)

    def test_assert_invalid(self, failed: Validator) -> None:
        assert_invalid(failed, "age")
        assert_invalid(failed, "age", "required")

    def test_assert_invalid_wrong_messages(self, failed: Validator) -> None:
        with pytest.raises(AssertionError, match="Expected messages"):
            assert_invalid(failed, "age", "Age is mandatory")

    def test_assert_invalid_on_passing_param(self, failed: Validator) -> None:
        with pytest.raises(AssertionError, match="but it passed"):
            assert_invalid(failed, "name")

    def test_assert_no_errors_for(self, failed: Validator) -> None:
        assert_no_errors_for(failed, "name")
        with pytest.raises(AssertionError):
            assert_no_errors_for(failed, "age")

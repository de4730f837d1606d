"""Assertion helpers for tests of code that uses vetted.

Each assertion produces a clear error message on failure::

    from vetted.testing import assert_invalid

    assert_invalid(validator, "age", "Age is mandatory")
"""

from vetted.validator import Validator


def assert_valid(validator: Validator) -> None:
    """Assert no parameter has recorded errors."""
    assert validator.is_valid, f"Expected no errors, got {validator.get_errors()!r}"


def assert_invalid(validator: Validator, param: str, *messages: str) -> None:
    """Assert *param* failed, optionally with exactly *messages* in order."""
    errors = validator.get_errors()
    assert param in errors, (
        f"Expected errors for {param!r}, but it passed.\n"
        f"Recorded errors: {errors!r}"
    )
    if messages:
        assert errors[param] == list(messages), (
            f"Expected messages {list(messages)!r} for {param!r}, got {errors[param]!r}"
        )


def assert_no_errors_for(validator: Validator, param: str) -> None:
    """Assert *param* has no recorded errors (other parameters may)."""
    assert validator.get_errors_of(param) == [], (
        f"Expected no errors for {param!r}, got {validator.get_errors_of(param)!r}"
    )

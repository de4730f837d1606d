"""vetted exception hierarchy.

Validation failures are data, not exceptions: the ``Validator`` collects
them into its ``errors`` mapping. The types here cover the cases that
must stop the caller instead.
"""

from typing import Any


class VettedError(Exception):
    """Base for all vetted-specific errors."""


class ConfigurationError(VettedError):
    """Raised when a validator is set up incorrectly.

    A programmer mistake, never a user-input failure. Always propagates.
    """


class MissingRulesError(ConfigurationError):
    """Raised when a parameter's rule spec carries no ``RuleSet``.

    Attributes:
        param: The parameter whose spec is malformed.
    """

    def __init__(self, param: str, spec: Any = None) -> None:
        self.param = param
        self.spec = spec
        super().__init__(f"Validation rules are missing for parameter {param!r}")


class RuleViolation(VettedError):  # noqa: N818
    """Raised by ``RuleSet.assert_valid`` when a value fails.

    Attributes:
        failures: The ``RuleFailure`` records, in rule order.
    """

    def __init__(self, failures: tuple[Any, ...]) -> None:
        self.failures = failures
        names = ", ".join(f.identifier for f in failures)
        super().__init__(f"Value failed rules: {names}")

"""Validator — run request parameters through rule sets, collect messages.

Usage::

    from vetted import Validator, FieldRules
    from vetted.rules import required, email, int_val

    validator = Validator().validate(params, {
        "email": required & email,
        "age": FieldRules(required & int_val, messages={"required": "Age is mandatory"}),
    }, {"email": "Please enter a valid email"})

    if not validator.is_valid:
        return validator.get_errors()

State accumulates across calls. A second ``validate()`` overwrites the
entries of the parameters it covers and leaves every other entry alone,
including errors recorded for parameters that are not validated again.
Call ``reset()`` (or ``set_errors({})``) to start over.

A ``Validator`` holds no locks. Use one per request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from vetted.config import ValidatorConfig
from vetted.errors import MissingRulesError
from vetted.http.params import as_param_source
from vetted.messages import Messages, normalize_messages, resolve_messages
from vetted.result import ValidationResult
from vetted.rules.base import RuleLike, RuleSet

logger = logging.getLogger("vetted.validator")


@dataclass(frozen=True, slots=True)
class FieldRules:
    """Rules for one parameter plus its own message overrides.

    ``messages`` beats both the pass-wide and the configured messages.
    A plain ``{"rules": ..., "messages": ...}`` mapping works the same.
    """

    rules: RuleSet | RuleLike
    messages: Messages | None = None


type RuleSpec = RuleSet | RuleLike | FieldRules | Mapping[str, Any]


def _as_ruleset(obj: Any) -> RuleSet | None:
    # A lone rule is a set of one
    if isinstance(obj, RuleSet):
        return obj
    if isinstance(obj, RuleLike):
        return RuleSet(obj)
    return None


def _unpack(param: str, spec: Any) -> tuple[RuleSet, dict[str, str] | tuple[str, ...]]:
    ruleset = _as_ruleset(spec)
    if ruleset is not None:
        return ruleset, {}

    rules: Any = None
    messages: Any = None
    if isinstance(spec, FieldRules):
        rules, messages = spec.rules, spec.messages
    elif isinstance(spec, Mapping):
        rules, messages = spec.get("rules"), spec.get("messages")

    ruleset = _as_ruleset(rules)
    if ruleset is None:
        logger.error("No RuleSet given for parameter %r (got %s)", param, type(spec).__name__)
        raise MissingRulesError(param, spec)
    return ruleset, normalize_messages(messages)


class Validator:
    """Validated data and error messages for a set of request parameters."""

    __slots__ = ("_data", "_errors", "config")

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self.config = config or ValidatorConfig()
        self._data: dict[str, Any] = {}
        self._errors: dict[str, list[str]] = {}

    # -- Validation pass --

    def validate(
        self,
        request: Any,
        rules: Mapping[str, RuleSpec],
        messages: Messages | None = None,
    ) -> Validator:
        """Validate request parameters with the given rules.

        Args:
            request: Anything with ``get_param(name)``, or a plain mapping.
            rules: Parameter name → ``RuleSet``, ``FieldRules`` or a
                ``{"rules": ..., "messages": ...}`` mapping.
            messages: Overrides for this pass, identifier → message.

        Returns:
            ``self``, for chaining.

        Raises:
            MissingRulesError: A spec carries no ``RuleSet``. Parameters
                before it have already been recorded.
        """
        source = as_param_source(request)
        pass_messages = normalize_messages(messages)
        failed = 0

        for param, spec in rules.items():
            value = source.get_param(param)
            self._data[param] = value

            ruleset, param_messages = _unpack(param, spec)
            outcome = ruleset.check(value)
            if outcome:
                continue

            failed += 1
            logger.debug("Parameter %r failed: %s", param, ", ".join(outcome.failed_identifiers))
            self._errors[param] = resolve_messages(
                outcome,
                ruleset.identifiers,
                self.config.messages,
                pass_messages,
                param_messages,
                use_rule_messages=self.config.use_rule_messages,
            )

        logger.debug("Validated %d parameter(s), %d failed", len(rules), failed)
        return self

    # -- Errors --

    def add_error(self, param: str, message: str) -> Validator:
        """Append one message for *param*."""
        self._errors.setdefault(param, []).append(message)
        return self

    def add_errors(self, param: str, messages: Iterable[str]) -> Validator:
        """Append several messages for *param*, in order."""
        self._errors.setdefault(param, []).extend(messages)
        return self

    def get_errors(self) -> dict[str, list[str]]:
        return {param: list(messages) for param, messages in self._errors.items()}

    def set_errors(self, errors: Mapping[str, Iterable[str]]) -> Validator:
        self._errors = {param: list(messages) for param, messages in errors.items()}
        return self

    def get_errors_of(self, param: str) -> list[str]:
        """Messages for *param*, or an empty list."""
        return list(self._errors.get(param, ()))

    def set_errors_of(self, param: str, messages: Iterable[str]) -> Validator:
        self._errors[param] = list(messages)
        return self

    def get_first(self, param: str) -> str:
        """First message for *param*, or ``""``."""
        messages = self._errors.get(param)
        return messages[0] if messages else ""

    # -- Data --

    def get_value(self, param: str) -> Any:
        """Value read for *param*, or ``config.missing_value`` when absent or ``None``."""
        value = self._data.get(param)
        return self.config.missing_value if value is None else value

    def set_values(self, data: Mapping[str, Any]) -> Validator:
        """Merge *data* into the validated data."""
        self._data.update(data)
        return self

    def set_data(self, data: Mapping[str, Any]) -> Validator:
        """Replace the validated data."""
        self._data = dict(data)
        return self

    def get_data(self) -> dict[str, Any]:
        return dict(self._data)

    # -- State --

    @property
    def is_valid(self) -> bool:
        """True if no parameter has a recorded message list."""
        return not self._errors

    def reset(self) -> Validator:
        """Forget all data and errors."""
        self._data = {}
        self._errors = {}
        return self

    def result(self) -> ValidationResult:
        """Immutable snapshot of the current data and errors."""
        return ValidationResult(data=self.get_data(), errors=self.get_errors())

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"Validator(data={len(self._data)}, errors={sorted(self._errors)})"


def validate(
    request: Any,
    rules: Mapping[str, RuleSpec],
    messages: Messages | None = None,
    *,
    config: ValidatorConfig | None = None,
) -> Validator:
    """Run one validation pass on a fresh ``Validator``."""
    return Validator(config).validate(request, rules, messages)

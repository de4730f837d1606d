"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(
            messages={"required": "This field is required"},
            use_rule_messages=True,
        )
    """

    # App-wide message overrides, beneath the per-call and per-parameter ones
    messages: Mapping[str, str] = field(default_factory=dict)

    # Fall back to the failed rule's own message instead of its identifier
    use_rule_messages: bool = False

    # Returned by Validator.get_value() for unseen parameters and stored None values
    missing_value: Any = ""

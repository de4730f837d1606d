"""Validation result — immutable snapshot of a validator's state."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Data and errors captured from a ``Validator`` at one point in time.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validator.validate(params, rules).result()
        if not result:
            return Response(json.dumps(result.to_dict()), status=422)

    ``errors`` maps parameter names to lists of messages::

        {"age": ["Age is mandatory"],
         "email": ["email"]}
    """

    data: dict[str, Any]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def first(self, param: str) -> str:
        """First message for *param*, or ``""``."""
        messages = self.errors.get(param)
        return messages[0] if messages else ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready error body."""
        return {"valid": self.is_valid, "errors": {k: list(v) for k, v in self.errors.items()}}

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid

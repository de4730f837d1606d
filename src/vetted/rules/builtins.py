"""Built-in rules.

Each rule carries an explicit identifier, the key callers use to override
its message::

    validator.validate(params, {"email": required & email},
                       {"email": "Please enter a valid email"})

Parameterized rules are factory functions that return a ``Rule``.
Values arrive raw from the request, so every predicate tolerates
``None``, lists and non-string scalars.
"""

import re
from collections.abc import Sized
from typing import Any

from vetted.rules.base import Predicate, Rule

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) > 0
    return True


def _not_blank(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return _present(value)


required = Rule("required", _present, "This field is required")
not_empty = Rule("notEmpty", _not_blank, "Must not be empty")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _size(value: Any) -> int | None:
    if isinstance(value, Sized) and not isinstance(value, (bytes, bytearray)):
        return len(value)
    return None


def length(min: int | None = None, max: int | None = None) -> Rule:  # noqa: A002
    """Value length must fall within ``[min, max]`` (either bound optional)."""
    if min is None and max is None:
        msg = "length() needs at least one of min or max"
        raise ValueError(msg)

    def check(value: Any) -> bool:
        size = _size(value)
        if size is None:
            return False
        if min is not None and size < min:
            return False
        return max is None or size <= max

    if min is not None and max is not None:
        message = f"Must be between {min} and {max} characters"
    elif min is not None:
        message = f"Must be at least {min} characters"
    else:
        message = f"Must be at most {max} characters"
    return Rule("length", check, message)


def min_length(n: int) -> Rule:
    """Value must be at least *n* characters (or items)."""

    def check(value: Any) -> bool:
        size = _size(value)
        return size is not None and size >= n

    return Rule("minLength", check, f"Must be at least {n} characters")


def max_length(n: int) -> Rule:
    """Value must be at most *n* characters (or items)."""

    def check(value: Any) -> bool:
        size = _size(value)
        return size is not None and size <= n

    return Rule("maxLength", check, f"Must be at most {n} characters")


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def _full_match(pattern: re.Pattern[str]) -> Predicate:
    def check(value: Any) -> bool:
        return isinstance(value, str) and pattern.match(value) is not None

    return check


email = Rule("email", _full_match(_EMAIL_RE), "Must be a valid email address")
url = Rule("url", _full_match(_URL_RE), "Must be a valid URL")
alnum = Rule(
    "alnum",
    lambda value: isinstance(value, str) and value.isalnum(),
    "Must contain only letters and digits",
)


def matches(pattern: str, message: str | None = None) -> Rule:
    """Value must match the given regex pattern."""
    return Rule("regex", _full_match(re.compile(pattern)), message or f"Must match pattern: {pattern}")


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Rule:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)
    options = ", ".join(sorted(allowed))
    return Rule("in", lambda value: isinstance(value, str) and value in allowed, f"Must be one of: {options}")


# ---------------------------------------------------------------------------
# Type
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if not isinstance(value, str):
        return False
    try:
        int(value)
    except ValueError:
        return False
    return True


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if not isinstance(value, str):
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


_BOOL_STRINGS = frozenset({"true", "false", "1", "0", "yes", "no", "on", "off"})


def _is_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value.lower() in _BOOL_STRINGS


int_val = Rule("intVal", _is_int, "Must be a whole number")
numeric = Rule("numeric", _is_number, "Must be a number")
bool_val = Rule("boolVal", _is_bool, "Must be true or false")

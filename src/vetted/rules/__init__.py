"""Composable, named validation rules.

Usage::

    from vetted.rules import RuleSet, required, email, max_length

    contact = RuleSet(required, email)
    title = required & max_length(200)

Any object with an ``identifier`` and a ``__call__(value) -> str | None``
works as a rule; ``rule()`` builds one from a predicate function.
"""

from vetted.rules.base import (
    Outcome,
    Rule,
    RuleFailure,
    RuleLike,
    RuleSet,
    rule,
    to_identifier,
)
from vetted.rules.builtins import (
    alnum,
    bool_val,
    email,
    int_val,
    length,
    matches,
    max_length,
    min_length,
    not_empty,
    numeric,
    one_of,
    required,
    url,
)

__all__ = [
    "Outcome",
    "Rule",
    "RuleFailure",
    "RuleLike",
    "RuleSet",
    "alnum",
    "bool_val",
    "email",
    "int_val",
    "length",
    "matches",
    "max_length",
    "min_length",
    "not_empty",
    "numeric",
    "one_of",
    "required",
    "rule",
    "to_identifier",
    "url",
]

"""Rule primitives — named predicates, ordered rule sets, structured outcomes.

A rule is any object with a string ``identifier`` and a ``__call__``::

    def __call__(self, value: Any) -> str | None:
        '''Return a candidate message on failure, or None if valid.'''

``Rule`` is the stock implementation. ``RuleSet`` bundles rules into the
unit a ``Validator`` asserts against one parameter. Evaluating a rule set
never raises for ordinary failures: ``check()`` returns an ``Outcome``
listing every rule that failed, in rule order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from vetted.errors import ConfigurationError, RuleViolation

type Predicate = Callable[[Any], bool]


@runtime_checkable
class RuleLike(Protocol):
    """Structural interface every rule satisfies."""

    identifier: str

    def __call__(self, value: Any) -> str | None: ...


def to_identifier(name: str) -> str:
    """Derive a lower-camel-cased identifier from a function or class name.

    ``not_empty`` → ``notEmpty``, ``Email`` → ``email``, ``IntVal`` → ``intVal``.
    """
    head, *rest = name.strip("_").split("_")
    joined = head + "".join(part[:1].upper() + part[1:] for part in rest)
    return joined[:1].lower() + joined[1:]


@dataclass(frozen=True, slots=True)
class Rule:
    """A named predicate with a default failure message.

    ``predicate`` returns True when the value is acceptable. Combine rules
    with ``&`` to build a ``RuleSet``::

        rules = required & max_length(200)
    """

    identifier: str
    predicate: Predicate
    message: str

    def __call__(self, value: Any) -> str | None:
        if self.predicate(value):
            return None
        return self.message

    def __and__(self, other: RuleLike | RuleSet) -> RuleSet:
        return RuleSet(self, other)

    def __repr__(self) -> str:
        return f"Rule({self.identifier!r})"


def rule(
    identifier: str | Predicate | None = None,
    *,
    message: str | None = None,
) -> Any:
    """Turn a predicate function into a ``Rule``.

    The identifier defaults to the function name in lower camel case.
    Works with or without arguments::

        @rule(message="Must not contain spaces")
        def no_spaces(value):
            return " " not in value

        @rule
        def even(value):
            return int(value) % 2 == 0

        no_spaces.identifier  # "noSpaces"
    """
    if callable(identifier):
        return rule(message=message)(identifier)

    def wrap(fn: Predicate) -> Rule:
        name = identifier or to_identifier(fn.__name__)
        return Rule(name, fn, message or f"Failed {name}")

    return wrap


@dataclass(frozen=True, slots=True)
class RuleFailure:
    """One failed rule and the candidate messages it produced."""

    identifier: str
    messages: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Outcome:
    """The result of checking one value against a ``RuleSet``.

    Truthy when every rule passed.
    """

    failures: tuple[RuleFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_identifiers(self) -> tuple[str, ...]:
        return tuple(f.identifier for f in self.failures)

    def __bool__(self) -> bool:
        return self.ok

    def find_messages(self, template: Mapping[str, str] | Sequence[str]) -> dict[str, str]:
        """Look up messages for the given identifiers.

        *template* maps identifiers to messages, or lists identifiers whose
        message is the failed rule's own first candidate. Every key of the
        template appears in the result, in template order; keys whose rule
        did not fail map to ``""``.
        """
        failed: dict[str, RuleFailure] = {}
        for failure in self.failures:
            failed.setdefault(failure.identifier, failure)

        if isinstance(template, Mapping):
            return {
                key: message if key in failed else ""
                for key, message in template.items()
            }
        found: dict[str, str] = {}
        for key in template:
            failure = failed.get(key)
            found[key] = failure.messages[0] if failure and failure.messages else ""
        return found


class RuleSet:
    """An ordered, immutable set of rules asserted together.

    Nested rule sets are flattened::

        name_rules = RuleSet(required, max_length(50))
        RuleSet(name_rules, alnum).identifiers  # ("required", "maxLength", "alnum")
    """

    __slots__ = ("_rules",)

    def __init__(self, *rules: RuleLike | RuleSet) -> None:
        flat: list[RuleLike] = []
        for item in rules:
            if isinstance(item, RuleSet):
                flat.extend(item.rules)
            elif isinstance(item, RuleLike):
                flat.append(item)
            else:
                msg = f"Not a rule: {item!r} (expected an object with 'identifier' and __call__)"
                raise ConfigurationError(msg)
        self._rules: tuple[RuleLike, ...] = tuple(flat)

    @property
    def rules(self) -> tuple[RuleLike, ...]:
        return self._rules

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Identifiers of every rule, failed or not, in order."""
        return tuple(r.identifier for r in self._rules)

    def check(self, value: Any) -> Outcome:
        """Run every rule against *value* and collect the failures."""
        failures: list[RuleFailure] = []
        for r in self._rules:
            message = r(value)
            if message is not None:
                failures.append(RuleFailure(r.identifier, (message,)))
        return Outcome(tuple(failures))

    def assert_valid(self, value: Any) -> None:
        """Raise ``RuleViolation`` unless *value* passes every rule."""
        outcome = self.check(value)
        if not outcome:
            raise RuleViolation(outcome.failures)

    def extend(self, *rules: RuleLike | RuleSet) -> RuleSet:
        return RuleSet(self, *rules)

    def __and__(self, other: RuleLike | RuleSet) -> RuleSet:
        return RuleSet(self, other)

    def __iter__(self) -> Iterator[RuleLike]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({', '.join(self.identifiers)})"

"""Message resolution — turn a failed ``Outcome`` into display strings.

Messages are layered, later layers winning on the same identifier::

    identifier defaults < config messages < pass messages < parameter messages

The default message for a rule is its identifier (``"required"``), or the
rule's own text when ``use_rule_messages`` is set. Only rules that failed
produce a message; an override set to ``""`` silences its rule.
"""

from collections.abc import Mapping, Sequence

from vetted.errors import ConfigurationError
from vetted.rules.base import Outcome

type Messages = Mapping[str, str] | Sequence[str]


def normalize_messages(messages: Messages | None) -> dict[str, str] | tuple[str, ...]:
    """Coerce a message layer to a dict or a tuple of identifiers.

    A plain list of identifiers means "the default message" for each one,
    so it is kept as a tuple and resolved against the current default.
    """
    if messages is None:
        return {}
    if isinstance(messages, Mapping):
        return dict(messages)
    if isinstance(messages, (list, tuple)):
        return tuple(messages)
    msg = f"Messages must be a mapping or a list of rule identifiers, got {type(messages).__name__}"
    raise ConfigurationError(msg)


def resolve_messages(
    outcome: Outcome,
    identifiers: Sequence[str],
    *layers: Messages,
    use_rule_messages: bool = False,
) -> list[str]:
    """Resolve the final message list for one failed parameter.

    Args:
        outcome: The failed ``Outcome`` of the parameter's rule set.
        identifiers: Every identifier in the rule set, failed or not.
        *layers: Override mappings, or lists of identifiers that ask for
            the default message, lowest precedence first.
        use_rule_messages: Default to the rule's own candidate message.

    Returns:
        Messages in rule order, one per failed identifier, falsy entries
        dropped. Duplicate texts are kept.
    """

    def lookup(layer: Messages) -> dict[str, str]:
        if isinstance(layer, Mapping) or use_rule_messages:
            return outcome.find_messages(layer)
        return outcome.find_messages({name: name for name in layer})

    merged = lookup(tuple(identifiers))

    for layer in layers:
        merged.update(lookup(layer))

    return [message for message in merged.values() if message]

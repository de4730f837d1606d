"""MultiValueMapping protocol — shared interface for QueryParams and FormData.

Lets ``Params`` hand back every value of a repeated field (checkboxes,
multi-selects) from any multi-valued mapping, not just the built-in ones.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get_list(self, key: str) -> list[str]: ...

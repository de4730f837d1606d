"""Immutable query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Parsed query string.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key. Blank values are kept, so
    ``?age=`` yields ``""`` rather than a missing key.
    """

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes | str = b"") -> None:
        raw = query_string.encode("latin-1") if isinstance(query_string, str) else query_string
        self._raw = raw
        self._data: dict[str, list[str]] = parse_qs(raw.decode("latin-1"), keep_blank_values=True)

    @property
    def raw(self) -> bytes:
        return self._raw

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw.decode('latin-1')!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

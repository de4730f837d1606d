"""Parameter sources — where a ``Validator`` reads raw values from.

A source is anything with ``get_param(name)``. Unknown names yield
``None``, never an error. ``Params`` is the stock source: form body first,
query string second::

    params = await Params.from_request(request)
    params.get_param("age")    # "42"
    params.get_param("tags")   # ["a", "b"] when the field repeats
    params.get_param("nope")   # None
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from vetted._internal.multimap import MultiValueMapping
from vetted.errors import ConfigurationError
from vetted.http.forms import FORM_CONTENT_TYPES, media_type


@runtime_checkable
class ParamSource(Protocol):
    """Anything a ``Validator`` can read named parameters from."""

    def get_param(self, name: str) -> Any: ...


def _lookup(source: Mapping[str, Any], name: str) -> Any:
    if isinstance(source, MultiValueMapping):
        values = source.get_list(name)
        return values[0] if len(values) == 1 else values
    return source[name]


class Params:
    """Request parameters from a parsed body and a query string.

    Either side may be any ``Mapping``. Body values win over query values
    of the same name.
    """

    __slots__ = ("_body", "_query")

    def __init__(
        self,
        body: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> None:
        self._body = body if body is not None else {}
        self._query = query if query is not None else {}

    def get_param(self, name: str, default: Any = None) -> Any:
        """Return the value for *name*, or *default* if neither side has it."""
        if name in self._body:
            return _lookup(self._body, name)
        if name in self._query:
            return _lookup(self._query, name)
        return default

    def __contains__(self, name: object) -> bool:
        return name in self._body or name in self._query

    def __repr__(self) -> str:
        return f"Params(body={list(self._body)}, query={list(self._query)})"

    @classmethod
    async def from_request(cls, request: Any) -> Params:
        """Build params from a request exposing ``.query`` and async ``.form()``.

        The body is only read when the request carries a form content type.
        """
        query = getattr(request, "query", None)
        body = None
        content_type = getattr(request, "content_type", None)
        if media_type(content_type) in FORM_CONTENT_TYPES:
            body = await request.form()
        return cls(body=body, query=query)


def as_param_source(request: Any) -> ParamSource:
    """Accept a ``ParamSource`` as is, wrap a plain mapping in ``Params``."""
    if isinstance(request, ParamSource):
        return request
    if isinstance(request, Mapping):
        return Params(body=request)
    msg = f"Cannot read parameters from {type(request).__name__}: expected get_param() or a mapping"
    raise ConfigurationError(msg)

"""Tests for vetted.http.query — QueryParams."""

import pytest

from vetted._internal.multimap import MultiValueMapping
from vetted.http.query import QueryParams


class TestQueryParams:
    def test_getitem_returns_first(self) -> None:
        q = QueryParams(b"color=red&color=blue")
        assert q["color"] == "red"

    def test_get_list(self) -> None:
        q = QueryParams(b"tag=a&tag=b")
        assert q.get_list("tag") == ["a", "b"]
        assert q.get_list("missing") == []

    def test_blank_values_kept(self) -> None:
        q = QueryParams(b"age=")
        assert "age" in q
        assert q["age"] == ""

    def test_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            QueryParams()["missing"]

    def test_str_input(self) -> None:
        q = QueryParams("name=alice")
        assert q["name"] == "alice"
        assert q.raw == b"name=alice"

    def test_percent_decoding(self) -> None:
        assert QueryParams(b"q=hello%20world")["q"] == "hello world"

    def test_mapping_protocol(self) -> None:
        q = QueryParams(b"a=1&b=2")
        assert len(q) == 2
        assert set(q) == {"a", "b"}
        assert dict(q) == {"a": "1", "b": "2"}
        assert isinstance(q, MultiValueMapping)

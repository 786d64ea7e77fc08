"""Unit tests for DocumentCache.

Tests cover:
- Cache hits (cached texts bypass the parser on the second get() call)
- LRU eviction (silent eviction at max_size; evicted texts re-parse on next call)
- Parse failures are never cached
- Instance isolation (separate DocumentCache instances do not share state)
- Properties (max_size, curr_size, hits, misses)
"""

from __future__ import annotations

from typing import Any

import pytest

import json_tree_diff.cache as cache_module
from json_tree_diff.cache import DocumentCache
from json_tree_diff.errors import ParseError
from json_tree_diff.tree.nodes import JsonNumber, JsonObject

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


@pytest.fixture
def parse_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Wrap the cache module's parse() with a spy that records each text."""
    calls: list[str] = []
    original = cache_module.parse

    def spy_parse(text: str, **kwargs: Any) -> Any:
        calls.append(text)
        return original(text, **kwargs)

    monkeypatch.setattr(cache_module, "parse", spy_parse)
    return calls


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCachedTextsNotReParsed:
    def test_second_get_is_served_from_memory(self, parse_calls: list[str]) -> None:
        cache = DocumentCache()
        first = cache.get('{"a": 1}')
        second = cache.get('{"a": 1}')

        assert parse_calls == ['{"a": 1}']
        assert first is second
        assert first == JsonObject({"a": JsonNumber(1)})

    def test_hit_and_miss_counters(self) -> None:
        cache = DocumentCache()
        cache.get("[1]")
        cache.get("[1]")
        cache.get("[2]")
        assert cache.hits == 1
        assert cache.misses == 2

    def test_keyed_by_exact_text(self, parse_calls: list[str]) -> None:
        cache = DocumentCache()
        cache.get("[1]")
        cache.get("[ 1 ]")
        assert len(parse_calls) == 2


class TestLRUEviction:
    def test_eviction_at_max_size(self, parse_calls: list[str]) -> None:
        cache = DocumentCache(max_size=2)
        cache.get("1")
        cache.get("2")
        cache.get("3")  # evicts "1"

        assert cache.curr_size == 2
        assert "1" not in cache
        cache.get("1")
        assert parse_calls == ["1", "2", "3", "1"]

    def test_recently_used_entry_survives(self) -> None:
        cache = DocumentCache(max_size=2)
        cache.get("1")
        cache.get("2")
        cache.get("1")  # touch "1"
        cache.get("3")  # evicts "2"
        assert "1" in cache
        assert "2" not in cache


class TestParseFailures:
    def test_errors_are_not_cached(self, parse_calls: list[str]) -> None:
        cache = DocumentCache()
        for _ in range(2):
            with pytest.raises(ParseError):
                cache.get("{")
        assert parse_calls == ["{", "{"]
        assert len(cache) == 0

    def test_depth_limit_forwarded(self) -> None:
        cache = DocumentCache(max_depth=1)
        with pytest.raises(ParseError):
            cache.get("[[1]]")


class TestInstanceIsolation:
    def test_separate_instances_do_not_share_entries(self) -> None:
        a = DocumentCache()
        b = DocumentCache()
        a.get("null")
        assert "null" in a
        assert "null" not in b


class TestProperties:
    def test_max_size(self) -> None:
        assert DocumentCache(max_size=7).max_size == 7

    def test_default_max_size(self) -> None:
        assert DocumentCache().max_size == 128

    def test_curr_size_and_clear(self) -> None:
        cache = DocumentCache()
        cache.get("1")
        cache.get("2")
        assert cache.curr_size == 2
        cache.clear()
        assert cache.curr_size == 0
        assert cache.hits == 0
        assert cache.misses == 0

    def test_invalid_max_size(self) -> None:
        with pytest.raises(ValueError, match="max_size"):
            DocumentCache(max_size=0)

"""Unit tests for TreeCache.

Tests cover:
- Cache hits (cached keys do not rebuild the tree)
- LRU eviction (silent eviction at max_size; evicted keys rebuild)
- Invalidation and clearing
- Instance isolation (separate TreeCache instances do not share state)
- Returned lists are independent of the cached entry
- Properties (max_size, curr_size, config)
"""

from __future__ import annotations

from typing import Any

import pytest

from json_selector_tree.cache import TreeCache
from json_selector_tree.config import BuildConfig
from json_selector_tree.tree.builder import TreeBuilder, build_tree

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


def _spy_builds(monkeypatch: pytest.MonkeyPatch) -> list[Any]:
    """Record every document passed to TreeBuilder.build.

    The spy delegates to the original implementation so results are unchanged.
    """
    call_log: list[Any] = []
    original_build = TreeBuilder.build

    def spy_build(self: TreeBuilder, value: Any) -> Any:
        call_log.append(value)
        return original_build(self, value)

    monkeypatch.setattr(TreeBuilder, "build", spy_build)
    return call_log


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCacheHit:
    def test_second_call_does_not_rebuild(self, monkeypatch: pytest.MonkeyPatch) -> None:
        call_log = _spy_builds(monkeypatch)
        cache = TreeCache()
        doc = {"a": [1, 2]}

        first = cache.get_or_build("doc", doc)
        second = cache.get_or_build("doc", doc)

        assert len(call_log) == 1
        assert first == second == build_tree(doc)

    def test_key_decides_not_document(self) -> None:
        cache = TreeCache()
        cache.get_or_build(("doc", 1), {"a": 1})
        # Same key with a different document is served from the cache.
        assert cache.get_or_build(("doc", 1), {"b": 2}) == build_tree({"a": 1})

    def test_empty_tree_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        call_log = _spy_builds(monkeypatch)
        cache = TreeCache()
        assert cache.get_or_build("empty", {}) == []
        assert cache.get_or_build("empty", {}) == []
        assert len(call_log) == 1

    def test_returned_list_is_independent(self) -> None:
        cache = TreeCache()
        nodes = cache.get_or_build("doc", [1, 2])
        nodes.clear()
        assert len(cache.get_or_build("doc", [1, 2])) == 2


class TestEviction:
    def test_lru_entry_evicted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        call_log = _spy_builds(monkeypatch)
        cache = TreeCache(max_size=2)
        cache.get_or_build("a", [1])
        cache.get_or_build("b", [2])
        cache.get_or_build("c", [3])

        assert cache.curr_size == 2
        assert "a" not in cache
        assert "c" in cache

        call_log.clear()
        cache.get_or_build("a", [1])
        assert call_log == [[1]]


class TestInvalidate:
    def test_invalidate_present(self) -> None:
        cache = TreeCache()
        cache.get_or_build("doc", {"a": 1})
        assert cache.invalidate("doc") is True
        assert "doc" not in cache

    def test_invalidate_absent(self) -> None:
        assert TreeCache().invalidate("nope") is False

    def test_invalidate_empty_tree(self) -> None:
        cache = TreeCache()
        cache.get_or_build("doc", [])
        assert cache.invalidate("doc") is True

    def test_rebuild_after_invalidate(self) -> None:
        cache = TreeCache()
        cache.get_or_build("doc", {"a": 1})
        cache.invalidate("doc")
        assert cache.get_or_build("doc", {"b": 2}) == build_tree({"b": 2})

    def test_clear(self) -> None:
        cache = TreeCache()
        cache.get_or_build("a", [1])
        cache.get_or_build("b", [2])
        cache.clear()
        assert cache.curr_size == 0


class TestIsolationAndProperties:
    def test_instances_do_not_share_state(self) -> None:
        first = TreeCache()
        second = TreeCache()
        first.get_or_build("doc", [1])
        assert "doc" not in second

    def test_max_size(self) -> None:
        assert TreeCache(max_size=5).max_size == 5

    def test_default_max_size(self) -> None:
        assert TreeCache().max_size == 32

    @pytest.mark.parametrize("max_size", [0, -3])
    def test_non_positive_max_size_rejected(self, max_size: int) -> None:
        with pytest.raises(ValueError, match="max_size"):
            TreeCache(max_size=max_size)

    def test_max_size_one_caches_latest_tree(self) -> None:
        cache = TreeCache(max_size=1)
        cache.get_or_build("a", [1])
        assert cache.get_or_build("b", [2]) == build_tree([2])
        assert "a" not in cache
        assert "b" in cache

    def test_config_used_for_builds(self) -> None:
        config = BuildConfig(separator="=")
        cache = TreeCache(config=config)
        assert cache.config is config
        assert cache.get_or_build("doc", {"a": 1})[0].label == "a=1"

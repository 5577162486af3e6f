"""TreeCache: LRU cache of built display trees.

Building a tree visits the whole document, so a viewer that re-renders the
same document (or switches between several open documents) can keep the
built trees here instead of rebuilding them on every frame. Entries are keyed
by a caller-supplied hashable key, typically a document name plus revision.
The cache never inspects the document: when it changes, use a new key or call
``invalidate``.

Each ``TreeCache`` instance maintains its own ``LRUCache``. LRU eviction is
silent.

Example::

    from json_selector_tree.cache import TreeCache

    cache = TreeCache(max_size=8)
    nodes = cache.get_or_build(("config.json", 3), document)

    # Same key: served from memory, document is not visited again
    nodes_again = cache.get_or_build(("config.json", 3), document)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from cachetools import LRUCache

from json_selector_tree.config import BuildConfig
from json_selector_tree.tree.builder import JsonValue, TreeBuilder
from json_selector_tree.tree.nodes import TreeNode

__all__ = ["TreeCache"]

logger = logging.getLogger(__name__)


class TreeCache:
    """LRU-backed cache of ``build_tree`` results.

    Args:
        max_size: Maximum number of trees to hold in memory.  Defaults to 32.
            Must be >= 1.
        config: Build configuration used for every tree built by this cache.
            Defaults to ``BuildConfig()``.
    """

    def __init__(self, max_size: int = 32, config: BuildConfig | None = None) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._builder = TreeBuilder(config=config or BuildConfig())
        self._cache: LRUCache[Hashable, tuple[TreeNode, ...]] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of trees stored in the cache."""
        return int(self._cache.currsize)

    @property
    def config(self) -> BuildConfig:
        return self._builder.config

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_or_build(self, key: Hashable, document: JsonValue) -> list[TreeNode]:
        """Return the tree cached under ``key``, building it from ``document`` on a miss.

        Returns a fresh list on every call; the nodes themselves are shared
        and immutable.
        """
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Tree cache hit for %r", key)
            return list(cached)

        logger.debug("Tree cache miss for %r, building", key)
        nodes = self._builder.build(document)
        self._cache[key] = tuple(nodes)
        return nodes

    def invalidate(self, key: Hashable) -> bool:
        """Drop the tree cached under ``key``.  Returns True if one was cached."""
        removed = self._cache.pop(key, None) is not None
        if removed:
            logger.debug("Invalidated cached tree for %r", key)
        return removed

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._cache

"""DocumentCache: LRU cache of parsed value trees keyed by source text.

Diffing one base document against many candidates re-parses the base on every
call unless the tree is kept.  Trees are immutable, so a cached tree can be
handed out any number of times.  LRU eviction occurs silently when
``max_size`` is exceeded.  Parse failures are never cached: the same bad text
raises again on the next ``get()``.

Each ``DocumentCache`` instance maintains its own ``LRUCache``: there is no
class-level shared state, so two separate instances never interfere with each
other.

Example::

    from json_tree_diff.cache import DocumentCache

    cache = DocumentCache(max_size=64)
    tree = cache.get('{"a": 1}')          # parsed
    same = cache.get('{"a": 1}')          # served from memory
    assert tree is same
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from json_tree_diff.tree.nodes import JsonValue
from json_tree_diff.tree.parser import DEFAULT_MAX_DEPTH, parse

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class DocumentCache:
    """LRU-backed cache of parsed documents.

    Args:
        max_size: Maximum number of parsed documents to hold.  Defaults to 128.
        max_depth: Nesting limit passed to the parser on a cache miss.
    """

    def __init__(self, max_size: int = 128, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._max_depth = max_depth
        self._cache: LRUCache[str, JsonValue] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, text: str) -> JsonValue:
        """Return the tree for ``text``, parsing it only on a cache miss.

        Raises:
            ParseError: If ``text`` is not valid; nothing is cached in that case.
        """
        tree = self._cache.get(text)
        if tree is not None:
            self._hits += 1
            return tree

        self._misses += 1
        tree = parse(text, max_depth=self._max_depth)
        self._cache[text] = tree
        logger.debug(
            "document_cache.miss chars=%d size=%d/%d",
            len(text),
            self.curr_size,
            self.max_size,
        )
        return tree

    def clear(self) -> None:
        """Drop every cached tree and reset the hit/miss counters."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def __contains__(self, text: object) -> bool:
        return text in self._cache

    def __len__(self) -> int:
        return len(self._cache)

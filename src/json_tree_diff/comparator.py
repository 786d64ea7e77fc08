"""JsonDiffer: orchestrator that wires DocumentCache + StructuralDiffer.

This is the central wiring layer between the raw algorithm and the public API.
It takes two JSON texts, obtains their trees from a per-instance
``DocumentCache`` (parsing only on a miss), runs the structural differ, and
wraps the records in a timed ``DiffReport``.

Architecture:
- Both texts are parsed before any comparison starts.  A ``ParseError`` on
  either side propagates unchanged; no partial diff is ever produced.
- The cache is keyed by the exact source text.  It is a performance detail and
  never changes results.
- Two ``JsonDiffer`` instances never share cache state.
"""

from __future__ import annotations

import logging
import time

from json_tree_diff.algorithm.config import DiffSettings
from json_tree_diff.algorithm.differ import StructuralDiffer
from json_tree_diff.cache import DocumentCache
from json_tree_diff.result import DiffRecord, DiffReport

__all__ = ["JsonDiffer"]

logger = logging.getLogger(__name__)


class JsonDiffer:
    """Parse-and-diff entry point for pairs of JSON texts.

    Example::

        from json_tree_diff.comparator import JsonDiffer

        differ = JsonDiffer()
        report = differ.compare('{"a": 1}', '{"a": 1, "b": 2}')
        print(report.render())   # +++ ? -> 2 in ::b
    """

    def __init__(
        self,
        settings: DiffSettings | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the differ.

        Args:
            settings: Tolerance and parser limits.  Defaults to ``DiffSettings()``.
            max_cache_size: Maximum number of parsed documents held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``DiffSettings``.
        """
        self._settings = settings if settings is not None else DiffSettings()
        self._cache = DocumentCache(
            max_size=max_cache_size, max_depth=self._settings.max_depth
        )
        self._differ = StructuralDiffer(self._settings)

    @property
    def settings(self) -> DiffSettings:
        return self._settings

    @property
    def cache(self) -> DocumentCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, base_text: str, compared_text: str) -> list[DiffRecord]:
        """Parse both texts and return their divergences.

        Raises:
            ParseError: If either text fails to parse.
        """
        base = self._cache.get(base_text)
        compared = self._cache.get(compared_text)
        return self._differ.compute(base, compared)

    def compare(self, base_text: str, compared_text: str) -> DiffReport:
        """Like ``diff()`` but returns a ``DiffReport`` with wall-clock timing.

        Raises:
            ParseError: If either text fails to parse.
        """
        t0 = time.perf_counter()
        records = self.diff(base_text, compared_text)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "json_differ.compare records=%d elapsed_ms=%.3f", len(records), elapsed_ms
        )
        return DiffReport(records=tuple(records), computation_time_ms=elapsed_ms)

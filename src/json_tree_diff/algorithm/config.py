"""DiffSettings: immutable configuration for the structural differ.

``float_tolerance`` governs numeric leaf comparison whenever at least one side
is a float.  ``max_depth`` is forwarded to the parser for both documents.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from json_tree_diff.tree.parser import DEFAULT_MAX_DEPTH, check_max_depth

__all__ = ["DEFAULT_FLOAT_TOLERANCE", "DiffSettings"]

DEFAULT_FLOAT_TOLERANCE = 1e-5


@dataclass(frozen=True, slots=True)
class DiffSettings:
    """Immutable configuration for ``diff``.

    Attributes:
        float_tolerance: Maximum absolute difference at which two numbers are
            still equal, applied when at least one side is a float.  Two
            integers always compare exactly.  Must be finite and >= 0.
        max_depth: Nesting limit passed to the parser for both documents.
            Must be between 1 and ``max_depth_limit()``, the ceiling derived
            from the interpreter recursion limit.
    """

    float_tolerance: float = DEFAULT_FLOAT_TOLERANCE
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not math.isfinite(self.float_tolerance) or self.float_tolerance < 0.0:
            msg = f"float_tolerance must be finite and >= 0.0, got {self.float_tolerance}"
            raise ValueError(msg)
        check_max_depth(self.max_depth)

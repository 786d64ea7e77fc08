"""Public API functions for json-tree-diff.

This module provides the user-facing functions: parse, dumps, diff, compare,
and is_identical.  The diff functions create a fresh ``JsonDiffer`` per call to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffSettings
from json_tree_diff.comparator import JsonDiffer
from json_tree_diff.result import DiffRecord, DiffReport
from json_tree_diff.tree.nodes import JsonValue
from json_tree_diff.tree.parser import DEFAULT_MAX_DEPTH
from json_tree_diff.tree.parser import parse as _parse
from json_tree_diff.tree.serializer import dumps as _dumps

__all__ = ["compare", "diff", "dumps", "is_identical", "parse"]


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> JsonValue:
    """Parse JSON text into an immutable value tree.

    Args:
        text:      The JSON document.
        max_depth: Maximum array/object nesting depth.  Defaults to 256.

    Returns:
        The root ``JsonValue``.

    Raises:
        ParseError: If the text is not a single well-formed JSON value.
    """
    return _parse(text, max_depth=max_depth)


def dumps(value: JsonValue, indent: int | None = None) -> str:
    """Serialize a value tree as compact (``indent=None``) or indented JSON."""
    return _dumps(value, indent=indent)


def diff(
    base_text: str,
    compared_text: str,
    settings: DiffSettings | None = None,
) -> list[DiffRecord]:
    """Parse two JSON texts and return their structural differences.

    Args:
        base_text:     The reference document.
        compared_text: The document compared against the reference.
        settings:      Tolerance and parser limits.  Defaults to ``DiffSettings()``.

    Returns:
        The diff records.  Records for different keys of one object may come
        in any order; treat the result as a set when asserting on it.

    Raises:
        ParseError: If either text fails to parse.  No partial diff is produced.
    """
    return JsonDiffer(settings=settings).diff(base_text, compared_text)


def compare(
    base_text: str,
    compared_text: str,
    settings: DiffSettings | None = None,
) -> DiffReport:
    """Parse and diff two JSON texts, returning a timed ``DiffReport``.

    Raises:
        ParseError: If either text fails to parse.
    """
    return JsonDiffer(settings=settings).compare(base_text, compared_text)


def is_identical(
    base_text: str,
    compared_text: str,
    settings: DiffSettings | None = None,
) -> bool:
    """Return True when the two documents have no structural differences.

    Raises:
        ParseError: If either text fails to parse.
    """
    return not diff(base_text, compared_text, settings=settings)

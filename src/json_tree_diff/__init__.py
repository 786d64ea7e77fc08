"""json-tree-diff - parse JSON into value trees and diff them structurally."""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffSettings
from json_tree_diff.api import compare, diff, dumps, is_identical, parse
from json_tree_diff.comparator import JsonDiffer
from json_tree_diff.errors import ParseError
from json_tree_diff.formatting import minify, prettify
from json_tree_diff.result import DiffKind, DiffRecord, DiffReport
from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffKind",
    "DiffRecord",
    "DiffReport",
    "DiffSettings",
    "JsonArray",
    "JsonDiffer",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "ParseError",
    "compare",
    "diff",
    "dumps",
    "is_identical",
    "minify",
    "parse",
    "prettify",
]

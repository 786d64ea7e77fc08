"""Tree subpackage: the JSON value model and its text conversions.

Re-exports the public API for the tree module:
- JsonValue and its five variants (JsonNumber, JsonString, JsonArray, JsonObject, JsonNull)
- ValueKind: StrEnum tag of the five variants
- Cursor: character cursor used by the parser
- Parser / parse: recursive-descent parser from text to tree
- dumps / render: serializer from tree to text
"""

from json_tree_diff.tree.cursor import Cursor
from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    ValueKind,
    values_equal,
)
from json_tree_diff.tree.parser import DEFAULT_MAX_DEPTH, Parser, max_depth_limit, parse
from json_tree_diff.tree.serializer import dumps, render

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Cursor",
    "JsonArray",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "Parser",
    "ValueKind",
    "dumps",
    "max_depth_limit",
    "parse",
    "render",
    "values_equal",
]

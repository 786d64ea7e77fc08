"""Serializer: converts a value tree back into JSON text.

Two entry points:

- ``dumps(value, indent=None)`` -> compact or indented JSON text that the
  parser reads back to an equal tree.
- ``render(value)`` -> the human-readable form used in diff records: numbers
  and ``null`` as JSON, strings raw (unquoted), containers as compact JSON.

Floats are always written in positional notation because the parser does not
accept exponents.  ``numpy.format_float_positional`` gives the shortest
positional digits that round-trip, which ``repr`` cannot guarantee once it
switches to ``1e-07`` style output.
"""

from __future__ import annotations

import math

import numpy as np

from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = ["dumps", "format_number", "render"]


def format_number(number: JsonNumber) -> str:
    """Format a number as a JSON literal without exponent notation.

    Integers print exactly.  Floats always carry a decimal point so that the
    integer/float distinction survives a round trip (``1.0`` stays ``1.0``).

    Raises:
        ValueError: For NaN or infinity, which have no JSON literal.
    """
    value = number.value
    if not number.is_float:
        return str(value)
    if not math.isfinite(value):
        msg = f"cannot serialize non-finite float {value!r}"
        raise ValueError(msg)
    return np.format_float_positional(value, unique=True, trim="0")


def _quote(text: str) -> str:
    # The parser drops a backslash and keeps the next character, so escaping
    # only the quote and the backslash is enough to read back the same text.
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def dumps(value: JsonValue, indent: int | None = None) -> str:
    """Serialize a value tree to JSON text.

    Args:
        value:  Root of the tree to serialize.
        indent: ``None`` for compact output (no whitespace at all); otherwise
                the number of spaces per nesting level.  Must be >= 0.

    Returns:
        JSON text.
    """
    if indent is not None and indent < 0:
        msg = f"indent must be >= 0, got {indent}"
        raise ValueError(msg)
    parts: list[str] = []
    _write(value, parts, indent, 0)
    return "".join(parts)


def _write(value: JsonValue, out: list[str], indent: int | None, level: int) -> None:
    if isinstance(value, JsonNumber):
        out.append(format_number(value))
    elif isinstance(value, JsonString):
        out.append(_quote(value.value))
    elif isinstance(value, JsonNull):
        out.append("null")
    elif isinstance(value, JsonArray):
        _write_container(
            "[", "]", [(None, item) for item in value], out, indent, level
        )
    elif isinstance(value, JsonObject):
        _write_container(
            "{", "}", list(value.members.items()), out, indent, level
        )
    else:
        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)


def _write_container(
    open_: str,
    close: str,
    entries: list[tuple[str | None, JsonValue]],
    out: list[str],
    indent: int | None,
    level: int,
) -> None:
    """Write an array (keys are None) or an object (keys are strings)."""
    if not entries:
        out.append(open_ + close)
        return

    if indent is None:
        newline, inner, outer, colon = "", "", "", ":"
    else:
        newline = "\n"
        inner = " " * (indent * (level + 1))
        outer = " " * (indent * level)
        colon = ": "

    out.append(open_)
    for i, (key, child) in enumerate(entries):
        if i:
            out.append(",")
        out.append(newline + inner)
        if key is not None:
            out.append(_quote(key) + colon)
        _write(child, out, indent, level + 1)
    out.append(newline + outer + close)


def render(value: JsonValue) -> str:
    """Human-readable rendering of a value for diff records.

    Strings are returned raw; everything else is compact JSON.
    """
    if isinstance(value, JsonString):
        return value.value
    return dumps(value)

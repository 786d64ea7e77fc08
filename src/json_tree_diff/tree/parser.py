"""Parser: hand-written recursive-descent parser from JSON text to a value tree.

Dispatch is on the first non-whitespace character of each value:

- ``{``          -> object
- ``"``          -> string
- ``[``          -> array
- ``n``          -> the ``null`` literal
- digit or ``-`` -> number
- anything else  -> ``UnexpectedCharacterError``

The parser is deliberately pragmatic rather than a conformance validator:
backslash escapes are copied through without decoding, exponent notation and
the ``true``/``false`` literals are not recognised, and a repeated object key
silently replaces the earlier value.

Every failure raises a ``ParseError`` subclass and aborts the whole parse; no
partial tree is ever returned.  Nesting is bounded by ``max_depth`` so that
hostile input fails with ``NestingTooDeepError`` rather than exhausting the
interpreter stack.
"""

from __future__ import annotations

import sys

from json_tree_diff.errors import (
    NestingTooDeepError,
    NumberFormatError,
    TrailingDataError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
)
from json_tree_diff.tree.cursor import Cursor
from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = ["DEFAULT_MAX_DEPTH", "Parser", "check_max_depth", "max_depth_limit", "parse"]

DEFAULT_MAX_DEPTH = 256

_DIGITS = frozenset("0123456789")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Each nesting level costs two Python frames in the parser and in the differ.
_FRAMES_PER_LEVEL = 2
_STACK_HEADROOM = 300


def max_depth_limit() -> int:
    """Largest ``max_depth`` that stays within the interpreter recursion limit.

    Derived from ``sys.getrecursionlimit()``, so raising the recursion limit
    raises the ceiling.  With the default limit of 1000 the ceiling is 350.
    """
    return max(1, (sys.getrecursionlimit() - _STACK_HEADROOM) // _FRAMES_PER_LEVEL)


def check_max_depth(max_depth: int) -> None:
    """Raise ``ValueError`` unless ``1 <= max_depth <= max_depth_limit()``."""
    ceiling = max_depth_limit()
    if not 1 <= max_depth <= ceiling:
        msg = f"max_depth must be between 1 and {ceiling}, got {max_depth}"
        raise ValueError(msg)


class Parser:
    """Single-use recursive-descent parser over one input text.

    Example::

        from json_tree_diff.tree.parser import Parser

        tree = Parser('{"a": [1, 2.5, null]}').parse()
        tree["a"][1]   # JsonNumber(value=2.5)
    """

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialise the parser.

        Args:
            text:      The complete JSON document.
            max_depth: Maximum array/object nesting depth.  Must be between 1
                and ``max_depth_limit()``.
        """
        check_max_depth(max_depth)
        self._cursor = Cursor(text)
        self._max_depth = max_depth
        self._depth = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self) -> JsonValue:
        """Parse the whole input as exactly one JSON value.

        Returns:
            The root of the value tree.

        Raises:
            ParseError: On any malformed input, including empty input and
                non-whitespace data after the root value.
        """
        ch = self._cursor.skip_whitespace()
        if ch is None:
            raise UnexpectedEndOfInputError(
                "no JSON value found: reached end of input", self._cursor.position
            )
        value = self._parse_value(ch)
        trailing = self._cursor.skip_whitespace()
        if trailing is not None:
            raise TrailingDataError(trailing, self._last_position)
        return value

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _last_position(self) -> int:
        """Index of the character most recently returned by the cursor."""
        return self._cursor.position - 1

    def _next_significant(self, context: str) -> str:
        """Skip whitespace and return the next character, failing at end of input."""
        ch = self._cursor.skip_whitespace()
        if ch is None:
            raise UnexpectedEndOfInputError(
                f"reached end of input while parsing {context}", self._cursor.position
            )
        return ch

    def _enter_container(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise NestingTooDeepError(self._max_depth, self._last_position)

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_value(self, ch: str) -> JsonValue:
        """Dispatch on ``ch``, the already-consumed first character of a value."""
        if ch == "{":
            return self._parse_object()
        if ch == '"':
            return self._parse_string()
        if ch == "[":
            return self._parse_array()
        if ch == "n":
            return self._parse_null()
        if ch == "-" or ch in _DIGITS:
            self._cursor.back()
            return self._parse_number()
        raise UnexpectedCharacterError("a JSON value", ch, self._last_position)

    def _parse_object(self) -> JsonObject:
        self._enter_container()
        members: dict[str, JsonValue] = {}

        ch = self._next_significant("object")
        if ch == "}":
            self._depth -= 1
            return JsonObject(members)

        while True:
            if ch != '"':
                raise UnexpectedCharacterError(
                    "a quoted object key", ch, self._last_position
                )
            key = self._parse_string().value

            ch = self._next_significant("object")
            if ch != ":":
                raise UnexpectedCharacterError(
                    "':' after object key", ch, self._last_position
                )

            # Last occurrence of a duplicate key wins.
            members[key] = self._parse_value(self._next_significant("object"))

            ch = self._next_significant("object")
            if ch == "}":
                break
            if ch != ",":
                raise UnexpectedCharacterError(
                    "',' or '}' after object member", ch, self._last_position
                )
            ch = self._next_significant("object")

        self._depth -= 1
        return JsonObject(members)

    def _parse_array(self) -> JsonArray:
        self._enter_container()
        items: list[JsonValue] = []

        ch = self._next_significant("array")
        if ch == "]":
            self._depth -= 1
            return JsonArray(())

        while True:
            items.append(self._parse_value(ch))
            ch = self._next_significant("array")
            if ch == "]":
                break
            if ch != ",":
                raise UnexpectedCharacterError(
                    "',' or ']' after array element", ch, self._last_position
                )
            ch = self._next_significant("array")

        self._depth -= 1
        return JsonArray(tuple(items))

    def _parse_string(self) -> JsonString:
        """Read up to the closing quote; the opening quote is already consumed."""
        buf: list[str] = []
        escaped = False
        while True:
            ch = self._cursor.next()
            if ch is None:
                raise UnterminatedStringError("".join(buf), self._cursor.position)
            if escaped:
                # Escaped character is copied through verbatim, backslash dropped.
                buf.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                return JsonString("".join(buf))
            else:
                buf.append(ch)

    def _parse_null(self) -> JsonNull:
        """Match the remaining ``ull`` of ``null``; the ``n`` is already consumed."""
        for expected in "ull":
            ch = self._cursor.next()
            if ch is None:
                raise UnexpectedEndOfInputError(
                    f"reached end of input while parsing null, expected {expected!r}",
                    self._cursor.position,
                )
            if ch != expected:
                raise UnexpectedCharacterError(
                    f"{expected!r} in null literal", ch, self._last_position
                )
        return JsonNull()

    def _parse_number(self) -> JsonNumber:
        start = self._cursor.position
        negative = False
        is_float = False
        int_digits: list[int] = []
        frac_digits: list[int] = []

        ch = self._cursor.next()
        if ch == "-":
            negative = True
            ch = self._cursor.next()

        while ch is not None:
            if ch in _DIGITS:
                (frac_digits if is_float else int_digits).append(ord(ch) - ord("0"))
            elif ch == ".":
                if is_float:
                    raise NumberFormatError(
                        _literal(negative, int_digits, frac_digits, is_float) + ".",
                        "second decimal point",
                        start,
                    )
                is_float = True
            elif ch.isspace():
                # Whitespace ends the number and is consumed.
                break
            else:
                self._cursor.back()
                break
            ch = self._cursor.next()

        literal = _literal(negative, int_digits, frac_digits, is_float)
        if not int_digits:
            if ch is None and not is_float:
                raise UnexpectedEndOfInputError(
                    "reached end of input while parsing number", self._cursor.position
                )
            raise NumberFormatError(literal, "expected a digit", start)
        if is_float and not frac_digits:
            raise NumberFormatError(
                literal, "expected a digit after the decimal point", start
            )

        magnitude = 0
        for digit in int_digits:
            magnitude = magnitude * 10 + digit

        if not is_float:
            value = -magnitude if negative else magnitude
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise NumberFormatError(
                    literal, "integer outside the signed 64-bit range", start
                )
            return JsonNumber(value)

        # Fold right-to-left so that d1 d2 d3 yields (d1 + (d2 + d3 / 10) / 10) / 10.
        fraction = 0.0
        for digit in reversed(frac_digits):
            fraction = (fraction + digit) / 10
        try:
            result = magnitude + fraction
        except OverflowError:
            raise NumberFormatError(
                literal, "magnitude too large for a float", start
            ) from None
        return JsonNumber(-result if negative else result)


def _literal(
    negative: bool, int_digits: list[int], frac_digits: list[int], is_float: bool
) -> str:
    """Reassemble the consumed number characters for error messages."""
    text = ("-" if negative else "") + "".join(map(str, int_digits))
    if is_float:
        text += "." + "".join(map(str, frac_digits))
    return text


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> JsonValue:
    """Parse JSON text into a value tree.

    Args:
        text:      The JSON document.
        max_depth: Maximum array/object nesting depth.  Defaults to 256.

    Returns:
        The root ``JsonValue``.

    Raises:
        ParseError: If the text is not a single well-formed value.
    """
    return Parser(text, max_depth=max_depth).parse()

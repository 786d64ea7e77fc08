"""Cursor: character-position reader over the full input text.

Positions are character (code point) indices, never byte offsets.  The parser
consumes one character at a time with ``next()`` and pushes back at most the
character it just read with ``back()``.
"""

from __future__ import annotations

__all__ = ["Cursor"]


class Cursor:
    """Peek/advance/retreat cursor over a string.

    Example::

        cur = Cursor("ab")
        cur.next()   # "a"
        cur.back()
        cur.next()   # "a"
        cur.next()   # "b"
        cur.next()   # None (end of input)
    """

    __slots__ = ("_pos", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the character the next ``next()`` call will return."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def next(self) -> str | None:
        """Return the current character and advance, or None at end of input."""
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def back(self) -> None:
        """Move one character earlier.

        Raises:
            AssertionError: If called at position 0.  The parser only ever
                retreats over a character it has just read.
        """
        assert self._pos > 0, "Cursor.back() called at start of input"
        self._pos -= 1

    def skip_whitespace(self) -> str | None:
        """Consume Unicode whitespace and return the next character (consumed)."""
        ch = self.next()
        while ch is not None and ch.isspace():
            ch = self.next()
        return ch

"""Tests for the character Cursor."""

from __future__ import annotations

import pytest

from json_tree_diff.tree.cursor import Cursor


class TestNext:
    def test_reads_characters_in_order(self) -> None:
        cur = Cursor("ab")
        assert cur.next() == "a"
        assert cur.next() == "b"

    def test_returns_none_when_exhausted(self) -> None:
        cur = Cursor("a")
        cur.next()
        assert cur.next() is None
        assert cur.next() is None

    def test_empty_input(self) -> None:
        cur = Cursor("")
        assert cur.at_end
        assert cur.next() is None

    def test_positions_are_character_indices(self) -> None:
        # Multi-byte characters still advance the position by one.
        cur = Cursor("é€x")
        cur.next()
        cur.next()
        assert cur.position == 2
        assert cur.next() == "x"


class TestBack:
    def test_back_rereads_previous_character(self) -> None:
        cur = Cursor("xy")
        cur.next()
        cur.next()
        cur.back()
        assert cur.next() == "y"

    def test_back_at_start_fails_loudly(self) -> None:
        cur = Cursor("abc")
        with pytest.raises(AssertionError):
            cur.back()
        assert cur.position == 0


class TestSkipWhitespace:
    def test_skips_ascii_whitespace(self) -> None:
        cur = Cursor(" \t\r\n{")
        assert cur.skip_whitespace() == "{"
        assert cur.position == 5

    def test_skips_unicode_whitespace(self) -> None:
        # NO-BREAK SPACE and EM SPACE are in the Unicode whitespace class.
        cur = Cursor("\u00a0\u2003[")
        assert cur.skip_whitespace() == "["

    def test_returns_none_at_end(self) -> None:
        cur = Cursor("   ")
        assert cur.skip_whitespace() is None

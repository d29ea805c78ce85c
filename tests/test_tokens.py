"""Tokenizer and token cursor tests."""

from __future__ import annotations

import pytest

from slantlib.errors import UnexpectedEofError, UnexpectedTokenError
from slantlib.tokens import TokenCursor, tokenize


def test_tokenize_collapses_whitespace_runs() -> None:
    """Spaces, tabs, CR and LF separate tokens; runs produce no empty tokens."""
    assert tokenize("  servers\ta \r\n b\n\n;  ") == ["servers", "a", "b", ";"]


def test_tokenize_keeps_punctuation_attached() -> None:
    """Braces and semicolons only split when surrounded by whitespace."""
    assert tokenize("layout {header;} ;") == ["layout", "{header;}", ";"]


def test_tokenize_empty_and_blank_input() -> None:
    assert tokenize("") == []
    assert tokenize(" \t\r\n") == []
    assert tokenize(b"") == []


def test_tokenize_bytes_and_other_whitespace() -> None:
    """Only the four separator characters split; form feeds stay in the token."""
    assert tokenize(b"servers a\x0cb ;") == ["servers", "a\x0cb", ";"]
    assert tokenize(b"servers \xff ;") == ["servers", "\udcff", ";"]


def test_cursor_equals_does_not_advance() -> None:
    cur = TokenCursor(["a", "b"])
    assert cur.equals("a")
    assert not cur.equals("b")
    assert cur.pos == 0

    assert not cur.equalsAdvance("b")
    assert cur.pos == 0
    assert cur.equalsAdvance("a")
    assert cur.current() == "b"


def test_cursor_expect_reports_expected_and_found() -> None:
    cur = TokenCursor(["x"], source="test.conf")
    with cur.rule("layout"):
        with pytest.raises(UnexpectedTokenError) as excInfo:
            cur.expect(";")

    err = excInfo.value
    assert err.expected == ";"
    assert err.found == "x"
    assert err.context == "layout"
    assert str(err) == 'test.conf: layout: expected ";", have "x"'
    assert cur.pos == 0


def test_cursor_expect_advance() -> None:
    cur = TokenCursor(["{", "}"])
    assert cur.expectAdvance("{")
    assert cur.expectAdvance("}")
    assert cur.atEnd()


def test_cursor_advance_fails_at_end() -> None:
    cur = TokenCursor(["a", "b"])
    assert cur.advance()
    with pytest.raises(UnexpectedEofError):
        cur.advance()


def test_cursor_current_and_equals_at_end_raise_eof() -> None:
    cur = TokenCursor([])
    assert cur.atEnd()
    with pytest.raises(UnexpectedEofError):
        cur.current()
    with pytest.raises(UnexpectedEofError):
        cur.equals(";")
    with pytest.raises(UnexpectedEofError):
        cur.expect(";")


def test_cursor_rule_context_nests_and_restores() -> None:
    cur = TokenCursor(["a"])
    assert cur.context == "config"
    with cur.rule("layout"):
        with cur.rule("layout host"):
            assert cur.context == "layout host"
        assert cur.context == "layout"
    assert cur.context == "config"


def test_cursor_take_returns_token() -> None:
    cur = TokenCursor(["a", "b"])
    assert cur.take() == "a"
    assert cur.take() == "b"
    with pytest.raises(UnexpectedEofError):
        cur.take()

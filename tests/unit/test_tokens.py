"""Unit tests for token classification and quoting."""

import pytest

from mime_typemap.media.tokens import (
    TSPECIALS,
    is_token_char,
    is_valid_token,
    quote,
    skip_whitespace,
    unquote,
)


def _inner(quoted: str) -> str:
    if len(quoted) >= 2 and quoted[0] == '"' and quoted[-1] == '"':
        return quoted[1:-1]
    return quoted


def test_specials_are_not_token_chars():
    for c in '()<>@,;:/[]?=\\"':
        assert c in TSPECIALS
        assert not is_token_char(c)


def test_printable_range_boundaries():
    assert not is_token_char(" ")
    assert not is_token_char("\t")
    assert not is_token_char("\x7f")
    assert not is_token_char("é")
    assert is_token_char("!")
    assert is_token_char("~")
    assert is_token_char("+")
    assert is_token_char("*")


def test_is_valid_token():
    assert not is_valid_token("")
    assert is_valid_token("html")
    assert is_valid_token("vnd.ms-excel")
    assert is_valid_token("svg+xml")
    assert not is_valid_token("text/html")
    assert not is_valid_token("a b")
    assert not is_valid_token("utf=8")


def test_skip_whitespace():
    assert skip_whitespace("   x", 0) == 3
    assert skip_whitespace("x  ", 1) == 3
    assert skip_whitespace("x", 0) == 0


def test_quote_leaves_tokens_alone():
    assert quote("utf-8") == "utf-8"
    assert quote("") == ""


def test_quote_wraps_and_escapes():
    assert quote("a b") == '"a b"'
    assert quote('say "hi"') == '"say \\"hi\\""'
    assert quote("back\\slash") == '"back\\\\slash"'


def test_unquote_processes_escapes():
    assert unquote("a b") == "a b"
    assert unquote('say \\"hi\\"') == 'say "hi"'
    assert unquote("back\\\\slash") == "back\\slash"
    assert unquote("\\x") == "x"


def test_unquote_stops_at_unescaped_quote():
    assert unquote('abc"def') == "abc"


@pytest.mark.parametrize(
    "value",
    ["", "plain", "a b", 'q"uote', "back\\slash", '\\"', "semi;colon", "tab\there"],
)
def test_quote_round_trip(value):
    assert unquote(_inner(quote(value))) == value

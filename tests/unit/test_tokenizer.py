"""Tests for tag extraction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tagmatch.core.tokenizer import line_number, tokenize
from tagmatch.models.tokens import Token
from tests.conftest import SAMPLE_HTML


def test_open_and_close() -> None:
    tokens = tokenize("<a><b></b></a>")
    assert [(t.name, t.is_closing) for t in tokens] == [
        ("a", False),
        ("b", False),
        ("b", True),
        ("a", True),
    ]
    assert [t.position for t in tokens] == [0, 3, 6, 10]


def test_raw_text_kept() -> None:
    (token,) = tokenize('<div class="x" id=y>')
    assert token.name == "div"
    assert token.raw == '<div class="x" id=y>'


def test_attributes_ignored() -> None:
    tokens = tokenize('<a href="/x?y=1">link</a >')
    assert [t.name for t in tokens] == ["a", "a"]
    assert tokens[1].is_closing


def test_self_closing_is_opener() -> None:
    (token,) = tokenize("<br/>")
    assert token.name == "br"
    assert token.is_closing is False


def test_case_sensitive_names() -> None:
    tokens = tokenize("<Div></div>")
    assert [t.name for t in tokens] == ["Div", "div"]


def test_name_with_digits() -> None:
    assert [t.name for t in tokenize("<h1></h1>")] == ["h1", "h1"]


@pytest.mark.parametrize(
    "text",
    [
        "plain text",
        "< a>",
        "<1a>",
        "</>",
        "<>",
        "a < b > c",
        "<a_b>",
        "<!-- comment -->",
        "<!DOCTYPE html>",
        "<a",
    ],
)
def test_non_tags_skipped(text: str) -> None:
    assert tokenize(text) == ()


def test_non_ascii_after_name_is_not_a_name_boundary() -> None:
    # "é" is not part of the name and is not a word character in ASCII mode
    (token,) = tokenize("<aé>")
    assert token.name == "a"


def test_line_numbers() -> None:
    tokens = tokenize("<a>\n\n  <b>\n</b></a>")
    assert [t.line for t in tokens] == [1, 3, 4, 4]


def test_line_number_helper() -> None:
    assert line_number("abc", 0) == 1
    assert line_number("a\nb\nc", 4) == 3


def test_positions_refer_to_untrimmed_text() -> None:
    (token,) = tokenize("\n   <a>")
    assert token.position == 4
    assert token.line == 2


def test_positions_strictly_increasing() -> None:
    tokens = tokenize(SAMPLE_HTML)
    positions = [t.position for t in tokens]
    assert positions == sorted(set(positions))


def test_sample_counts() -> None:
    tokens = tokenize(SAMPLE_HTML)
    assert len(tokens) == 22
    assert sum(t.is_closing for t in tokens) == 11


def test_tokens_are_immutable() -> None:
    token = Token(name="a", is_closing=False, position=0, line=1)
    with pytest.raises(ValidationError):
        token.name = "b"  # type: ignore[misc]

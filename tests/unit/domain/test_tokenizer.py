"""Unit tests for the tokenizer."""

import pytest

from textmorph.domain.tokenizer import tokenize
from textmorph.domain.value_objects import Token


def test_empty_input_yields_no_tokens() -> None:
    """Empty text tokenizes to an empty sequence."""
    assert not list(tokenize(""))


@pytest.mark.parametrize("text", ["   ", "...!?", " - _ - ", "\n\t"])
def test_separator_only_input_yields_no_tokens(text: str) -> None:
    """Text without word characters tokenizes to nothing, without failing."""
    assert not list(tokenize(text))


def test_offsets_point_back_into_source() -> None:
    """Each token records where it sits in the original text."""
    text = "  hello, big  world!"
    tokens = list(tokenize(text))
    assert tokens == [
        Token("hello", 2, 7),
        Token("big", 9, 12),
        Token("world", 14, 19),
    ]
    for token in tokens:
        assert text[token.start : token.end] == token.text


def test_repeated_words_get_their_own_offsets() -> None:
    """Duplicate words are located by position, not by searching for the text."""
    tokens = list(tokenize("the cat and the hat"))
    assert [t.start for t in tokens if t.text == "the"] == [0, 12]


def test_underscore_and_hyphen_are_separators() -> None:
    """Identifiers split on underscores and hyphens."""
    assert [t.text for t in tokenize("hello_world-again")] == [
        "hello",
        "world",
        "again",
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("don't stop", ["don't", "stop"]),
        ("rock’n’roll", ["rock’n’roll"]),
        ("'quoted'", ["quoted"]),
        ("dogs' toys", ["dogs", "toys"]),
    ],
)
def test_apostrophe_only_inside_a_word(text: str, expected: list[str]) -> None:
    """An apostrophe joins two word characters but never starts or ends a token."""
    assert [t.text for t in tokenize(text)] == expected


def test_digits_are_word_characters() -> None:
    """Digits belong to tokens, alone or mixed with letters."""
    assert [t.text for t in tokenize("version 2 of r2d2")] == [
        "version",
        "2",
        "of",
        "r2d2",
    ]


def test_non_ascii_letters_are_word_characters() -> None:
    """Accented letters stay inside their word."""
    assert [t.text for t in tokenize("café crème")] == ["café", "crème"]


def test_tokenize_is_lazy() -> None:
    """Tokens are produced on demand."""
    tokens = tokenize("one two")
    assert next(tokens) == Token("one", 0, 3)
    assert next(tokens) == Token("two", 4, 7)
    with pytest.raises(StopIteration):
        next(tokens)

"""Hypothesis property tests for the casing engine.

Properties exercised:

- **Empty input**: every mode maps ``""`` to ``""``.
- **Idempotence**: Upper and Lower case applied twice equal applied once.
- **Inverse round-trip**: flipping case twice restores letters-only text.
- **Length preservation**: every mode except the identifier modes keeps the
  text length.
- **Entry-point consistency**: ``explain(t, m).output == convert(t, m)``.
- **Explanation completeness**: Title case reports exactly the tokens whose
  text changed.

Most generated text is ASCII so the laws comparing lowercased forms hold;
length preservation is also checked over arbitrary Unicode text.
"""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textmorph.domain.engine import classify_title, convert
from textmorph.domain.explanation import explain
from textmorph.domain.minor_words import MINOR_WORDS
from textmorph.domain.tokenizer import tokenize
from textmorph.domain.value_objects import CasingMode, ModeGroup

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Strategies
# ============================================================================

ascii_text = st.text(alphabet=string.printable)
letters = st.text(alphabet=string.ascii_letters)
modes = st.sampled_from(list(CasingMode))

# Sentences built from real minor words exercise the Title rules more often
# than uniformly random text would.
words = st.one_of(
    st.sampled_from(sorted(MINOR_WORDS)),
    st.text(alphabet=string.ascii_letters, min_size=1, max_size=8),
)
separators = st.sampled_from([" ", "  ", ", ", "-", "_", ". ", "! ", "\n", "'"])


@st.composite
def phrases(draw: st.DrawFn) -> str:
    """Draw a phrase of words joined by assorted separators."""
    parts = draw(st.lists(words, min_size=1, max_size=10))
    out = [parts[0]]
    for word in parts[1:]:
        out.append(draw(separators))
        out.append(word)
    return "".join(out)


prose = st.one_of(ascii_text, phrases())

# ============================================================================
#                               Properties
# ============================================================================


@given(mode=modes)
def test_empty_is_fixed_point(mode: CasingMode) -> None:
    """Empty input converts to empty output in every mode."""
    assert convert("", mode) == ""


@given(text=prose)
def test_upper_and_lower_are_idempotent(text: str) -> None:
    """Folding twice equals folding once."""
    for mode in (CasingMode.UPPER, CasingMode.LOWER):
        once = convert(text, mode)
        assert convert(once, mode) == once


@given(text=letters)
def test_inverse_round_trip(text: str) -> None:
    """Inverse case is its own inverse on letters."""
    assert convert(convert(text, CasingMode.INVERSE), CasingMode.INVERSE) == text


@given(text=prose, mode=modes)
def test_length_is_preserved_outside_identifier_modes(
    text: str, mode: CasingMode
) -> None:
    """Only identifier modes may change the text length."""
    output = convert(text, mode)
    if mode.group is ModeGroup.IDENTIFIER:
        assert len(output) <= len(text)
    else:
        assert len(output) == len(text)
        assert output.lower() == text.lower()


@given(text=prose, mode=modes)
def test_explain_output_matches_convert(text: str, mode: CasingMode) -> None:
    """Both entry points always agree on the output."""
    assert explain(text, mode).output == convert(text, mode)


@given(text=prose)
def test_title_explanation_completeness(text: str) -> None:
    """Title case reports exactly the tokens whose text changed, in order."""
    changed = [
        (d.token.text, d.transformed)
        for d in classify_title(list(tokenize(text)))
        if d.token.text != d.transformed
    ]
    result = explain(text, CasingMode.TITLE)
    reported = [(j.original, j.transformed) for j in result.justifications]
    assert reported == changed


@given(text=prose)
def test_title_first_and_last_words_capitalized(text: str) -> None:
    """The first and last words of Title case output start uppercase."""
    tokens = list(tokenize(convert(text, CasingMode.TITLE)))
    for token in (tokens[:1] + tokens[-1:]) if tokens else []:
        assert token.text[0] == token.text[0].upper()


@given(text=st.text(), mode=modes)
def test_length_is_preserved_for_any_unicode(text: str, mode: CasingMode) -> None:
    """Characters whose case mapping expands (ß, İ) never change the length."""
    if mode.group is not ModeGroup.IDENTIFIER:
        assert len(convert(text, mode)) == len(text)

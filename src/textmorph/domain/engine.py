"""Case transform engine.

Every mode is rendered from the raw text in a single left-to-right pass. Title
and Sentence case are split into a classification step (which words or
letters change, and why) and a rendering step; the classification functions
are shared with `textmorph.domain.explanation` so both entry points always
agree.
"""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import UnrecognizedModeError
from .minor_words import MINOR_WORDS
from .tokenizer import APOSTROPHES, tokenize
from .value_objects import CasingMode, JustificationCategory, Token

logger = logging.getLogger(__name__)

SENTENCE_END = frozenset(".!?")

FIRST_WORD_REASON = "First word is always capitalized"
LAST_WORD_REASON = "Last word is always capitalized"
MAJOR_WORD_REASON = "Major word (capitalized)"
FIRST_LETTER_REASON = "First letter of text"
SENTENCE_START_REASON = "First letter after sentence end"

_APOSTROPHE_RE = re.compile(f"[{APOSTROPHES}]")


@dataclass(frozen=True)
class TitleDecision:
    """How a single token is recased in Title Case, and why."""

    token: Token
    transformed: str
    reason: str
    category: JustificationCategory


@dataclass(frozen=True)
class SentenceStart:
    """Position of a character that opens a sentence."""

    index: int
    reason: str


def _fold(char: str, folded: str) -> str:
    # Multi-character mappings (ß -> SS) are skipped so positions never shift.
    return folded if len(folded) == 1 else char


def lower(text: str) -> str:
    """Lowercase `text` one character at a time, keeping its length."""
    return "".join(_fold(char, char.lower()) for char in text)


def upper(text: str) -> str:
    """Uppercase `text` one character at a time, keeping its length."""
    return "".join(_fold(char, char.upper()) for char in text)


def swapcase(text: str) -> str:
    """Swap the case of each character of `text`, keeping its length."""
    return "".join(_fold(char, char.swapcase()) for char in text)


def capitalize(word: str) -> str:
    """Uppercase the first character of `word` and lowercase the rest."""
    return upper(word[:1]) + lower(word[1:])


# ============================================================================
#                           Classification
# ============================================================================


def classify_title(tokens: Sequence[Token]) -> list[TitleDecision]:
    """Decide the Title Case form of each token.

    The first and last tokens are always capitalized, even when they are
    minor words. Any other token is lowercased if it is a minor word and
    capitalized otherwise.

    Args:
        tokens: The tokens of the text, in order.

    Returns:
        One decision per token, in the same order.
    """
    last = len(tokens) - 1
    decisions = []
    for index, token in enumerate(tokens):
        folded = lower(token.text)
        if index == 0:
            transformed, reason = capitalize(folded), FIRST_WORD_REASON
            category = JustificationCategory.CAPITALIZED
        elif index == last:
            transformed, reason = capitalize(folded), LAST_WORD_REASON
            category = JustificationCategory.CAPITALIZED
        elif (kind := MINOR_WORDS.get(folded)) is not None:
            transformed, reason = folded, f"Minor word ({kind.value})"
            category = JustificationCategory.LOWERCASED
        else:
            transformed, reason = capitalize(folded), MAJOR_WORD_REASON
            category = JustificationCategory.CAPITALIZED
        decisions.append(TitleDecision(token, transformed, reason, category))
    return decisions


def find_sentence_starts(text: str) -> list[SentenceStart]:
    """Locate the characters Sentence case uppercases.

    A sentence opens at the first word character of the text and at the
    first word character after a run of ``.``, ``!`` or ``?``. Whitespace may
    sit in between; any other character cancels the pending sentence start.
    Digits open a sentence too, they simply have no uppercase form.

    Args:
        text: The source text. Classification is case-independent, so the
            original or the lowercased text give the same answer.

    Returns:
        The sentence starts in order of position.
    """
    starts = []
    pending: str | None = FIRST_LETTER_REASON
    for index, char in enumerate(text):
        if char in SENTENCE_END:
            pending = SENTENCE_START_REASON
        elif char.isspace():
            continue
        elif pending is not None:
            if char.isalnum():
                starts.append(SentenceStart(index, pending))
            pending = None
    return starts


# ============================================================================
#                               Rendering
# ============================================================================


def render_title(text: str, decisions: Sequence[TitleDecision]) -> str:
    """Splice the decided token forms back between the original separators."""
    parts = []
    cursor = 0
    for decision in decisions:
        parts.append(text[cursor : decision.token.start])
        parts.append(decision.transformed)
        cursor = decision.token.end
    parts.append(text[cursor:])
    return "".join(parts)


def render_sentence(text: str, starts: Sequence[SentenceStart]) -> list[str]:
    """Lowercase `text` and uppercase each sentence start.

    Returns the characters as a list indexed like `text`, so callers can
    compare individual positions with the original.
    """
    chars = [lower(char) for char in text]
    for start in starts:
        chars[start.index] = upper(chars[start.index])
    return chars


def _words(text: str) -> list[str]:
    # Identifiers have no apostrophes, so a contraction splits into two words.
    return [
        part for token in tokenize(text) for part in _APOSTROPHE_RE.split(token.text)
    ]


def _title(text: str) -> str:
    return render_title(text, classify_title(list(tokenize(text))))


def _sentence(text: str) -> str:
    return "".join(render_sentence(text, find_sentence_starts(text)))


def _camel(text: str) -> str:
    words = _words(text)
    return "".join(
        lower(word) if index == 0 else capitalize(word)
        for index, word in enumerate(words)
    )


def _pascal(text: str) -> str:
    return "".join(capitalize(word) for word in _words(text))


def _snake(text: str) -> str:
    return "_".join(lower(word) for word in _words(text))


def _kebab(text: str) -> str:
    return "-".join(lower(word) for word in _words(text))


def _alternating(text: str) -> str:
    return "".join(
        upper(char) if index % 2 else lower(char) for index, char in enumerate(text)
    )


_RENDERERS: dict[CasingMode, Callable[[str], str]] = {
    CasingMode.TITLE: _title,
    CasingMode.SENTENCE: _sentence,
    CasingMode.LOWER: lower,
    CasingMode.UPPER: upper,
    CasingMode.CAMEL: _camel,
    CasingMode.PASCAL: _pascal,
    CasingMode.SNAKE: _snake,
    CasingMode.KEBAB: _kebab,
    CasingMode.ALTERNATING: _alternating,
    CasingMode.INVERSE: swapcase,
}


def convert(text: str, mode: CasingMode) -> str:
    """Convert `text` to the casing selected by `mode`.

    Args:
        text: Any string. Empty input always yields an empty string.
        mode: The casing to apply.

    Returns:
        The converted text. Identifier modes (camel, pascal, snake, kebab)
        drop separators and may shorten the text; every other mode only
        recases characters in place.

    Raises:
        UnrecognizedModeError: If `mode` is not a `CasingMode` member.
    """
    try:
        render = _RENDERERS[mode]
    except (KeyError, TypeError) as e:
        raise UnrecognizedModeError(mode, CasingMode.names()) from e
    if not text:
        return ""
    logger.debug("Converting %d characters to %s", len(text), mode.value)
    return render(text)

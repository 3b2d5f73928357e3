"""Split text into word tokens.

A word is a maximal run of letters and digits, optionally joined by an
apostrophe (``'`` or ``’``) sitting between two of them, so ``don't`` and
``rock’n’roll`` are single tokens while a leading or trailing quote is not
part of the word. Everything else is a separator and is never a token.
"""

import re
from collections.abc import Iterator

from .value_objects import Token

APOSTROPHES = "'’"

WORD_RE = re.compile(rf"[^\W_]+(?:[{APOSTROPHES}][^\W_]+)*")


def tokenize(text: str) -> Iterator[Token]:
    """Yield the word tokens of `text` from left to right.

    The scan is a single pass over the input; offsets are taken from the
    match positions rather than searched for again.

    Args:
        text: Any string, possibly empty.

    Yields:
        Token: Each word with its ``start``/``end`` offsets in `text`.
    """
    for match in WORD_RE.finditer(text):
        yield Token(text=match.group(), start=match.start(), end=match.end())

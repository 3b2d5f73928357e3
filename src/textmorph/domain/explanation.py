"""Explanation generator.

Re-runs the engine's classification step and reports, for each word or
letter whose case changed, which rule changed it. Only Title and Sentence
case carry word-level reasoning; Upper and Lower case report a single
summary record and the remaining modes report nothing.
"""

import logging

from .engine import (
    classify_title,
    convert,
    find_sentence_starts,
    render_sentence,
    render_title,
)
from .tokenizer import tokenize
from .value_objects import (
    CasingMode,
    Explanation,
    Justification,
    JustificationCategory,
)

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 20
EXPLAINED_MODES = frozenset(
    {CasingMode.TITLE, CasingMode.SENTENCE, CasingMode.UPPER, CasingMode.LOWER}
)
UPPER_REASON = "All text converted to uppercase"
LOWER_REASON = "All text converted to lowercase"


def _preview(text: str) -> str:
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def _explain_title(text: str) -> Explanation:
    decisions = classify_title(list(tokenize(text)))
    justifications = tuple(
        Justification(d.token.text, d.transformed, d.reason, d.category)
        for d in decisions
        if d.token.text != d.transformed
    )
    return Explanation(render_title(text, decisions), justifications)


def _explain_sentence(text: str) -> Explanation:
    starts = find_sentence_starts(text)
    chars = render_sentence(text, starts)
    justifications = tuple(
        Justification(
            text[start.index],
            chars[start.index],
            start.reason,
            JustificationCategory.CAPITALIZED,
        )
        for start in starts
        if text[start.index] != chars[start.index]
    )
    return Explanation("".join(chars), justifications)


def _explain_whole_text(
    text: str, mode: CasingMode, reason: str, category: JustificationCategory
) -> Explanation:
    output = convert(text, mode)
    if output == text:
        return Explanation(output)
    summary = Justification(_preview(text), _preview(output), reason, category)
    return Explanation(output, (summary,))


def explain(text: str, mode: CasingMode) -> Explanation:
    """Convert `text` and explain the changes made.

    The output is always identical to ``convert(text, mode)``.

    Args:
        text: Any string.
        mode: The casing to apply.

    Returns:
        Explanation: The converted text and the justification records.
        Records are only produced for pieces whose case actually changed, so
        a word that was already correct has no record even though it was
        processed.

    Raises:
        UnrecognizedModeError: If `mode` is not a `CasingMode` member.
    """
    if mode is CasingMode.TITLE and text:
        result = _explain_title(text)
    elif mode is CasingMode.SENTENCE and text:
        result = _explain_sentence(text)
    elif mode is CasingMode.UPPER:
        result = _explain_whole_text(
            text, mode, UPPER_REASON, JustificationCategory.CAPITALIZED
        )
    elif mode is CasingMode.LOWER:
        result = _explain_whole_text(
            text, mode, LOWER_REASON, JustificationCategory.LOWERCASED
        )
    else:
        result = Explanation(convert(text, mode))
    logger.debug(
        "Explained %s conversion with %d justification(s)",
        mode.value,
        len(result.justifications),
    )
    return result

"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnrecognizedModeError


class ModeGroup(Enum):
    """Families of casing modes, in the order they are presented to users."""

    PROSE = "prose"
    IDENTIFIER = "identifier"
    NOVELTY = "novelty"


class CasingMode(Enum):
    """Enumeration of supported casing modes.

    The values are the public mode identifiers; declaration order is the
    canonical listing order.
    """

    TITLE = "title"
    SENTENCE = "sentence"
    LOWER = "lower"
    UPPER = "upper"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    ALTERNATING = "alternating"
    INVERSE = "inverse"

    @property
    def label(self) -> str:
        """Human-readable name, itself written in the mode's own casing."""
        return _LABELS[self]

    @property
    def group(self) -> ModeGroup:
        """The family this mode belongs to."""
        return _GROUPS[self]

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return every mode identifier in canonical order."""
        return tuple(mode.value for mode in cls)

    @classmethod
    def parse(cls, value: str) -> CasingMode:
        """Build a mode from an external identifier such as a CLI flag.

        Matching ignores case and surrounding whitespace.

        Args:
            value: The identifier to parse, e.g. ``"title"`` or ``" Snake "``.

        Returns:
            The matching `CasingMode`.

        Raises:
            UnrecognizedModeError: If `value` names no mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError) as e:
            raise UnrecognizedModeError(value, cls.names()) from e


_LABELS = {
    CasingMode.TITLE: "Title Case",
    CasingMode.SENTENCE: "Sentence case",
    CasingMode.LOWER: "lower case",
    CasingMode.UPPER: "UPPER CASE",
    CasingMode.CAMEL: "camelCase",
    CasingMode.PASCAL: "PascalCase",
    CasingMode.SNAKE: "snake_case",
    CasingMode.KEBAB: "kebab-case",
    CasingMode.ALTERNATING: "aLtErNaTiNg",
    CasingMode.INVERSE: "InVeRsE cAsE",
}

_GROUPS = {
    CasingMode.TITLE: ModeGroup.PROSE,
    CasingMode.SENTENCE: ModeGroup.PROSE,
    CasingMode.LOWER: ModeGroup.PROSE,
    CasingMode.UPPER: ModeGroup.PROSE,
    CasingMode.CAMEL: ModeGroup.IDENTIFIER,
    CasingMode.PASCAL: ModeGroup.IDENTIFIER,
    CasingMode.SNAKE: ModeGroup.IDENTIFIER,
    CasingMode.KEBAB: ModeGroup.IDENTIFIER,
    CasingMode.ALTERNATING: ModeGroup.NOVELTY,
    CasingMode.INVERSE: ModeGroup.NOVELTY,
}


class MinorWordKind(Enum):
    """Grammatical class of a minor word."""

    ARTICLE = "article"
    CONJUNCTION = "conjunction"
    PREPOSITION = "preposition"


class JustificationCategory(Enum):
    """What happened to a word, as reported by an explanation."""

    CAPITALIZED = "capitalized"
    LOWERCASED = "lowercased"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Token:
    """A maximal run of word characters and its offsets in the source text."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Justification:
    """Value object explaining why a piece of text was recased."""

    original: str
    transformed: str
    reason: str
    category: JustificationCategory


@dataclass(frozen=True)
class Explanation:
    """Result of an explained conversion."""

    output: str
    justifications: tuple[Justification, ...] = ()

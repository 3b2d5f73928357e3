"""Minor words kept lowercase by Title Case unless they open or close the text."""

from collections.abc import Mapping
from types import MappingProxyType

from .value_objects import MinorWordKind

_BY_KIND = {
    MinorWordKind.ARTICLE: ("a", "an", "the"),
    MinorWordKind.CONJUNCTION: ("and", "but", "or", "nor", "for", "yet", "so", "as"),
    MinorWordKind.PREPOSITION: (
        "at",
        "by",
        "in",
        "of",
        "on",
        "to",
        "from",
        "with",
        "into",
        "onto",
        "upon",
        "via",
    ),
}

MINOR_WORDS: Mapping[str, MinorWordKind] = MappingProxyType(
    {word: kind for kind, words in _BY_KIND.items() for word in words}
)

"""TEXTMORPH

A deterministic text case-transformation engine. Converts text between ten
casing modes (Title Case, Sentence case, camelCase, snake_case, ...) and can
explain, word by word, why each transformation was made.
"""

from textmorph.domain.engine import convert
from textmorph.domain.explanation import explain
from textmorph.domain.value_objects import CasingMode

__all__ = ["__version__", "CasingMode", "convert", "explain"]
__version__ = "0.1.0"

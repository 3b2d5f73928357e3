"""Configuration utilities for TEXTMORPH.

This module centralizes small helpers and constants related to application configuration.
"""

import os

from textmorph.domain.value_objects import CasingMode

DEFAULT_MODE_ENVVAR = "TEXTMORPH_DEFAULT_MODE"  # pragma: no mutate
FALLBACK_MODE = CasingMode.TITLE


def get_default_mode() -> CasingMode:
    """Get the casing mode used when none is requested explicitly.

    Returns:
        The mode named by the `TEXTMORPH_DEFAULT_MODE` environment variable,
        or Title Case when it is unset or empty.

    Raises:
        UnrecognizedModeError: If `TEXTMORPH_DEFAULT_MODE` names no mode.
    """
    if not (value := os.environ.get(DEFAULT_MODE_ENVVAR)):
        return FALLBACK_MODE
    return CasingMode.parse(value)

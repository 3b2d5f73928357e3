"""CLI helpers for TEXTMORPH.

Utilities used by the command-line interface: Click callbacks that parse
option values at the boundary, and message emitters that write to stderr
with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .mode_parser import parse_mode

__all__ = ["error", "parse_log_level", "parse_mode", "success", "warn"]

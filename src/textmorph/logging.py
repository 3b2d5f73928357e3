"""Logging setup for the TEXTMORPH CLI.

Console records go to stderr through Rich so that stdout carries nothing but
converted text. The flight recorder keeps recent records in memory and dumps
them to a file when a WARNING or worse is logged; each buffered record is
tagged with the conversion being run (command, mode and input size), so a
dump can be traced back to the invocation that produced it.
"""

from __future__ import annotations

import logging
import platform
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(message)s"
DEBUG_CONSOLE_FORMAT = "%(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d "
    "<%(conversion)s> %(message)s"
)
NO_CONVERSION = "-"
CONVERSION_META_KEY = "textmorph.conversion"

# Libraries whose versions matter when a bug report comes with a dump.
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")


class ConversionFilter(logging.Filter):
    """Tag records with the conversion currently being run.

    Records logged before a command has read its input (startup, option
    parsing) carry ``-``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.conversion = NO_CONVERSION

    def describe(self, command: str, mode: str, length: int) -> None:
        """Record which conversion the following log records belong to."""
        self.conversion = f"{command} mode={mode} chars={length}"

    def filter(self, record: logging.LogRecord) -> bool:
        record.conversion = self.conversion
        return True


def console_handler(
    level: int = logging.WARNING, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Args:
        level: Minimum level shown. Debug mode forces DEBUG.
        debug: Show logger names and source locations.
        color: Mirror click-extra's ``--color/--no-color``.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT)
    )
    return handler


def recorder_handler(
    path: Path,
    conversion: ConversionFilter,
    *,
    capacity: int = 2000,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory buffer that dumps to `path` on WARNING.

    Args:
        path: File the buffer is written to; truncated on every run.
        conversion: Filter stamping each buffered record.
        capacity: Number of records kept in memory.
        flush_on_close: Also dump the buffer when the handler is closed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    recorder = MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )
    recorder.addFilter(conversion)
    return recorder


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    recorder_path: Path | None,
) -> None:
    """Log a one-line summary, then interpreter and library versions at DEBUG."""
    logger.info(
        "TEXTMORPH %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        recorder_path if recorder_path else "OFF",
    )
    logger.debug(
        "Python %s on %s", platform.python_version(), platform.platform(terse=True)
    )
    logger.debug(
        "Libraries: %s",
        ", ".join(f"{n} {_distribution_version(n)}" for n in REPORTED_DISTRIBUTIONS),
    )

"""Fixtures for end-to-end CLI tests.

Every test runs in an isolated directory with the flight recorder writing to
``latest.log`` there, and with the root logger restored afterwards because
the CLI reconfigures it on each invocation.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from textmorph.entrypoints.cli.main import textmorph

# pylint: disable=redefined-outer-name

LEVELS = (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)


@click.command()
def emit():
    """Log one record per level from a project logger and a library logger."""
    for name in ("textmorph.tests", "vendor.lib"):
        log = logging.getLogger(name)
        for level in LEVELS:
            log.log(level, "%s %s", name, logging.getLevelName(level).lower())
    logging.getLogger("textmorph.tests").debug("after the last warning")


@pytest.fixture
def emit_command():
    """Make ``textmorph emit`` available for the duration of a test."""
    textmorph.add_command(emit)
    yield
    textmorph.commands.pop("emit", None)
    sections = [
        *getattr(textmorph, "_sections", ()),
        getattr(textmorph, "_default_section", None),
    ]
    for section in filter(None, sections):
        section.commands.pop("emit", None)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Isolated directory, no inherited TEXTMORPH_* settings."""
    for name in (
        "TEXTMORPH_DEFAULT_MODE",
        "TEXTMORPH_FORCE_FLUSH_FLIGHT_RECORDER",
        "TEXTMORPH_LOGGER_LEVELS",
    ):
        monkeypatch.delenv(name, raising=False)
    with runner.isolated_filesystem():
        monkeypatch.setenv("TEXTMORPH_LOG_PATH", "latest.log")
        yield


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("vendor.lib", "click_extra", "textmorph"):
        logging.getLogger(name).setLevel(logging.NOTSET)

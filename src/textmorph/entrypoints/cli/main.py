"""TEXTMORPH CLI entry point.

Defines the top-level ``textmorph`` command (via Click-Extra) and registers
the subcommands exposed by the project.

Currently available commands
- ``textmorph convert``: convert text to one of the ten casing modes.
- ``textmorph explain``: convert text and report why each word changed.
- ``textmorph modes``: list the casing modes.

Notes
- The CLI version is sourced from `textmorph.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logging goes to stderr (Rich) and to an optional flight recorder file, so
  stdout only ever carries converted text.

Examples
    $ textmorph --version
    $ textmorph convert -m snake "Product Detail Page"
    $ echo "the catcher in the rye" | textmorph explain
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from textmorph import __version__
from textmorph.logging import (
    CONVERSION_META_KEY,
    ConversionFilter,
    console_handler,
    recorder_handler,
    log_startup,
)

from .convert import convert, explain, modes
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """TEXTMORPH command-line interface.

    TEXTMORPH converts text between casing styles: Title Case, Sentence case,
    lower case, UPPER CASE, camelCase, PascalCase, snake_case, kebab-case,
    aLtErNaTiNg and InVeRsE cAsE. Conversions are deterministic, and the
    explain command shows which rule decided the case of every changed word.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Examples:', fg='blue', bold=True, underline=True)}",
        '  textmorph convert -m kebab "Product Detail Page"',
        '  echo "GIVE IN TO ME" | textmorph explain --json',
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("textmorph", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TEXTMORPH_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TEXTMORPH_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via TEXTMORPH_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a "
        "WARNING/ERROR occurs, or on clean exit if --force-flush is set. "
        "Use --no-flight-recorder to disable."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is "
        "unaffected."
    ),
    default=False,
    envvar="TEXTMORPH_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L textmorph.domain=INFO -L click_extra=ERROR) or via "
        "TEXTMORPH_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="TEXTMORPH_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def textmorph(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """TEXTMORPH command-line interface."""

    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[logging.Handler] = [
        console_handler(level, debug=debug, color=ctx.color is not False)
    ]

    # The recorder sees DEBUG regardless of -v/-q; only -L levels filter it.
    if flight_recorder:
        conversion = ConversionFilter()
        ctx.meta[CONVERSION_META_KEY] = conversion
        handlers.append(
            recorder_handler(
                log_path,
                conversion,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        recorder_path=log_path if flight_recorder else None,
    )
    ctx.call_on_close(logging.shutdown)


textmorph.add_command(convert)
textmorph.add_command(explain)
textmorph.add_command(modes)

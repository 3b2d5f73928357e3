"""TEXTMORPH conversion commands.

``convert`` prints the converted text, ``explain`` additionally reports why
each word changed, and ``modes`` lists the available casing modes.

Behavior
- TEXT is taken from the command line, or read from stdin when omitted (one
  trailing newline is stripped so ``echo ... | textmorph convert`` works).
- Converted text (or JSON) goes to **stdout**; human-oriented notices go to
  **stderr**.
- The mode is parsed at this boundary; an unknown identifier is a usage error.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from itertools import groupby

import click

from textmorph.domain.engine import convert as convert_text
from textmorph.domain.explanation import EXPLAINED_MODES
from textmorph.domain.explanation import explain as explain_text
from textmorph.domain.value_objects import (
    CasingMode,
    Explanation,
    JustificationCategory,
)
from textmorph.logging import CONVERSION_META_KEY

from .helpers import error, parse_mode, success, warn
from .helpers.mode_parser import MODE_METAVAR

logger = logging.getLogger(__name__)

CATEGORY_COLORS = {
    JustificationCategory.CAPITALIZED: "green",
    JustificationCategory.LOWERCASED: "cyan",
    JustificationCategory.UNCHANGED: "white",
}

INVALID_INPUT_MSG = "Standard input could not be decoded as text."

mode_option = click.option(
    "--mode",
    "-m",
    "mode",
    metavar=MODE_METAVAR,
    callback=parse_mode,
    default=None,
    help=(
        "Casing mode to apply. Defaults to TEXTMORPH_DEFAULT_MODE when set, "
        "otherwise 'title'."
    ),
)

text_argument = click.argument("text", required=False)


def _read_input(text: str | None) -> str:
    if text is not None:
        return text
    try:
        data = click.get_text_stream("stdin").read()
    except UnicodeDecodeError as e:
        error(INVALID_INPUT_MSG)
        raise click.exceptions.Exit(1) from e
    logger.debug("Read %d characters from stdin", len(data))
    return data.removesuffix("\n")


def _describe(command: str, mode: CasingMode, text: str) -> str:
    ctx = click.get_current_context()
    if (conversion := ctx.meta.get(CONVERSION_META_KEY)) is not None:
        conversion.describe(command, mode.value, len(text))
    return text


def _explanation_as_json(mode: CasingMode, result: Explanation) -> str:
    payload = {
        "mode": mode.value,
        "output": result.output,
        "justifications": [
            {**asdict(j), "category": j.category.value} for j in result.justifications
        ],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


@click.command()
@mode_option
@text_argument
def convert(mode: CasingMode, text: str | None) -> None:
    """Convert TEXT to the selected casing."""
    source = _describe("convert", mode, _read_input(text))
    click.echo(convert_text(source, mode))


@click.command()
@mode_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the output and justifications as a JSON object.",
)
@text_argument
def explain(mode: CasingMode, as_json: bool, text: str | None) -> None:
    """Convert TEXT and explain why each word changed."""
    source = _describe("explain", mode, _read_input(text))
    result = explain_text(source, mode)

    if as_json:
        click.echo(_explanation_as_json(mode, result))
        return

    click.echo(result.output)
    for j in result.justifications:
        click.echo(
            f"  {j.original!r} -> "
            + click.style(repr(j.transformed), fg=CATEGORY_COLORS[j.category])
            + f"  {j.reason}"
        )

    if mode not in EXPLAINED_MODES:
        warn(f"Mode '{mode.value}' has no per-word explanations.")
    elif result.output == source:
        success(f"Nothing to change: text is already in {mode.label}.")


@click.command()
def modes() -> None:
    """List the available casing modes."""
    for group, members in groupby(CasingMode, key=lambda m: m.group):
        click.secho(group.value.capitalize(), bold=True)
        for mode in members:
            click.echo(f"  {mode.value:<12} {mode.label}")

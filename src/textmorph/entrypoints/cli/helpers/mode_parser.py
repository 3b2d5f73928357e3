"""Click callback turning a mode identifier into a `CasingMode`.

Mode strings are validated here, at the CLI boundary, so the engine only
ever receives members of the closed enumeration.
"""

import click

from textmorph import config
from textmorph.domain.errors import UnrecognizedModeError
from textmorph.domain.value_objects import CasingMode

MODE_METAVAR = "[" + "|".join(CasingMode.names()) + "]"


def parse_mode(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,
    value: str | None,
) -> CasingMode:
    """Parse the ``--mode`` option value.

    When the option is omitted the configured default applies (see
    `textmorph.config.get_default_mode`).

    Args:
        ctx: Click context (passed by Click, not used here).
        param: The Click parameter being parsed, used in error messages.
        value: The raw identifier, or None when the option was not given.

    Returns:
        CasingMode: The requested mode.

    Raises:
        click.BadParameter: If `value` names no mode.
        click.ClickException: If the configured default mode is invalid.
    """
    if value is None:
        try:
            return config.get_default_mode()
        except UnrecognizedModeError as e:
            raise click.ClickException(
                f"{config.DEFAULT_MODE_ENVVAR} is invalid. {e}"
            ) from e
    try:
        return CasingMode.parse(value)
    except UnrecognizedModeError as e:
        raise click.BadParameter(str(e), param=param) from e

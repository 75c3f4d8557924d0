# topmark:header:start
#
#   project      : ResxEdit
#   file         : main.py
#   file_relpath : src/resxedit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the ``resxedit`` command line.

Group-level options (verbosity and color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resxedit.cli.commands.config import config_command
from resxedit.cli.commands.edit import (
    add_command,
    insert_command,
    remove_command,
    rename_command,
    set_command,
    set_many_command,
)
from resxedit.cli.commands.scan import scan_command, table_command
from resxedit.cli.commands.show import get_command, show_command
from resxedit.cli.commands.version import version_command
from resxedit.cli.commands.watch import watch_command
from resxedit.cli.console import ClickConsole
from resxedit.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from resxedit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from resxedit.cli.console import ConsoleLike
    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ResxEdit: format-preserving editor for .resx resource files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ResxEdit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'resxedit show FILE' to list the entries of a file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_command)
cli.add_command(get_command)

cli.add_command(set_command)
cli.add_command(set_many_command)
cli.add_command(rename_command)
cli.add_command(insert_command)
cli.add_command(add_command)
cli.add_command(remove_command)

cli.add_command(scan_command)
cli.add_command(table_command)
cli.add_command(watch_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()

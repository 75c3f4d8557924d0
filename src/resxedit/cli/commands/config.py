# topmark:header:start
#
#   project      : ResxEdit
#   file         : config.py
#   file_relpath : src/resxedit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResxEdit `config` command group.

Subcommands:
  * ``dump``: the effective configuration after merging all sources.
  * ``defaults``: the built-in defaults.

Output is TOML wrapped between ``# === BEGIN ===`` and ``# === END ===``
markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from resxedit.cli.cmd_common import build_config, get_console, get_effective_verbosity
from resxedit.cli.options import common_config_options
from resxedit.config.io import load_defaults_dict, to_toml

if TYPE_CHECKING:
    from resxedit.cli.console import ConsoleLike
    from resxedit.config.model import Config


def _emit_toml(console: ConsoleLike, text: str) -> None:
    console.print("# === BEGIN ===")
    console.print(text.rstrip("\n"))
    console.print("# === END ===")


@click.group(name="config", help="Inspect ResxEdit configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="dump", help="Dump the merged configuration as TOML.")
@click.option(
    "--start",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Directory where config discovery starts (default: current directory).",
)
@common_config_options
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    *,
    start: Path | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Print the effective configuration."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(start=start, no_config=no_config, config_paths=config_paths)
    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(console.styled(f"# source: {source}", dim=True))
    _emit_toml(console, to_toml(config.to_toml_dict()))


@config_command.command(name="defaults", help="Show the built-in default configuration.")
@click.pass_context
def config_defaults_command(ctx: click.Context) -> None:
    """Print the defaults as TOML."""
    _emit_toml(get_console(ctx), to_toml(load_defaults_dict()))

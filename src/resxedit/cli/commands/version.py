# topmark:header:start
#
#   project      : ResxEdit
#   file         : version.py
#   file_relpath : src/resxedit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResxEdit `version` command.

Prints the current ResxEdit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from resxedit.cli.cmd_common import get_console, get_effective_verbosity
from resxedit.cli.options import OutputFormat, output_format_option
from resxedit.constants import RESXEDIT_VERSION

if TYPE_CHECKING:
    from resxedit.cli.console import ConsoleLike


@click.command(name="version", help="Show the current version of ResxEdit.")
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of ResxEdit."""
    console: ConsoleLike = get_console(ctx)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps({"version": RESXEDIT_VERSION}))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ResxEdit version:", bold=True, underline=True))
        console.print(f"    {console.styled(RESXEDIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(RESXEDIT_VERSION, bold=True))

# topmark:header:start
#
#   project      : ResxEdit
#   file         : show.py
#   file_relpath : src/resxedit/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only commands: ``show`` lists the entries of a file, ``get`` prints one value."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from resxedit import api, engine
from resxedit.cli.cmd_common import get_console
from resxedit.cli.errors import ResxEditError, translate_errors
from resxedit.cli.options import OutputFormat, output_format_option
from resxedit.core.assembler import read_document

if TYPE_CHECKING:
    from resxedit.cli.console import ConsoleLike
    from resxedit.core.parser import ResourceEntry


def one_line(value: str) -> str:
    """Return ``value`` with line breaks made visible, for single-line listings."""
    return value.replace("\r", "\\r").replace("\n", "\\n")


@click.command(name="show", help="List the entries of a resource file in document order.")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@output_format_option
@click.pass_context
def show_command(ctx: click.Context, path: Path, *, output_format: str) -> None:
    """List every named entry with its ordinal, key and value."""
    console: ConsoleLike = get_console(ctx)
    with translate_errors():
        entries: list[ResourceEntry] = engine.entries(read_document(path))

    if OutputFormat(output_format) == OutputFormat.JSON:
        payload = [{"key": e.key, "value": e.value, "ordinal": e.ordinal} for e in entries]
        console.print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for e in entries:
        console.print(f"{e.ordinal:>4}  {console.styled(e.key, bold=True)}  {one_line(e.value)}")


@click.command(name="get", help="Print the value of one key.")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("key")
@click.pass_context
def get_command(ctx: click.Context, path: Path, key: str) -> None:
    """Print the value of ``KEY`` verbatim; a missing key is an error."""
    console: ConsoleLike = get_console(ctx)
    with translate_errors():
        values: dict[str, str] = api.parse_file(path)
    if key not in values:
        raise ResxEditError(f"Key not found: {key!r}")
    console.print(values[key])

# topmark:header:start
#
#   project      : ResxEdit
#   file         : scan.py
#   file_relpath : src/resxedit/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle commands: ``scan`` finds resource groups, ``table`` merges one group."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from resxedit.bundles import load_group, scan_directory
from resxedit.cli.cmd_common import build_config, get_console
from resxedit.cli.commands.show import one_line
from resxedit.cli.errors import ResxEditFileNotFoundError, translate_errors
from resxedit.cli.options import OutputFormat, common_config_options, output_format_option

if TYPE_CHECKING:
    from resxedit.bundles import ResxGroup, RowData
    from resxedit.cli.console import ConsoleLike
    from resxedit.config.model import Config

DIR_ARGUMENT = click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)


def _group_to_dict(group: ResxGroup) -> dict[str, object]:
    return {
        "name": group.name,
        "directory": str(group.directory),
        "files": [{"path": str(f.path), "language": f.language} for f in group.files],
    }


@click.command(name="scan", help="Find resource groups (Name.resx, Name.fr.resx, ...) in a tree.")
@DIR_ARGUMENT
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Gitignore-style pattern to skip (repeatable; adds to the configured patterns).",
)
@output_format_option
@common_config_options
@click.pass_context
def scan_command(
    ctx: click.Context,
    directory: Path,
    *,
    exclude_patterns: tuple[str, ...],
    output_format: str,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """List the groups under ``DIRECTORY`` with their languages."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(
        start=directory,
        no_config=no_config,
        config_paths=config_paths,
        exclude_patterns=list(exclude_patterns) or None,
    )
    groups: list[ResxGroup] = scan_directory(
        directory,
        exclude_patterns=config.exclude_patterns,
        default_language=config.default_language,
    )

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps([_group_to_dict(g) for g in groups], indent=2))
        return

    if not groups:
        console.warn(f"No resource files found under {directory}.")
        return
    for group in groups:
        console.print(f"{console.styled(group.name, bold=True)}  ({group.directory})")
        for f in group.files:
            console.print(f"    {f.language:<12} {f.path.name}")


def _render_table(rows: list[RowData], languages: list[str]) -> list[str]:
    header: list[str] = ["key", *languages]
    body: list[list[str]] = [
        [row.key, *(one_line(row.values.get(lang, "")) for lang in languages)] for row in rows
    ]
    widths: list[int] = [max(len(line[i]) for line in [header, *body]) for i in range(len(header))]
    return [
        "  ".join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip()
        for line in [header, *body]
    ]


@click.command(name="table", help="Show the merged key table of one group.")
@DIR_ARGUMENT
@click.argument("name")
@output_format_option
@common_config_options
@click.pass_context
def table_command(
    ctx: click.Context,
    directory: Path,
    name: str,
    *,
    output_format: str,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Merge every language file of group ``NAME`` in ``DIRECTORY`` into rows."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(start=directory, no_config=no_config, config_paths=config_paths)
    target: Path = directory.resolve()
    matches: list[ResxGroup] = [
        g
        for g in scan_directory(directory, default_language=config.default_language)
        if g.name == name and g.directory.resolve() == target
    ]
    if not matches:
        raise ResxEditFileNotFoundError(f"No resource group {name!r} in {directory}")
    group: ResxGroup = matches[0]

    with translate_errors():
        rows: list[RowData] = load_group(group.files)

    if OutputFormat(output_format) == OutputFormat.JSON:
        payload = {
            "languages": group.languages,
            "rows": [{"key": r.key, "values": r.values} for r in rows],
        }
        console.print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    lines: list[str] = _render_table(rows, group.languages)
    console.print(console.styled(lines[0], bold=True))
    for line in lines[1:]:
        console.print(line)

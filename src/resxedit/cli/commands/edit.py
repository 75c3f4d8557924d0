# topmark:header:start
#
#   project      : ResxEdit
#   file         : edit.py
#   file_relpath : src/resxedit/cli/commands/edit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutating commands: ``set``, ``set-many``, ``rename``, ``insert``, ``add`` and ``remove``.

All of them perform a dry run by default and write only with ``--apply``.

Exit codes:
  SUCCESS (0): Nothing to change, or the change was written.
  WOULD_CHANGE (2): Dry run detected a change.
  FAILURE (1): ``add`` of a key that already exists.
  ENCODING_ERROR (65): The file is not a well-formed document.
  FILE_NOT_FOUND (66): The file does not exist.

Examples:
  $ resxedit set Strings.resx Greeting "Hello" --apply
  $ resxedit remove Strings.resx Obsolete Unused --diff
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from resxedit import api
from resxedit.cli.cmd_common import build_config, get_console, report_edit
from resxedit.cli.errors import ResxEditUsageError, translate_errors
from resxedit.cli.options import common_edit_options
from resxedit.core.mutator import InsertItem

if TYPE_CHECKING:
    from resxedit.api.types import EditResult
    from resxedit.config.model import Config

FILE_ARGUMENT = click.argument("path", type=click.Path(dir_okay=False, path_type=Path))


def _config_for(
    path: Path, *, no_config: bool, config_paths: tuple[str, ...], default_indent: str | None
) -> Config:
    return build_config(
        start=path.parent,
        no_config=no_config,
        config_paths=config_paths,
        default_indent=default_indent,
    )


def parse_assignment(text: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` at the first ``=``.

    Raises:
        ResxEditUsageError: If there is no ``=`` or the key is empty.
    """
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise ResxEditUsageError(f"Expected KEY=VALUE, got {text!r}")
    return key, value


@click.command(name="set", help="Set the value of an existing key.")
@FILE_ARGUMENT
@click.argument("key")
@click.argument("value")
@common_edit_options
@click.pass_context
def set_command(
    ctx: click.Context,
    path: Path,
    key: str,
    value: str,
    *,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Set ``KEY`` to ``VALUE``; a missing key leaves the file unchanged."""
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.update_file_value(
            path, key, value, config=config, apply=apply_changes, diff=show_diff
        )
    report_edit(ctx, result, f"set {key!r}", show_diff=show_diff)


@click.command(name="set-many", help="Set several values in one pass (KEY=VALUE ...).")
@FILE_ARGUMENT
@click.argument("assignments", nargs=-1, required=True, metavar="KEY=VALUE...")
@common_edit_options
@click.pass_context
def set_many_command(
    ctx: click.Context,
    path: Path,
    assignments: tuple[str, ...],
    *,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Apply every assignment; later assignments of the same key win."""
    updates: dict[str, str] = dict(parse_assignment(a) for a in assignments)
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.update_file_values(
            path, updates, config=config, apply=apply_changes, diff=show_diff
        )
    report_edit(ctx, result, f"set {len(updates)} key(s)", show_diff=show_diff)


@click.command(name="rename", help="Rename a key, keeping its value and position.")
@FILE_ARGUMENT
@click.argument("old_key")
@click.argument("new_key")
@common_edit_options
@click.pass_context
def rename_command(
    ctx: click.Context,
    path: Path,
    old_key: str,
    new_key: str,
    *,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Rename ``OLD_KEY`` to ``NEW_KEY``."""
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.rename_file_key(
            path, old_key, new_key, config=config, apply=apply_changes, diff=show_diff
        )
    report_edit(ctx, result, f"rename {old_key!r} to {new_key!r}", show_diff=show_diff)


@click.command(name="insert", help="Insert a new entry at a given position.")
@FILE_ARGUMENT
@click.argument("key")
@click.argument("value")
@click.option(
    "--index",
    "index",
    type=click.IntRange(min=0),
    required=True,
    help="Ordinal of the new entry; past the end appends.",
)
@common_edit_options
@click.pass_context
def insert_command(
    ctx: click.Context,
    path: Path,
    key: str,
    value: str,
    *,
    index: int,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Insert ``KEY`` with ``VALUE`` so that it becomes entry number ``--index``."""
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.insert_file_entries(
            path,
            [InsertItem(key, value, index)],
            config=config,
            apply=apply_changes,
            diff=show_diff,
        )
    report_edit(ctx, result, f"insert {key!r} at {index}", show_diff=show_diff)


@click.command(name="add", help="Append a new key (fails if the key already exists).")
@FILE_ARGUMENT
@click.argument("key")
@click.argument("value", required=False, default="")
@common_edit_options
@click.pass_context
def add_command(
    ctx: click.Context,
    path: Path,
    key: str,
    value: str,
    *,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Append ``KEY`` (with an optional ``VALUE``) after the last entry."""
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.add_file_entry(
            path, key, value, config=config, apply=apply_changes, diff=show_diff
        )
    report_edit(ctx, result, f"add {key!r}", show_diff=show_diff)


@click.command(name="remove", help="Remove one or more keys.")
@FILE_ARGUMENT
@click.argument("keys", nargs=-1, required=True)
@common_edit_options
@click.pass_context
def remove_command(
    ctx: click.Context,
    path: Path,
    keys: tuple[str, ...],
    *,
    apply_changes: bool,
    show_diff: bool,
    default_indent: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Remove every named key and report the position each one occupied."""
    console = get_console(ctx)
    with translate_errors():
        config = _config_for(
            path, no_config=no_config, config_paths=config_paths, default_indent=default_indent
        )
        result: EditResult = api.remove_file_entries(
            path, keys, config=config, apply=apply_changes, diff=show_diff
        )
    for key in keys:
        if key in result.removed:
            console.print(f"  - {key} (index {result.removed[key]})")
        else:
            console.warn(f"  ! {key}: not found")
    report_edit(ctx, result, f"remove {len(result.removed)} key(s)", show_diff=show_diff)

# topmark:header:start
#
#   project      : ResxEdit
#   file         : watch.py
#   file_relpath : src/resxedit/cli/commands/watch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResxEdit `watch` command.

Prints one line per change to a ``.resx`` file in a directory until interrupted
(or until ``--timeout`` expires).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING

import click

from resxedit.cli.cmd_common import get_console
from resxedit.watcher import GroupWatcher

if TYPE_CHECKING:
    from resxedit.cli.console import ConsoleLike
    from resxedit.watcher import ResxChange


@click.command(name="watch", help="Report changes to .resx files in a directory.")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--timeout",
    type=click.FloatRange(min=0),
    default=None,
    help="Stop after this many seconds (default: run until interrupted).",
)
@click.pass_context
def watch_command(ctx: click.Context, directory: Path, *, timeout: float | None) -> None:
    """Watch ``DIRECTORY`` (not its subdirectories)."""
    console: ConsoleLike = get_console(ctx)
    done = threading.Event()

    def on_change(change: ResxChange) -> None:
        console.print(f"{change.event_type}: {change.path}")

    with GroupWatcher() as watcher:
        watcher.watch(directory, on_change)
        console.print(console.styled(f"Watching {directory} (Ctrl+C to stop)", dim=True))
        try:
            done.wait(timeout)
        except KeyboardInterrupt:
            pass

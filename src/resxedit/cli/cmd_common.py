# topmark:header:start
#
#   project      : ResxEdit
#   file         : cmd_common.py
#   file_relpath : src/resxedit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the CLI commands.

Commands stay thin: they resolve a `Config`, call the file API inside
`translate_errors()` and hand the `EditResult` to `report_edit`, which prints
the outcome and sets the exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from resxedit.api.types import Outcome
from resxedit.cli.errors import ResxEditConfigError
from resxedit.cli.exit_codes import ExitCode
from resxedit.config.logging import get_logger
from resxedit.config.model import MutableConfig
from resxedit.utils.diff import render_patch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resxedit.api.types import EditResult
    from resxedit.cli.console import ConsoleLike
    from resxedit.config.logging import ResxLogger
    from resxedit.config.model import Config

logger: ResxLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    return int(ctx.obj.get("verbosity_level", 0)) if isinstance(ctx.obj, dict) else 0


def build_config(
    *,
    start: Path | None = None,
    no_config: bool = False,
    config_paths: Iterable[str] = (),
    **overrides: Any,
) -> Config:
    """Resolve the effective configuration for a command.

    Args:
        start (Path | None): Where config discovery starts (the edited file's directory).
        no_config (bool): Skip discovery of project config files.
        config_paths (Iterable[str]): Explicit ``--config`` files.
        **overrides (Any): CLI overrides keyed by `MutableConfig` field name; None is ignored.

    Returns:
        Config: The frozen configuration.

    Raises:
        ResxEditConfigError: If the indentation is not made of spaces and tabs.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        start=start,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
        overrides={k: v for k, v in overrides.items() if v is not None},
    )
    config: Config = draft.freeze()
    if config.default_indent.strip(" \t"):
        raise ResxEditConfigError(
            f"default_indent must contain only spaces and tabs, got {config.default_indent!r}"
        )
    logger.debug("Effective config: %s", config)
    return config


def report_edit(ctx: click.Context, result: EditResult, summary: str, *, show_diff: bool) -> None:
    """Print the outcome of an edit and exit with ``WOULD_CHANGE`` after a changing dry run.

    Args:
        ctx (click.Context): Current command context.
        result (EditResult): Result returned by the file API.
        summary (str): Short description of the edit (e.g. ``set 'Greeting'``).
        show_diff (bool): Whether to print the diff.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if show_diff and result.diff:
        enable_color: bool = bool(getattr(console, "enable_color", False))
        console.print(render_patch(result.diff) if enable_color else result.diff, nl=False)

    if result.outcome == Outcome.UNCHANGED:
        if vlevel >= 0:
            console.print(f"✅ {result.path}: no changes ({summary}).")
        return

    if result.outcome == Outcome.WOULD_CHANGE:
        if vlevel >= 0:
            console.print(
                console.styled(f"🛠️  {result.path}: would {summary}.", fg="yellow")
                + f"\n   Run again with --apply to write {result.path}."
            )
        ctx.exit(ExitCode.WOULD_CHANGE)

    if vlevel >= 0:
        console.print(console.styled(f"✅ {result.path}: {summary}.", fg="green"))

# topmark:header:start
#
#   project      : ResxEdit
#   file         : options.py
#   file_relpath : src/resxedit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config, edit mode)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from resxedit.cli.errors import ResxEditUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output formats for listing commands."""

    TEXT = "text"
    JSON = "json"


class ColorMode(str, Enum):
    """Color output modes for ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` and ``-q`` counts.

    Returns:
        int: Positive for more detail, negative for less, 0 by default.

    Raises:
        ResxEditUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ResxEditUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats: JSON output is never colored.
        2. CLI override: ``ALWAYS`` → True; ``NEVER`` → False.
        3. Environment: ``FORCE_COLOR`` (set and not "0") → True; ``NO_COLOR`` → False.
        4. Auto: whether stdout is a TTY.
    """
    if output_format == OutputFormat.JSON:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (mutually exclusive, counted)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config FILE`` (repeatable)."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_edit_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shared by mutating commands.

    Adds ``--apply`` (write; the default is a dry run), ``--diff`` and
    ``--indent`` (fallback indentation for new structure), plus the config options.
    """
    f = click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to the file (off by default).",
    )(f)
    f = click.option(
        "--diff",
        "show_diff",
        is_flag=True,
        help="Show a unified diff of the change.",
    )(f)
    f = click.option(
        "--indent",
        "default_indent",
        default=None,
        metavar="TEXT",
        help="Indentation used when the file offers none to copy.",
    )(f)
    return common_config_options(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format text|json``."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([m.value for m in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)

# topmark:header:start
#
#   file         : diff.py
#   file_relpath : src/resxedit/utils/diff.py
#   project      : ResxEdit
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

The diff compares the current and updated document text line by line, keeping
line terminators as they are so CRLF drift shows up in the preview.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from resxedit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)


def unified_patch(current: str, updated: str, label: str) -> str | None:
    """Return a unified diff between two document texts.

    Args:
        current (str): Text before the edit.
        updated (str): Text after the edit.
        label (str): File label used in the ``---``/``+++`` headers.

    Returns:
        str | None: The diff, or None when both texts are identical.
    """
    if current == updated:
        return None
    patch_lines: list[str] = list(
        difflib.unified_diff(
            current.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{label} (current)",
            tofile=f"{label} (updated)",
            n=3,
        )
    )
    logger.trace("Patch for %s: %d lines", label, len(patch_lines))
    # Lines without a terminator (last line of a file) get one so the patch stays line-based.
    return "".join(line if line.endswith("\n") else line + "\n" for line in patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as either a sequence of lines or a
            single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    # Show carriage returns explicitly; they matter in resource files.
    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)

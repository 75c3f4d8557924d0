# topmark:header:start
#
#   project      : ResxEdit
#   file         : types.py
#   file_relpath : src/resxedit/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public result types for the file-level API.

These shapes appear in the return values of [`resxedit.api`][resxedit.api].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class Outcome(str, Enum):
    """Per-file outcome bucket.

    Values mirror CLI semantics:
      - ``UNCHANGED``: The edit produced identical content.
      - ``WOULD_CHANGE``: Dry run detected a change (``apply=False``).
      - ``CHANGED``: The new content was written.
    """

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would_change"
    CHANGED = "changed"


@dataclass(frozen=True)
class EditResult:
    """Result of one file-level edit.

    Attributes:
        path (Path): The edited file.
        outcome (Outcome): High-level outcome bucket.
        original (bytes): Content before the edit.
        updated (bytes): Content after the edit (identical object when unchanged).
        removed (dict[str, int]): Ordinals of removed keys (remove operations only).
        diff (str | None): Unified diff when requested and the content changed.
    """

    path: Path
    outcome: Outcome
    original: bytes
    updated: bytes
    removed: dict[str, int] = field(default_factory=lambda: {})
    diff: str | None = None

    @property
    def changed(self) -> bool:
        """Whether the edit altered the content (written or not)."""
        return self.outcome != Outcome.UNCHANGED

    @property
    def written(self) -> bool:
        """Whether the new content was written to disk."""
        return self.outcome == Outcome.CHANGED

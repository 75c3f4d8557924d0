# topmark:header:start
#
#   project      : ResxEdit
#   file         : types.py
#   file_relpath : src/resxedit/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other modules can
depend on without risk of circular imports. Keep it stdlib-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Parsed TOML table (plain dicts after tomlkit unwrapping)
TomlTable = dict[str, Any]

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class FileWriteStrategy(str, Enum):
    """Available strategies for writing file content."""

    ATOMIC = "Safe atomic writer (default)"
    IN_PLACE = "Fast in-place writer"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Finds the FileWriteStrategy member by its case-insensitive name.

        Args:
            key_name (str | None): The string name of the member (e.g., 'atomic', 'in_place')
                or None.

        Returns:
            FileWriteStrategy | None: The matching FileWriteStrategy member or None
                if the key is None or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper())

# topmark:header:start
#
#   project      : ResxEdit
#   file         : keys.py
#   file_relpath : src/resxedit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ResxEdit configuration.

These constants are the external configuration schema as it appears in
``resxedit.toml`` and in ``[tool.resxedit]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ResxEdit configuration."""

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_DEFAULT_INDENT: Final[str] = "default_indent"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_STRATEGY: Final[str] = "strategy"

    # [scan]
    SECTION_SCAN: Final[str] = "scan"

    KEY_DEFAULT_LANGUAGE: Final[str] = "default_language"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMAT: frozenset({KEY_DEFAULT_INDENT}),
        SECTION_WRITER: frozenset({KEY_STRATEGY}),
        SECTION_SCAN: frozenset({KEY_DEFAULT_LANGUAGE, KEY_EXCLUDE_PATTERNS}),
    }

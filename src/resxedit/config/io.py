# topmark:header:start
#
#   project      : ResxEdit
#   file         : io.py
#   file_relpath : src/resxedit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, inspect and render TOML configuration sources.

Sources are ``resxedit.toml`` files and the ``[tool.resxedit]`` table of
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain `dict`
structures. Read errors are logged and yield an empty table so a broken config
never blocks editing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from resxedit.config.keys import Toml
from resxedit.config.logging import get_logger
from resxedit.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_INDENT,
    DEFAULT_LANGUAGE,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from resxedit.config.logging import ResxLogger
    from resxedit.config.types import TomlTable

logger: ResxLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ResxEdit's runtime defaults as a new dict (no I/O)."""
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_DEFAULT_INDENT: DEFAULT_INDENT,
        },
        Toml.SECTION_WRITER: {
            Toml.KEY_STRATEGY: "atomic",
        },
        Toml.SECTION_SCAN: {
            Toml.KEY_DEFAULT_LANGUAGE: DEFAULT_LANGUAGE,
            Toml.KEY_EXCLUDE_PATTERNS: ["bin/", "obj/"],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``resxedit.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_resxedit_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the ResxEdit table of a parsed config source.

    For ``pyproject.toml`` this is ``[tool.resxedit]`` (empty when absent); any
    other file is a ResxEdit config in its entirety.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get("resxedit", {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def warn_unknown_keys(table: TomlTable, source: str) -> list[str]:
    """Log a warning for every unknown section or key; return their dotted names."""
    unknown: list[str] = []
    for section, value in table.items():
        allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(section)
        if allowed is None:
            unknown.append(section)
            continue
        if isinstance(value, dict):
            unknown.extend(f"{section}.{k}" for k in value if k not in allowed)
    for name in unknown:
        logger.warning("Unknown configuration key '%s' in %s", name, source)
    return unknown


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table`` (empty dict when absent or not a table)."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for '%s', got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Returns:
        str | None: The string value, or None when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None


def get_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings; non-string items are dropped with a warning."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning("Expected a list for '%s', got %r; ignoring", key, value)
        return None
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            logger.warning("Ignoring non-string item %r in '%s'", item, key)
    return items


def discover_config_files(start: Path) -> list[Path]:
    """Return the nearest ``pyproject.toml`` and ``resxedit.toml`` above ``start``.

    The search walks from ``start`` up to the filesystem root and keeps the first
    hit for each file name. Results are ordered by increasing precedence
    (``pyproject.toml`` before ``resxedit.toml``).
    """
    found: dict[str, Path] = {}
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate: Path = directory / name
            if name not in found and candidate.is_file():
                found[name] = candidate
        if len(found) == 2:
            break
    ordered: list[Path] = [
        found[name] for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME) if name in found
    ]
    logger.debug("Discovered config files: %s", ordered)
    return ordered


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(data)

# topmark:header:start
#
#   project      : ResxEdit
#   file         : constants.py
#   file_relpath : src/resxedit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResxEdit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

RESXEDIT_VERSION: str = get_version("resxedit")

# Resource table schema
ENTRY_TAG: str = "data"
VALUE_TAG: str = "value"
HEADER_TAG: str = "resheader"
NAME_ATTRIBUTE: str = "name"

RESX_SUFFIX: str = ".resx"

UTF8_BOM: bytes = b"\xef\xbb\xbf"

DEFAULT_INDENT: str = "    "
DEFAULT_LANGUAGE: str = "default"

# Longest trailing stem segment still treated as a language code ("az-Latn-AZ")
MAX_LANGUAGE_CODE_LENGTH: int = 10

CONFIG_FILE_NAME: str = "resxedit.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

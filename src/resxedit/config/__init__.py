# topmark:header:start
#
#   project      : ResxEdit
#   file         : __init__.py
#   file_relpath : src/resxedit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public configuration API for ResxEdit.

Build configs with `MutableConfig` (mutable, mergeable), then `freeze()` into a
`Config` for use by the file-level API.
"""

from __future__ import annotations

from resxedit.config.model import Config, MutableConfig
from resxedit.config.types import FileWriteStrategy

__all__ = [
    "Config",
    "FileWriteStrategy",
    "MutableConfig",
]

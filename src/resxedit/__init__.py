# topmark:header:start
#
#   project      : ResxEdit
#   file         : __init__.py
#   file_relpath : src/resxedit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResxEdit package.

ResxEdit is a format-preserving editor for XML resource tables (``.resx``). It
reads entry tables and applies point edits (value change, rename, insert,
remove and their batched variants) while leaving every untouched byte of the
document as it was. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations

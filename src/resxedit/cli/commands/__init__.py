# topmark:header:start
#
#   project      : ResxEdit
#   file         : __init__.py
#   file_relpath : src/resxedit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``resxedit`` CLI."""

# topmark:header:start
#
#   project      : ResxEdit
#   file         : __init__.py
#   file_relpath : src/resxedit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for ResxEdit.

Program output goes through the console stored in ``ctx.obj``; diagnostics go
through logging (enable with ``RESXEDIT_LOG_LEVEL``).
"""

# topmark:header:start
#
#   project      : ResxEdit
#   file         : __main__.py
#   file_relpath : src/resxedit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ResxEdit via ``python -m resxedit``.

Delegates directly to :func:`resxedit.cli.main.cli`, the same entry point as the
``resxedit`` console script.

Examples:
    Show the entries of a resource table::

        python -m resxedit show Strings.resx
"""

from __future__ import annotations

from resxedit.cli.main import cli

if __name__ == "__main__":
    cli()

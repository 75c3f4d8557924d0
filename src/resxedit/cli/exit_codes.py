# topmark:header:start
#
#   project      : ResxEdit
#   file         : exit_codes.py
#   file_relpath : src/resxedit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ResxEdit CLI.

ResxEdit aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, which signals a dry run where changes would be made. Click also
uses 2 for usage errors, so tests must assert `result.exception is None` to tell
them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ResxEdit CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. adding a key that already exists.
        WOULD_CHANGE: Dry run: changes would be made if ``--apply`` were set.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Malformed document (bad UTF-8 or XML). Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

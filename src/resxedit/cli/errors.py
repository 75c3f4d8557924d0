# topmark:header:start
#
#   project      : ResxEdit
#   file         : errors.py
#   file_relpath : src/resxedit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ResxEdit CLI.

Usage:
    Commands run engine calls inside `translate_errors()`, which turns engine
    exceptions into the click exceptions below, each carrying its exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

import errno
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from resxedit.cli.exit_codes import ExitCode
from resxedit.errors import (
    DocumentIOError,
    MalformedDocumentError,
    ResxError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class ResxEditError(click.ClickException):
    """Base class for all ResxEdit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ResxEditUsageError(ResxEditError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ResxEditConfigError(ResxEditError):
    """Error for invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class ResxEditFileNotFoundError(ResxEditError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ResxEditPermissionDeniedError(ResxEditError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class ResxEditIOError(ResxEditError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ResxEditEncodingError(ResxEditError):
    """Error for malformed documents (decoding or well-formedness)."""

    exit_code = ExitCode.ENCODING_ERROR


def _io_error_class(exc: DocumentIOError) -> type[ResxEditError]:
    cause: BaseException | None = exc.__cause__
    if isinstance(cause, OSError):
        if cause.errno == errno.ENOENT:
            return ResxEditFileNotFoundError
        if cause.errno in (errno.EACCES, errno.EPERM):
            return ResxEditPermissionDeniedError
    return ResxEditIOError


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise engine errors as CLI errors with the matching exit code.

    Duplicate keys and any other engine error map to `ExitCode.FAILURE`.
    """
    try:
        yield
    except MalformedDocumentError as exc:
        raise ResxEditEncodingError(str(exc)) from exc
    except DocumentIOError as exc:
        raise _io_error_class(exc)(str(exc)) from exc
    except ResxError as exc:
        raise ResxEditError(str(exc)) from exc

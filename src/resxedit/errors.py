# topmark:header:start
#
#   project      : ResxEdit
#   file         : errors.py
#   file_relpath : src/resxedit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the ResxEdit engine.

Hierarchy:
    - `ResxError`: base class for every engine error.
    - `ParseError`: a document could not be scanned.
        - `MalformedDocumentError`: the token stream is not well-formed.
        - `DocumentReadError`: the source could not be opened or read.
    - `DocumentIOError`: a document could not be read or written.
        - `DocumentWriteError`: the destination could not be written.
    - `DuplicateKeyError`: an add-new-key request names a key that already exists.

The engine never retries and never writes after an error: a failed call leaves
the file on disk untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ResxError(Exception):
    """Base class for all ResxEdit engine errors."""


class ParseError(ResxError):
    """A resource document could not be scanned."""


class MalformedDocumentError(ParseError):
    """The token stream of a document is not well-formed.

    Attributes:
        offset (int | None): Character offset (into the BOM-stripped text) where the
            problem was detected, when known.
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class DocumentIOError(ResxError):
    """A resource document could not be read or written.

    Attributes:
        path (Path): Path of the document involved.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")


class DocumentReadError(DocumentIOError, ParseError):
    """The source document could not be opened or read."""


class DocumentWriteError(DocumentIOError):
    """The destination document could not be written."""


class DuplicateKeyError(ResxError):
    """An add-new-key request names a key already present in the document.

    Attributes:
        key (str): The rejected key.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key already exists: {key!r}")

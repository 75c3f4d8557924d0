# topmark:header:start
#
#   project      : ResxEdit
#   file         : assembler.py
#   file_relpath : src/resxedit/core/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-level framing of resource documents.

Documents are handled as UTF-8 text without the byte-order marker; the marker is
split off on the way in and re-prepended on the way out. Files are read and
written whole. Two write strategies exist:

- ``ATOMIC`` (default): write a sibling temporary file, then ``os.replace`` it
  over the target.
- ``IN_PLACE``: truncate and rewrite the target directly.
"""

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING

from resxedit.config.logging import get_logger
from resxedit.config.types import FileWriteStrategy
from resxedit.constants import UTF8_BOM
from resxedit.core.fingerprint import has_utf8_bom
from resxedit.errors import DocumentReadError, DocumentWriteError, MalformedDocumentError

if TYPE_CHECKING:
    from pathlib import Path

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)


def decode_document(data: bytes) -> tuple[str, bool]:
    """Split off a UTF-8 byte-order marker and decode the rest.

    Args:
        data (bytes): Raw document bytes.

    Returns:
        tuple[str, bool]: The decoded text and whether a marker was present.

    Raises:
        MalformedDocumentError: If the bytes are not valid UTF-8.
    """
    has_bom: bool = has_utf8_bom(data)
    body: bytes = data[len(UTF8_BOM) :] if has_bom else data
    try:
        text: str = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"Document is not valid UTF-8: {exc.reason}") from exc
    return text, has_bom


def encode_document(text: str, has_bom: bool) -> bytes:
    """Encode ``text`` as UTF-8, re-attaching the byte-order marker if requested."""
    body: bytes = text.encode("utf-8")
    return UTF8_BOM + body if has_bom else body


def read_document(path: Path) -> bytes:
    """Read a whole document.

    Args:
        path (Path): File to read.

    Returns:
        bytes: The raw file content.

    Raises:
        DocumentReadError: If the file cannot be opened or read.
    """
    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def write_document(
    path: Path,
    data: bytes,
    strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC,
) -> int:
    """Overwrite ``path`` with ``data``.

    Args:
        path (Path): Destination file.
        data (bytes): Complete new content.
        strategy (FileWriteStrategy): Atomic replace or in-place rewrite.

    Returns:
        int: Number of bytes written.

    Raises:
        DocumentWriteError: If the file cannot be written.
    """
    try:
        if strategy == FileWriteStrategy.IN_PLACE:
            with open(path, "wb") as f:
                f.write(data)
        else:
            _write_atomic(path, data)
    except OSError as exc:
        raise DocumentWriteError(path, exc.strerror or str(exc)) from exc
    logger.debug("wrote %d bytes to %s (%s)", len(data), path, strategy.name)
    return len(data)


def _write_atomic(path: Path, data: bytes) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

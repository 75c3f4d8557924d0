# topmark:header:start
#
#   project      : ResxEdit
#   file         : engine.py
#   file_relpath : src/resxedit/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bytes-in, bytes-out operation surface.

Every function takes the full content of a resource file and returns the full
new content. The flow is the same for each call:

1. split off a UTF-8 byte-order marker and decode;
2. infer a fresh [`FormatFingerprint`][resxedit.core.fingerprint.FormatFingerprint];
3. run one pass of the parser or a mutator;
4. re-attach the marker and encode.

When a pass changes nothing the input object is returned as is. Malformed input
raises [`MalformedDocumentError`][resxedit.errors.MalformedDocumentError] before
any output is produced.

Examples:
    ```python
    from resxedit import engine

    data = engine.update_value(data, "Greeting", "Hello & welcome")
    data, ordinal = engine.remove_entry(data, "Obsolete")
    data = engine.insert_entry(data, "Obsolete", "restored", ordinal)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resxedit.constants import DEFAULT_INDENT
from resxedit.core import mutator
from resxedit.core.assembler import decode_document, encode_document
from resxedit.core.fingerprint import FormatFingerprint
from resxedit.core.mutator import InsertItem
from resxedit.core.parser import ResourceEntry, parse_entries, parse_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "InsertItem",
    "ResourceEntry",
    "add_entry",
    "entries",
    "fingerprint",
    "insert_entries",
    "insert_entry",
    "parse",
    "remove_entries",
    "remove_entry",
    "rename_key",
    "update_value",
    "update_values",
]


def _load(data: bytes, default_indent: str) -> tuple[str, FormatFingerprint]:
    text, has_bom = decode_document(data)
    fp = FormatFingerprint.from_text(text, has_bom=has_bom, default_indent=default_indent)
    return text, fp


def _store(data: bytes, original: str, updated: str, fp: FormatFingerprint) -> bytes:
    if updated == original:
        return data
    return encode_document(updated, fp.has_bom)


def parse(data: bytes) -> dict[str, str]:
    """Return the key to value mapping of a document (last duplicate wins).

    Raises:
        MalformedDocumentError: If the document is not well-formed UTF-8 XML.
    """
    text, _ = decode_document(data)
    return parse_text(text)


def entries(data: bytes) -> list[ResourceEntry]:
    """Return all named entries of a document in order, with their ordinals."""
    text, _ = decode_document(data)
    return parse_entries(text)


def fingerprint(data: bytes, *, default_indent: str = DEFAULT_INDENT) -> FormatFingerprint:
    """Return the format fingerprint of a document."""
    return _load(data, default_indent)[1]


def update_value(
    data: bytes, key: str, new_value: str, *, default_indent: str = DEFAULT_INDENT
) -> bytes:
    """Replace the value of ``key``; absent keys are a silent no-op."""
    return update_values(data, {key: new_value}, default_indent=default_indent)


def update_values(
    data: bytes, updates: Mapping[str, str], *, default_indent: str = DEFAULT_INDENT
) -> bytes:
    """Replace the values of several keys in one pass.

    An empty ``updates`` mapping returns ``data`` unchanged, byte for byte.
    """
    if not updates:
        return data
    text, fp = _load(data, default_indent)
    return _store(data, text, mutator.update_values_text(text, updates), fp)


def rename_key(
    data: bytes, old_key: str, new_key: str, *, default_indent: str = DEFAULT_INDENT
) -> bytes:
    """Rename entry ``old_key`` to ``new_key``; absent keys are a silent no-op."""
    text, fp = _load(data, default_indent)
    return _store(data, text, mutator.rename_key_text(text, old_key, new_key), fp)


def insert_entry(
    data: bytes,
    key: str,
    value: str,
    index: int,
    *,
    default_indent: str = DEFAULT_INDENT,
) -> bytes:
    """Insert a new entry at ordinal ``index`` (appends past the last entry)."""
    text, fp = _load(data, default_indent)
    return _store(data, text, mutator.insert_entry_text(text, key, value, index, fp), fp)


def insert_entries(
    data: bytes, items: Iterable[InsertItem], *, default_indent: str = DEFAULT_INDENT
) -> bytes:
    """Insert several entries at their ordinal indices in one pass."""
    item_list: list[InsertItem] = list(items)
    if not item_list:
        return data
    text, fp = _load(data, default_indent)
    return _store(data, text, mutator.insert_entries_text(text, item_list, fp), fp)


def add_entry(
    data: bytes, key: str, value: str = "", *, default_indent: str = DEFAULT_INDENT
) -> bytes:
    """Append a new entry; raises `DuplicateKeyError` if ``name="key"`` already occurs."""
    text, fp = _load(data, default_indent)
    return _store(data, text, mutator.add_entry_text(text, key, value, fp), fp)


def remove_entry(
    data: bytes, key: str, *, default_indent: str = DEFAULT_INDENT
) -> tuple[bytes, int | None]:
    """Remove entry ``key``.

    Returns:
        tuple[bytes, int | None]: New content and the ordinal the entry occupied
        (None when the key was absent).
    """
    text, fp = _load(data, default_indent)
    new_text, ordinal = mutator.remove_entry_text(text, key)
    return _store(data, text, new_text, fp), ordinal


def remove_entries(
    data: bytes, keys: Iterable[str], *, default_indent: str = DEFAULT_INDENT
) -> tuple[bytes, dict[str, int]]:
    """Remove several entries in one pass.

    Returns:
        tuple[bytes, dict[str, int]]: New content and the ordinal of each removed key.
    """
    key_set: frozenset[str] = frozenset(keys)
    if not key_set:
        return data, {}
    text, fp = _load(data, default_indent)
    new_text, removed = mutator.remove_entries_text(text, key_set)
    return _store(data, text, new_text, fp), removed

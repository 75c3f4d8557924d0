# topmark:header:start
#
#   project      : ResxEdit
#   file         : parser.py
#   file_relpath : src/resxedit/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry extraction.

A single forward scan over the document collects entries: on an entry start the
name is captured and the value accumulator reset, value text is appended only
while directly inside the entry's ``<value>`` child, and the entry is committed
on its end tag. Entries with an empty name are skipped; for duplicated keys the
last occurrence wins in `parse_text`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from resxedit.config.logging import get_logger
from resxedit.core.escape import unescape
from resxedit.core.scanner import Role, walk
from resxedit.core.tokens import TokenKind

if TYPE_CHECKING:
    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)

_CDATA_OPEN: int = len("<![CDATA[")
_CDATA_CLOSE: int = len("]]>")


@dataclass(frozen=True, slots=True)
class ResourceEntry:
    """One key/value pair of a resource table.

    Attributes:
        key (str): Entry name.
        value (str): Decoded entry value.
        ordinal (int): 0-based rank among entry elements in document order.
    """

    key: str
    value: str
    ordinal: int


def parse_entries(text: str) -> list[ResourceEntry]:
    """Return every named entry of ``text`` in document order, duplicates included.

    Args:
        text (str): Document text without a leading byte-order marker.

    Returns:
        list[ResourceEntry]: Entries in document order.

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    entries: list[ResourceEntry] = []
    parts: list[str] = []

    for ev in walk(text):
        tok = ev.token
        if ev.role == Role.ENTRY_OPEN:
            parts = []
        elif ev.role == Role.VALUE_TEXT:
            if tok.kind == TokenKind.CDATA:
                parts.append(tok.raw[_CDATA_OPEN:-_CDATA_CLOSE])
            else:
                parts.append(unescape(tok.raw, tok.start))
        elif ev.role in (Role.ENTRY_CLOSE, Role.ENTRY_EMPTY):
            assert ev.key is not None and ev.ordinal is not None
            if ev.key:
                value: str = "".join(parts) if ev.role == Role.ENTRY_CLOSE else ""
                entries.append(ResourceEntry(ev.key, value, ev.ordinal))
            else:
                logger.debug("parser: skipping unnamed entry at ordinal %d", ev.ordinal)
            parts = []

    logger.trace("parser: %d entries", len(entries))
    return entries


def parse_text(text: str) -> dict[str, str]:
    """Return the key to value mapping of ``text``.

    Args:
        text (str): Document text without a leading byte-order marker.

    Returns:
        dict[str, str]: Mapping in document order of first appearance; the last
        occurrence of a duplicated key provides its value.

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    result: dict[str, str] = {}
    for entry in parse_entries(text):
        result[entry.key] = entry.value
    return result

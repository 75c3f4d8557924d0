# topmark:header:start
#
#   project      : ResxEdit
#   file         : mutator.py
#   file_relpath : src/resxedit/core/mutator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving structural edits on resource-table text.

Each operation is one forward pass over [`walk`][resxedit.core.scanner.walk]
events: tokens are copied verbatim except the targeted region, which is
intercepted and replaced. The mutators share a small state machine::

    OUTSIDE --(entry start matches target)--> INSIDE_TARGET --(entry end)--> OUTSIDE

Tokens seen INSIDE_TARGET are suppressed (remove) or selectively rewritten
(update); tokens seen OUTSIDE pass through unchanged.

All functions work on decoded, BOM-free text. Byte-level framing lives in
[`resxedit.engine`][resxedit.engine]. New structure is rendered with the
document's [`FormatFingerprint`][resxedit.core.fingerprint.FormatFingerprint].
"""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resxedit.config.logging import get_logger
from resxedit.constants import ENTRY_TAG, NAME_ATTRIBUTE, VALUE_TAG
from resxedit.core.escape import escape_attribute, escape_text
from resxedit.core.scanner import ENTRY_START_ROLES, Role, walk
from resxedit.core.tokens import XML_WHITESPACE, Token
from resxedit.errors import DuplicateKeyError

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from resxedit.config.logging import ResxLogger
    from resxedit.core.fingerprint import FormatFingerprint

logger: ResxLogger = get_logger(__name__)

# Index meaning "after the last entry"
APPEND: int = sys.maxsize


@dataclass(frozen=True, slots=True)
class InsertItem:
    """An entry to insert at a given ordinal index.

    Attributes:
        key (str): Entry name.
        value (str): Entry value (unescaped).
        index (int): Target ordinal; values past the last entry append.
    """

    key: str
    value: str
    index: int


# --- rendering helpers ------------------------------------------------------


def _open_tag_from_empty(tok: Token) -> str:
    """Turn ``<name attrs/>`` into ``<name attrs>``."""
    return tok.raw[:-2].rstrip(XML_WHITESPACE) + ">"


def _value_element(value: str) -> str:
    return f"<{VALUE_TAG}>{escape_text(value)}</{VALUE_TAG}>"


def render_entry(key: str, value: str, indent: str, fp: FormatFingerprint) -> str:
    """Render a complete entry element, without leading indentation.

    Args:
        key (str): Entry name.
        value (str): Entry value (unescaped).
        indent (str): Indentation of the entry's own lines.
        fp (FormatFingerprint): Fingerprint of the target document.

    Returns:
        str: The element text, from ``<data`` to ``</data>``.
    """
    nl: str = fp.line_ending
    return (
        f'<{ENTRY_TAG} {NAME_ATTRIBUTE}="{escape_attribute(key)}" xml:space="preserve">{nl}'
        f"{indent}{fp.indent_unit}{_value_element(value)}{nl}"
        f"{indent}</{ENTRY_TAG}>"
    )


def _local_indent(text: str, offset: int) -> tuple[str, bool]:
    """Return the whitespace between the previous newline and ``offset``.

    Returns:
        tuple[str, bool]: The indentation (empty when ``offset`` does not start a
        line's content) and whether ``offset`` is preceded only by whitespace on
        its line.
    """
    j: int = offset
    while j > 0 and text[j - 1] in " \t":
        j -= 1
    at_line_start: bool = j == 0 or text[j - 1] == "\n"
    return (text[j:offset] if at_line_start else ""), at_line_start


def _insertion_text(
    text: str, offset: int, items: Sequence[InsertItem], fp: FormatFingerprint
) -> str:
    """Render ``items`` for splicing at ``offset``, matching the local layout."""
    nl: str = fp.line_ending
    indent, at_line_start = _local_indent(text, offset)
    if indent:
        # Offset is an indented tag: each block re-creates that indentation after itself.
        return "".join(f"{render_entry(i.key, i.value, indent, fp)}{nl}{indent}" for i in items)
    unit: str = fp.indent_unit
    if at_line_start:
        return "".join(f"{unit}{render_entry(i.key, i.value, unit, fp)}{nl}" for i in items)
    blocks: str = "".join(f"{nl}{unit}{render_entry(i.key, i.value, unit, fp)}" for i in items)
    return blocks + nl


def _expanded_root(tok: Token, items: Sequence[InsertItem], fp: FormatFingerprint) -> str:
    """Expand a self-closing root element so it can hold ``items``."""
    nl: str = fp.line_ending
    unit: str = fp.indent_unit
    body: str = "".join(f"{unit}{render_entry(i.key, i.value, unit, fp)}{nl}" for i in items)
    return f"{_open_tag_from_empty(tok)}{nl}{body}</{tok.name}>"


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"Insert index must be non-negative, got {index}")


# --- update -----------------------------------------------------------------


def update_values_text(text: str, updates: Mapping[str, str]) -> str:
    """Replace the value text of every entry named in ``updates``.

    Only the content of the entry's ``<value>`` child changes. New values are
    minimally escaped. Keys not present in the document are ignored. An entry
    lacking a value child gets one.

    Args:
        text (str): Document text.
        updates (Mapping[str, str]): Key to new (unescaped) value.

    Returns:
        str: The updated text (``text`` itself when ``updates`` is empty).

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    if not updates:
        return text

    out: list[str] = []
    armed: bool = False
    new_value: str = ""
    in_value: bool = False
    value_written: bool = False
    hits: int = 0

    for ev in walk(text):
        tok: Token = ev.token
        role: Role = ev.role

        if role == Role.ENTRY_EMPTY and ev.key in updates:
            out.append(_open_tag_from_empty(tok))
            out.append(_value_element(updates[ev.key]))
            out.append(f"</{tok.name}>")
            hits += 1
            continue

        if role == Role.ENTRY_OPEN:
            armed = ev.key in updates
            if armed:
                assert ev.key is not None
                new_value = updates[ev.key]
                value_written = False
                hits += 1
            out.append(tok.raw)
            continue

        if armed:
            if role == Role.VALUE_OPEN:
                out.append(tok.raw)
                out.append(escape_text(new_value))
                in_value = True
                value_written = True
                continue
            if role == Role.VALUE_EMPTY:
                out.append(_open_tag_from_empty(tok))
                out.append(escape_text(new_value))
                out.append(f"</{tok.name}>")
                value_written = True
                continue
            if role == Role.VALUE_CLOSE:
                in_value = False
            elif in_value:
                continue
            elif role == Role.ENTRY_CLOSE:
                if not value_written:
                    out.append(_value_element(new_value))
                armed = False

        out.append(tok.raw)

    logger.debug("update: %d key(s) requested, %d entr(ies) rewritten", len(updates), hits)
    return "".join(out)


def update_value_text(text: str, key: str, new_value: str) -> str:
    """Replace the value of ``key``; see `update_values_text`."""
    return update_values_text(text, {key: new_value})


# --- rename -----------------------------------------------------------------


def rename_key_text(text: str, old_key: str, new_key: str) -> str:
    """Change the name attribute of entries named ``old_key`` to ``new_key``.

    The new value is spliced into the raw start tag, so the remaining attributes
    keep their order, spacing and quoting. No uniqueness check is made against
    ``new_key``; an absent ``old_key`` leaves the text unchanged.

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    out: list[str] = []
    for ev in walk(text):
        tok: Token = ev.token
        if ev.role in ENTRY_START_ROLES and ev.key == old_key:
            attr = tok.get_attribute(NAME_ATTRIBUTE)
            if attr is not None:
                out.append(
                    tok.raw[: attr.value_start]
                    + escape_attribute(new_key, attr.quote)
                    + tok.raw[attr.value_end :]
                )
                logger.debug("rename: %r -> %r at ordinal %s", old_key, new_key, ev.ordinal)
                continue
        out.append(tok.raw)
    return "".join(out)


# --- insert -----------------------------------------------------------------


def insert_entry_text(
    text: str, key: str, value: str, index: int, fp: FormatFingerprint
) -> str:
    """Insert one entry so that it becomes entry number ``index``.

    The new element is spliced just before the start tag of the entry currently
    at ``index``, or before the root end tag when ``index`` is past the last
    entry. It is indented like the tag it precedes, falling back to the
    fingerprint's indentation unit.

    Raises:
        ValueError: If ``index`` is negative.
        MalformedDocumentError: If the document is not well-formed.
    """
    _check_index(index)
    offset: int | None = None
    root_close: int | None = None
    root_empty: Token | None = None

    for ev in walk(text):
        if ev.role in ENTRY_START_ROLES and ev.ordinal == index:
            offset = ev.token.start
        elif ev.role == Role.ROOT_CLOSE:
            root_close = ev.token.start
        elif ev.role == Role.ROOT_EMPTY:
            root_empty = ev.token

    item = InsertItem(key, value, index)
    if offset is None:
        if root_empty is not None:
            logger.debug("insert: expanding empty root for %r", key)
            expanded: str = _expanded_root(root_empty, [item], fp)
            return text[: root_empty.start] + expanded + text[root_empty.end :]
        assert root_close is not None
        offset = root_close
    logger.debug("insert: %r at index %d (offset %d)", key, index, offset)
    return text[:offset] + _insertion_text(text, offset, [item], fp) + text[offset:]


def insert_entries_text(text: str, items: Sequence[InsertItem], fp: FormatFingerprint) -> str:
    """Insert several entries in one streaming pass.

    Items are ordered by ascending index, keeping caller order for ties. Before
    an original entry is copied, every pending item whose index is not greater
    than the number of entries emitted so far (inserted ones included) is
    flushed; whatever remains is appended before the root end tag.

    Raises:
        ValueError: If any index is negative.
        MalformedDocumentError: If the document is not well-formed.
    """
    if not items:
        return text
    for item in items:
        _check_index(item.index)
    pending: deque[InsertItem] = deque(sorted(items, key=lambda i: i.index))

    out: list[str] = []
    emitted: int = 0
    for ev in walk(text):
        tok: Token = ev.token
        if ev.role in ENTRY_START_ROLES:
            batch: list[InsertItem] = []
            while pending and pending[0].index <= emitted + len(batch):
                batch.append(pending.popleft())
            if batch:
                out.append(_insertion_text(text, tok.start, batch, fp))
            emitted += len(batch) + 1
        elif ev.role == Role.ROOT_CLOSE and pending:
            out.append(_insertion_text(text, tok.start, pending, fp))
            pending.clear()
        elif ev.role == Role.ROOT_EMPTY and pending:
            out.append(_expanded_root(tok, pending, fp))
            pending.clear()
            continue
        out.append(tok.raw)

    logger.debug("insert: %d item(s) in one pass", len(items))
    return "".join(out)


def add_entry_text(text: str, key: str, value: str, fp: FormatFingerprint) -> str:
    """Append a new entry, refusing keys that already appear in the document.

    The duplicate check is a literal substring test for ``name="{key}"`` on the
    raw text, not a parse.

    Raises:
        DuplicateKeyError: If the literal name attribute is already present.
        MalformedDocumentError: If the document is not well-formed.
    """
    if f'{NAME_ATTRIBUTE}="{key}"' in text:
        raise DuplicateKeyError(key)
    return insert_entry_text(text, key, value, APPEND, fp)


# --- remove -----------------------------------------------------------------


def remove_entries_text(text: str, keys: Collection[str]) -> tuple[str, dict[str, int]]:
    """Delete every entry named in ``keys``.

    Each removed element goes together with the whitespace-only text right
    before it: whitespace is buffered as pending and only emitted once a
    following token survives.

    Args:
        text (str): Document text.
        keys (Collection[str]): Keys to remove.

    Returns:
        tuple[str, dict[str, int]]: The new text and, per removed key, the ordinal
        it occupied (first occurrence for duplicated keys).

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    removed: dict[str, int] = {}
    if not keys:
        return text, removed

    out: list[str] = []
    pending_ws: str | None = None
    inside_target: bool = False

    for ev in walk(text):
        tok: Token = ev.token
        if inside_target:
            if ev.role == Role.ENTRY_CLOSE:
                inside_target = False
            continue
        if ev.role in ENTRY_START_ROLES and ev.key in keys:
            assert ev.key is not None and ev.ordinal is not None
            removed.setdefault(ev.key, ev.ordinal)
            pending_ws = None
            inside_target = ev.role == Role.ENTRY_OPEN
            continue
        if tok.is_whitespace:
            if pending_ws is not None:
                out.append(pending_ws)
            pending_ws = tok.raw
            continue
        if pending_ws is not None:
            out.append(pending_ws)
            pending_ws = None
        out.append(tok.raw)

    if pending_ws is not None:
        out.append(pending_ws)
    logger.debug("remove: %s", removed)
    return "".join(out), removed


def remove_entry_text(text: str, key: str) -> tuple[str, int | None]:
    """Delete the entry named ``key``; see `remove_entries_text`.

    Returns:
        tuple[str, int | None]: The new text and the removed ordinal, or None when
        ``key`` was not present.
    """
    new_text, removed = remove_entries_text(text, {key})
    return new_text, removed.get(key)

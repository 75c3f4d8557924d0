# topmark:header:start
#
#   project      : ResxEdit
#   file         : scanner.py
#   file_relpath : src/resxedit/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry-aware walk over the token stream.

Parser and mutators share one structural view of a document: `walk` annotates
every token with its [`Role`][resxedit.core.scanner.Role] in the resource-table
schema, the key of the entry that owns it, and that entry's ordinal index.

Schema recognized:
    - the root element (depth 0);
    - entry elements: ``<data>`` elements that are direct children of the root;
    - value elements: ``<value>`` elements that are direct children of an entry
      (the first one only);
    - value text: text and CDATA tokens directly inside a value element.

Everything else is `Role.OTHER` and is meant to be copied verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from resxedit.constants import ENTRY_TAG, NAME_ATTRIBUTE, VALUE_TAG
from resxedit.core.tokens import Token, TokenKind, iter_tokens

if TYPE_CHECKING:
    from collections.abc import Iterator


class Role(str, Enum):
    """Structural role of a token within a resource table."""

    OTHER = "other"
    ROOT_OPEN = "root_open"
    ROOT_CLOSE = "root_close"
    ROOT_EMPTY = "root_empty"
    ENTRY_OPEN = "entry_open"
    ENTRY_CLOSE = "entry_close"
    ENTRY_EMPTY = "entry_empty"
    VALUE_OPEN = "value_open"
    VALUE_CLOSE = "value_close"
    VALUE_EMPTY = "value_empty"
    VALUE_TEXT = "value_text"


ENTRY_START_ROLES: frozenset[Role] = frozenset({Role.ENTRY_OPEN, Role.ENTRY_EMPTY})


@dataclass(frozen=True, slots=True)
class ScanEvent:
    """A token together with its structural context.

    Attributes:
        token (Token): The token.
        role (Role): The token's role.
        key (str | None): Name of the owning entry (``""`` when the entry has no
            name attribute), or None outside entries.
        ordinal (int | None): Ordinal index of the owning entry, or None outside entries.
    """

    token: Token
    role: Role
    key: str | None = None
    ordinal: int | None = None

    @property
    def inside_entry(self) -> bool:
        """True for any token that belongs to an entry element, its tags included."""
        return self.ordinal is not None


def entry_key(token: Token) -> str:
    """Return the decoded name attribute of an entry tag (``""`` when missing)."""
    attr = token.get_attribute(NAME_ATTRIBUTE)
    return attr.value if attr is not None else ""


def walk(text: str) -> Iterator[ScanEvent]:
    """Yield a `ScanEvent` for each token of ``text``.

    Args:
        text (str): Document text without a leading byte-order marker.

    Yields:
        ScanEvent: Annotated tokens in document order.

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    depth: int = 0  # open elements before the current token
    ordinal: int = -1
    key: str | None = None
    entry_depth: int | None = None
    value_depth: int | None = None
    value_seen: bool = False

    for tok in iter_tokens(text):
        role: Role = Role.OTHER
        if tok.kind in (TokenKind.START, TokenKind.EMPTY):
            empty: bool = tok.kind == TokenKind.EMPTY
            if depth == 0:
                role = Role.ROOT_EMPTY if empty else Role.ROOT_OPEN
            elif depth == 1 and entry_depth is None and tok.name == ENTRY_TAG:
                ordinal += 1
                key = entry_key(tok)
                if empty:
                    yield ScanEvent(tok, Role.ENTRY_EMPTY, key, ordinal)
                    key = None
                    continue
                role = Role.ENTRY_OPEN
                entry_depth = depth
                value_seen = False
            elif (
                entry_depth is not None
                and depth == entry_depth + 1
                and tok.name == VALUE_TAG
                and not value_seen
            ):
                value_seen = True
                if empty:
                    role = Role.VALUE_EMPTY
                else:
                    role = Role.VALUE_OPEN
                    value_depth = depth
            if not empty:
                depth += 1
        elif tok.kind == TokenKind.END:
            depth -= 1
            if depth == 0:
                role = Role.ROOT_CLOSE
            elif depth == entry_depth:
                yield ScanEvent(tok, Role.ENTRY_CLOSE, key, ordinal)
                entry_depth = None
                key = None
                continue
            elif depth == value_depth:
                role = Role.VALUE_CLOSE
                value_depth = None
        elif tok.kind in (TokenKind.TEXT, TokenKind.CDATA):
            if value_depth is not None and depth == value_depth + 1:
                role = Role.VALUE_TEXT

        if entry_depth is not None:
            yield ScanEvent(tok, role, key, ordinal)
        else:
            yield ScanEvent(tok, role)

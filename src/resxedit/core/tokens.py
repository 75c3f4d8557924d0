# topmark:header:start
#
#   project      : ResxEdit
#   file         : tokens.py
#   file_relpath : src/resxedit/core/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless XML token stream for resource tables.

`iter_tokens` splits a document into contiguous tokens whose ``raw`` texts
concatenate back to the input exactly. Every mutation works by copying tokens
verbatim and intercepting only the targeted ones, so untouched regions keep
their original bytes (indentation, attribute quoting, entity spelling, comments).

The lexer checks well-formedness as it goes (balanced tags, a single root
element, valid attributes and references) and raises
[`MalformedDocumentError`][resxedit.errors.MalformedDocumentError] at the first
violation. Because tokens are produced lazily, callers must consume the whole
stream before committing any output.

Only the subset of XML used by resource tables is understood: no DTD
processing, no namespace handling (prefixed names are passed through).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from resxedit.config.logging import get_logger
from resxedit.core.escape import check_references, unescape
from resxedit.errors import MalformedDocumentError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)

XML_WHITESPACE: Final[str] = " \t\r\n"

_NAME: Final[str] = r"[A-Za-z_:][\w.:-]*"
_WS: Final[str] = r"[ \t\r\n]"
_QUOTED: Final[str] = r"(?:\"[^\"<]*\"|'[^'<]*')"

_START_TAG_RE: Final[re.Pattern[str]] = re.compile(
    rf"<(?P<name>{_NAME})(?P<attrs>(?:{_WS}+{_NAME}{_WS}*={_WS}*{_QUOTED})*){_WS}*(?P<empty>/?)>"
)
_ATTR_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<name>{_NAME}){_WS}*={_WS}*(?:\"(?P<dq>[^\"<]*)\"|'(?P<sq>[^'<]*)')"
)
_END_TAG_RE: Final[re.Pattern[str]] = re.compile(rf"</(?P<name>{_NAME}){_WS}*>")
_PI_TARGET_RE: Final[re.Pattern[str]] = re.compile(_NAME)


class TokenKind(str, Enum):
    """Kinds of tokens produced by the lexer."""

    DECLARATION = "declaration"  # <?xml ...?> and other processing instructions
    DOCTYPE = "doctype"
    COMMENT = "comment"
    CDATA = "cdata"
    START = "start"
    END = "end"
    EMPTY = "empty"  # <name ... />
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Attribute:
    """An attribute of a start or empty-element tag.

    Attributes:
        name (str): Attribute name, as written.
        value (str): Decoded attribute value.
        quote (str): The delimiting quote character.
        value_start (int): Offset of the raw value (inside the quotes) relative to the tag.
        value_end (int): End offset of the raw value relative to the tag.
    """

    name: str
    value: str
    quote: str
    value_start: int
    value_end: int


@dataclass(frozen=True, slots=True)
class Token:
    """A contiguous slice of the document.

    Attributes:
        kind (TokenKind): Token kind.
        raw (str): Exact source text of the token.
        start (int): Offset of the token in the document text.
        name (str): Element name for START/END/EMPTY tokens, else empty.
        attributes (tuple[Attribute, ...]): Attributes of START/EMPTY tokens.
    """

    kind: TokenKind
    raw: str
    start: int
    name: str = ""
    attributes: tuple[Attribute, ...] = ()

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.start + len(self.raw)

    @property
    def is_whitespace(self) -> bool:
        """True for text tokens made only of XML whitespace."""
        return self.kind == TokenKind.TEXT and not self.raw.strip(XML_WHITESPACE)

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the attribute called ``name``, if present."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None


def _parse_attributes(m: re.Match[str], pos: int) -> tuple[Attribute, ...]:
    attrs_raw: str = m.group("attrs")
    if not attrs_raw:
        return ()
    base: int = m.start("attrs") - pos
    seen: set[str] = set()
    result: list[Attribute] = []
    for am in _ATTR_RE.finditer(attrs_raw):
        name: str = am.group("name")
        if name in seen:
            raise MalformedDocumentError(f"Duplicate attribute '{name}'", offset=pos)
        seen.add(name)
        group: str = "dq" if am.group("dq") is not None else "sq"
        value_start: int = base + am.start(group)
        result.append(
            Attribute(
                name=name,
                value=unescape(am.group(group), pos + value_start),
                quote='"' if group == "dq" else "'",
                value_start=value_start,
                value_end=base + am.end(group),
            )
        )
    return tuple(result)


def _doctype_end(text: str, pos: int) -> int:
    """Return the offset just past a DOCTYPE declaration (internal subset aware)."""
    depth: int = 0
    quote: str | None = None
    i: int = pos + len("<!DOCTYPE")
    while i < len(text):
        c: str = text[i]
        if quote is not None:
            if c == quote:
                quote = None
        elif c in "\"'":
            quote = c
        elif c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
        elif c == ">" and depth <= 0:
            return i + 1
        i += 1
    raise MalformedDocumentError("Unterminated DOCTYPE declaration", offset=pos)


def _find_terminator(text: str, pos: int, opener: str, closer: str, what: str) -> int:
    end: int = text.find(closer, pos + len(opener))
    if end == -1:
        raise MalformedDocumentError(f"Unterminated {what}", offset=pos)
    return end + len(closer)


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in document order.

    Args:
        text (str): Document text without a leading byte-order marker.

    Yields:
        Token: Contiguous tokens covering the whole input.

    Raises:
        MalformedDocumentError: If the document is not well-formed.
    """
    pos: int = 0
    n: int = len(text)
    stack: list[str] = []
    root_seen: bool = False

    while pos < n:
        if text[pos] != "<":
            nxt: int = text.find("<", pos)
            if nxt == -1:
                nxt = n
            raw: str = text[pos:nxt]
            if not stack:
                if raw.strip(XML_WHITESPACE):
                    raise MalformedDocumentError("Text outside the root element", offset=pos)
            else:
                check_references(raw, pos)
            yield Token(TokenKind.TEXT, raw, pos)
            pos = nxt
            continue

        end: int
        if text.startswith("<!--", pos):
            end = _find_terminator(text, pos, "<!--", "-->", "comment")
            yield Token(TokenKind.COMMENT, text[pos:end], pos)
        elif text.startswith("<![CDATA[", pos):
            if not stack:
                raise MalformedDocumentError("CDATA section outside the root element", offset=pos)
            end = _find_terminator(text, pos, "<![CDATA[", "]]>", "CDATA section")
            yield Token(TokenKind.CDATA, text[pos:end], pos)
        elif text.startswith("<?", pos):
            end = _find_terminator(text, pos, "<?", "?>", "processing instruction")
            target: re.Match[str] | None = _PI_TARGET_RE.match(text, pos + 2)
            if target is None:
                raise MalformedDocumentError("Processing instruction without target", offset=pos)
            yield Token(TokenKind.DECLARATION, text[pos:end], pos, name=target.group(0))
        elif text.startswith("<!DOCTYPE", pos):
            if root_seen:
                raise MalformedDocumentError("DOCTYPE after the root element", offset=pos)
            end = _doctype_end(text, pos)
            yield Token(TokenKind.DOCTYPE, text[pos:end], pos)
        elif text.startswith("</", pos):
            em: re.Match[str] | None = _END_TAG_RE.match(text, pos)
            if em is None:
                raise MalformedDocumentError("Malformed end tag", offset=pos)
            name: str = em.group("name")
            if not stack or stack[-1] != name:
                expected: str = f"</{stack[-1]}>" if stack else "nothing"
                raise MalformedDocumentError(
                    f"Unexpected end tag </{name}>, expected {expected}", offset=pos
                )
            stack.pop()
            end = em.end()
            yield Token(TokenKind.END, text[pos:end], pos, name=name)
        else:
            sm: re.Match[str] | None = _START_TAG_RE.match(text, pos)
            if sm is None:
                raise MalformedDocumentError("Malformed start tag", offset=pos)
            if not stack and root_seen:
                raise MalformedDocumentError("Content after the root element", offset=pos)
            root_seen = True
            name = sm.group("name")
            attributes: tuple[Attribute, ...] = _parse_attributes(sm, pos)
            end = sm.end()
            if sm.group("empty"):
                yield Token(TokenKind.EMPTY, text[pos:end], pos, name, attributes)
            else:
                stack.append(name)
                yield Token(TokenKind.START, text[pos:end], pos, name, attributes)
        pos = end

    if stack:
        raise MalformedDocumentError(f"Unclosed element <{stack[-1]}>", offset=n)
    if not root_seen:
        raise MalformedDocumentError("Document has no root element", offset=n)
    logger.trace("lexer: consumed %d characters", n)

# topmark:header:start
#
#   project      : ResxEdit
#   file         : escape.py
#   file_relpath : src/resxedit/core/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entity escaping helpers.

Escaping is deliberately minimal: text content only substitutes ``&``, ``<`` and
``>``, so quote characters written by a caller stay as typed. Attribute values
additionally escape the quote character that delimits them.
"""

from __future__ import annotations

import re
from typing import Final

from resxedit.errors import MalformedDocumentError

PREDEFINED_ENTITIES: Final[dict[str, str]] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

# Any '&' must start one of these; the lexer validates with the same pattern.
ENTITY_RE: Final[re.Pattern[str]] = re.compile(
    r"&(?:(#[0-9]+)|(#x[0-9A-Fa-f]+)|([A-Za-z_][\w.-]*));"
)
_AMP_RE: Final[re.Pattern[str]] = re.compile(r"&")


def escape_text(value: str) -> str:
    """Escape ``value`` for use as element text content.

    Args:
        value (str): Raw text.

    Returns:
        str: Text with ``&``, ``<`` and ``>`` replaced by entity references.
    """
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attribute(value: str, quote: str = '"') -> str:
    """Escape ``value`` for use inside an attribute delimited by ``quote``.

    Args:
        value (str): Raw attribute value.
        quote (str): The delimiting quote character (``"`` or ``'``).

    Returns:
        str: Escaped attribute value (without the surrounding quotes).
    """
    escaped: str = escape_text(value)
    if quote == '"':
        return escaped.replace('"', "&quot;")
    return escaped.replace("'", "&apos;")


def _decode_reference(match: re.Match[str], offset: int) -> str:
    dec, hexa, name = match.groups()
    if name is not None:
        if name not in PREDEFINED_ENTITIES:
            raise MalformedDocumentError(
                f"Unknown entity reference '&{name};'", offset=offset + match.start()
            )
        return PREDEFINED_ENTITIES[name]
    codepoint: int = int(dec[1:]) if dec is not None else int(hexa[2:], 16)
    try:
        return chr(codepoint)
    except (ValueError, OverflowError) as exc:
        raise MalformedDocumentError(
            f"Invalid character reference {match.group(0)!r}", offset=offset + match.start()
        ) from exc


def check_references(raw: str, offset: int = 0) -> None:
    """Validate that every ``&`` in ``raw`` starts a known reference.

    Args:
        raw (str): Raw (escaped) text or attribute value.
        offset (int): Offset of ``raw`` in the document, used for error reporting.

    Raises:
        MalformedDocumentError: If a bare ``&`` or an unknown entity is found.
    """
    for amp in _AMP_RE.finditer(raw):
        m: re.Match[str] | None = ENTITY_RE.match(raw, amp.start())
        if m is None:
            raise MalformedDocumentError(
                "Bare '&' is not a valid reference", offset=offset + amp.start()
            )
        _decode_reference(m, offset)


def unescape(raw: str, offset: int = 0) -> str:
    """Decode entity and character references in ``raw``.

    Args:
        raw (str): Escaped text as it appears in the document.
        offset (int): Offset of ``raw`` in the document, used for error reporting.

    Returns:
        str: The decoded text.

    Raises:
        MalformedDocumentError: If an unknown entity or invalid reference is found.
    """
    if "&" not in raw:
        return raw
    check_references(raw, offset)
    return ENTITY_RE.sub(lambda m: _decode_reference(m, offset), raw)

# topmark:header:start
#
#   project      : ResxEdit
#   file         : fingerprint.py
#   file_relpath : src/resxedit/core/fingerprint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Format inference for resource tables.

Every mutating call derives a fresh `FormatFingerprint` from the document it is
about to edit; nothing is cached between calls. The fingerprint records:

  * whether the raw bytes started with a UTF-8 byte-order marker;
  * the line-ending convention: ``"\r\n"`` if that sequence occurs anywhere,
    otherwise ``"\n"``;
  * the indentation unit: the whitespace run between the first newline and an
    entry start tag, else before a header element, else the configured default.

All synthesized structure (inserted entries, expanded elements) is rendered with
the fingerprint so that entries added in different sessions line up with the
existing ones.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from resxedit.config.logging import get_logger
from resxedit.constants import DEFAULT_INDENT, ENTRY_TAG, HEADER_TAG, UTF8_BOM

if TYPE_CHECKING:
    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)

CRLF: Final[str] = "\r\n"
LF: Final[str] = "\n"


def _indent_probe(tag: str) -> re.Pattern[str]:
    return re.compile(rf"\n([ \t]+)<{re.escape(tag)}[ \t\r\n/>]")


_ENTRY_INDENT_RE: Final[re.Pattern[str]] = _indent_probe(ENTRY_TAG)
_HEADER_INDENT_RE: Final[re.Pattern[str]] = _indent_probe(HEADER_TAG)


@dataclass(frozen=True, slots=True)
class FormatFingerprint:
    """Formatting facts inferred from one document.

    Attributes:
        has_bom (bool): Whether the raw bytes started with a UTF-8 byte-order marker.
        line_ending (str): ``"\\n"`` or ``"\\r\\n"``.
        indent_unit (str): Whitespace placed before entry start tags.
    """

    has_bom: bool
    line_ending: str
    indent_unit: str

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        has_bom: bool = False,
        default_indent: str = DEFAULT_INDENT,
    ) -> FormatFingerprint:
        """Infer the fingerprint of a decoded, BOM-free document.

        Args:
            text (str): Document text.
            has_bom (bool): Whether the raw document carried a byte-order marker.
            default_indent (str): Indentation used when none can be sampled.

        Returns:
            FormatFingerprint: The inferred fingerprint.
        """
        fp = cls(
            has_bom=has_bom,
            line_ending=detect_line_ending(text),
            indent_unit=infer_indent_unit(text, default_indent=default_indent),
        )
        logger.trace("fingerprint: %r", fp)
        return fp


def has_utf8_bom(data: bytes) -> bool:
    """Return True if ``data`` starts with a UTF-8 byte-order marker."""
    return data.startswith(UTF8_BOM)


def detect_line_ending(text: str) -> str:
    """Return ``"\\r\\n"`` if it occurs anywhere in ``text``, else ``"\\n"``."""
    return CRLF if CRLF in text else LF


def infer_indent_unit(text: str, *, default_indent: str = DEFAULT_INDENT) -> str:
    """Return the whitespace used before entry elements in ``text``.

    Args:
        text (str): Document text.
        default_indent (str): Fallback when neither entries nor headers are indented.

    Returns:
        str: The sampled indentation, or ``default_indent``.
    """
    for probe in (_ENTRY_INDENT_RE, _HEADER_INDENT_RE):
        m: re.Match[str] | None = probe.search(text)
        if m is not None:
            return m.group(1)
    return default_indent

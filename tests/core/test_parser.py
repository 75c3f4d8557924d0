# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_parser.py
#   file_relpath : tests/core/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry extraction: values, ordinals, duplicates and odd shapes."""

from __future__ import annotations

import pytest

from resxedit import engine
from resxedit.core.parser import ResourceEntry, parse_entries, parse_text
from resxedit.errors import MalformedDocumentError
from tests.helpers import DESIGNER_DOC, SIMPLE_DOC

pytestmark = pytest.mark.core


def test_parse_simple_document() -> None:
    assert parse_text(SIMPLE_DOC) == {"Key1": "Value1", "Key2": "Value2"}


def test_parse_designer_document_skips_headers_and_comments() -> None:
    """Headers and comment children do not contribute entries or values."""
    assert parse_text(DESIGNER_DOC) == {
        "Greeting": "Hello",
        "Farewell": "Bye & see you",
        "Empty": "",
    }


def test_entries_carry_ordinals() -> None:
    assert parse_entries(DESIGNER_DOC) == [
        ResourceEntry("Greeting", "Hello", 0),
        ResourceEntry("Farewell", "Bye & see you", 1),
        ResourceEntry("Empty", "", 2),
    ]


def test_last_duplicate_wins() -> None:
    text = (
        "<root>"
        '<data name="k"><value>first</value></data>'
        '<data name="k"><value>second</value></data>'
        "</root>"
    )
    assert parse_text(text) == {"k": "second"}
    assert [e.ordinal for e in parse_entries(text)] == [0, 1]


def test_cdata_is_taken_verbatim() -> None:
    text = '<root><data name="k"><value><![CDATA[a < b & c]]> &amp; d</value></data></root>'
    assert parse_text(text) == {"k": "a < b & c & d"}


def test_character_references_are_decoded() -> None:
    text = '<root><data name="k"><value>&#65;&#x42;&quot;&apos;</value></data></root>'
    assert parse_text(text) == {"k": "AB\"'"}


def test_line_endings_in_values_are_kept() -> None:
    text = '<root>\r\n<data name="k"><value>line1\r\nline2</value></data>\r\n</root>'
    assert parse_text(text) == {"k": "line1\r\nline2"}


def test_self_closing_entry_and_missing_value_parse_as_empty() -> None:
    text = '<root><data name="a"/><data name="b"><comment>c</comment></data></root>'
    assert parse_text(text) == {"a": "", "b": ""}


def test_unnamed_entries_are_skipped_but_counted() -> None:
    text = '<root><data><value>x</value></data><data name="b"><value>y</value></data></root>'
    assert parse_entries(text) == [ResourceEntry("b", "y", 1)]


def test_empty_root_has_no_entries() -> None:
    assert parse_text("<root/>") == {}


def test_engine_parse_strips_bom() -> None:
    data = b"\xef\xbb\xbf" + SIMPLE_DOC.encode("utf-8")
    assert engine.parse(data) == {"Key1": "Value1", "Key2": "Value2"}


def test_engine_parse_rejects_invalid_utf8() -> None:
    with pytest.raises(MalformedDocumentError, match="not valid UTF-8"):
        engine.parse(b"<root>\xff</root>")

# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_tokens.py
#   file_relpath : tests/core/test_tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexer tests: lossless tokenization and well-formedness checks."""

from __future__ import annotations

import pytest

from resxedit.core.scanner import Role, walk
from resxedit.core.tokens import TokenKind, iter_tokens
from resxedit.errors import MalformedDocumentError
from tests.helpers import DESIGNER_DOC, SIMPLE_DOC, parametrize

pytestmark = pytest.mark.core


@parametrize("text", [SIMPLE_DOC, DESIGNER_DOC, DESIGNER_DOC.replace("\n", "\r\n")])
def test_tokens_concatenate_back_to_input(text: str) -> None:
    """Joining raw token text reproduces the document exactly."""
    tokens = list(iter_tokens(text))
    assert "".join(t.raw for t in tokens) == text
    for prev, nxt in zip(tokens, tokens[1:]):
        assert prev.end == nxt.start


def test_attribute_offsets_point_into_raw_tag() -> None:
    """Attribute value offsets are relative to the tag and exclude the quotes."""
    text = "<root><data  name='a&amp;b' x=\"1\"/></root>"
    tok = next(t for t in iter_tokens(text) if t.name == "data")
    attr = tok.get_attribute("name")
    assert attr is not None
    assert attr.value == "a&b"
    assert attr.quote == "'"
    assert tok.raw[attr.value_start : attr.value_end] == "a&amp;b"
    assert tok.kind == TokenKind.EMPTY


def test_cdata_and_comments_are_single_tokens() -> None:
    """Markup-like text inside CDATA and comments does not split tokens."""
    text = "<root><!-- <data> --><v><![CDATA[<b>&x]]></v></root>"
    kinds = [t.kind for t in iter_tokens(text)]
    assert kinds == [
        TokenKind.START,
        TokenKind.COMMENT,
        TokenKind.START,
        TokenKind.CDATA,
        TokenKind.END,
        TokenKind.END,
    ]


@parametrize(
    "text, message",
    [
        ("", "no root element"),
        ("   \n", "no root element"),
        ("<root>", "Unclosed element <root>"),
        ("<root></data>", "Unexpected end tag </data>"),
        ("<a/><b/>", "Content after the root element"),
        ("text<root/>", "Text outside the root element"),
        ("<root/>tail", "Text outside the root element"),
        ("<root>&bogus;</root>", "Unknown entity"),
        ("<root>a & b</root>", "Bare '&'"),
        ('<root a="1" a="2"/>', "Duplicate attribute"),
        ("<root><!-- open</root>", "Unterminated comment"),
        ("<root><![CDATA[x</root>", "Unterminated CDATA"),
        ("<root><data name=x/></root>", "Malformed start tag"),
    ],
)
def test_malformed_documents_raise(text: str, message: str) -> None:
    """Each well-formedness violation is reported with a descriptive message."""
    with pytest.raises(MalformedDocumentError, match=message):
        list(iter_tokens(text))


def test_malformed_error_reports_offset() -> None:
    """The offset of the offending token is kept on the exception."""
    with pytest.raises(MalformedDocumentError) as excinfo:
        list(iter_tokens("<root>\n  </oops>\n</root>"))
    assert excinfo.value.offset == 9
    assert "(at offset 9)" in str(excinfo.value)


def test_walk_assigns_entry_roles_and_ordinals() -> None:
    """Only direct ``data`` children of the root are entries; ordinals count them."""
    text = (
        "<root>"
        '<resheader name="h"><value>x</value></resheader>'
        '<data name="a"><value>1</value><data name="nested"/></data>'
        '<data name="b"/>'
        "</root>"
    )
    entries = [
        (ev.role, ev.key, ev.ordinal) for ev in walk(text) if ev.role.name.startswith("ENTRY")
    ]
    assert entries == [
        (Role.ENTRY_OPEN, "a", 0),
        (Role.ENTRY_CLOSE, "a", 0),
        (Role.ENTRY_EMPTY, "b", 1),
    ]


def test_walk_marks_only_first_value_child() -> None:
    """A second ``value`` child of an entry is ordinary content."""
    text = '<root><data name="a"><value>1</value><value>2</value></data></root>'
    texts = [ev.token.raw for ev in walk(text) if ev.role == Role.VALUE_TEXT]
    assert texts == ["1"]

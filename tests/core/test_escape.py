# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_escape.py
#   file_relpath : tests/core/test_escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal escaping and reference decoding."""

from __future__ import annotations

import pytest

from resxedit.core.escape import escape_attribute, escape_text, unescape
from resxedit.errors import MalformedDocumentError

pytestmark = pytest.mark.core


def test_escape_text_only_touches_amp_and_angle_brackets() -> None:
    assert escape_text("a & <b> \"c\" 'd'") == "a &amp; &lt;b&gt; \"c\" 'd'"


def test_escape_attribute_escapes_the_delimiting_quote() -> None:
    assert escape_attribute('say "hi" & \'bye\'') == "say &quot;hi&quot; &amp; 'bye'"
    assert escape_attribute('say "hi" & \'bye\'', "'") == "say \"hi\" &amp; &apos;bye&apos;"


def test_unescape_round_trips_escape_text() -> None:
    raw = "x < y && z > 0"
    assert unescape(escape_text(raw)) == raw


def test_unescape_rejects_unknown_entities() -> None:
    with pytest.raises(MalformedDocumentError, match="Unknown entity reference '&nbsp;'"):
        unescape("a&nbsp;b")

# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: patch generation and rendering from text or sequences."""

from __future__ import annotations

from resxedit.utils.diff import render_patch, unified_patch


def test_unified_patch_identical_texts() -> None:
    assert unified_patch("<root/>", "<root/>", "Strings.resx") is None


def test_unified_patch_headers_and_terminators() -> None:
    patch = unified_patch("<a>\n<b>", "<a>\n<c>", "Strings.resx")
    assert patch is not None
    lines = patch.splitlines()
    assert lines[0] == "--- Strings.resx (current)"
    assert lines[1] == "+++ Strings.resx (updated)"
    assert "-<b>" in lines and "+<c>" in lines
    # The unterminated last line still ends the patch with a newline.
    assert patch.endswith("\n")


def test_unified_patch_shows_line_ending_drift() -> None:
    patch = unified_patch("<a>\r\n</a>\r\n", "<a>\n</a>\r\n", "x")
    assert patch is not None
    assert "-<a>\r\n" in patch
    assert "+<a>\n" in patch


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and an iterable of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(False))

    assert isinstance(s1, str) and isinstance(s2, str) and s1 and s2
    assert "foo" in s1 and "bar" in s2


def test_render_patch_escapes_carriage_returns() -> None:
    rendered = render_patch(["-<a>\r", "+<a>"])
    assert "\r" not in rendered
    assert "<a>\\r" in rendered


def test_render_patch_line_numbers() -> None:
    rendered = render_patch(" ctx\n-old\n", show_line_numbers=True)
    assert rendered.splitlines()[0].startswith("0001|")
    assert rendered.splitlines()[1].startswith("0002|")


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input should not raise and should return a string."""
    s = render_patch("")
    assert isinstance(s, str)

# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_cli_show.py
#   file_relpath : tests/cli/test_cli_show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only commands: ``show`` and ``get``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from resxedit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_show_lists_entries_in_order(resx_file: Callable[..., Path]) -> None:
    path: Path = resx_file()
    result = run_cli(["show", str(path)])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "   0  Greeting  Hello"
    assert lines[1] == "   1  Farewell  Bye & see you"
    assert lines[2].rstrip() == "   2  Empty"


def test_show_makes_line_breaks_visible(resx_file: Callable[..., Path]) -> None:
    path: Path = resx_file('<root><data name="k"><value>a\r\nb</value></data></root>')
    result = run_cli(["show", str(path)])
    assert_SUCCESS(result)
    assert "   0  k  a\\r\\nb" in result.output


def test_show_json(resx_file: Callable[..., Path]) -> None:
    path: Path = resx_file()
    result = run_cli(["show", str(path), "--format", "json"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload[1] == {"key": "Farewell", "value": "Bye & see you", "ordinal": 1}
    assert [p["key"] for p in payload] == ["Greeting", "Farewell", "Empty"]


def test_show_missing_file(tmp_path: Path) -> None:
    result = run_cli(["show", str(tmp_path / "nope.resx")])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_get_prints_value(resx_file: Callable[..., Path]) -> None:
    path: Path = resx_file()
    result = run_cli(["get", str(path), "Farewell"])
    assert_SUCCESS(result)
    assert result.output == "Bye & see you\n"


def test_get_missing_key(resx_file: Callable[..., Path]) -> None:
    path: Path = resx_file()
    result = run_cli(["get", str(path), "Nope"])
    assert result.exit_code == ExitCode.FAILURE
    assert "Key not found: 'Nope'" in result.output

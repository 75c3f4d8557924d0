# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_cli_bundles.py
#   file_relpath : tests/cli/test_cli_bundles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle commands: ``scan`` and ``table``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from resxedit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def _write(path: Path, **pairs: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f'<data name="{k}"><value>{v}</value></data>' for k, v in pairs.items())
    path.write_text(f"<root>{body}</root>", encoding="utf-8")


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    root: Path = tmp_path / "res"
    _write(root / "Strings.resx", Hello="Hello", Bye="Bye")
    _write(root / "Strings.fr.resx", Hello="Bonjour")
    _write(root / "obj" / "Strings.resx", Stale="x")
    _write(root / "Forms" / "Main.de.resx", Title="Titel")
    return root


def test_scan_text(bundle_dir: Path) -> None:
    result = run_cli(["scan", str(bundle_dir), "--no-config"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == f"Main  ({bundle_dir / 'Forms'})"
    assert lines[1].split() == ["de", "Main.de.resx"]
    assert lines[2] == f"Strings  ({bundle_dir})"
    assert lines[3].split() == ["default", "Strings.resx"]
    assert lines[4].split() == ["fr", "Strings.fr.resx"]
    assert len(lines) == 5


def test_scan_json_and_exclude(bundle_dir: Path) -> None:
    result = run_cli(["scan", str(bundle_dir), "--no-config", "-e", "Forms/", "--format", "json"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert [g["name"] for g in payload] == ["Strings"]
    assert [f["language"] for f in payload[0]["files"]] == ["default", "fr"]


def test_scan_without_groups(tmp_path: Path) -> None:
    result = run_cli(["scan", str(tmp_path), "--no-config"])
    assert_SUCCESS(result)
    assert "No resource files found" in result.output


def test_table_text(bundle_dir: Path) -> None:
    result = run_cli(["table", str(bundle_dir), "Strings", "--no-config"])

    assert_SUCCESS(result)
    rows = [line.split() for line in result.output.splitlines()]
    assert rows == [["key", "default", "fr"], ["Bye", "Bye"], ["Hello", "Hello", "Bonjour"]]


def test_table_json(bundle_dir: Path) -> None:
    result = run_cli(["table", str(bundle_dir), "Strings", "--format", "json", "--no-config"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {
        "languages": ["default", "fr"],
        "rows": [
            {"key": "Bye", "values": {"default": "Bye"}},
            {"key": "Hello", "values": {"default": "Hello", "fr": "Bonjour"}},
        ],
    }


def test_table_unknown_group(bundle_dir: Path) -> None:
    result = run_cli(["table", str(bundle_dir), "Nope", "--no-config"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No resource group 'Nope'" in result.output

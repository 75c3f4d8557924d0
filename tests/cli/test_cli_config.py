# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``config dump`` and ``config defaults`` output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def _extract_toml(output: str) -> dict[str, Any]:
    start: int = output.index("# === BEGIN ===")
    end: int = output.index("# === END ===")
    body: str = output[start + len("# === BEGIN ===") : end]
    return tomlkit.parse(body).unwrap()


def test_config_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["config", "defaults"])

    assert_SUCCESS(result)
    data = _extract_toml(result.output)
    assert data["format"]["default_indent"] == "    "
    assert data["writer"]["strategy"] == "atomic"
    assert data["scan"]["exclude_patterns"] == ["bin/", "obj/"]


def test_config_dump_merges_project_file(tmp_path: Path) -> None:
    (tmp_path / "resxedit.toml").write_text(
        '[writer]\nstrategy = "in_place"\n[scan]\nexclude_patterns = ["legacy/"]\n',
        encoding="utf-8",
    )
    result = run_cli_in(tmp_path, ["config", "dump"])

    assert_SUCCESS(result)
    data = _extract_toml(result.output)
    assert data["writer"]["strategy"] == "in_place"
    assert data["scan"]["exclude_patterns"] == ["bin/", "obj/", "legacy/"]


def test_config_dump_no_config(tmp_path: Path) -> None:
    (tmp_path / "resxedit.toml").write_text('[format]\ndefault_indent = "\\t"\n', "utf-8")
    result = run_cli_in(tmp_path, ["config", "dump", "--no-config"])

    assert_SUCCESS(result)
    assert _extract_toml(result.output)["format"]["default_indent"] == "    "


def test_config_dump_explicit_file_and_sources(tmp_path: Path) -> None:
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[scan]\ndefault_language = "en"\n', encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["-v", "config", "dump", "--no-config", "--config", str(extra)]
    )

    assert_SUCCESS(result)
    assert f"# source: {extra}" in result.output
    assert _extract_toml(result.output)["scan"]["default_language"] == "en"

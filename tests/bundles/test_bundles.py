# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_bundles.py
#   file_relpath : tests/bundles/test_bundles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle discovery and merging of localized resource files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from resxedit.bundles import RowData, load_group, scan_directory, split_language
from tests.helpers import SIMPLE_DOC, parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _doc(**pairs: str) -> str:
    body: str = "".join(
        f'  <data name="{k}" xml:space="preserve"><value>{v}</value></data>\n'
        for k, v in pairs.items()
    )
    return f"<root>\n{body}</root>\n"


@parametrize(
    "stem, expected",
    [
        ("Strings", ("Strings", "default")),
        ("Strings.fr", ("Strings", "fr")),
        ("Strings.zh-Hans", ("Strings", "zh-Hans")),
        ("App.Resources.de-DE", ("App.Resources", "de-DE")),
        ("Strings.v2", ("Strings", "v2")),
        ("Strings.2024", ("Strings.2024", "default")),
        ("Strings.averyveryverylongsuffix", ("Strings.averyveryverylongsuffix", "default")),
        ("Strings.", ("Strings.", "default")),
    ],
)
def test_split_language(stem: str, expected: tuple[str, str]) -> None:
    assert split_language(stem) == expected


def test_split_language_custom_default() -> None:
    assert split_language("Strings", "en") == ("Strings", "en")


def test_scan_groups_and_orders_files(tmp_path: Path) -> None:
    for name in ("Strings.resx", "Strings.fr.resx", "Strings.de.resx", "Errors.nl.resx"):
        (tmp_path / name).write_text(SIMPLE_DOC, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")

    groups = scan_directory(tmp_path)

    assert [g.name for g in groups] == ["Errors", "Strings"]
    assert groups[0].languages == ["nl"]
    assert groups[1].languages == ["default", "de", "fr"]
    assert all(g.directory == tmp_path for g in groups)


def test_same_name_in_two_directories_is_two_groups(tmp_path: Path) -> None:
    for sub in ("a", "b"):
        (tmp_path / sub).mkdir()
        (tmp_path / sub / "Strings.resx").write_text(SIMPLE_DOC, encoding="utf-8")

    groups = scan_directory(tmp_path)
    assert [(g.name, g.directory.name) for g in groups] == [("Strings", "a"), ("Strings", "b")]


def test_exclude_patterns_prune_directories_and_files(tmp_path: Path) -> None:
    for rel in ("Strings.resx", "bin/Debug/Strings.resx", "Legacy.resx", "src/Forms.resx"):
        path: Path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(SIMPLE_DOC, encoding="utf-8")

    groups = scan_directory(tmp_path, exclude_patterns=["bin/", "Legacy.resx"])

    found = sorted(f.path.relative_to(tmp_path).as_posix() for g in groups for f in g.files)
    assert found == ["Strings.resx", "src/Forms.resx"]


def test_load_group_merges_rows(tmp_path: Path) -> None:
    (tmp_path / "Strings.resx").write_text(_doc(B="b", A="a"), encoding="utf-8")
    (tmp_path / "Strings.fr.resx").write_text(_doc(A="a-fr", C="c-fr"), encoding="utf-8")

    (group,) = scan_directory(tmp_path)
    rows = load_group(group.files)

    assert rows == [
        RowData("A", {"default": "a", "fr": "a-fr"}),
        RowData("B", {"default": "b"}),
        RowData("C", {"fr": "c-fr"}),
    ]


def test_load_group_skips_unreadable_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    (tmp_path / "Strings.resx").write_text(_doc(A="a"), encoding="utf-8")
    (tmp_path / "Strings.fr.resx").write_text("<root><data name='A'>", encoding="utf-8")

    (group,) = scan_directory(tmp_path)
    rows = load_group(group.files)

    assert rows == [RowData("A", {"default": "a"})]
    assert "Skipping" in caplog.text

# topmark:header:start
#
#   project      : ResxEdit
#   file         : bundles.py
#   file_relpath : src/resxedit/bundles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discovery and merging of localized resource bundles.

A bundle (group) is the set of ``.resx`` files in one directory that share a
base name: ``Strings.resx`` (the default language), ``Strings.fr.resx``,
``Strings.zh-Hans.resx`` and so on. `scan_directory` finds the groups under a
tree and `load_group` merges a group into one row per key.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from resxedit.config.logging import get_logger
from resxedit.constants import DEFAULT_LANGUAGE, MAX_LANGUAGE_CODE_LENGTH, RESX_SUFFIX
from resxedit.core.assembler import read_document
from resxedit.engine import parse
from resxedit.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)


@dataclass(frozen=True)
class ResxFile:
    """One file of a group.

    Attributes:
        path (Path): Location of the file.
        language (str): Language label (``default`` for the neutral file).
    """

    path: Path
    language: str


@dataclass
class ResxGroup:
    """Files sharing a base name in one directory."""

    name: str
    directory: Path
    files: list[ResxFile] = field(default_factory=lambda: [])

    @property
    def languages(self) -> list[str]:
        """Language labels in file order."""
        return [f.language for f in self.files]


@dataclass(frozen=True)
class RowData:
    """One key of a group with its value per language (missing languages are absent)."""

    key: str
    values: dict[str, str]


def split_language(stem: str, default_language: str = DEFAULT_LANGUAGE) -> tuple[str, str]:
    """Split a file stem into ``(group name, language)``.

    The last dot-separated segment is taken as the language when it is short
    and starts with an ASCII letter; otherwise the whole stem is the name.

    Args:
        stem (str): File name without the ``.resx`` suffix.
        default_language (str): Label used when there is no language segment.

    Returns:
        tuple[str, str]: Group name and language label.
    """
    name, sep, candidate = stem.rpartition(".")
    if (
        sep
        and candidate
        and len(candidate) <= MAX_LANGUAGE_CODE_LENGTH
        and candidate[0].isascii()
        and candidate[0].isalpha()
    ):
        return name, candidate
    return stem, default_language


def _rel_for_match(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _iter_resx_files(root: Path, spec: PathSpec | None) -> Iterable[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        if spec is not None:
            # Prune excluded directories so their contents are never visited.
            dirnames[:] = [
                d for d in dirnames if not spec.match_file(_rel_for_match(current / d, root) + "/")
            ]
        dirnames.sort()
        for filename in sorted(filenames):
            if not filename.lower().endswith(RESX_SUFFIX):
                continue
            path: Path = current / filename
            if spec is not None and spec.match_file(_rel_for_match(path, root)):
                logger.trace("excluded: %s", path)
                continue
            yield path


def _file_sort_key(f: ResxFile, default_language: str) -> tuple[bool, str]:
    return (f.language != default_language, f.language)


def scan_directory(
    root: Path,
    *,
    exclude_patterns: Sequence[str] = (),
    default_language: str = DEFAULT_LANGUAGE,
) -> list[ResxGroup]:
    """Find every resource group under ``root``.

    Args:
        root (Path): Directory to walk recursively.
        exclude_patterns (Sequence[str]): Gitignore-style patterns relative to ``root``.
        default_language (str): Label for files without a language segment.

    Returns:
        list[ResxGroup]: Groups sorted by name, each with the default-language
        file first and the others sorted by language.
    """
    spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, list(exclude_patterns))
        if exclude_patterns
        else None
    )
    groups: dict[tuple[Path, str], ResxGroup] = {}
    for path in _iter_resx_files(root, spec):
        name, language = split_language(path.name[: -len(RESX_SUFFIX)], default_language)
        group: ResxGroup = groups.setdefault(
            (path.parent, name), ResxGroup(name=name, directory=path.parent)
        )
        group.files.append(ResxFile(path=path, language=language))

    for group in groups.values():
        group.files.sort(key=lambda f: _file_sort_key(f, default_language))

    result: list[ResxGroup] = sorted(groups.values(), key=lambda g: (g.name, str(g.directory)))
    logger.debug("scan of %s found %d group(s)", root, len(result))
    return result


def load_group(files: Iterable[ResxFile]) -> list[RowData]:
    """Merge the files of a group into rows sorted by key.

    Files that cannot be read or parsed are logged and skipped so the rest of
    the group stays usable.
    """
    merged: dict[str, dict[str, str]] = {}
    for f in files:
        try:
            parsed: dict[str, str] = parse(read_document(f.path))
        except ParseError as exc:
            logger.warning("Skipping %s: %s", f.path, exc)
            continue
        for key, value in parsed.items():
            merged.setdefault(key, {})[f.language] = value
    return [RowData(key=key, values=merged[key]) for key in sorted(merged)]

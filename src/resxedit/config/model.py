# topmark:header:start
#
#   project      : ResxEdit
#   file         : model.py
#   file_relpath : src/resxedit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot passed to the file-level API.
    - `MutableConfig`: a mutable builder used while merging sources; it can be
      frozen into `Config` and thawed back for edits.

Precedence (lowest first): runtime defaults, ``[tool.resxedit]`` in the nearest
``pyproject.toml``, the nearest ``resxedit.toml``, explicit config files, then
overrides supplied by the caller (CLI flags or API arguments).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from resxedit.config.io import (
    discover_config_files,
    extract_resxedit_table,
    get_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    warn_unknown_keys,
)
from resxedit.config.keys import Toml
from resxedit.config.logging import get_logger
from resxedit.config.types import FileWriteStrategy
from resxedit.constants import DEFAULT_INDENT, DEFAULT_LANGUAGE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resxedit.config.logging import ResxLogger
    from resxedit.config.types import ArgsLike, TomlTable

logger: ResxLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ResxEdit.

    Attributes:
        default_indent (str): Indentation used for new entries when the document
            offers nothing to sample.
        write_strategy (FileWriteStrategy): How files are overwritten.
        default_language (str): Language label of files without a language suffix.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns skipped when scanning.
        config_files (tuple[Path, ...]): Sources merged into this snapshot.
    """

    default_indent: str = DEFAULT_INDENT
    write_strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC
    default_language: str = DEFAULT_LANGUAGE
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults as a frozen config."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            default_indent=self.default_indent,
            write_strategy=self.write_strategy,
            default_language=self.default_language,
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this config in the TOML schema (without provenance)."""
        strategy: str = self.write_strategy.name.lower()
        return {
            Toml.SECTION_FORMAT: {Toml.KEY_DEFAULT_INDENT: self.default_indent},
            Toml.SECTION_WRITER: {Toml.KEY_STRATEGY: strategy},
            Toml.SECTION_SCAN: {
                Toml.KEY_DEFAULT_LANGUAGE: self.default_language,
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `merge_with` only overlays values
    that are set. `freeze` fills anything still unset with the defaults.
    """

    default_indent: str | None = None
    write_strategy: FileWriteStrategy | None = None
    default_language: str | None = None
    exclude_patterns: list[str] | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> MutableConfig:
        """Build a layer from a ResxEdit TOML table.

        Args:
            data (TomlTable): The ResxEdit table (already extracted from pyproject).
            source (Path | None): Where the table came from, recorded for provenance.

        Returns:
            MutableConfig: The layer; unknown keys are reported and ignored.
        """
        warn_unknown_keys(data, str(source) if source else "<defaults>")
        fmt: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)
        writer: TomlTable = get_table_value(data, Toml.SECTION_WRITER)
        scan: TomlTable = get_table_value(data, Toml.SECTION_SCAN)

        strategy_name: str | None = get_string_value_or_none(writer, Toml.KEY_STRATEGY)
        strategy: FileWriteStrategy | None = FileWriteStrategy.from_name(strategy_name)
        if strategy_name is not None and strategy is None:
            logger.warning("Unknown writer strategy %r; ignoring", strategy_name)

        return cls(
            default_indent=get_string_value_or_none(fmt, Toml.KEY_DEFAULT_INDENT),
            write_strategy=strategy,
            default_language=get_string_value_or_none(scan, Toml.KEY_DEFAULT_LANGUAGE),
            exclude_patterns=get_list_value_or_none(scan, Toml.KEY_EXCLUDE_PATTERNS),
            config_files=[source] if source else [],
        )

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Load one config source (``resxedit.toml`` or ``pyproject.toml``)."""
        table: TomlTable = extract_resxedit_table(path, load_toml_dict(path))
        return cls.from_toml_dict(table, source=path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
        overrides: ArgsLike | None = None,
    ) -> MutableConfig:
        """Merge defaults, discovered files, explicit files and overrides.

        Args:
            start (Path | None): Directory (or file) where discovery starts; defaults to CWD.
            extra_config_files (Iterable[Path]): Explicit config files, highest file precedence.
            no_config (bool): Skip discovery of ``pyproject.toml`` / ``resxedit.toml``.
            overrides (ArgsLike | None): Final layer, keyed by `MutableConfig` field name.

        Returns:
            MutableConfig: The merged builder.
        """
        merged: MutableConfig = cls.from_defaults()
        sources: list[Path] = []
        if not no_config:
            sources.extend(discover_config_files(start or Path.cwd()))
        sources.extend(extra_config_files)
        for path in sources:
            merged = merged.merge_with(cls.from_file(path))
        if overrides:
            merged = merged.merge_with(cls.from_overrides(overrides))
        return merged

    @classmethod
    def from_overrides(cls, args: ArgsLike) -> MutableConfig:
        """Build a layer from caller-supplied overrides (unknown names are ignored)."""
        strategy = args.get("write_strategy")
        if isinstance(strategy, str):
            strategy = FileWriteStrategy.from_name(strategy)
        patterns = args.get("exclude_patterns")
        return cls(
            default_indent=args.get("default_indent"),
            write_strategy=strategy,
            default_language=args.get("default_language"),
            exclude_patterns=list(patterns) if patterns else None,
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other``'s set values overlaid on this one.

        Exclude patterns accumulate rather than replace.
        """
        patterns: list[str] | None = self.exclude_patterns
        if other.exclude_patterns is not None:
            patterns = [*(patterns or []), *other.exclude_patterns]
        return MutableConfig(
            default_indent=(
                other.default_indent if other.default_indent is not None else self.default_indent
            ),
            write_strategy=other.write_strategy or self.write_strategy,
            default_language=other.default_language or self.default_language,
            exclude_patterns=patterns,
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset values with defaults."""
        return Config(
            default_indent=(
                self.default_indent if self.default_indent is not None else DEFAULT_INDENT
            ),
            write_strategy=self.write_strategy or FileWriteStrategy.ATOMIC,
            default_language=self.default_language or DEFAULT_LANGUAGE,
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns or [])),
            config_files=tuple(self.config_files),
        )

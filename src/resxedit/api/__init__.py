# topmark:header:start
#
#   project      : ResxEdit
#   file         : __init__.py
#   file_relpath : src/resxedit/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public ResxEdit file API (stable surface).

Each function reads one resource file, runs a single engine operation on its
bytes and writes the result back only when the content changed.

Configuration contract
----------------------
- ``config`` accepts a frozen [`resxedit.config.Config`][], a plain mapping in
  the TOML shape, or ``None``. With ``None`` the usual discovery runs from the
  file's directory (``pyproject.toml`` / ``resxedit.toml``).
- The configuration supplies the fallback indentation and the write strategy.

```python
from pathlib import Path

from resxedit import api

result = api.remove_file_entry(Path("Strings.resx"), "Obsolete")
ordinal = result.removed.get("Obsolete")
```

Notes:
    Malformed documents raise before anything is written, so a failed edit
    leaves the file untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from resxedit import engine
from resxedit.api.types import EditResult, Outcome
from resxedit.config.logging import get_logger
from resxedit.config.model import Config, MutableConfig
from resxedit.core.assembler import decode_document, read_document, write_document
from resxedit.core.mutator import InsertItem
from resxedit.utils.diff import unified_patch

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)

__all__: list[str] = [
    "EditResult",
    "InsertItem",
    "Outcome",
    "add_file_entry",
    "insert_file_entries",
    "insert_file_entry",
    "parse_file",
    "remove_file_entries",
    "remove_file_entry",
    "rename_file_key",
    "resolve_config",
    "update_file_value",
    "update_file_values",
]

ConfigLike = Config | Mapping[str, Any] | None


def resolve_config(config: ConfigLike, path: Path | None = None) -> Config:
    """Normalize the ``config`` argument of the public functions.

    Args:
        config (ConfigLike): Frozen config, TOML-shaped mapping, or None for discovery.
        path (Path | None): File being edited; discovery starts from its directory.

    Returns:
        Config: The frozen snapshot to run with.
    """
    if isinstance(config, Config):
        return config
    if config is None:
        start: Path | None = path.parent if path is not None else None
        return MutableConfig.load_merged(start=start).freeze()
    layer: MutableConfig = MutableConfig.from_toml_dict(dict(config))
    return MutableConfig.from_defaults().merge_with(layer).freeze()


def _transact(
    path: Path,
    edit: Callable[[bytes, str], tuple[bytes, dict[str, int]]],
    *,
    config: ConfigLike,
    apply: bool,
    diff: bool,
) -> EditResult:
    cfg: Config = resolve_config(config, path)
    original: bytes = read_document(path)
    updated, removed = edit(original, cfg.default_indent)

    if updated is original or updated == original:
        logger.debug("%s: unchanged", path)
        return EditResult(path, Outcome.UNCHANGED, original, original, removed)

    patch: str | None = None
    if diff:
        patch = unified_patch(
            decode_document(original)[0], decode_document(updated)[0], str(path)
        )

    if not apply:
        logger.info("%s: would change (dry run)", path)
        return EditResult(path, Outcome.WOULD_CHANGE, original, updated, removed, patch)

    write_document(path, updated, cfg.write_strategy)
    logger.info("%s: written", path)
    return EditResult(path, Outcome.CHANGED, original, updated, removed, patch)


def parse_file(path: Path) -> dict[str, str]:
    """Return the key to value mapping of a resource file.

    Raises:
        DocumentReadError: If the file cannot be read.
        MalformedDocumentError: If the content is not a well-formed document.
    """
    return engine.parse(read_document(path))


def update_file_value(
    path: Path,
    key: str,
    value: str,
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Set the value of ``key``; an absent key leaves the file unchanged."""
    return update_file_values(path, {key: value}, config=config, apply=apply, diff=diff)


def update_file_values(
    path: Path,
    updates: Mapping[str, str],
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Set the values of several keys in one pass."""
    return _transact(
        path,
        lambda data, indent: (engine.update_values(data, updates, default_indent=indent), {}),
        config=config,
        apply=apply,
        diff=diff,
    )


def rename_file_key(
    path: Path,
    old_key: str,
    new_key: str,
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Rename ``old_key`` to ``new_key``; an absent key leaves the file unchanged."""
    return _transact(
        path,
        lambda data, indent: (
            engine.rename_key(data, old_key, new_key, default_indent=indent),
            {},
        ),
        config=config,
        apply=apply,
        diff=diff,
    )


def insert_file_entry(
    path: Path,
    key: str,
    value: str,
    index: int,
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Insert an entry at ordinal ``index``."""
    return insert_file_entries(
        path, [InsertItem(key, value, index)], config=config, apply=apply, diff=diff
    )


def insert_file_entries(
    path: Path,
    items: Iterable[InsertItem],
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Insert several entries at their ordinals in one pass."""
    item_list: list[InsertItem] = list(items)
    return _transact(
        path,
        lambda data, indent: (engine.insert_entries(data, item_list, default_indent=indent), {}),
        config=config,
        apply=apply,
        diff=diff,
    )


def add_file_entry(
    path: Path,
    key: str,
    value: str = "",
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Append an entry.

    Raises:
        DuplicateKeyError: If the file already mentions ``name="key"``.
    """
    return _transact(
        path,
        lambda data, indent: (engine.add_entry(data, key, value, default_indent=indent), {}),
        config=config,
        apply=apply,
        diff=diff,
    )


def remove_file_entry(
    path: Path,
    key: str,
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Remove ``key``; its former ordinal is reported in ``result.removed``."""
    return remove_file_entries(path, [key], config=config, apply=apply, diff=diff)


def remove_file_entries(
    path: Path,
    keys: Iterable[str],
    *,
    config: ConfigLike = None,
    apply: bool = True,
    diff: bool = False,
) -> EditResult:
    """Remove several keys in one pass."""
    key_list: list[str] = list(keys)
    return _transact(
        path,
        lambda data, indent: engine.remove_entries(data, key_list, default_indent=indent),
        config=config,
        apply=apply,
        diff=diff,
    )

# topmark:header:start
#
#   project      : ResxEdit
#   file         : watcher.py
#   file_relpath : src/resxedit/watcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Change notifications for the resource files of one directory.

`GroupWatcher` wraps a watchdog observer. It watches a single directory
(non-recursively) and calls back once per filesystem event touching a
``.resx`` file. Only one directory is watched at a time: a new `watch` call
stops the previous observer first.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from resxedit.config.logging import get_logger
from resxedit.constants import RESX_SUFFIX

if TYPE_CHECKING:
    from watchdog.observers.api import BaseObserver

    from resxedit.config.logging import ResxLogger

logger: ResxLogger = get_logger(__name__)


@dataclass(frozen=True)
class ResxChange:
    """A change to a resource file.

    Attributes:
        event_type (str): watchdog event type (``created``, ``modified``, ``moved``, ...).
        path (Path): The ``.resx`` file concerned (the destination for moves).
    """

    event_type: str
    path: Path


ChangeCallback = Callable[[ResxChange], None]


def _as_str(path: str | bytes) -> str:
    return os.fsdecode(path)


class _ResxEventHandler(FileSystemEventHandler):
    def __init__(self, callback: ChangeCallback) -> None:
        self._callback: ChangeCallback = callback

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in ("opened", "closed", "closed_no_write"):
            return
        # Atomic saves show up as a move from a temporary file onto the target.
        candidates: list[str] = [_as_str(event.src_path)]
        dest: str | bytes = getattr(event, "dest_path", "")
        if dest:
            candidates.insert(0, _as_str(dest))
        for candidate in candidates:
            if candidate.lower().endswith(RESX_SUFFIX):
                logger.debug("%s: %s", event.event_type, candidate)
                self._callback(ResxChange(event.event_type, Path(candidate)))
                return


class GroupWatcher:
    """Owns at most one active observer on one directory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._observer: BaseObserver | None = None
        self._directory: Path | None = None

    @property
    def directory(self) -> Path | None:
        """The directory currently watched, if any."""
        return self._directory

    @property
    def active(self) -> bool:
        """Whether an observer is running."""
        return self._observer is not None

    def watch(self, directory: Path, callback: ChangeCallback) -> None:
        """Start watching ``directory``, replacing any previous watch.

        Args:
            directory (Path): Directory to observe (not its subdirectories).
            callback (ChangeCallback): Called from the observer thread per change.

        Raises:
            NotADirectoryError: If ``directory`` is not an existing directory.
        """
        if not directory.is_dir():
            raise NotADirectoryError(str(directory))
        with self._lock:
            self._stop_locked()
            observer: BaseObserver = Observer()
            observer.schedule(_ResxEventHandler(callback), str(directory), recursive=False)
            observer.start()
            self._observer = observer
            self._directory = directory
        logger.info("Watching %s", directory)

    def stop(self) -> None:
        """Stop the active observer, if any."""
        with self._lock:
            self._stop_locked()

    def _stop_locked(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        logger.debug("Stopped watching %s", self._directory)
        self._observer = None
        self._directory = None

    def __enter__(self) -> GroupWatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

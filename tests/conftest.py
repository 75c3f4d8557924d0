# topmark:header:start
#
#   project      : ResxEdit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ResxEdit test suite.

Sets up shared fixtures (resource files on disk, an isolated working
directory) and the logging configuration for test runs. Sample documents and
typed mark helpers live in `tests.helpers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import settings

from resxedit.config import logging
from tests.helpers import DESIGNER_DOC

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

# `nox -s property_test` selects the long profile.
settings.register_profile("long", max_examples=2000)


@pytest.fixture(autouse=True)
def silence_resxedit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("RESXEDIT_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE so failures come with the engine's trail."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def resx_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a resource file under ``tmp_path``.

    The factory takes the document text and optional ``name``, ``bom`` and
    ``newline`` arguments; ``newline="\\r\\n"`` converts LF line endings.
    """

    def _make(
        text: str = DESIGNER_DOC,
        *,
        name: str = "Strings.resx",
        bom: bool = False,
        newline: str = "\n",
    ) -> Path:
        path: Path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        body: bytes = text.replace("\n", newline).encode("utf-8")
        path.write_bytes((b"\xef\xbb\xbf" if bom else b"") + body)
        return path

    return _make


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory so no stray config is discovered."""
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd

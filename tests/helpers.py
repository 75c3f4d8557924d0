# topmark:header:start
#
#   project      : ResxEdit
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test helpers: typed marks, sample documents and config builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from resxedit.config import MutableConfig

if TYPE_CHECKING:
    from resxedit.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


# Two entries indented by two spaces, LF line endings, no trailing newline.
SIMPLE_DOC: str = (
    "<root>\n"
    '  <data name="Key1" xml:space="preserve"><value>Value1</value></data>\n'
    '  <data name="Key2" xml:space="preserve"><value>Value2</value></data>\n'
    "</root>"
)

# A designer-style table: declaration, comment, header, four-space nesting,
# an escaped value, a comment child and an empty value element.
DESIGNER_DOC: str = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<root>\n"
    "  <!-- schema omitted -->\n"
    '  <resheader name="resmimetype">\n'
    "    <value>text/microsoft-resx</value>\n"
    "  </resheader>\n"
    '  <data name="Greeting" xml:space="preserve">\n'
    "    <value>Hello</value>\n"
    "  </data>\n"
    '  <data name="Farewell" xml:space="preserve">\n'
    "    <value>Bye &amp; see you</value>\n"
    "    <comment>Shown on exit</comment>\n"
    "  </data>\n"
    '  <data name="Empty" xml:space="preserve">\n'
    "    <value />\n"
    "  </data>\n"
    "</root>\n"
)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and field overrides."""
    draft: MutableConfig = MutableConfig.from_defaults()
    return draft.merge_with(MutableConfig.from_overrides(overrides)).freeze()

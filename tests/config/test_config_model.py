# topmark:header:start
#
#   project      : ResxEdit
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config model: defaults, layering, freeze/thaw and TOML export."""

from __future__ import annotations

import logging

import pytest

from resxedit.config import Config, FileWriteStrategy, MutableConfig
from resxedit.constants import DEFAULT_INDENT, DEFAULT_LANGUAGE
from tests.helpers import make_config

pytestmark = pytest.mark.config


def test_defaults() -> None:
    cfg: Config = Config.from_defaults()
    assert cfg.default_indent == DEFAULT_INDENT
    assert cfg.write_strategy == FileWriteStrategy.ATOMIC
    assert cfg.default_language == DEFAULT_LANGUAGE
    assert cfg.exclude_patterns == ("bin/", "obj/")
    assert cfg.config_files == ()


def test_merge_overlays_only_set_values() -> None:
    base = MutableConfig(default_indent="\t", default_language="en")
    layer = MutableConfig(default_language="fr")
    merged = base.merge_with(layer)
    assert merged.default_indent == "\t"
    assert merged.default_language == "fr"


def test_merge_accumulates_exclude_patterns() -> None:
    merged = MutableConfig(exclude_patterns=["bin/"]).merge_with(
        MutableConfig(exclude_patterns=["bin/", "*.Designer.resx"])
    )
    assert merged.exclude_patterns == ["bin/", "bin/", "*.Designer.resx"]
    assert merged.freeze().exclude_patterns == ("bin/", "*.Designer.resx")


def test_empty_indent_is_a_real_value() -> None:
    merged = MutableConfig(default_indent="  ").merge_with(MutableConfig(default_indent=""))
    assert merged.freeze().default_indent == ""


def test_freeze_thaw_round_trip() -> None:
    cfg = make_config(default_indent="\t", write_strategy="in_place")
    assert cfg.write_strategy == FileWriteStrategy.IN_PLACE
    assert cfg.thaw().freeze() == cfg


def test_config_is_immutable() -> None:
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.default_indent = "\t"  # type: ignore[misc]


def test_from_toml_dict_reads_all_sections() -> None:
    layer = MutableConfig.from_toml_dict(
        {
            "format": {"default_indent": "  "},
            "writer": {"strategy": "IN_PLACE"},
            "scan": {"default_language": "en", "exclude_patterns": ["out/"]},
        }
    )
    assert layer.default_indent == "  "
    assert layer.write_strategy == FileWriteStrategy.IN_PLACE
    assert layer.default_language == "en"
    assert layer.exclude_patterns == ["out/"]


def test_from_toml_dict_ignores_bad_values(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    layer = MutableConfig.from_toml_dict(
        {
            "format": {"default_indent": 4},
            "writer": {"strategy": "sideways"},
            "scan": {"exclude_patterns": ["ok/", 3]},
            "colors": {"theme": "dark"},
        }
    )
    assert layer.default_indent is None
    assert layer.write_strategy is None
    assert layer.exclude_patterns == ["ok/"]
    assert "Unknown configuration key 'colors'" in caplog.text
    assert "Unknown writer strategy 'sideways'" in caplog.text


def test_from_overrides_accepts_names_and_members() -> None:
    assert (
        MutableConfig.from_overrides({"write_strategy": "atomic"}).write_strategy
        == FileWriteStrategy.ATOMIC
    )
    assert (
        MutableConfig.from_overrides({"write_strategy": FileWriteStrategy.IN_PLACE}).write_strategy
        == FileWriteStrategy.IN_PLACE
    )
    assert MutableConfig.from_overrides({"unrelated": 1}) == MutableConfig()


def test_to_toml_dict_round_trips() -> None:
    cfg = make_config(default_language="en", exclude_patterns=["x/"])
    again = MutableConfig.from_toml_dict(cfg.to_toml_dict()).freeze()
    assert again.default_language == "en"
    assert again.exclude_patterns == cfg.exclude_patterns

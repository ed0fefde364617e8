# topmark:header:start
#
#   project      : Tealeaf
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for configuration loading, validation and freeze/thaw."""

from __future__ import annotations

from pathlib import Path

import pytest

from tealeaf.config import Config, MutableConfig, StyleSpec, load_config
from tealeaf.config.keys import StyleSlot
from tealeaf.config.loaders import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
)
from tealeaf.config.model import parse_color
from tealeaf.config.paths import cache_dir, config_dir, config_file_path
from tealeaf.constants import DEFAULT_AUTO_UPDATE_INTERVAL_HOURS
from tealeaf.core.errors import ConfigError
from tests.conftest import parametrize


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.toml")

    assert not config.compact
    assert not config.use_pager
    assert not config.auto_update
    assert config.auto_update_interval_hours == DEFAULT_AUTO_UPDATE_INTERVAL_HOURS
    assert config.config_file is None
    assert config.style(StyleSlot.COMMAND_NAME) == StyleSpec(foreground="cyan", bold=True)


def test_default_discovery_uses_config_dir_override(tmp_path: Path) -> None:
    assert config_file_path() == tmp_path / "config" / "config.toml"
    assert cache_dir() == tmp_path / "cache"


def test_xdg_directories_are_used_without_override() -> None:
    env = {"XDG_CONFIG_HOME": "/xdg/config", "XDG_CACHE_HOME": "/xdg/cache"}
    assert config_dir(env) == Path("/xdg/config/tealeaf")
    assert cache_dir(env) == Path("/xdg/cache/tealeaf")


def test_file_values_override_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.toml",
        """
[display]
compact = true
use_pager = true

[updates]
auto_update = true
auto_update_interval_hours = 24

[directories]
custom_pages_dir = "my-pages"

[style.example_variable]
foreground = "magenta"
italic = true
""",
    )

    config = load_config(path)

    assert config.compact
    assert config.use_pager
    assert config.auto_update
    assert config.auto_update_interval_hours == 24
    assert config.custom_pages_dir == (tmp_path / "my-pages").resolve()
    assert config.config_file == path
    assert config.style(StyleSlot.EXAMPLE_VARIABLE) == StyleSpec(foreground="magenta", italic=True)
    # Untouched slots keep their defaults
    assert config.style(StyleSlot.EXAMPLE_TEXT) == StyleSpec(foreground="green")


def test_partial_file_keeps_other_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.toml", "[display]\ncompact = true\n")

    config = load_config(path)

    assert config.compact
    assert not config.use_pager
    assert config.auto_update_interval_hours == DEFAULT_AUTO_UPDATE_INTERVAL_HOURS


@parametrize(
    "text",
    [
        "[display]\ncompact = 'yes'\n",
        "[updates]\nauto_update_interval_hours = -1\n",
        "[updates]\nauto_update_interval_hours = true\n",
        "[style.command_name]\nforeground = 'chartreuse'\n",
        "[style.command_name]\nforeground = 300\n",
        "[style.command_name]\nbackground = [1, 2]\n",
        "[style.command_name]\nbold = 1\n",
        "[directories]\ncustom_pages_dir = 3\n",
        "display = 1\n",
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, text: str) -> None:
    path = _write(tmp_path / "config.toml", text)

    with pytest.raises(ConfigError):
        load_config(path)


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.toml", "[display\ncompact = true\n")

    with pytest.raises(ConfigError, match="Error decoding TOML"):
        load_toml_dict(path)


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.toml",
        "[style.command_name]\nblink = true\n\n[style.nonsense]\nbold = true\n",
    )

    config = load_config(path)

    assert config.style(StyleSlot.COMMAND_NAME) == StyleSpec()
    assert "nonsense" not in config.styles


@parametrize(
    ("value", "expected"),
    [
        ("Cyan", "cyan"),
        ("bright-red", "bright_red"),
        (208, 208),
        ([255, 128, 0], (255, 128, 0)),
    ],
)
def test_parse_color_accepts_names_indexes_and_rgb(value: object, expected: object) -> None:
    assert parse_color(value, where="style.x.foreground") == expected


def test_parse_color_rejects_booleans() -> None:
    with pytest.raises(ConfigError, match="style.x.foreground"):
        parse_color(True, where="style.x.foreground")


def test_freeze_and_thaw_round_trip() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    draft = config.thaw()
    draft.compact = True

    changed = draft.freeze()

    assert changed.compact
    assert not config.compact
    with pytest.raises(TypeError):
        changed.styles[StyleSlot.DESCRIPTION] = StyleSpec(bold=True)  # type: ignore[index]


def test_defaults_dict_is_a_fresh_copy() -> None:
    first = load_defaults_dict()
    first["display"]["compact"] = True
    assert load_defaults_dict()["display"]["compact"] is False


def test_seed_template_is_valid_and_matches_runtime_defaults(tmp_path: Path) -> None:
    text = load_default_config_template_toml_text()

    assert "topmark:header" not in text
    path = _write(tmp_path / "seed.toml", text)
    seeded = load_config(path)
    defaults = MutableConfig.from_defaults().freeze()
    assert seeded.compact == defaults.compact
    assert seeded.auto_update_interval_hours == defaults.auto_update_interval_hours
    assert dict(seeded.styles) == dict(defaults.styles)

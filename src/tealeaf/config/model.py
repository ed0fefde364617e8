# topmark:header:start
#
#   project      : Tealeaf
#   file         : model.py
#   file_relpath : src/tealeaf/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model.

This module defines:
    - `StyleSpec`: one style directive (colors and text attributes) for a
      page element.
    - `Config`: an immutable, request-scoped snapshot used by the renderer and
      the CLI.
    - `MutableConfig`: a mutable builder that layers a TOML table over the
      built-in defaults and freezes into `Config`.

Scope:
    - *In scope*: data shapes, validation of TOML values, freeze/thaw.
    - *Out of scope*: file I/O (see `tealeaf.config.loaders`) and directory
      discovery (see `tealeaf.config.paths`).

Validation:
    Values with the wrong type, unknown color names and out-of-range color
    values raise `ConfigError` naming the offending key. Unknown keys are
    ignored with a warning so that newer config files keep working.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from tealeaf.config.keys import StyleSlot, Toml
from tealeaf.config.loaders import load_defaults_dict, load_toml_dict
from tealeaf.config.logging import get_logger
from tealeaf.config.paths import abs_path_from, cache_dir, default_custom_pages_dir
from tealeaf.core.errors import ConfigError

if TYPE_CHECKING:
    from tealeaf.config.logging import TealeafLogger

logger: TealeafLogger = get_logger(__name__)

#: Color names understood by `click.style`.
COLOR_NAMES: frozenset[str] = frozenset(
    {
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "reset",
        "bright_black",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_white",
    }
)

# A color is a name, a 256-color index or an RGB triple
Color = Union[str, int, tuple[int, int, int]]

_STYLE_FLAGS: tuple[str, ...] = (
    Toml.KEY_BOLD,
    Toml.KEY_DIM,
    Toml.KEY_ITALIC,
    Toml.KEY_UNDERLINE,
)


def parse_color(value: object, *, where: str) -> Color:
    """Validate a TOML color value.

    Args:
        value (object): Raw TOML value.
        where (str): Dotted key used in error messages.

    Returns:
        Color: The normalized color (lowercase name, int, or RGB tuple).

    Raises:
        ConfigError: If the value is not a known color.
    """
    if isinstance(value, bool):
        raise ConfigError(f"{where}: expected a color, got a boolean")
    if isinstance(value, str):
        name: str = value.strip().lower().replace("-", "_")
        if name not in COLOR_NAMES:
            raise ConfigError(f"{where}: unknown color name {value!r}")
        return name
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ConfigError(f"{where}: 256-color index out of range: {value}")
        return value
    if isinstance(value, (list, tuple)) and len(value) == 3:
        channels: list[int] = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ConfigError(f"{where}: RGB channels must be integers in 0..255")
            channels.append(channel)
        return (channels[0], channels[1], channels[2])
    raise ConfigError(f"{where}: expected a color name, 0-255 index or [r, g, b], got {value!r}")


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """A style directive for one page element.

    Attributes:
        foreground (Color | None): Text color.
        background (Color | None): Background color.
        bold (bool): Bold text.
        dim (bool): Dimmed text.
        italic (bool): Italic text.
        underline (bool): Underlined text.
    """

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False

    @classmethod
    def from_toml(cls, table: Mapping[str, Any], *, slot: str) -> StyleSpec:
        """Build a spec from a ``[style.<slot>]`` table."""
        prefix: str = f"{Toml.SECTION_STYLE}.{slot}"
        kwargs: dict[str, Any] = {}
        for key, value in table.items():
            where: str = f"{prefix}.{key}"
            if key in (Toml.KEY_FOREGROUND, Toml.KEY_BACKGROUND):
                kwargs[key] = parse_color(value, where=where)
            elif key in _STYLE_FLAGS:
                if not isinstance(value, bool):
                    raise ConfigError(f"{where}: expected a boolean, got {value!r}")
                kwargs[key] = value
            else:
                logger.warning("Ignoring unknown style key %s", where)
        return cls(**kwargs)

    def click_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for `click.style`."""
        return {
            "fg": self.foreground,
            "bg": self.background,
            "bold": self.bold or None,
            "dim": self.dim or None,
            "italic": self.italic or None,
            "underline": self.underline or None,
        }


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value: Any = data.get(name, {})
    if not isinstance(value, Mapping):
        raise ConfigError(f"[{name}]: expected a table, got {type(value).__name__}")
    return value


def _bool(table: Mapping[str, Any], key: str, *, section: str, default: bool) -> bool:
    value: Any = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{section}.{key}: expected a boolean, got {value!r}")
    return value


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Tealeaf.

    Produced by `MutableConfig.freeze`; use `Config.thaw` to derive an edited
    copy.

    Attributes:
        compact (bool): Remove blank separator lines from rendered pages.
        use_pager (bool): Route output through a pager.
        auto_update (bool): Refresh a stale cache automatically.
        auto_update_interval_hours (int): Cache age after which it is stale.
        cache_dir (Path): Cache root directory.
        custom_pages_dir (Path | None): Directory of ``.page``/``.patch`` files.
        styles (Mapping[str, StyleSpec]): Style directive per `StyleSlot`.
        config_file (Path | None): The file the config was loaded from, if any.
    """

    compact: bool
    use_pager: bool
    auto_update: bool
    auto_update_interval_hours: int
    cache_dir: Path
    custom_pages_dir: Path | None
    styles: Mapping[str, StyleSpec]
    config_file: Path | None = None

    def style(self, slot: str) -> StyleSpec:
        """Return the style for ``slot`` (plain when unset)."""
        return self.styles.get(slot, StyleSpec())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            compact=self.compact,
            use_pager=self.use_pager,
            auto_update=self.auto_update,
            auto_update_interval_hours=self.auto_update_interval_hours,
            cache_dir=self.cache_dir,
            custom_pages_dir=self.custom_pages_dir,
            styles=dict(self.styles),
            config_file=self.config_file,
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Start from `MutableConfig.from_defaults`, layer a TOML table with
    `MutableConfig.apply_toml`, apply CLI overrides by assignment, then
    `MutableConfig.freeze`.
    """

    compact: bool = False
    use_pager: bool = False
    auto_update: bool = False
    auto_update_interval_hours: int = 0
    cache_dir: Path = field(default_factory=cache_dir)
    custom_pages_dir: Path | None = field(default_factory=default_custom_pages_dir)
    styles: dict[str, StyleSpec] = field(default_factory=dict)
    config_file: Path | None = None

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        draft: MutableConfig = cls()
        draft.apply_toml(load_defaults_dict(), base_dir=Path.cwd())
        return draft

    @classmethod
    def load(cls, path: Path | None) -> MutableConfig:
        """Return defaults overlaid with the TOML file at ``path`` (if it exists).

        Raises:
            ConfigError: If the file exists but is unreadable or invalid.
        """
        draft: MutableConfig = cls.from_defaults()
        if path is not None and path.is_file():
            draft.apply_toml(load_toml_dict(path), base_dir=path.parent)
            draft.config_file = path
        elif path is not None:
            logger.debug("No config file at %s; using defaults", path)
        return draft

    def apply_toml(self, data: Mapping[str, Any], *, base_dir: Path) -> MutableConfig:
        """Overlay a parsed TOML table on this builder.

        Args:
            data (Mapping[str, Any]): Parsed TOML document.
            base_dir (Path): Directory against which relative paths resolve.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a value has the wrong type or an invalid color.
        """
        display = _section(data, Toml.SECTION_DISPLAY)
        self.compact = _bool(
            display, Toml.KEY_COMPACT, section=Toml.SECTION_DISPLAY, default=self.compact
        )
        self.use_pager = _bool(
            display, Toml.KEY_USE_PAGER, section=Toml.SECTION_DISPLAY, default=self.use_pager
        )

        updates = _section(data, Toml.SECTION_UPDATES)
        self.auto_update = _bool(
            updates, Toml.KEY_AUTO_UPDATE, section=Toml.SECTION_UPDATES, default=self.auto_update
        )
        interval: Any = updates.get(
            Toml.KEY_AUTO_UPDATE_INTERVAL_HOURS, self.auto_update_interval_hours
        )
        if isinstance(interval, bool) or not isinstance(interval, int) or interval < 0:
            raise ConfigError(
                f"{Toml.SECTION_UPDATES}.{Toml.KEY_AUTO_UPDATE_INTERVAL_HOURS}: "
                f"expected a non-negative integer, got {interval!r}"
            )
        self.auto_update_interval_hours = interval

        directories = _section(data, Toml.SECTION_DIRECTORIES)
        raw_dir: Any = directories.get(Toml.KEY_CUSTOM_PAGES_DIR)
        if raw_dir is not None:
            if not isinstance(raw_dir, str):
                raise ConfigError(
                    f"{Toml.SECTION_DIRECTORIES}.{Toml.KEY_CUSTOM_PAGES_DIR}: expected a path string"
                )
            self.custom_pages_dir = abs_path_from(base_dir, raw_dir)

        styles = _section(data, Toml.SECTION_STYLE)
        for slot, table in styles.items():
            if slot not in StyleSlot.ALL:
                logger.warning("Ignoring unknown style section [%s.%s]", Toml.SECTION_STYLE, slot)
                continue
            if not isinstance(table, Mapping):
                raise ConfigError(f"[{Toml.SECTION_STYLE}.{slot}]: expected a table")
            self.styles[slot] = StyleSpec.from_toml(table, slot=slot)
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot."""
        return Config(
            compact=self.compact,
            use_pager=self.use_pager,
            auto_update=self.auto_update,
            auto_update_interval_hours=self.auto_update_interval_hours,
            cache_dir=self.cache_dir,
            custom_pages_dir=self.custom_pages_dir,
            styles=MappingProxyType(dict(self.styles)),
            config_file=self.config_file,
        )


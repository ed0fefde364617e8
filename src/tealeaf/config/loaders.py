# topmark:header:start
#
#   project      : Tealeaf
#   file         : loaders.py
#   file_relpath : src/tealeaf/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Tealeaf configuration from:
- the packaged default TOML template, and
- the on-disk ``config.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tealeaf.config.keys import StyleSlot, Toml
from tealeaf.config.logging import get_logger
from tealeaf.constants import DEFAULT_AUTO_UPDATE_INTERVAL_HOURS
from tealeaf.core.errors import ConfigError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from tealeaf.config.logging import TealeafLogger

TomlTable = dict[str, Any]

logger: TealeafLogger = get_logger(__name__)

DEFAULT_TOML_CONFIG_PACKAGE: str = "tealeaf.config"
DEFAULT_TOML_CONFIG_NAME: str = "tealeaf-default.toml"
HEADER_END_MARKER: str = "# topmark:header:end"


def load_defaults_dict() -> TomlTable:
    """Return Tealeaf's **runtime defaults** as a Python dict.

    This function performs no I/O. The bundled ``tealeaf-default.toml`` is the
    annotated, human-facing version of the same values; runtime defaults live
    in code so Tealeaf works even if the packaged template is unreadable.

    Returns:
        A new TOML-table-compatible dict; callers may mutate it.
    """
    return {
        Toml.SECTION_DISPLAY: {
            Toml.KEY_COMPACT: False,
            Toml.KEY_USE_PAGER: False,
        },
        Toml.SECTION_UPDATES: {
            Toml.KEY_AUTO_UPDATE: False,
            Toml.KEY_AUTO_UPDATE_INTERVAL_HOURS: DEFAULT_AUTO_UPDATE_INTERVAL_HOURS,
        },
        Toml.SECTION_DIRECTORIES: {},
        Toml.SECTION_STYLE: {
            StyleSlot.COMMAND_NAME: {Toml.KEY_FOREGROUND: "cyan", Toml.KEY_BOLD: True},
            StyleSlot.DESCRIPTION: {},
            StyleSlot.EXAMPLE_TEXT: {Toml.KEY_FOREGROUND: "green"},
            StyleSlot.EXAMPLE_CODE: {Toml.KEY_FOREGROUND: "cyan"},
            StyleSlot.EXAMPLE_VARIABLE: {Toml.KEY_FOREGROUND: "cyan", Toml.KEY_UNDERLINE: True},
        },
    }


def load_default_config_template_toml_text() -> str:
    """Load the bundled, annotated default config template as text.

    The leading file header block is stripped so a seeded ``config.toml``
    starts at the actual template content. If the packaged template cannot be
    read, the runtime defaults are rendered instead.

    Returns:
        str: TOML document text.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return tomlkit.dumps(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == HEADER_END_MARKER:
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading config from {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    logger.debug("Loaded config from %s", path)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}

# topmark:header:start
#
#   project      : Tealeaf
#   file         : keys.py
#   file_relpath : src/tealeaf/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Tealeaf configuration.

This module defines the authoritative string constants used when reading and
writing ``config.toml``. Keys defined here represent *external configuration
API*: renaming or removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Tealeaf configuration.

    The ordering of constants mirrors ``tealeaf-default.toml``.
    """

    # [display]
    SECTION_DISPLAY: Final[str] = "display"

    KEY_COMPACT: Final[str] = "compact"
    KEY_USE_PAGER: Final[str] = "use_pager"

    # [updates]
    SECTION_UPDATES: Final[str] = "updates"

    KEY_AUTO_UPDATE: Final[str] = "auto_update"
    KEY_AUTO_UPDATE_INTERVAL_HOURS: Final[str] = "auto_update_interval_hours"

    # [directories]
    SECTION_DIRECTORIES: Final[str] = "directories"

    KEY_CUSTOM_PAGES_DIR: Final[str] = "custom_pages_dir"

    # [style.<slot>]
    SECTION_STYLE: Final[str] = "style"

    KEY_FOREGROUND: Final[str] = "foreground"
    KEY_BACKGROUND: Final[str] = "background"
    KEY_BOLD: Final[str] = "bold"
    KEY_DIM: Final[str] = "dim"
    KEY_ITALIC: Final[str] = "italic"
    KEY_UNDERLINE: Final[str] = "underline"


class StyleSlot:
    """Names of the styled page elements (sub-tables of ``[style]``)."""

    COMMAND_NAME: Final[str] = "command_name"
    DESCRIPTION: Final[str] = "description"
    EXAMPLE_TEXT: Final[str] = "example_text"
    EXAMPLE_CODE: Final[str] = "example_code"
    EXAMPLE_VARIABLE: Final[str] = "example_variable"

    ALL: Final[tuple[str, ...]] = (
        COMMAND_NAME,
        DESCRIPTION,
        EXAMPLE_TEXT,
        EXAMPLE_CODE,
        EXAMPLE_VARIABLE,
    )

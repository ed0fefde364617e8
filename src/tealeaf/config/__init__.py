# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tealeaf configuration.

Public surface re-exported here:
    - `Config` / `MutableConfig`: immutable runtime snapshot and its builder.
    - `StyleSpec`: one style directive.
    - `load_config`: defaults overlaid with ``config.toml``.

Logging helpers live in `tealeaf.config.logging`; directory discovery in
`tealeaf.config.paths`.
"""

from __future__ import annotations

from pathlib import Path

from tealeaf.config.model import Config, MutableConfig, StyleSpec
from tealeaf.config.paths import config_file_path


def load_config(path: Path | None = None) -> Config:
    """Load the effective configuration.

    Args:
        path (Path | None): Config file to read; defaults to the discovered
            ``config.toml``. A missing file yields the built-in defaults.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    return MutableConfig.load(path if path is not None else config_file_path()).freeze()


__all__ = [
    "Config",
    "MutableConfig",
    "StyleSpec",
    "load_config",
]

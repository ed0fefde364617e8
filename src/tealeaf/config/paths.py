# topmark:header:start
#
#   project      : Tealeaf
#   file         : paths.py
#   file_relpath : src/tealeaf/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for locating Tealeaf's directories.

Resolution order for each directory:

1. An explicit environment override (``TEALEAF_CONFIG_DIR`` /
   ``TEALEAF_CACHE_DIR``).
2. The XDG base directory (``$XDG_CONFIG_HOME`` / ``$XDG_CACHE_HOME``) joined
   with ``tealeaf``.
3. ``~/.config/tealeaf`` / ``~/.cache/tealeaf``.

These helpers do no I/O beyond reading the environment and expanding ``~``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from tealeaf.config.logging import get_logger
from tealeaf.constants import (
    APP_DIR_NAME,
    CONFIG_FILE_NAME,
    CUSTOM_PAGES_DIR_NAME,
    ENV_CACHE_DIR,
    ENV_CONFIG_DIR,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

    from tealeaf.config.logging import TealeafLogger

logger: TealeafLogger = get_logger(__name__)


def abs_path_from(base: Path, raw: str | PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw).expanduser()
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


def _xdg_dir(
    env: Mapping[str, str],
    override_var: str,
    xdg_var: str,
    fallback: str,
) -> Path:
    override: str | None = env.get(override_var)
    if override:
        logger.debug("Using %s=%s", override_var, override)
        return Path(override).expanduser()
    base: str | None = env.get(xdg_var)
    root: Path = Path(base).expanduser() if base else Path.home() / fallback
    return root / APP_DIR_NAME


def config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the configuration directory."""
    environ: Mapping[str, str] = env if env is not None else os.environ
    return _xdg_dir(environ, ENV_CONFIG_DIR, "XDG_CONFIG_HOME", ".config")


def cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the page cache root directory."""
    environ: Mapping[str, str] = env if env is not None else os.environ
    return _xdg_dir(environ, ENV_CACHE_DIR, "XDG_CACHE_HOME", ".cache")


def config_file_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the path of ``config.toml``."""
    return config_dir(env) / CONFIG_FILE_NAME


def default_custom_pages_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the custom pages directory used when the config names none."""
    return config_dir(env) / CUSTOM_PAGES_DIR_NAME

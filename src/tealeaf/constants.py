# topmark:header:start
#
#   project      : Tealeaf
#   file         : constants.py
#   file_relpath : src/tealeaf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tealeaf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TEALEAF_VERSION: str = get_version("tealeaf")

# Environment variables consulted for directory and logging overrides
ENV_CONFIG_DIR: str = "TEALEAF_CONFIG_DIR"
ENV_CACHE_DIR: str = "TEALEAF_CACHE_DIR"
ENV_LOG_LEVEL: str = "TEALEAF_LOG_LEVEL"

APP_DIR_NAME: str = "tealeaf"
CONFIG_FILE_NAME: str = "config.toml"
CUSTOM_PAGES_DIR_NAME: str = "pages"

# Cache layout: <cache_root>/pages/<platform>/<command>.md
PAGES_DIR_NAME: str = "pages"
PAGE_SUFFIX: str = ".md"
OVERRIDE_SUFFIX: str = ".page"
PATCH_SUFFIX: str = ".patch"

COMMON_PLATFORM: str = "common"

ARCHIVE_URL: str = "https://tldr.sh/assets/tldr.zip"
ARCHIVE_TIMEOUT: float = 30.0

# One month, matching the upstream tldr clients
DEFAULT_AUTO_UPDATE_INTERVAL_HOURS: int = 720

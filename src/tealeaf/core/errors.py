# topmark:header:start
#
#   project      : Tealeaf
#   file         : errors.py
#   file_relpath : src/tealeaf/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the Tealeaf core.

These exceptions are framework-agnostic: the page resolver, the renderer, the
cache and the config loader raise them, and the CLI layer translates them into
`click.ClickException` subclasses with a matching exit code
(see `tealeaf.cli.errors`).

Taxonomy:
    - `PageNotFoundError`: no resolvable page for a request (an absence, not an
      I/O failure).
    - `PageReadError`: a page file could not be opened, read or decoded.
    - `PageWriteError`: the output sink rejected a write or flush. Partial
      output may already be visible to the user.
    - `ConfigError`: the configuration file is malformed.
    - `CacheError`: the page cache is missing or could not be updated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TealeafError(Exception):
    """Base class for all Tealeaf domain errors."""


class PageNotFoundError(TealeafError):
    """Raised when no page exists for the requested command and platform.

    Attributes:
        command (str): The normalized command name that was looked up.
        platform (str): The platform that was searched first.
    """

    def __init__(self, command: str, platform: str) -> None:
        self.command = command
        self.platform = platform
        super().__init__(f"Page `{command}` not found in cache (platform: {platform}).")


class PageReadError(TealeafError):
    """Raised when a page file cannot be opened, read or decoded.

    Attributes:
        path (Path): The file that failed.
    """

    def __init__(self, path: Path, reason: object) -> None:
        self.path = path
        super().__init__(f"Could not read page file {path}: {reason}")


class PageWriteError(TealeafError):
    """Raised when writing to or flushing the output sink fails."""


class ConfigError(TealeafError):
    """Raised for a missing, unreadable or malformed configuration."""


class CacheError(TealeafError):
    """Raised when the page cache is missing or cannot be updated."""

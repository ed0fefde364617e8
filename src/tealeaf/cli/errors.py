# topmark:header:start
#
#   project      : Tealeaf
#   file         : errors.py
#   file_relpath : src/tealeaf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Tealeaf CLI.

Usage:
    Commands run core operations inside `translate_errors()`, which turns
    domain exceptions from `tealeaf.core.errors` into the `TealeafCliError`
    subclass carrying the matching exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from tealeaf.core.errors import (
    CacheError,
    ConfigError,
    PageNotFoundError,
    PageReadError,
    PageWriteError,
    TealeafError,
)
from tealeaf.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator


class TealeafCliError(click.ClickException):
    """Base class for all Tealeaf CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(self.format_message())
            return
        super().show(file)


class TealeafUsageError(TealeafCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TealeafConfigError(TealeafCliError):
    """Error for configuration errors (invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TealeafPageNotFoundError(TealeafCliError):
    """Error when no page exists for the request."""

    exit_code = ExitCode.PAGE_NOT_FOUND


class TealeafCacheError(TealeafCliError):
    """Error when the cache is missing or cannot be updated."""

    exit_code = ExitCode.CACHE_UNAVAILABLE


class TealeafIOError(TealeafCliError):
    """Error for failures reading pages or writing output."""

    exit_code = ExitCode.IO_ERROR


# Most specific first: the first matching domain class wins
_ERROR_MAP: tuple[tuple[type[TealeafError], type[TealeafCliError]], ...] = (
    (PageNotFoundError, TealeafPageNotFoundError),
    (PageReadError, TealeafIOError),
    (PageWriteError, TealeafIOError),
    (ConfigError, TealeafConfigError),
    (CacheError, TealeafCacheError),
)


def cli_error_for(exc: TealeafError) -> TealeafCliError:
    """Return the CLI exception matching a domain exception."""
    for domain_type, cli_type in _ERROR_MAP:
        if isinstance(exc, domain_type):
            return cli_type(str(exc))
    return TealeafCliError(str(exc))


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise domain exceptions as CLI exceptions with exit codes."""
    try:
        yield
    except TealeafError as exc:
        raise cli_error_for(exc) from exc

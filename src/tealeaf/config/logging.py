# topmark:header:start
#
#   project      : Tealeaf
#   file         : logging.py
#   file_relpath : src/tealeaf/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Tealeaf logging with TRACE logging.

This module extends the standard logging module with Tealeaf-specific features,
including a custom TRACE level, a specialized logger class, and colored output
formatting. Log records go to stderr so they never mix with a rendered page.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

from tealeaf.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TealeafLogger(logging.Logger):
    """Custom logger class for Tealeaf with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TealeafLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Severity floor -> click.style keyword arguments, checked from the top down
_LEVEL_STYLES: tuple[tuple[int, dict[str, object]], ...] = (
    (logging.CRITICAL, {"fg": "bright_red"}),
    (logging.ERROR, {"fg": "red"}),
    (logging.WARNING, {"fg": "yellow"}),
    (logging.INFO, {"fg": "green"}),
    (logging.DEBUG, {"fg": "bright_black"}),
    (TRACE_LEVEL, {"fg": "blue"}),
)


class StyledFormatter(logging.Formatter):
    """Formatter that colors log records based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        message = super().format(record)
        for floor, style in _LEVEL_STYLES:
            if record.levelno >= floor:
                return click.style(message, **style)  # type: ignore[arg-type]
        # Fallback color for unknown or lower-than-TRACE levels
        return click.style(message, fg="red", dim=True)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors TEALEAF_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if val:
        v = val.strip().upper()
        if v.isdigit():
            return int(v)
        name_to_level = {
            "TRACE": TRACE_LEVEL,
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "WARN": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
            "FATAL": logging.CRITICAL,
            "NOTSET": logging.NOTSET,
        }
        return name_to_level.get(v)
    return None


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, environment variables are consulted via
    `resolve_env_log_level`. Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Use detailed logging format below INFO, simpler otherwise
    formatter = StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> TealeafLogger:
    """Retrieve a TealeafLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TealeafLogger: A TealeafLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("TealeafLogger", logger)

# topmark:header:start
#
#   project      : Tealeaf
#   file         : options.py
#   file_relpath : src/tealeaf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Tealeaf CLI.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so the command body can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from tealeaf.cli.errors import TealeafUsageError
from tealeaf.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override: Parsed `ColorMode` from ``--color``; ``None``
            means “not provided”.
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def resolve_verbosity(verbose_count: int, quiet: bool) -> int:
    """Resolve the logging level from ``-v`` count and ``--quiet``.

    Raises:
        TealeafUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        ``--quiet`` sets ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet:
        raise TealeafUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` (counted) and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=False,
        help="Suppress informational messages such as cache warnings.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value.lower()) if value else None,
        help="Color the output: auto (default), always or never.",
    )(f)
    f = click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable color output (same as --color=never).",
    )(f)
    return f

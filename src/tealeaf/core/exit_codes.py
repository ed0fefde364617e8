# topmark:header:start
#
#   project      : Tealeaf
#   file         : exit_codes.py
#   file_relpath : src/tealeaf/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Tealeaf CLI.

Tealeaf aligns with the BSD `sysexits` convention where practical, so that
shell scripts wrapping `tealeaf` can tell a missing page apart from an I/O
failure or a broken configuration file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Tealeaf CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        PAGE_NOT_FOUND: No page exists for the request. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CACHE_UNAVAILABLE: The page cache is missing or could not be updated.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: Error reading a page or writing the output. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (invalid/malformed config). Mirrors
            BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    PAGE_NOT_FOUND = 66  # EX_NOINPUT
    CACHE_UNAVAILABLE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255

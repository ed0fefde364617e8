# topmark:header:start
#
#   project      : Tealeaf
#   file         : __main__.py
#   file_relpath : src/tealeaf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Tealeaf via ``python -m tealeaf``.

It delegates directly to :func:`tealeaf.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Tealeaf is launched.

Examples:
    Render the ``tar`` page using the module interface::

        python -m tealeaf tar
"""

from __future__ import annotations

from tealeaf.cli.main import cli

if __name__ == "__main__":
    cli()

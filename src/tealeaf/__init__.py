# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tealeaf package.

Tealeaf renders tldr-style command reference pages to the terminal. It resolves
a page from a local cache (honoring user override and patch files), classifies
the page's markdown lines into typed tokens, and writes them to a styled
output stream through the `tealeaf` Click command.
"""

from __future__ import annotations

# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/cache/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Local page cache and its archive updater."""

from __future__ import annotations

from tealeaf.cache.store import PageCache
from tealeaf.cache.updater import ArchiveUpdater, CacheUpdater, extract_pages

__all__ = [
    "ArchiveUpdater",
    "CacheUpdater",
    "PageCache",
    "extract_pages",
]

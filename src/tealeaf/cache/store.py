# topmark:header:start
#
#   project      : Tealeaf
#   file         : store.py
#   file_relpath : src/tealeaf/cache/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Local page cache.

Layout::

    <cache_root>/
        pages/
            common/<command>.md
            linux/<command>.md
            ...

The cache root's modification time is the cache's age: the updater touches it
after every successful update.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tealeaf.config.logging import get_logger
from tealeaf.constants import (
    COMMON_PLATFORM,
    OVERRIDE_SUFFIX,
    PAGE_SUFFIX,
    PAGES_DIR_NAME,
)
from tealeaf.core.errors import CacheError

if TYPE_CHECKING:
    from tealeaf.config.logging import TealeafLogger

logger: TealeafLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PageCache:
    """Handle on the cache directory.

    Attributes:
        root (Path): Cache root directory.
    """

    root: Path

    @property
    def pages_dir(self) -> Path:
        """Directory holding one sub-directory per platform."""
        return self.root / PAGES_DIR_NAME

    def exists(self) -> bool:
        """Return True if the cache has been populated."""
        return self.pages_dir.is_dir()

    def mtime(self) -> float:
        """Return the cache root modification time.

        Raises:
            CacheError: If the cache does not exist.
        """
        try:
            return self.root.stat().st_mtime
        except OSError as exc:
            raise CacheError(f"Cannot stat cache directory {self.root}: {exc}") from exc

    def touch(self) -> None:
        """Mark the cache as freshly updated."""
        os.utime(self.root)

    def list_pages(self, platform: str, custom_pages_dir: Path | None = None) -> list[str]:
        """Return the names of pages available for ``platform``.

        Pages from ``common`` and custom override pages are included; names
        are de-duplicated and sorted.

        Args:
            platform (str): Platform to list (``common`` is always included).
            custom_pages_dir (Path | None): Directory of ``.page`` overrides.

        Returns:
            list[str]: Sorted page names.
        """
        names: set[str] = set()
        for name in dict.fromkeys((platform, COMMON_PLATFORM)):
            directory: Path = self.pages_dir / name
            if directory.is_dir():
                names.update(p.stem for p in directory.glob(f"*{PAGE_SUFFIX}") if p.is_file())
        if custom_pages_dir is not None and custom_pages_dir.is_dir():
            names.update(
                p.stem for p in custom_pages_dir.glob(f"*{OVERRIDE_SUFFIX}") if p.is_file()
            )
        return sorted(names)

    def clear(self) -> bool:
        """Delete the cache directory.

        Returns:
            bool: False if there was nothing to delete.

        Raises:
            CacheError: If the directory exists but cannot be removed.
        """
        if not self.root.exists():
            logger.debug("No cache to clear at %s", self.root)
            return False
        try:
            shutil.rmtree(self.root)
        except OSError as exc:
            raise CacheError(f"Could not delete cache directory {self.root}: {exc}") from exc
        logger.info("Cleared cache at %s", self.root)
        return True

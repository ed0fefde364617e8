# topmark:header:start
#
#   project      : Tealeaf
#   file         : updater.py
#   file_relpath : src/tealeaf/cache/updater.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Download and extract the tldr-pages archive into the local cache.

The updater performs one HTTPS GET of a zip archive and extracts the English
``pages/`` tree (``pages/<platform>/<command>.md``). Translated trees
(``pages.de/`` etc.) are skipped. Archives wrapped in a single top-level
directory (``tldr-main/pages/...``) are accepted too.

Extraction happens in a scratch directory next to the cache; the previous
``pages/`` directory is only replaced once the new tree is complete.

Example:
    >>> from tealeaf.cache import ArchiveUpdater, PageCache
    >>> ArchiveUpdater().update(PageCache(Path("~/.cache/tealeaf")))  # doctest: +SKIP
    3712
"""

from __future__ import annotations

import io
import shutil
import tempfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Protocol

import requests

from tealeaf.config.logging import get_logger
from tealeaf.constants import ARCHIVE_TIMEOUT, ARCHIVE_URL, PAGE_SUFFIX, PAGES_DIR_NAME
from tealeaf.core.errors import CacheError

if TYPE_CHECKING:
    from tealeaf.cache.store import PageCache
    from tealeaf.config.logging import TealeafLogger

logger: TealeafLogger = get_logger(__name__)


class CacheUpdater(Protocol):
    """Anything able to (re)populate a `PageCache`."""

    def update(self, cache: PageCache) -> int:
        """Populate ``cache`` and return the number of pages installed."""
        ...


def _page_member_path(name: str) -> PurePosixPath | None:
    """Return ``<platform>/<command>.md`` for an English page entry, else None."""
    parts: tuple[str, ...] = PurePosixPath(name).parts
    if not parts or ".." in parts or parts[0] in ("/", ""):
        return None
    # Accept "pages/..." and "<wrapper>/pages/..."
    for offset in (0, 1):
        if len(parts) == offset + 3 and parts[offset] == PAGES_DIR_NAME:
            platform, filename = parts[offset + 1], parts[offset + 2]
            if filename.endswith(PAGE_SUFFIX):
                return PurePosixPath(platform, filename)
    return None


def extract_pages(data: bytes, destination: Path) -> int:
    """Extract the English pages of a zip archive into ``destination``.

    Args:
        data (bytes): The zip archive.
        destination (Path): Directory that receives ``<platform>/<command>.md``.

    Returns:
        int: The number of pages extracted.

    Raises:
        CacheError: If the archive is corrupt or holds no pages.
    """
    count: int = 0
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                rel: PurePosixPath | None = _page_member_path(info.filename)
                if rel is None:
                    continue
                target: Path = destination.joinpath(*rel.parts)
                target.parent.mkdir(parents=True, exist_ok=True)
                with archive.open(info) as src, target.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
                count += 1
    except zipfile.BadZipFile as exc:
        raise CacheError(f"Downloaded archive is not a valid zip file: {exc}") from exc
    if count == 0:
        raise CacheError("Downloaded archive contains no pages.")
    return count


class ArchiveUpdater:
    """Populate the cache from the tldr-pages zip archive.

    Args:
        url (str): Archive URL.
        session (requests.Session | None): Session to reuse; a new one is
            created by default.
        timeout (float): Per-request timeout in seconds.

    The updater does not retry failed downloads.
    """

    def __init__(
        self,
        url: str = ARCHIVE_URL,
        *,
        session: requests.Session | None = None,
        timeout: float = ARCHIVE_TIMEOUT,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def download(self) -> bytes:
        """Fetch the archive.

        Raises:
            CacheError: On network errors or a non-success HTTP status.
        """
        logger.info("Downloading %s", self.url)
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise CacheError(f"Could not download pages archive from {self.url}: {exc}") from exc
        return response.content

    def update(self, cache: PageCache) -> int:
        """Download the archive and replace the cached pages.

        Args:
            cache (PageCache): Cache to populate.

        Returns:
            int: The number of pages installed.

        Raises:
            CacheError: If the download, extraction or swap fails.
        """
        data: bytes = self.download()
        try:
            cache.root.mkdir(parents=True, exist_ok=True)
            with tempfile.TemporaryDirectory(dir=cache.root, prefix=".update-") as scratch:
                staged: Path = Path(scratch) / PAGES_DIR_NAME
                count: int = extract_pages(data, staged)
                retired: Path = Path(scratch) / "retired"
                if cache.pages_dir.exists():
                    cache.pages_dir.rename(retired)
                staged.rename(cache.pages_dir)
            cache.touch()
        except OSError as exc:
            raise CacheError(f"Could not install pages into {cache.root}: {exc}") from exc
        logger.info("Installed %d pages into %s", count, cache.pages_dir)
        return count

# topmark:header:start
#
#   project      : Tealeaf
#   file         : resolver.py
#   file_relpath : src/tealeaf/pages/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a page request to the file(s) that make up the page.

A page is looked up in three places:

- ``<custom_pages_dir>/<command>.page``: a user-authored *override*. When it
  exists it replaces the cached page entirely, and no patch is applied.
- ``<cache_root>/pages/<platform>/<command>.md``, falling back to
  ``<cache_root>/pages/common/<command>.md``: the cached *main* page. Its
  absence fails the lookup with `PageNotFoundError`.
- ``<custom_pages_dir>/<command>.patch``: a user-authored *patch*, appended
  after the main page when present.

A patch without a main page is never consulted: the missing main page fails the
lookup before the patch check runs. An override is a replacement, a patch is an
addition.

The resolver only checks for file existence; it never opens a file.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tealeaf.config.logging import get_logger
from tealeaf.constants import (
    COMMON_PLATFORM,
    OVERRIDE_SUFFIX,
    PAGE_SUFFIX,
    PAGES_DIR_NAME,
    PATCH_SUFFIX,
)
from tealeaf.core.errors import PageNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tealeaf.config.logging import TealeafLogger

logger: TealeafLogger = get_logger(__name__)

#: Platforms published by the tldr-pages project (besides ``common``).
KNOWN_PLATFORMS: tuple[str, ...] = (
    "android",
    "freebsd",
    "linux",
    "netbsd",
    "openbsd",
    "osx",
    "sunos",
    "windows",
)

# sys.platform prefix -> tldr platform directory
_SYS_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("linux", "linux"),
    ("darwin", "osx"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("sunos", "sunos"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
)


def detect_platform(sys_platform: str | None = None) -> str:
    """Map the running operating system to a tldr platform name.

    Args:
        sys_platform (str | None): Override for `sys.platform` (testing aid).

    Returns:
        str: A platform directory name; ``common`` when the OS is unknown.
    """
    value: str = sys_platform if sys_platform is not None else sys.platform
    for prefix, platform in _SYS_PLATFORMS:
        if value.startswith(prefix):
            return platform
    return COMMON_PLATFORM


def normalize_command(words: Iterable[str]) -> str:
    """Join a possibly multi-word command into its page name.

    ``("git", "checkout")`` becomes ``"git-checkout"``; names are lowercased
    because page files are.
    """
    return "-".join(w.strip() for w in words if w.strip()).lower()


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A request for one command's page.

    Attributes:
        command (str): Normalized page name (see `normalize_command`).
        platform (str): Platform searched first; ``common`` by default.
    """

    command: str
    platform: str = COMMON_PLATFORM


@dataclass(frozen=True, slots=True)
class ResolvedPage:
    """Ordered source files composing one logical page.

    Reading the files in order and concatenating their lines yields the page.

    Attributes:
        paths (tuple[Path, ...]): One or two absolute paths in read order.
        is_override (bool): True when ``paths`` holds a custom override page.
    """

    paths: tuple[Path, ...]
    is_override: bool = False

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    @property
    def main(self) -> Path:
        """Return the first (override or main cache) file."""
        return self.paths[0]

    @property
    def patch(self) -> Path | None:
        """Return the patch file, if one is appended."""
        return self.paths[1] if len(self.paths) > 1 else None


def page_path(cache_root: Path, platform: str, command: str) -> Path:
    """Return where the cached page for ``command`` on ``platform`` lives."""
    return cache_root / PAGES_DIR_NAME / platform / f"{command}{PAGE_SUFFIX}"


def find_main_page(command: str, platform: str, cache_root: Path) -> Path | None:
    """Return the cached main page, falling back to the ``common`` platform.

    Args:
        command (str): Normalized page name.
        platform (str): Platform searched first.
        cache_root (Path): Cache root directory.

    Returns:
        Path | None: The first existing candidate, or None.
    """
    candidates: list[str] = [platform]
    if platform != COMMON_PLATFORM:
        candidates.append(COMMON_PLATFORM)
    for candidate in candidates:
        path: Path = page_path(cache_root, candidate, command)
        logger.trace("Looking for page at %s", path)
        if path.is_file():
            return path.absolute()
    return None


def resolve_page(
    command: str,
    platform: str,
    cache_root: Path,
    custom_pages_dir: Path | None,
) -> ResolvedPage:
    """Determine which files constitute the page for ``command``.

    Args:
        command (str): Normalized page name.
        platform (str): Platform searched first (``common`` is the fallback).
        cache_root (Path): Cache root directory holding ``pages/``.
        custom_pages_dir (Path | None): Directory of user ``.page``/``.patch``
            files, or None when no custom pages are configured.

    Returns:
        ResolvedPage: ``[override]``, ``[main]`` or ``[main, patch]``.

    Raises:
        PageNotFoundError: If there is no override and no main page.
    """
    if custom_pages_dir is not None:
        override: Path = custom_pages_dir / f"{command}{OVERRIDE_SUFFIX}"
        if override.is_file():
            logger.debug("Using custom override page %s", override)
            return ResolvedPage(paths=(override.absolute(),), is_override=True)

    main: Path | None = find_main_page(command, platform, cache_root)
    if main is None:
        raise PageNotFoundError(command, platform)

    if custom_pages_dir is not None:
        patch: Path = custom_pages_dir / f"{command}{PATCH_SUFFIX}"
        if patch.is_file():
            logger.debug("Appending custom patch %s to %s", patch, main)
            return ResolvedPage(paths=(main, patch.absolute()))

    logger.debug("Resolved page %s", main)
    return ResolvedPage(paths=(main,))


def resolve_request(
    request: PageRequest,
    cache_root: Path,
    custom_pages_dir: Path | None,
) -> ResolvedPage:
    """Resolve a `PageRequest`; see `resolve_page`."""
    return resolve_page(request.command, request.platform, cache_root, custom_pages_dir)

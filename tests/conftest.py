# topmark:header:start
#
#   project      : Tealeaf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Tealeaf test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs. Every test runs with its own cache and config directories (via the
``TEALEAF_CACHE_DIR`` / ``TEALEAF_CONFIG_DIR`` overrides) so the developer's
real cache is never touched.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `tealeaf.config.MutableConfig`, then `freeze()` into a
    `tealeaf.config.Config`. To tweak a frozen config, `thaw()` it first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tealeaf.config import MutableConfig, logging
from tealeaf.constants import ENV_CACHE_DIR, ENV_CONFIG_DIR, ENV_LOG_LEVEL, PAGES_DIR_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from tealeaf.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point Tealeaf at per-test directories and neutralize ambient settings.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment
            variables.
    """
    # Ensure environment never forces DEBUG during test runs
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv(ENV_CACHE_DIR, str(tmp_path / "cache"))
    monkeypatch.setenv(ENV_CONFIG_DIR, str(tmp_path / "config"))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so every diagnostic path is exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def cache_root(tmp_path: Path) -> Path:
    """Return the cache root used by the isolated environment (not created)."""
    return tmp_path / "cache"


@fixture()
def custom_dir(tmp_path: Path) -> Path:
    """Return an existing, empty custom pages directory."""
    path: Path = tmp_path / "config" / "pages"
    path.mkdir(parents=True)
    return path


def write_page(cache_root: Path, platform: str, command: str, text: str) -> Path:
    """Write a cached page and return its path.

    Args:
        cache_root (Path): Cache root directory.
        platform (str): Platform directory name.
        command (str): Page name.
        text (str): Page content.

    Returns:
        Path: The written ``<cache_root>/pages/<platform>/<command>.md``.
    """
    path: Path = cache_root / PAGES_DIR_NAME / platform / f"{command}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attributes to set on the `MutableConfig` before
            freezing.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


TAR_PAGE: str = """\
# tar

> Archiving utility.
> More information: <https://www.gnu.org/software/tar>.

- Create an archive from files:

`tar cf {{target.tar}} {{file1}} {{file2}}`

- Extract an archive in the current directory:

`tar xf {{source.tar}}`
"""

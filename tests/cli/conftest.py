# topmark:header:start
#
#   project      : Tealeaf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Tealeaf against an isolated cache.

The autouse fixture in ``tests/conftest.py`` points the cache and config
directories at the test's ``tmp_path``. `run_cli` additionally injects a
`FakeUpdater` through Click's context object so no test ever downloads the real
archive.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from tealeaf.cli.main import cli
from tealeaf.config.logging import TRACE_LEVEL, setup_logging
from tealeaf.constants import PAGE_SUFFIX
from tealeaf.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from tealeaf.cache import PageCache


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-install the suite-wide handler after each run.

    The CLI points the root handler at the runner's captured stderr, which is
    gone once the run is over.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


class FakeUpdater:
    """Updater installing a fixed set of pages instead of downloading.

    Args:
        pages (Mapping[str, str]): ``"<platform>/<command>"`` -> page text.
    """

    def __init__(self, pages: Mapping[str, str] | None = None) -> None:
        self.pages: Mapping[str, str] = pages if pages is not None else {"common/tar": "# tar\n"}
        self.calls: int = 0

    def update(self, cache: PageCache) -> int:
        self.calls += 1
        for name, text in self.pages.items():
            target = cache.pages_dir / f"{name}{PAGE_SUFFIX}"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        cache.touch()
        return len(self.pages)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    updater: FakeUpdater | None = None,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with a fake updater injected into the context object.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["-p", "linux", "tar"]``.
        updater (FakeUpdater | None): Updater used by ``--update`` and
            auto-update; a default `FakeUpdater` when omitted.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--version"])
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(
        cli,
        argv,
        input=input_text,
        obj={"updater": updater or FakeUpdater()},  # inject test override into Click's context
    )


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert that the CLI exited with ``expected``, showing output on failure."""
    assert result.exit_code == expected, (
        f"expected exit {int(expected)}, got {result.exit_code}\n"
        f"stdout:\n{result.stdout}\nstderr:\n{result.stderr}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the CLI exited with SUCCESS (0)."""
    assert_exit(result, ExitCode.SUCCESS)

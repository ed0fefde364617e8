# topmark:header:start
#
#   project      : Tealeaf
#   file         : sinks.py
#   file_relpath : src/tealeaf/rendering/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks for rendered pages.

The renderer only needs "a writable sink supporting sequential writes and an
explicit flush". Two sinks are provided:

- standard output, used as-is;
- `PagerSink`, which collects the request and streams it to
  `click.echo_via_pager` on flush.

`open_sink` acquires one sink per request and releases it on every exit path.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from tealeaf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tealeaf.config.logging import TealeafLogger
    from tealeaf.rendering.renderer import TextSink

logger: TealeafLogger = get_logger(__name__)


class PagerSink:
    """Collect writes and page them through the user's pager on flush.

    The collected chunks are handed to `click.echo_via_pager` as a generator,
    so they are never joined into one string.

    Args:
        color (bool | None): Passed to `click.echo_via_pager`; ``None`` lets
            click decide.
    """

    def __init__(self, *, color: bool | None = None) -> None:
        self.color = color
        self._chunks: list[str] = []

    def write(self, s: str, /) -> int:
        self._chunks.append(s)
        return len(s)

    def flush(self) -> None:
        chunks: list[str] = self._chunks
        self._chunks = []
        if any(chunks):
            logger.debug("Paging %d chunks", len(chunks))
            click.echo_via_pager((chunk for chunk in chunks), color=self.color)

    def close(self) -> None:
        """Discard anything not yet flushed."""
        self._chunks.clear()


@contextmanager
def open_sink(*, use_pager: bool, color: bool | None = None) -> Iterator[TextSink]:
    """Acquire the output sink for one request.

    Args:
        use_pager (bool): Buffer output and show it through a pager.
        color (bool | None): Color hint for the pager.

    Yields:
        TextSink: The sink; stdout is looked up at call time so test runners
            that swap `sys.stdout` capture the output.
    """
    if not use_pager:
        yield sys.stdout
        return
    pager = PagerSink(color=color)
    try:
        yield pager
    finally:
        pager.close()

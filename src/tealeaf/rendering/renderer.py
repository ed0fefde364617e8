# topmark:header:start
#
#   project      : Tealeaf
#   file         : renderer.py
#   file_relpath : src/tealeaf/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render classified page tokens to a text sink.

Layout rules:

- `CommandName`: styled inline, no newline.
- `Description` / `ExampleText`: two-space indent, styled text, newline.
- `ExampleCode`: four-space indent, then each span styled on its own
  (placeholders with the ``example_variable`` style), inline.
- `Linebreak`: one newline.

Title and code rows are *inline*: they stay open until the next token, which
closes the row with a newline before writing itself. The end of the page
closes a row the same way. A `Linebreak` after an open row therefore shows up
as a blank line, so the blank line under the title appears unless compact
mode dropped its `Linebreak`.

Tokens with empty text produce no output at all, and neither do empty
placeholder spans.

Markdown passthrough (`write_passthrough`) bypasses classification: each raw
line is written verbatim, one write per line.

Error handling:
    Read failures surface as `PageReadError`, sink failures as
    `PageWriteError`. Either aborts the rest of the page; output already written
    is not rolled back. The sink is flushed exactly once, by `print_page`, after
    every file of the page has been written.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, Protocol

from tealeaf.config.logging import get_logger
from tealeaf.core.errors import PageReadError, PageWriteError
from tealeaf.pages.classifier import classify_lines
from tealeaf.pages.tokens import (
    CommandName,
    Description,
    ExampleCode,
    ExampleText,
    Linebreak,
    Placeholder,
    is_empty,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from tealeaf.config.logging import TealeafLogger
    from tealeaf.pages.tokens import RenderToken
    from tealeaf.rendering.styles import StyleConfig

logger: TealeafLogger = get_logger(__name__)

TEXT_INDENT: str = "  "
CODE_INDENT: str = "    "


class TextSink(Protocol):
    """Writable sink supporting sequential writes and an explicit flush."""

    def write(self, s: str, /) -> int | None:
        """Write ``s``."""
        ...

    def flush(self) -> None:
        """Flush buffered output."""
        ...


def iter_page_lines(path: Path) -> Iterator[str]:
    """Yield the lines of ``path`` lazily, newlines stripped.

    The file is opened on first iteration and closed when the generator is
    exhausted or closed.

    Raises:
        PageReadError: If the file cannot be opened, read or decoded as UTF-8.
    """
    try:
        with path.open(encoding="utf-8") as fh:
            for line in fh:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise PageReadError(path, exc) from exc


class TokenWriter:
    """Write render tokens to a sink, tracking whether an inline row is open.

    Args:
        sink (TextSink): Output sink.
        style (StyleConfig): Colorizers for each page element.
    """

    def __init__(self, sink: TextSink, style: StyleConfig) -> None:
        self.sink = sink
        self.style = style
        self.row_open: bool = False

    def _write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except OSError as exc:
            raise PageWriteError(f"Could not write to output: {exc}") from exc

    def close_row(self) -> None:
        """Terminate an open inline row with a newline."""
        if self.row_open:
            self._write("\n")
            self.row_open = False

    def write(self, token: RenderToken) -> None:
        """Write one token."""
        if is_empty(token):
            return
        match token:
            case Linebreak():
                self.close_row()
                self._write("\n")
            case CommandName(text):
                self.close_row()
                self._write(self.style.command_name(text))
                self.row_open = True
            case Description(text):
                self.close_row()
                self._write(f"{TEXT_INDENT}{self.style.description(text)}\n")
            case ExampleText(text):
                self.close_row()
                self._write(f"{TEXT_INDENT}{self.style.example_text(text)}\n")
            case ExampleCode(spans):
                self.close_row()
                self._write(CODE_INDENT)
                for span in spans:
                    if not span.text:
                        continue
                    if isinstance(span, Placeholder):
                        self._write(self.style.example_variable(span.text))
                    else:
                        self._write(self.style.example_code(span.text))
                self.row_open = True


def render(tokens: Iterable[RenderToken], style: StyleConfig, sink: TextSink) -> None:
    """Write ``tokens`` to ``sink`` without flushing it.

    Args:
        tokens (Iterable[RenderToken]): Token stream, consumed lazily.
        style (StyleConfig): Colorizers for each page element.
        sink (TextSink): Output sink.

    Raises:
        PageWriteError: If the sink rejects a write.
        PageReadError: If the token stream's underlying file fails.
    """
    writer = TokenWriter(sink, style)
    for token in tokens:
        writer.write(token)
    writer.close_row()


def write_passthrough(lines: Iterable[str], sink: TextSink) -> int:
    """Copy raw ``lines`` to ``sink``, one write per line.

    Returns:
        int: The number of lines written.

    Raises:
        PageWriteError: If the sink rejects a write.
    """
    count: int = 0
    for line in lines:
        try:
            sink.write(f"{line}\n")
        except OSError as exc:
            raise PageWriteError(f"Could not write to output: {exc}") from exc
        count += 1
    return count


def flush_sink(sink: TextSink) -> None:
    """Flush ``sink``, translating failures to `PageWriteError`."""
    try:
        sink.flush()
    except OSError as exc:
        raise PageWriteError(f"Could not flush output: {exc}") from exc


def print_page(
    paths: Iterable[Path],
    *,
    style: StyleConfig,
    sink: TextSink,
    markdown_passthrough: bool = False,
    compact: bool = False,
) -> None:
    """Render the files composing one page to ``sink``, then flush once.

    Files are read strictly in order. In the styled path their line streams
    are concatenated and fed through a single classifier.

    Args:
        paths (Iterable[Path]): Page files in read order (see `ResolvedPage`).
        style (StyleConfig): Colorizers for each page element.
        sink (TextSink): Output sink.
        markdown_passthrough (bool): Copy raw markdown instead of rendering.
        compact (bool): Enable compact mode in the classifier.

    Raises:
        PageReadError: If a page file fails to open or read.
        PageWriteError: If the sink rejects a write or the final flush.
    """
    files: list[Path] = list(paths)
    logger.debug("Printing page from %s", ", ".join(str(p) for p in files))
    if markdown_passthrough:
        for path in files:
            write_passthrough(iter_page_lines(path), sink)
    else:
        lines: Iterator[str] = chain.from_iterable(iter_page_lines(p) for p in files)
        render(classify_lines(lines, compact=compact), style, sink)
    flush_sink(sink)

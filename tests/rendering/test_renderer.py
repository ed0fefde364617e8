# topmark:header:start
#
#   project      : Tealeaf
#   file         : test_renderer.py
#   file_relpath : tests/rendering/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for token rendering, markdown passthrough and sink handling."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from tealeaf.core.errors import PageReadError, PageWriteError
from tealeaf.pages.tokens import (
    LINEBREAK,
    CommandName,
    Description,
    ExampleCode,
    ExampleText,
    Literal,
    Placeholder,
)
from tealeaf.rendering.renderer import (
    TokenWriter,
    iter_page_lines,
    print_page,
    render,
    write_passthrough,
)
from tealeaf.rendering.styles import StyleConfig
from tests.conftest import TAR_PAGE

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


class RecordingSink:
    """Sink recording every write and flush."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flushes: int = 0

    def write(self, s: str, /) -> int:
        self.writes.append(s)
        return len(s)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def text(self) -> str:
        return "".join(self.writes)


class BrokenSink(RecordingSink):
    """Sink failing after ``fail_after`` successful writes."""

    def __init__(self, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_after = fail_after

    def write(self, s: str, /) -> int:
        if len(self.writes) >= self.fail_after:
            raise BrokenPipeError("pipe closed")
        return super().write(s)


def _bracket(tag: str) -> Callable[[str], str]:
    def colorize(text: str) -> str:
        return f"<{tag}>{text}</{tag}>"

    return colorize


TAGGED = StyleConfig(
    command_name=_bracket("cmd"),
    description=_bracket("desc"),
    example_text=_bracket("text"),
    example_code=_bracket("code"),
    example_variable=_bracket("var"),
)


def test_tar_page_layout(tmp_path: Path) -> None:
    page = tmp_path / "tar.md"
    page.write_text(TAR_PAGE, encoding="utf-8")
    sink = RecordingSink()

    print_page([page], style=StyleConfig.unstyled(), sink=sink)

    assert sink.text == (
        "tar\n"
        "\n"
        "  Archiving utility.\n"
        "  More information: <https://www.gnu.org/software/tar>.\n"
        "\n"
        "  Create an archive from files:\n"
        "\n"
        "    tar cf target.tar file1 file2\n"
        "\n"
        "  Extract an archive in the current directory:\n"
        "\n"
        "    tar xf source.tar\n"
    )


def test_compact_layout_keeps_title_on_its_own_row(tmp_path: Path) -> None:
    page = tmp_path / "tar.md"
    page.write_text("# tar\n\n> Archiving utility.\n\n- Create:\n\n`tar cf {{t}}`\n", "utf-8")
    sink = RecordingSink()

    print_page([page], style=StyleConfig.unstyled(), sink=sink, compact=True)

    assert sink.text == "tar\n  Archiving utility.\n\n  Create:\n\n    tar cf t\n"


def test_each_slot_uses_its_colorizer() -> None:
    sink = RecordingSink()
    tokens = [
        CommandName("tar"),
        LINEBREAK,
        Description("d"),
        ExampleText("e"),
        ExampleCode((Literal("tar "), Placeholder("file"))),
    ]

    render(tokens, TAGGED, sink)

    assert sink.text == (
        "<cmd>tar</cmd>\n"
        "\n"
        "  <desc>d</desc>\n"
        "  <text>e</text>\n"
        "    <code>tar </code><var>file</var>\n"
    )


def test_empty_tokens_produce_no_output() -> None:
    sink = RecordingSink()

    render([CommandName(""), Description(""), ExampleText(""), ExampleCode(())], TAGGED, sink)

    assert sink.writes == []


def test_compact_mode_drops_only_the_blank_line_under_the_title(tmp_path: Path) -> None:
    page = tmp_path / "t.md"
    page.write_text("# tar\n\n> d\n\n- e:\n\n`x`\n\n- f:\n", encoding="utf-8")
    full = RecordingSink()
    compact = RecordingSink()

    print_page([page], style=StyleConfig.unstyled(), sink=full)
    print_page([page], style=StyleConfig.unstyled(), sink=compact, compact=True)

    assert full.text == "tar\n\n  d\n\n  e:\n\n    x\n\n  f:\n"
    assert compact.text == "tar\n  d\n\n  e:\n\n    x\n\n  f:\n"


def test_blank_line_follows_code_row() -> None:
    sink = RecordingSink()
    render(
        [ExampleCode((Literal("a"),)), LINEBREAK, ExampleText("next")],
        StyleConfig.unstyled(),
        sink,
    )
    assert sink.text == "    a\n\n  next\n"


def test_legacy_and_current_pages_render_identically(tmp_path: Path) -> None:
    legacy = tmp_path / "legacy.md"
    current = tmp_path / "current.md"
    legacy.write_text(TAR_PAGE, encoding="utf-8")
    current.write_text(
        "#  tar \n"
        "\n"
        ">  Archiving utility.  \n"
        "> More information: <https://www.gnu.org/software/tar>.\n"
        "\n"
        "-  Create an archive from files:\n"
        "\n"
        "`tar cf {{target.tar}} {{file1}} {{file2}}`  \n"
        "\n"
        "- Extract an archive in the current directory:\n"
        "\n"
        "`tar xf {{source.tar}}`\n",
        encoding="utf-8",
    )
    legacy_sink = RecordingSink()
    current_sink = RecordingSink()

    print_page([legacy], style=TAGGED, sink=legacy_sink)
    print_page([current], style=TAGGED, sink=current_sink)

    assert current_sink.text == legacy_sink.text
    assert "<var>target.tar</var>" in legacy_sink.text


def test_empty_placeholder_spans_are_skipped() -> None:
    sink = RecordingSink()

    render(
        [ExampleCode((Literal("echo "), Placeholder(""))), ExampleCode((Placeholder(""),))],
        TAGGED,
        sink,
    )

    assert sink.text == "    <code>echo </code>\n"
    assert "<var>" not in sink.text


def test_linebreak_always_renders_a_newline() -> None:
    sink = RecordingSink()
    render([LINEBREAK, LINEBREAK], TAGGED, sink)
    assert sink.text == "\n\n"


def test_render_does_not_flush() -> None:
    sink = RecordingSink()
    render([CommandName("x")], TAGGED, sink)
    assert sink.flushes == 0


def test_writer_closes_open_row_before_line_token() -> None:
    sink = RecordingSink()
    writer = TokenWriter(sink, StyleConfig.unstyled())

    writer.write(ExampleCode((Literal("a"),)))
    assert writer.row_open
    writer.write(ExampleText("b"))

    assert sink.text == "    a\n  b\n"
    assert not writer.row_open


def test_print_page_flushes_exactly_once_after_all_files(tmp_path: Path) -> None:
    main = tmp_path / "tar.md"
    patch = tmp_path / "tar.patch"
    main.write_text("# tar\n\n> Archiver.\n", encoding="utf-8")
    patch.write_text("\n- Extra example:\n\n`tar --extra`\n", encoding="utf-8")
    sink = RecordingSink()

    print_page([main, patch], style=StyleConfig.unstyled(), sink=sink)

    assert sink.flushes == 1
    assert sink.text == "tar\n\n  Archiver.\n\n  Extra example:\n\n    tar --extra\n"


def test_patch_continues_compact_state_across_files(tmp_path: Path) -> None:
    main = tmp_path / "a.md"
    patch = tmp_path / "a.patch"
    main.write_text("# a\n\n> d\n\n", encoding="utf-8")
    patch.write_text("\n\n- e\n", encoding="utf-8")
    sink = RecordingSink()

    print_page([main, patch], style=StyleConfig.unstyled(), sink=sink, compact=True)

    assert sink.text == "a\n  d\n\n  e\n"


def test_passthrough_writes_each_line_verbatim(tmp_path: Path) -> None:
    lines = ["# tar", "", "> Archiving utility.", "", "`tar cf {{target.tar}}`"]
    page = tmp_path / "tar.md"
    page.write_text("\n".join(lines) + "\n", encoding="utf-8")
    sink = RecordingSink()

    print_page([page], style=TAGGED, sink=sink, markdown_passthrough=True)

    assert sink.writes == [f"{line}\n" for line in lines]
    assert sink.flushes == 1


def test_passthrough_of_override_plus_patch_keeps_file_order(tmp_path: Path) -> None:
    first = tmp_path / "one.md"
    second = tmp_path / "one.patch"
    first.write_text("A\nB\n", encoding="utf-8")
    second.write_text("C\n", encoding="utf-8")
    sink = RecordingSink()

    print_page([first, second], style=TAGGED, sink=sink, markdown_passthrough=True)

    assert sink.writes == ["A\n", "B\n", "C\n"]


def test_write_passthrough_counts_lines() -> None:
    out = io.StringIO()
    assert write_passthrough(["a", "b", "c"], out) == 3
    assert out.getvalue() == "a\nb\nc\n"


def test_write_failure_raises_page_write_error(tmp_path: Path) -> None:
    page = tmp_path / "tar.md"
    page.write_text(TAR_PAGE, encoding="utf-8")
    sink = BrokenSink(fail_after=2)

    with pytest.raises(PageWriteError):
        print_page([page], style=StyleConfig.unstyled(), sink=sink)

    # Output already written stays written; no flush after the failure
    assert len(sink.writes) == 2
    assert sink.flushes == 0


def test_passthrough_write_failure_raises_page_write_error(tmp_path: Path) -> None:
    page = tmp_path / "tar.md"
    page.write_text(TAR_PAGE, encoding="utf-8")

    with pytest.raises(PageWriteError):
        print_page([page], style=TAGGED, sink=BrokenSink(), markdown_passthrough=True)


def test_missing_file_raises_page_read_error(tmp_path: Path) -> None:
    missing = tmp_path / "gone.md"

    with pytest.raises(PageReadError) as excinfo:
        print_page([missing], style=StyleConfig.unstyled(), sink=RecordingSink())

    assert excinfo.value.path == missing


def test_invalid_utf8_raises_page_read_error(tmp_path: Path) -> None:
    page = tmp_path / "bad.md"
    page.write_bytes(b"# bad\n\xff\xfe\n")

    with pytest.raises(PageReadError):
        list(iter_page_lines(page))


def test_patch_read_failure_after_main_output(tmp_path: Path) -> None:
    main = tmp_path / "tar.md"
    main.write_text("# tar\n> d\n", encoding="utf-8")
    sink = RecordingSink()

    with pytest.raises(PageReadError):
        print_page([main, tmp_path / "tar.patch"], style=StyleConfig.unstyled(), sink=sink)

    assert sink.text.startswith("tar\n  d\n")

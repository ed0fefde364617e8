# topmark:header:start
#
#   project      : Tealeaf
#   file         : tokens.py
#   file_relpath : src/tealeaf/pages/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed values exchanged between page classification and rendering.

Two small closed families live here:

- **Spans** (`Literal`, `Placeholder`): pieces of an example code line. A
  placeholder is the text found between ``{{`` and ``}}``.
- **Render tokens** (`CommandName`, `Description`, `ExampleText`,
  `ExampleCode`, `Linebreak`): one token per classified page line. Tokens are
  the sole interface between `tealeaf.pages.classifier` and
  `tealeaf.rendering.renderer`; they carry no line numbers or other positional
  metadata, so downstream consumers stay stateless.

All values are frozen dataclasses and compare by value, which keeps tests and
pattern matching simple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text inside an example code line."""

    text: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """User-fillable text inside an example code line, delimiters stripped."""

    text: str


Span = Union[Literal, Placeholder]


@dataclass(frozen=True, slots=True)
class CommandName:
    """Page title (the ``# `` line)."""

    text: str


@dataclass(frozen=True, slots=True)
class Description:
    """Page description or tag line (a ``> `` line)."""

    text: str


@dataclass(frozen=True, slots=True)
class ExampleText:
    """Prose describing an example (a ``- `` line)."""

    text: str


@dataclass(frozen=True, slots=True)
class ExampleCode:
    """Example command line, split into literal and placeholder spans."""

    spans: tuple[Span, ...]

    @property
    def text(self) -> str:
        """Return the code line with placeholder delimiters stripped."""
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True, slots=True)
class Linebreak:
    """Blank or unrecognized line."""


RenderToken = Union[CommandName, Description, ExampleText, ExampleCode, Linebreak]

LINEBREAK: Linebreak = Linebreak()


def is_empty(token: RenderToken) -> bool:
    """Return True when a token would render nothing.

    `Linebreak` is never empty: it always renders a newline.
    """
    if isinstance(token, Linebreak):
        return False
    if isinstance(token, ExampleCode):
        return not any(span.text for span in token.spans)
    return not token.text

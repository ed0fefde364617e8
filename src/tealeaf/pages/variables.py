# topmark:header:start
#
#   project      : Tealeaf
#   file         : variables.py
#   file_relpath : src/tealeaf/pages/variables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split example code lines into literal and placeholder spans.

Example lines mark user-fillable parts with double braces::

    tar cf {{target.tar}} {{file1}} {{file2}}

`split_variables` turns such a line into an ordered sequence of
`Literal` / `Placeholder` spans. Splitting never fails: an opening ``{{``
without a closing ``}}`` on the same line is kept as literal text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tealeaf.pages.tokens import Literal, Placeholder

if TYPE_CHECKING:
    from tealeaf.pages.tokens import Span

VARIABLE_START: str = "{{"
VARIABLE_END: str = "}}"


def split_variables(text: str) -> list[Span]:
    """Split ``text`` into literal and placeholder spans.

    Args:
        text (str): The example code line, backticks already removed.

    Returns:
        list[Span]: Spans in input order. Empty literals are omitted; adjacent
            literals are not merged.

    Examples:
        >>> split_variables("plain {{var}} text")
        [Literal(text='plain '), Placeholder(text='var'), Literal(text=' text')]
        >>> split_variables("unterminated {{oops")
        [Literal(text='unterminated '), Literal(text='{{oops')]
    """
    spans: list[Span] = []
    pos: int = 0
    while pos < len(text):
        start: int = text.find(VARIABLE_START, pos)
        if start < 0:
            spans.append(Literal(text[pos:]))
            break
        end: int = text.find(VARIABLE_END, start + len(VARIABLE_START))
        if start > pos:
            spans.append(Literal(text[pos:start]))
        if end < 0:
            # Unmatched opener: the rest of the line stays literal
            spans.append(Literal(text[start:]))
            break
        spans.append(Placeholder(text[start + len(VARIABLE_START) : end]))
        pos = end + len(VARIABLE_END)
    return spans

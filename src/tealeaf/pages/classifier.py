# topmark:header:start
#
#   project      : Tealeaf
#   file         : classifier.py
#   file_relpath : src/tealeaf/pages/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classifier for the tldr page dialect.

The classifier consumes raw page lines lazily and yields `RenderToken` values
lazily. Each line is classified on its own, by its leading marker, in this
precedence order:

1. ``# `` title            -> `CommandName`
2. ``> `` description/tag  -> `Description`
3. ``- `` example prose    -> `ExampleText`
4. ```` `...` ```` code     -> `ExampleCode` (spans from `split_variables`)
5. anything else           -> `Linebreak`

Legacy and current dialect variants of a page only differ cosmetically
(whitespace around markers, trailing spaces), so they are normalized by
trimming and share the same rules.

Classification never fails: an unrecognized line degrades to `Linebreak`, so
the renderer always receives a total mapping over arbitrary input.

Compact mode:
    Consecutive `Linebreak` tokens collapse to one, and a `Linebreak` directly
    following a `CommandName` is dropped. The decision needs one token of
    lookback, kept as a local in `LineClassifier.classify`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tealeaf.config.logging import get_logger
from tealeaf.pages.tokens import (
    LINEBREAK,
    CommandName,
    Description,
    ExampleCode,
    ExampleText,
    Linebreak,
)
from tealeaf.pages.variables import split_variables

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tealeaf.config.logging import TealeafLogger
    from tealeaf.pages.tokens import RenderToken

logger: TealeafLogger = get_logger(__name__)

TITLE_MARKER: str = "# "
DESCRIPTION_MARKER: str = "> "
EXAMPLE_MARKER: str = "- "
CODE_FENCE: str = "`"


class ClassifierState(str, Enum):
    """Position of the classifier within a page.

    Attributes:
        START: No title line seen yet.
        BODY: At least one title line seen.
    """

    START = "start"
    BODY = "body"


class LineClassifier:
    """Stateful classifier turning raw page lines into render tokens.

    Args:
        compact (bool): If True, collapse blank lines as described in the
            module docstring.

    Attributes:
        compact (bool): Whether compact mode is active.
        state (ClassifierState): `START` until the first title line is seen.
    """

    def __init__(self, *, compact: bool = False) -> None:
        self.compact = compact
        self.state = ClassifierState.START

    def classify_line(self, line: str) -> RenderToken:
        """Classify a single raw line.

        Args:
            line (str): One line of page text; a trailing newline is ignored.

        Returns:
            RenderToken: The token for this line.
        """
        raw: str = line.rstrip("\r\n")
        if raw.startswith(TITLE_MARKER):
            if self.state is ClassifierState.BODY:
                logger.debug("Repeated title line: %r", raw)
            self.state = ClassifierState.BODY
            return CommandName(raw[len(TITLE_MARKER) :].strip())
        if raw.startswith(DESCRIPTION_MARKER):
            return Description(raw[len(DESCRIPTION_MARKER) :].strip())
        if raw.startswith(EXAMPLE_MARKER):
            return ExampleText(raw[len(EXAMPLE_MARKER) :].strip())

        code: str = raw.rstrip()
        if len(code) >= 2 and code.startswith(CODE_FENCE) and code.endswith(CODE_FENCE):
            return ExampleCode(tuple(split_variables(code[1:-1])))

        if raw.strip():
            logger.trace("Unrecognized line rendered as linebreak: %r", raw)
        return LINEBREAK

    def classify(self, lines: Iterable[str]) -> Iterator[RenderToken]:
        """Yield tokens for ``lines``, applying compact mode if enabled.

        Args:
            lines (Iterable[str]): Raw page lines, consumed lazily.

        Yields:
            RenderToken: Classified tokens in input order.
        """
        previous: RenderToken | None = None
        for line in lines:
            token: RenderToken = self.classify_line(line)
            if (
                self.compact
                and isinstance(token, Linebreak)
                and isinstance(previous, (Linebreak, CommandName))
            ):
                # ``previous`` is left untouched so every further blank is dropped too
                continue
            previous = token
            yield token


def classify_lines(lines: Iterable[str], *, compact: bool = False) -> Iterator[RenderToken]:
    """Classify ``lines`` with a fresh `LineClassifier`.

    Args:
        lines (Iterable[str]): Raw page lines.
        compact (bool): Enable compact mode.

    Returns:
        Iterator[RenderToken]: Lazy token stream.
    """
    return LineClassifier(compact=compact).classify(lines)

# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/pages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Page model: resolution, classification and freshness.

Public surface:
    - `resolve_page` / `ResolvedPage`: which files make up a page.
    - `LineClassifier` / `classify_lines`: raw lines to render tokens.
    - `split_variables`: example code line to literal/placeholder spans.
    - `is_stale` / `should_autoupdate`: cache freshness arithmetic.
"""

from __future__ import annotations

from tealeaf.pages.classifier import ClassifierState, LineClassifier, classify_lines
from tealeaf.pages.freshness import Freshness, check_freshness, is_stale, should_autoupdate
from tealeaf.pages.resolver import (
    PageRequest,
    ResolvedPage,
    detect_platform,
    normalize_command,
    resolve_page,
    resolve_request,
)
from tealeaf.pages.tokens import (
    CommandName,
    Description,
    ExampleCode,
    ExampleText,
    Linebreak,
    Literal,
    Placeholder,
    RenderToken,
    Span,
)
from tealeaf.pages.variables import split_variables

__all__ = [
    "ClassifierState",
    "CommandName",
    "Description",
    "ExampleCode",
    "ExampleText",
    "Freshness",
    "LineClassifier",
    "Linebreak",
    "Literal",
    "PageRequest",
    "Placeholder",
    "RenderToken",
    "ResolvedPage",
    "Span",
    "check_freshness",
    "classify_lines",
    "detect_platform",
    "is_stale",
    "normalize_command",
    "resolve_page",
    "resolve_request",
    "should_autoupdate",
    "split_variables",
]

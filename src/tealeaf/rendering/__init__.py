# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal rendering of classified pages.

- `tealeaf.rendering.styles`: `StyleConfig` and colorizers.
- `tealeaf.rendering.renderer`: token writer, passthrough and `print_page`.
- `tealeaf.rendering.sinks`: stdout and pager output sinks.
"""

from __future__ import annotations

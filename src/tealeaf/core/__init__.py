# topmark:header:start
#
#   project      : Tealeaf
#   file         : __init__.py
#   file_relpath : src/tealeaf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic building blocks shared by the Tealeaf core and CLI."""

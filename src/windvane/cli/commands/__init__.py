# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane CLI commands."""

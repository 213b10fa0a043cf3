# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/content/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content-glob helpers used by the file-scanning collaborator."""

from __future__ import annotations

from windvane.content.matcher import ContentMatcher, expand_braces, normalize_pattern

__all__ = [
    "ContentMatcher",
    "expand_braces",
    "normalize_pattern",
]

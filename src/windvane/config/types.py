# topmark:header:start
#
#   project      : Windvane
#   file         : types.py
#   file_relpath : src/windvane/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config type aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports. Keep it free of side effects
and of imports from the rest of Windvane.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# A configuration tree as read from a file or handed over by a caller.
ConfigTable = dict[str, Any]

# The `theme` table: category name -> token map (or an opaque value)
ThemeTable = dict[str, Any]

# Read-only view accepted by public entry points (plain dicts, proxies, ...)
ConfigLike = Mapping[str, Any]

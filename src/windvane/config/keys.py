# topmark:header:start
#
#   project      : Windvane
#   file         : keys.py
#   file_relpath : src/windvane/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names for Windvane configuration descriptors.

This module defines the authoritative string constants used when reading,
resolving, and dumping a configuration (``windvane.toml``, ``[tool.windvane]``
in ``pyproject.toml``, ``windvane.config.json`` or the ``config`` export of
``windvane_config.py``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Keys not listed in `Keys.KNOWN_TOP_LEVEL_KEYS` are legal and passed
      through resolution unchanged.
"""

from __future__ import annotations

from typing import Final


class Keys:
    """Configuration keys recognized by the resolver.

    Notes:
        - Values must match user-facing keys exactly (camelCase theme
          categories are kept as-is, e.g. ``fontFamily``).
    """

    # Ordered sequence of content-scan globs
    CONTENT: Final[str] = "content"

    # Design-token categories and the additive layer below them
    THEME: Final[str] = "theme"
    EXTEND: Final[str] = "extend"

    # Ordered plugin registrations
    PLUGINS: Final[str] = "plugins"

    # Configured-plugin pair
    PLUGIN_TRANSFORM: Final[str] = "transform"
    PLUGIN_HANDLER: Final[str] = "handler"  # alias accepted for `transform`
    PLUGIN_OPTIONS: Final[str] = "options"

    KNOWN_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            CONTENT,
            THEME,
            PLUGINS,
        }
    )


def join_key_path(parent: str, key: str) -> str:
    """Return the dotted key path for ``key`` below ``parent``.

    Args:
        parent (str): Parent key path; empty for the configuration root.
        key (str): Child key.

    Returns:
        str: ``"parent.key"``, or ``"key"`` at the root.
    """
    return f"{parent}.{key}" if parent else key


def index_key_path(parent: str, index: int) -> str:
    """Return the key path for item ``index`` of the sequence at ``parent``."""
    return f"{parent}[{index}]"

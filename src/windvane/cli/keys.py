# topmark:header:start
#
#   project      : Windvane
#   file         : keys.py
#   file_relpath : src/windvane/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and argument keys.

Design notes:
    - CLI option spellings (``CliOpt``) are user-facing and should be changed with care.
    - Argument destination keys (``ArgKey``) form the internal contract between
      Click parsing and the command implementations, including the keys of
      ``ctx.obj``.
    - Neither class contains behavior; they are pure namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the Windvane CLI."""

    CONFIG: Final[str] = "config"
    CONFIG_CHECK: Final[str] = "check"
    CONFIG_DUMP: Final[str] = "dump"
    CONFIG_DEFAULTS: Final[str] = "defaults"
    CONTENT: Final[str] = "content"
    CONTENT_MATCH: Final[str] = "match"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings for the Windvane CLI."""

    CONFIG_PATH: Final[str] = "--config"
    OUTPUT_FORMAT: Final[str] = "--format"
    NO_COLOR: Final[str] = "--no-color"
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"


class ArgKey:
    """Canonical argument keys (Click destinations and ``ctx.obj`` entries)."""

    CONFIG_PATH: Final[str] = "config_path"
    OUTPUT_FORMAT: Final[str] = "output_format"
    NO_COLOR: Final[str] = "no_color"
    VERBOSE: Final[str] = "verbose"
    QUIET: Final[str] = "quiet"
    PATHS: Final[str] = "paths"

    # ctx.obj
    CONSOLE: Final[str] = "console"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_ENABLED: Final[str] = "color_enabled"

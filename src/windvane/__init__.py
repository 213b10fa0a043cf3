# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane package.

Windvane resolves the configuration descriptor of a utility-class CSS build
tool. It merges a user configuration against the built-in defaults, normalizes
the content-scan globs and relays plugin registrations in declared order. It
exposes a small typed API and a CLI for inspecting resolved configurations.
"""

from __future__ import annotations

from windvane.config import (
    ConfigError,
    ConfigLoadError,
    InvalidSchema,
    PluginDescriptor,
    PluginKind,
    ResolvedConfig,
    load_defaults_dict,
    resolve,
)

__all__: list[str] = [
    "ConfigError",
    "ConfigLoadError",
    "InvalidSchema",
    "PluginDescriptor",
    "PluginKind",
    "ResolvedConfig",
    "load_defaults_dict",
    "resolve",
]

# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane configuration layer.

Public entry points:
    * `resolve`: pure merge of a user configuration over the defaults.
    * `load_defaults_dict`: the built-in defaults (fresh dict on every call).
    * `resolve_file` / `resolve_discovered`: load a configuration file, then
      resolve it.

The result is an immutable `ResolvedConfig`; plugin registrations are tagged
`PluginDescriptor` values.
"""

from __future__ import annotations

from windvane.config.defaults import DEFAULT_THEME_CATEGORIES, load_defaults_dict
from windvane.config.errors import ConfigError, ConfigLoadError, InvalidSchema, PluginLoadError
from windvane.config.io import (
    discover_config_file,
    load_config_file,
    resolve_discovered,
    resolve_file,
    to_toml,
)
from windvane.config.model import ResolvedConfig
from windvane.config.plugins import PluginDescriptor, PluginKind
from windvane.config.resolver import merge_theme, resolve, resolve_content

__all__ = [
    "DEFAULT_THEME_CATEGORIES",
    "ConfigError",
    "ConfigLoadError",
    "InvalidSchema",
    "PluginDescriptor",
    "PluginKind",
    "PluginLoadError",
    "ResolvedConfig",
    "discover_config_file",
    "load_config_file",
    "load_defaults_dict",
    "merge_theme",
    "resolve",
    "resolve_content",
    "resolve_discovered",
    "resolve_file",
    "to_toml",
]

# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""I/O helpers for Windvane configuration.

This package centralizes reading configuration files and rendering resolved
configurations. Keeping these utilities separate keeps the resolver free of
I/O: `windvane.config.resolver.resolve` only ever sees in-memory values.

Supported sources:
    * ``windvane_config.py``: executed with `importlib.util`; its ``config``
      attribute is the user configuration (plugins may be real callables).
    * ``windvane.config.json``: parsed with `json`.
    * ``windvane.toml`` and ``[tool.windvane]`` in ``pyproject.toml``: parsed
      with `tomlkit` and unwrapped to plain dicts.

Typical flow:
    1. Find the nearest configuration file (``discover_config_file``).
    2. Load it (``load_config_file``); failures raise ``ConfigLoadError``.
    3. Resolve it against the defaults (``resolve_file`` / ``resolve_discovered``).
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .guards import is_config_table
from .loaders import (
    discover_config_file,
    load_config_file,
    load_json_dict,
    load_pyproject_table,
    load_python_config,
    load_toml_dict,
    resolve_discovered,
    resolve_file,
)
from .render import to_toml

__all__ = [
    "discover_config_file",
    "is_config_table",
    "load_config_file",
    "load_json_dict",
    "load_pyproject_table",
    "load_python_config",
    "load_toml_dict",
    "resolve_discovered",
    "resolve_file",
    "to_toml",
]

# topmark:header:start
#
#   project      : Windvane
#   file         : constants.py
#   file_relpath : src/windvane/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

WINDVANE_VERSION: str = get_version("windvane")

# Environment variable consulted by `windvane.config.logging`
LOG_LEVEL_ENV_VAR: str = "WINDVANE_LOG_LEVEL"

# Configuration file names, in per-directory discovery order
PYTHON_CONFIG_NAME: str = "windvane_config.py"
JSON_CONFIG_NAME: str = "windvane.config.json"
TOML_CONFIG_NAME: str = "windvane.toml"
PYPROJECT_NAME: str = "pyproject.toml"

CONFIG_FILE_NAMES: tuple[str, ...] = (
    PYTHON_CONFIG_NAME,
    JSON_CONFIG_NAME,
    TOML_CONFIG_NAME,
    PYPROJECT_NAME,
)

# Name of the module attribute holding the default export of a Python config
PYTHON_CONFIG_EXPORT: str = "config"

# Table holding Windvane settings inside pyproject.toml: [tool.windvane]
PYPROJECT_TOOL_TABLE: str = "windvane"

TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="

# topmark:header:start
#
#   project      : Windvane
#   file         : loaders.py
#   file_relpath : src/windvane/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load user configuration sources.

This module provides I/O helpers for reading a Windvane user configuration from:
- ``windvane.toml`` (top-level table) and ``[tool.windvane]`` in ``pyproject.toml``,
- ``windvane.config.json``,
- ``windvane_config.py`` (the module attribute ``config`` is the export).

TOML is parsed with `tomlkit` and returned as plain `dict` structures.

Unlike best-effort discovery, an explicit load never falls back to the defaults:
every failure raises `windvane.config.errors.ConfigLoadError`.
"""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from windvane.config.defaults import load_defaults_dict
from windvane.config.errors import ConfigLoadError
from windvane.config.io.guards import is_config_table
from windvane.config.logging import get_logger
from windvane.config.resolver import resolve
from windvane.constants import (
    CONFIG_FILE_NAMES,
    PYPROJECT_NAME,
    PYPROJECT_TOOL_TABLE,
    PYTHON_CONFIG_EXPORT,
)

if TYPE_CHECKING:
    from types import ModuleType

    from windvane.config.logging import WindvaneLogger
    from windvane.config.model import ResolvedConfig
    from windvane.config.types import ConfigTable

logger: WindvaneLogger = get_logger(__name__)


# --- Per-format loaders ---


def load_toml_dict(path: Path) -> ConfigTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g. ``windvane.toml`` or
            ``pyproject.toml``).

    Returns:
        ConfigTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(path, f"invalid TOML: {e}") from e

    data_any: Any = doc.unwrap()
    if not is_config_table(data_any):
        raise ConfigLoadError(path, "TOML document does not hold a table")
    return data_any


def load_pyproject_table(path: Path) -> ConfigTable | None:
    """Return the ``[tool.windvane]`` table of a ``pyproject.toml``.

    Args:
        path (Path): Path to ``pyproject.toml``.

    Returns:
        ConfigTable | None: The table, or ``None`` if the file has no
            ``[tool.windvane]`` section.

    Raises:
        ConfigLoadError: If the file cannot be parsed or the section is not a
            table.
    """
    data: ConfigTable = load_toml_dict(path)
    tool: object = data.get("tool")
    if not is_config_table(tool) or PYPROJECT_TOOL_TABLE not in tool:
        return None
    table: object = tool[PYPROJECT_TOOL_TABLE]
    if not is_config_table(table):
        raise ConfigLoadError(path, f"[tool.{PYPROJECT_TOOL_TABLE}] is not a table")
    return table


def load_json_dict(path: Path) -> object:
    """Load a JSON configuration file.

    The top-level value is returned as-is so that the resolver can report a
    non-object root with its key path.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid JSON.
    """
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as e:
        logger.error("Error loading JSON from %s: %s", path, e)
        raise ConfigLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        logger.error("Error decoding JSON from %s: %s", path, e)
        raise ConfigLoadError(path, f"invalid JSON: {e}") from e


def load_python_config(path: Path) -> object:
    """Execute a Python configuration module and return its ``config`` attribute.

    Python configurations may register plugins as real callables, which data
    formats cannot express.

    Args:
        path (Path): Path to ``windvane_config.py`` (or any ``.py`` file).

    Returns:
        object: The value of the module's ``config`` attribute.

    Raises:
        ConfigLoadError: If the module cannot be loaded, raises while executing,
            or does not define ``config``.
    """
    spec = importlib.util.spec_from_file_location(f"_windvane_user_config_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ConfigLoadError(path, "not a loadable Python module")

    module: ModuleType = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except OSError as e:
        raise ConfigLoadError(path, str(e)) from e
    except Exception as e:
        # User code: any failure while executing the module is a load error.
        logger.error("Error executing Python config %s: %s", path, e)
        raise ConfigLoadError(path, f"{type(e).__name__}: {e}") from e

    if not hasattr(module, PYTHON_CONFIG_EXPORT):
        raise ConfigLoadError(path, f"module defines no '{PYTHON_CONFIG_EXPORT}' attribute")
    return getattr(module, PYTHON_CONFIG_EXPORT)


def load_config_file(path: Path) -> object:
    """Load a user configuration from ``path``, dispatching on the file name.

    Args:
        path (Path): A ``.py``, ``.json`` or ``.toml`` configuration file.
            For ``pyproject.toml`` only the ``[tool.windvane]`` table is read.

    Returns:
        object: The user configuration as loaded (not yet validated).

    Raises:
        ConfigLoadError: If the file does not exist, has an unsupported
            format, cannot be parsed, or is a ``pyproject.toml`` without a
            ``[tool.windvane]`` table.
    """
    if not path.is_file():
        raise ConfigLoadError(path, "no such file")

    logger.debug("Loading configuration from %s", path)
    suffix: str = path.suffix.lower()

    if path.name == PYPROJECT_NAME:
        table: ConfigTable | None = load_pyproject_table(path)
        if table is None:
            raise ConfigLoadError(path, f"no [tool.{PYPROJECT_TOOL_TABLE}] table")
        return table
    if suffix == ".toml":
        return load_toml_dict(path)
    if suffix == ".json":
        return load_json_dict(path)
    if suffix == ".py":
        return load_python_config(path)

    raise ConfigLoadError(path, f"unsupported configuration format '{suffix or path.name}'")


# --- Discovery ---


def _is_candidate(path: Path) -> bool:
    """Return True if ``path`` is a configuration file discovery should pick."""
    if not path.is_file():
        return False
    if path.name != PYPROJECT_NAME:
        return True
    # A pyproject.toml only counts when it configures Windvane.
    try:
        return load_pyproject_table(path) is not None
    except ConfigLoadError as e:
        logger.debug("Ignoring unparsable %s during discovery: %s", path, e)
        return False


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest configuration file, walking upward from ``start``.

    In each directory the candidates are checked in this order:
    ``windvane_config.py``, ``windvane.config.json``, ``windvane.toml``,
    ``pyproject.toml`` (only if it has a ``[tool.windvane]`` table).

    Args:
        start (Path): Directory (or file, whose parent is used) to start from.

    Returns:
        Path | None: The first candidate found, or ``None`` when the filesystem
            root is reached without a match.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            candidate: Path = cur / name
            if _is_candidate(candidate):
                logger.debug("Discovered config file: %s", candidate)
                return candidate

        parent: Path = cur.parent
        if parent == cur:
            logger.debug("No configuration file found above %s", start)
            return None
        cur = parent


# --- Load + resolve ---


def resolve_file(path: Path) -> ResolvedConfig:
    """Load ``path`` and resolve it against the built-in defaults.

    Raises:
        ConfigLoadError: If the file cannot be loaded.
        InvalidSchema: If the loaded configuration is structurally invalid.
    """
    user: object = load_config_file(path)
    return resolve(load_defaults_dict(), user, source=path)


def resolve_discovered(start: Path | None = None) -> ResolvedConfig:
    """Discover the nearest configuration file and resolve it.

    Args:
        start (Path | None): Where discovery starts; defaults to the current
            working directory.

    Returns:
        ResolvedConfig: The resolved configuration, or the resolved defaults
            (``source is None``) when no configuration file exists.
    """
    found: Path | None = discover_config_file(start or Path.cwd())
    if found is None:
        return resolve(load_defaults_dict(), {})
    return resolve_file(found)


# topmark:header:start
#
#   project      : Windvane
#   file         : errors.py
#   file_relpath : src/windvane/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Windvane config layer.

Resolution is all-or-nothing: a schema violation aborts before any merge
output is produced, and callers must surface the error rather than fall
back to the defaults. The CLI maps these exceptions to
`windvane.cli.errors.WindvaneConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

ROOT_KEY_PATH_LABEL: str = "<root>"


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidSchema(ConfigError):
    """A user configuration does not have the required shape.

    Attributes:
        key_path (str): Dotted/indexed path of the offending value
            (e.g. ``theme.extend.colors`` or ``content[2]``); empty for the root.
        reason (str): Human-readable description of the violation.
    """

    def __init__(self, key_path: str, reason: str) -> None:
        self.key_path = key_path
        self.reason = reason
        super().__init__(f"Invalid configuration at '{self.display_path}': {reason}")

    @property
    def display_path(self) -> str:
        """Return the key path, or a root label when the root itself is invalid."""
        return self.key_path or ROOT_KEY_PATH_LABEL


class ConfigLoadError(ConfigError):
    """A configuration source could not be read or parsed.

    Attributes:
        path (Path): The configuration file that failed to load.
        reason (str): Human-readable description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load configuration from {path}: {reason}")


class PluginLoadError(ConfigError):
    """A plugin import reference could not be turned into a callable.

    Attributes:
        reference (str): The ``"module:attribute"`` reference that failed.
        reason (str): Human-readable description of the failure.
    """

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot load plugin '{reference}': {reason}")

# topmark:header:start
#
#   project      : Windvane
#   file         : guards.py
#   file_relpath : src/windvane/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for values coming out of configuration parsers.

These `TypeGuard`-based predicates help Pyright narrow runtime values returned
by `tomlkit` or `json`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

if TYPE_CHECKING:
    from windvane.config.types import ConfigTable


def is_config_table(obj: object) -> TypeGuard[ConfigTable]:
    """Type guard for a plain configuration table.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[ConfigTable]: ``True`` if ``obj`` is a ``dict`` with string keys.
    """
    return isinstance(obj, dict) and all(isinstance(k, str) for k in obj)  # pyright: ignore[reportUnknownVariableType]


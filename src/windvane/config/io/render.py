# topmark:header:start
#
#   project      : Windvane
#   file         : render.py
#   file_relpath : src/windvane/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration tables as TOML for dumps.

TOML has no `null` value, so `None` entries are stripped during rendering.
Callables (allowed anywhere in Python configurations) are rendered as
``"module:qualname"`` strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from windvane.config.logging import get_logger
from windvane.config.plugins import qualified_name

if TYPE_CHECKING:
    from windvane.config.logging import WindvaneLogger
    from windvane.config.types import ConfigTable

logger: WindvaneLogger = get_logger(__name__)


def _is_table_like(value: object) -> bool:
    """Return True if ``value`` renders as a TOML table or array of tables."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, list) and value:
        items: list[object] = cast("list[object]", value)
        return all(isinstance(v, Mapping) for v in items)
    return False


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` and name callables in mappings, lists and tuples.

    Notes:
        - Mapping keys are normalized to strings, since TOML tables are
          string-keyed.
        - Tuples are rendered as TOML arrays.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        # Plain values must precede tables, or they would land inside the last table.
        return dict(sorted(out.items(), key=lambda kv: _is_table_like(kv[1])))

    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object] | tuple[object, ...]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    if callable(value):
        # Python configs may hold callables; TOML can only show their name.
        return qualified_name(value)

    return value


def to_toml(table: ConfigTable) -> str:
    """Serialize a configuration mapping to a TOML string.

    Args:
        table (ConfigTable): Mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(table)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))

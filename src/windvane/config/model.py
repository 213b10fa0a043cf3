# topmark:header:start
#
#   project      : Windvane
#   file         : model.py
#   file_relpath : src/windvane/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved configuration model.

`ResolvedConfig` is the immutable output of `windvane.config.resolver.resolve`:

    - ``theme``: every token category fully populated (defaults replaced per
      category by the user ``theme``, then extended key-wise by ``theme.extend``);
    - ``content``: deduplicated content globs in first-seen order;
    - ``plugins``: tagged plugin descriptors in declared order;
    - ``extra``: unknown top-level keys, passed through unchanged.

Immutability:
    The dataclass is ``frozen=True`` and sequences are tuples. Mapping values
    are private deep copies owned by the instance; treat them as read-only.
    Use `to_dict` to obtain a mutable plain-Python configuration.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from windvane.config.keys import Keys

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from windvane.config.plugins import PluginDescriptor
    from windvane.config.types import ConfigTable
    from windvane.core.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Immutable, fully-resolved configuration.

    Attributes:
        content (tuple[str, ...]): Content-scan glob patterns, unique, in
            first-seen order. Never expanded against the filesystem.
        theme (Mapping[str, Any]): Resolved design-token categories.
        plugins (tuple[PluginDescriptor, ...]): Plugin registrations in
            declared order, ready for sequential invocation.
        extra (Mapping[str, Any]): Unknown top-level keys, passed through.
        source (Path | None): Configuration file the user config came from,
            if any.
        diagnostics (tuple[Diagnostic, ...]): Non-fatal notes collected while
            resolving.
    """

    content: tuple[str, ...]
    theme: Mapping[str, Any]
    plugins: tuple[PluginDescriptor, ...]
    extra: Mapping[str, Any] = field(default_factory=lambda: {})
    source: Path | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def category(self, name: str) -> Any:
        """Return the resolved value of a token category.

        Args:
            name (str): Category name, e.g. ``"fontFamily"``.

        Returns:
            Any: The resolved category value (usually a token mapping).

        Raises:
            KeyError: If the category is neither a default nor user-defined.
        """
        return self.theme[name]

    def to_dict(self) -> ConfigTable:
        """Return this configuration as a plain, mutable Configuration tree.

        Plugins are rendered back to their raw entries (transform or
        ``{transform, options}``). Unknown keys follow the recognized ones.
        """
        out: ConfigTable = {
            Keys.CONTENT: list(self.content),
            Keys.THEME: deepcopy(dict(self.theme)),
            Keys.PLUGINS: [p.to_config_value() for p in self.plugins],
        }
        for key, value in self.extra.items():
            out[key] = deepcopy(value)
        return out

    def to_toml_dict(self) -> ConfigTable:
        """Return a TOML-serializable view of this configuration.

        Plugin callables are rendered by their ``module:qualname``.

        Note:
            Export-only convenience for dumps and snapshots. Values TOML cannot
            represent (``None``) are stripped by `windvane.config.io.to_toml`.
        """
        out: ConfigTable = self.to_dict()
        out[Keys.PLUGINS] = [p.to_toml_value() for p in self.plugins]
        return out

    def to_json_dict(self) -> ConfigTable:
        """Return a JSON-serializable view including provenance and diagnostics."""
        return {
            "source": str(self.source) if self.source is not None else None,
            "config": self.to_toml_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }

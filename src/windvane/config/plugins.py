# topmark:header:start
#
#   project      : Windvane
#   file         : plugins.py
#   file_relpath : src/windvane/config/plugins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin descriptors.

A plugin entry in a configuration is one of two variants:

    * **bare**: a plain transform, given either as a callable (Python config
      modules) or as a reference string (TOML/JSON configs). Reference strings
      are opaque to the resolver; only ``"package.module:attribute"`` references
      can be loaded;
    * **configured**: a ``{transform, options}`` pair. ``handler`` is accepted
      as an alias for ``transform``.

Entries are wrapped into a tagged `PluginDescriptor` instead of being sniffed
for shape at every use site. Descriptors are relayed in declared order; the
resolver never invokes a transform. Call `PluginDescriptor.load_transform` at
registration time to obtain the callable.

TOML mapping:

    plugins = [
        "acme_forms.plugin:forms",
        { transform = "acme_typography:plugin", options = { className = "prose" } },
    ]
"""

from __future__ import annotations

import importlib
import re
from collections.abc import Callable, Mapping
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, cast

from windvane.config.errors import InvalidSchema, PluginLoadError
from windvane.config.keys import Keys, join_key_path
from windvane.config.logging import WindvaneLogger, get_logger

logger: WindvaneLogger = get_logger(__name__)

PluginTransform = Callable[..., Any]

# "package.module:attribute" (the attribute may be dotted)
_IMPORT_REF_RE: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*:[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*$"
)


class PluginKind(str, Enum):
    """Variant tag of a plugin descriptor."""

    BARE = "bare"
    CONFIGURED = "configured"


def is_import_reference(value: object) -> bool:
    """Return True if ``value`` is a ``"module:attribute"`` import reference string."""
    return isinstance(value, str) and _IMPORT_REF_RE.match(value) is not None


def qualified_name(obj: object) -> str:
    """Return ``"module:qualname"`` for a callable (the form used in dumps)."""
    module: str = getattr(obj, "__module__", None) or "<unknown>"
    qualname: str = getattr(obj, "__qualname__", None) or repr(obj)
    return f"{module}:{qualname}"


@dataclass(frozen=True, slots=True)
class PluginDescriptor:
    """Immutable, tagged plugin registration.

    Attributes:
        kind (PluginKind): Which variant this descriptor holds.
        transform (PluginTransform | str): The transform callable, or an import
            reference resolved lazily by `load_transform`.
        options (Mapping[str, Any]): Options of a configured plugin; empty for
            bare plugins.
    """

    kind: PluginKind
    transform: PluginTransform | str
    options: Mapping[str, Any] = field(default_factory=lambda: {})

    @classmethod
    def bare(cls, transform: PluginTransform | str) -> PluginDescriptor:
        """Create a bare plugin descriptor."""
        return cls(kind=PluginKind.BARE, transform=transform)

    @classmethod
    def configured(
        cls,
        transform: PluginTransform | str,
        options: Mapping[str, Any] | None = None,
    ) -> PluginDescriptor:
        """Create a configured plugin descriptor (options are deep-copied)."""
        return cls(
            kind=PluginKind.CONFIGURED,
            transform=transform,
            options=deepcopy(dict(options or {})),
        )

    @classmethod
    def from_entry(cls, entry: object, key_path: str) -> PluginDescriptor:
        """Wrap a raw ``plugins`` entry into a descriptor without invoking it.

        Args:
            entry (object): Raw entry: a descriptor, a callable, a plugin
                reference string, or a ``{transform, options}`` mapping.
            key_path (str): Key path of the entry, used in error messages
                (e.g. ``plugins[1]``).

        Returns:
            PluginDescriptor: The tagged descriptor.

        Raises:
            InvalidSchema: If the entry matches neither variant.
        """
        if isinstance(entry, PluginDescriptor):
            return entry

        if callable(entry) or isinstance(entry, str):
            return cls.bare(_check_transform(entry, key_path))

        if isinstance(entry, Mapping):
            table: Mapping[str, Any] = cast("Mapping[str, Any]", entry)
            if Keys.PLUGIN_TRANSFORM in table:
                transform_key: str = Keys.PLUGIN_TRANSFORM
            elif Keys.PLUGIN_HANDLER in table:
                transform_key = Keys.PLUGIN_HANDLER
            else:
                raise InvalidSchema(
                    key_path,
                    f"configured plugin needs a '{Keys.PLUGIN_TRANSFORM}' entry",
                )
            transform: PluginTransform | str = _check_transform(
                table[transform_key], join_key_path(key_path, transform_key)
            )
            options: object = table.get(Keys.PLUGIN_OPTIONS)
            if options is not None and not isinstance(options, Mapping):
                raise InvalidSchema(
                    join_key_path(key_path, Keys.PLUGIN_OPTIONS),
                    f"expected a mapping, got {type(options).__name__}",
                )
            return cls.configured(transform, cast("Mapping[str, Any] | None", options))

        raise InvalidSchema(
            key_path,
            "expected a transform (callable or reference string) "
            f"or a {{transform, options}} mapping, got {type(entry).__name__}",
        )

    @property
    def name(self) -> str:
        """Return a display name for the transform."""
        if isinstance(self.transform, str):
            return self.transform
        return qualified_name(self.transform)

    def load_transform(self) -> PluginTransform:
        """Return the transform callable, importing an import reference on demand.

        Returns:
            PluginTransform: The transform. It is **not** called.

        Raises:
            PluginLoadError: If the reference is not of the ``module:attribute``
                form, the module or attribute cannot be found, or the target is
                not callable.
        """
        if not isinstance(self.transform, str):
            return self.transform
        if not is_import_reference(self.transform):
            raise PluginLoadError(self.transform, "not an importable 'module:attribute' reference")

        module_name, _, attr_path = self.transform.partition(":")
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as exc:
            raise PluginLoadError(self.transform, f"cannot import '{module_name}': {exc}") from exc

        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as exc:
                raise PluginLoadError(self.transform, f"no attribute '{attr}'") from exc

        if not callable(target):
            raise PluginLoadError(self.transform, f"{type(target).__name__} is not callable")
        logger.debug("Loaded plugin transform %s", self.transform)
        return cast("PluginTransform", target)

    def to_config_value(self) -> Any:
        """Return the raw configuration entry this descriptor stands for.

        Bare plugins map back to their transform, configured plugins to a
        ``{transform, options}`` dict.
        """
        if self.kind is PluginKind.BARE:
            return self.transform
        return {
            Keys.PLUGIN_TRANSFORM: self.transform,
            Keys.PLUGIN_OPTIONS: deepcopy(dict(self.options)),
        }

    def to_toml_value(self) -> Any:
        """Return a TOML-serializable view (callables are rendered by name)."""
        if self.kind is PluginKind.BARE:
            return self.name
        return {
            Keys.PLUGIN_TRANSFORM: self.name,
            Keys.PLUGIN_OPTIONS: deepcopy(dict(self.options)),
        }


def _check_transform(value: object, key_path: str) -> PluginTransform | str:
    """Validate the transform slot of a plugin entry (shape only, never called).

    Strings are kept opaque: any non-empty name is accepted here, and only
    `PluginDescriptor.load_transform` requires the ``module:attribute`` form.
    """
    if isinstance(value, str):
        if not value.strip():
            raise InvalidSchema(key_path, "plugin reference must not be empty")
        return value
    if callable(value):
        return cast("PluginTransform", value)
    raise InvalidSchema(
        key_path,
        f"expected a callable or a plugin reference string, got {type(value).__name__}",
    )

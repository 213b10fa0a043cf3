# topmark:header:start
#
#   project      : Windvane
#   file         : resolver.py
#   file_relpath : src/windvane/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration resolution: defaults + user configuration -> `ResolvedConfig`.

Resolution runs in three steps on top of a validation pass:

    1. **Theme merge**, in two explicit phases applied per token category:

       - *replace*: a category present in the user ``theme`` replaces the
         default category wholesale;
       - *extend*: each category in ``theme.extend`` is merged key-wise onto
         the value from the replace phase; ``extend`` wins on key collisions.
         Values under a key are replaced, never concatenated.

    2. **Content**: glob strings keep their order; exact duplicates are dropped
       (first occurrence wins). Patterns are never expanded here.

    3. **Plugins**: entries are wrapped into tagged
       `windvane.config.plugins.PluginDescriptor` values in declared order and
       are never invoked.

Unknown top-level keys are passed through unchanged.

Resolution is a pure function of its inputs: nothing is mutated, no I/O is
performed, and the result shares no mutable container with either input.
It is all-or-nothing: any `InvalidSchema` aborts before a result exists.
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import TYPE_CHECKING, Any, cast

from windvane.config.errors import InvalidSchema
from windvane.config.keys import Keys, index_key_path, join_key_path
from windvane.config.logging import get_logger
from windvane.config.model import ResolvedConfig
from windvane.config.plugins import PluginDescriptor
from windvane.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from windvane.config.logging import WindvaneLogger
    from windvane.config.types import ConfigLike, ConfigTable, ThemeTable

logger: WindvaneLogger = get_logger(__name__)

_THEME_EXTEND_PATH: str = join_key_path(Keys.THEME, Keys.EXTEND)


def _require_mapping(value: object, key_path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidSchema(key_path, f"expected a mapping, got {type(value).__name__}")
    return cast("Mapping[str, Any]", value)


def _require_sequence(value: object, key_path: str) -> list[Any]:
    # `str` is a Sequence too; only real lists/tuples are accepted.
    if not isinstance(value, (list, tuple)):
        raise InvalidSchema(key_path, f"expected a list, got {type(value).__name__}")
    return list(cast("list[Any] | tuple[Any, ...]", value))


def validate_user_config(user: object) -> Mapping[str, Any]:
    """Check the structural requirements of a user configuration.

    Only the shape the resolver depends on is checked; unknown keys and token
    values are not inspected.

    Args:
        user (object): The user configuration, as loaded.

    Returns:
        Mapping[str, Any]: ``user`` narrowed to a mapping.

    Raises:
        InvalidSchema: If the root, ``content``, a ``content`` entry, ``theme``,
            ``theme.extend``, an ``extend`` category or ``plugins`` has the
            wrong type.
    """
    table: Mapping[str, Any] = _require_mapping(user, "")

    if Keys.CONTENT in table:
        entries: list[Any] = _require_sequence(table[Keys.CONTENT], Keys.CONTENT)
        for i, entry in enumerate(entries):
            if not isinstance(entry, str):
                raise InvalidSchema(
                    index_key_path(Keys.CONTENT, i),
                    f"content globs must be strings, got {type(entry).__name__}",
                )

    if Keys.THEME in table:
        theme: Mapping[str, Any] = _require_mapping(table[Keys.THEME], Keys.THEME)
        if Keys.EXTEND in theme:
            extend: Mapping[str, Any] = _require_mapping(theme[Keys.EXTEND], _THEME_EXTEND_PATH)
            for category, tokens in extend.items():
                _require_mapping(tokens, join_key_path(_THEME_EXTEND_PATH, category))

    if Keys.PLUGINS in table:
        _require_sequence(table[Keys.PLUGINS], Keys.PLUGINS)

    return table


def replace_categories(
    default_theme: Mapping[str, Any],
    user_theme: Mapping[str, Any],
) -> ThemeTable:
    """Run the *replace* phase of the theme merge.

    For every category present in either theme, the user value wins over the
    default one. The ``extend`` key is not a category and is skipped on both
    sides.

    Args:
        default_theme (Mapping[str, Any]): The default ``theme`` table.
        user_theme (Mapping[str, Any]): The user ``theme`` table.

    Returns:
        ThemeTable: New theme table; default categories first (in default
            order), followed by categories only the user defines.
    """
    merged: ThemeTable = {}
    for category, value in default_theme.items():
        if category == Keys.EXTEND:
            continue
        if category in user_theme:
            logger.trace("theme.%s: replaced by user theme", category)
            merged[category] = deepcopy(user_theme[category])
        else:
            merged[category] = deepcopy(value)

    for category, value in user_theme.items():
        if category == Keys.EXTEND or category in merged:
            continue
        logger.trace("theme.%s: added by user theme", category)
        merged[category] = deepcopy(value)

    return merged


def extend_categories(
    theme: Mapping[str, Any],
    extend: Mapping[str, Any],
    diagnostics: DiagnosticLog | None = None,
) -> ThemeTable:
    """Run the *extend* phase of the theme merge.

    Each category listed in ``extend`` becomes the key-wise union of its
    current value and the ``extend`` entries, with ``extend`` winning on
    collisions. A category that does not exist yet is created from its
    ``extend`` entries alone and reported as a WARNING (often a misspelled
    category name).

    Args:
        theme (Mapping[str, Any]): Theme table produced by the replace phase.
        extend (Mapping[str, Any]): The user ``theme.extend`` table.
        diagnostics (DiagnosticLog | None): Optional log receiving a warning
            per category created by ``extend``.

    Returns:
        ThemeTable: New theme table.

    Raises:
        InvalidSchema: If an ``extend`` category is not a mapping, or extends a
            category whose current value is not a mapping.
    """
    merged: ThemeTable = {category: deepcopy(value) for category, value in theme.items()}

    for category, tokens in extend.items():
        additions: Mapping[str, Any] = _require_mapping(
            tokens, join_key_path(_THEME_EXTEND_PATH, category)
        )
        if category not in merged:
            logger.debug("theme.extend.%s: creates a new category", category)
            if diagnostics is not None:
                diagnostics.add_warning(
                    f"'extend' creates category '{category}', "
                    "which is neither a default nor a user theme category",
                    join_key_path(_THEME_EXTEND_PATH, category),
                )
        base: object = merged.get(category, {})
        base_tokens: Mapping[str, Any] = _require_mapping(base, join_key_path(Keys.THEME, category))

        union: dict[str, Any] = dict(base_tokens)
        for token, value in additions.items():
            if token in union:
                logger.trace("theme.%s.%s: overridden by theme.extend", category, token)
            union[token] = deepcopy(value)
        merged[category] = union

    return merged


def merge_theme(
    default_theme: Mapping[str, Any],
    user_theme: Mapping[str, Any],
    diagnostics: DiagnosticLog | None = None,
) -> ThemeTable:
    """Merge a user ``theme`` (including its ``extend`` layer) over the defaults.

    Args:
        default_theme (Mapping[str, Any]): The default ``theme`` table.
        user_theme (Mapping[str, Any]): The user ``theme`` table; may contain
            ``extend``.
        diagnostics (DiagnosticLog | None): Optional log for non-fatal notes.

    Returns:
        ThemeTable: The resolved theme table.
    """
    replaced: ThemeTable = replace_categories(default_theme, user_theme)
    extend: Mapping[str, Any] = _require_mapping(
        user_theme.get(Keys.EXTEND, {}), _THEME_EXTEND_PATH
    )
    if not extend:
        return replaced
    return extend_categories(replaced, extend, diagnostics)


def resolve_content(
    patterns: list[str] | tuple[str, ...],
    diagnostics: DiagnosticLog | None = None,
) -> tuple[str, ...]:
    """Return content globs in first-seen order with exact duplicates removed.

    Args:
        patterns (list[str] | tuple[str, ...]): Glob pattern strings.
        diagnostics (DiagnosticLog | None): Optional log receiving a note per
            dropped duplicate.

    Returns:
        tuple[str, ...]: The unique patterns.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for i, pattern in enumerate(patterns):
        if pattern in seen:
            logger.debug("Dropping duplicate content glob %r at %s[%d]", pattern, Keys.CONTENT, i)
            if diagnostics is not None:
                diagnostics.add_info(
                    f"Duplicate content glob {pattern!r} ignored",
                    index_key_path(Keys.CONTENT, i),
                )
            continue
        seen.add(pattern)
        unique.append(pattern)
    return tuple(unique)


def assemble_plugins(entries: list[Any] | tuple[Any, ...]) -> tuple[PluginDescriptor, ...]:
    """Wrap plugin entries into descriptors, preserving declared order.

    Args:
        entries (list[Any] | tuple[Any, ...]): Raw ``plugins`` entries.

    Returns:
        tuple[PluginDescriptor, ...]: One descriptor per entry, same order.

    Raises:
        InvalidSchema: If an entry matches no plugin variant.
    """
    return tuple(
        PluginDescriptor.from_entry(entry, index_key_path(Keys.PLUGINS, i))
        for i, entry in enumerate(entries)
    )


def resolve(
    default: ConfigLike,
    user: object,
    *,
    source: Path | None = None,
) -> ResolvedConfig:
    """Resolve a user configuration against the default configuration.

    Args:
        default (ConfigLike): The default configuration (see
            `windvane.config.defaults.load_defaults_dict`). Read only.
        user (object): The user configuration. Any key may be omitted;
            unknown keys are preserved.
        source (Path | None): Optional file the user configuration was read
            from, recorded on the result.

    Returns:
        ResolvedConfig: The resolved configuration.

    Raises:
        InvalidSchema: If ``user`` is structurally invalid (see
            `validate_user_config`) or a plugin entry matches no variant.
    """
    table: Mapping[str, Any] = validate_user_config(user)
    diagnostics = DiagnosticLog()

    default_theme: Mapping[str, Any] = cast("Mapping[str, Any]", default.get(Keys.THEME) or {})
    user_theme: Mapping[str, Any] = cast("Mapping[str, Any]", table.get(Keys.THEME) or {})
    theme: ThemeTable = merge_theme(default_theme, user_theme, diagnostics)

    content: tuple[str, ...] = resolve_content(
        cast("list[str]", table.get(Keys.CONTENT) or []), diagnostics
    )

    plugins: tuple[PluginDescriptor, ...] = assemble_plugins(table.get(Keys.PLUGINS) or [])

    # Unknown keys: defaults first, user values replace them key by key.
    extra: ConfigTable = {
        key: deepcopy(value)
        for key, value in default.items()
        if key not in Keys.KNOWN_TOP_LEVEL_KEYS
    }
    for key, value in table.items():
        if key in Keys.KNOWN_TOP_LEVEL_KEYS:
            continue
        logger.debug("Passing through unknown top-level key %r", key)
        diagnostics.add_info(f"Unrecognized key '{key}' passed through unchanged", key)
        extra[key] = deepcopy(value)

    logger.debug(
        "Resolved configuration: %d theme categories, %d content globs, %d plugins",
        len(theme),
        len(content),
        len(plugins),
    )

    return ResolvedConfig(
        content=content,
        theme=theme,
        plugins=plugins,
        extra=extra,
        source=source,
        diagnostics=tuple(diagnostics),
    )

# topmark:header:start
#
#   project      : Windvane
#   file         : test_resolver_properties.py
#   file_relpath : tests/config/test_resolver_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the resolver's merge invariants.

For arbitrary valid user configurations:
1) categories untouched by the user equal the defaults;
2) user categories replace the defaults, then ``extend`` is applied key-wise;
3) content keeps first-seen order and contains no duplicates;
4) resolution never mutates its inputs and is deterministic.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from hypothesis import HealthCheck, given, settings

from tests.strategies_windvane import content_lists, user_configs
from windvane.config import load_defaults_dict, resolve
from windvane.config.resolver import resolve_content

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=150,
)


@PROPERTY_SETTINGS
@given(user=user_configs())
def test_theme_categories_follow_replace_then_extend(user: dict[str, Any]) -> None:
    """Every resolved category equals (user or default) updated with extend."""
    default: dict[str, Any] = load_defaults_dict()
    theme: dict[str, Any] = dict(resolve(default, user).theme)

    user_theme: dict[str, Any] = user.get("theme", {})
    extend: dict[str, Any] = user_theme.get("extend", {})
    categories: set[str] = (set(default["theme"]) | set(user_theme) | set(extend)) - {"extend"}

    assert set(theme) == categories
    for category in categories:
        base: Any = user_theme.get(category, default["theme"].get(category))
        if category in extend:
            expected: Any = {**(base or {}), **extend[category]}
        else:
            expected = base
        assert theme[category] == expected, category


@PROPERTY_SETTINGS
@given(user=user_configs())
def test_resolution_is_pure_and_deterministic(user: dict[str, Any]) -> None:
    """Inputs are unchanged and resolving twice gives equal results."""
    default: dict[str, Any] = load_defaults_dict()
    default_before: dict[str, Any] = deepcopy(default)
    user_before: dict[str, Any] = deepcopy(user)

    first: dict[str, Any] = resolve(default, user).to_dict()
    second: dict[str, Any] = resolve(default, user).to_dict()

    assert first == second
    assert default == default_before
    assert user == user_before


@PROPERTY_SETTINGS
@given(patterns=content_lists())
def test_content_is_ordered_unique_subsequence(patterns: list[str]) -> None:
    """Output has no duplicates and lists each pattern at its first position."""
    unique: tuple[str, ...] = resolve_content(patterns)

    assert len(unique) == len(set(unique))
    assert set(unique) == set(patterns)
    first_index: list[int] = [patterns.index(p) for p in unique]
    assert first_index == sorted(first_index)


@PROPERTY_SETTINGS
@given(user=user_configs())
def test_plugin_count_and_order_are_preserved(user: dict[str, Any]) -> None:
    """One descriptor per entry, in declared order."""
    entries: list[Any] = user.get("plugins", [])
    plugins = resolve(load_defaults_dict(), user).plugins

    assert [p.to_config_value() for p in plugins] == entries

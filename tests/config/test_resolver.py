# topmark:header:start
#
#   project      : Windvane
#   file         : test_resolver.py
#   file_relpath : tests/config/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `windvane.config.resolver.resolve`.

Covers the documented examples, the identity on an empty user configuration,
pass-through of unknown keys, purity (inputs are never mutated) and the
all-or-nothing error behavior.
"""

from __future__ import annotations

from copy import deepcopy
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import pytest

from tests.conftest import parametrize
from windvane.config import InvalidSchema, PluginKind, ResolvedConfig, resolve
from windvane.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from windvane.config.types import ConfigTable


def test_resolve_empty_user_returns_defaults(defaults: ConfigTable) -> None:
    """An empty user configuration resolves to exactly the defaults."""
    resolved: ResolvedConfig = resolve(defaults, {})

    assert resolved.to_dict() == defaults
    assert resolved.content == ()
    assert resolved.plugins == ()
    assert resolved.diagnostics == ()


def test_extend_replaces_token_value_wholesale() -> None:
    """Extending ``fontFamily.sans`` replaces the list; it is not concatenated."""
    default: ConfigTable = {"theme": {"fontFamily": {"sans": ["system-ui"]}}}
    user: ConfigTable = {"theme": {"extend": {"fontFamily": {"sans": ["Lato", "sans-serif"]}}}}

    resolved: ResolvedConfig = resolve(default, user)

    assert resolved.theme["fontFamily"]["sans"] == ["Lato", "sans-serif"]


def test_content_duplicates_are_dropped_in_first_seen_order(defaults: ConfigTable) -> None:
    """Later duplicates are dropped and the original order is kept."""
    user: ConfigTable = {
        "content": ["./src/**/*.html", "./src/**/*.html", "./src/**/*.ts"],
    }

    resolved: ResolvedConfig = resolve(defaults, user)

    assert resolved.content == ("./src/**/*.html", "./src/**/*.ts")
    assert resolved.to_dict()["content"] == ["./src/**/*.html", "./src/**/*.ts"]


def test_content_globs_are_not_rewritten(defaults: ConfigTable) -> None:
    """Globs are relayed as written (no expansion or path normalization)."""
    user: ConfigTable = {"content": ["src/**/*.{js,ts}", "./a/../b/*.html", "!./vendor/**"]}

    resolved: ResolvedConfig = resolve(defaults, user)

    assert resolved.content == ("src/**/*.{js,ts}", "./a/../b/*.html", "!./vendor/**")


def test_theme_not_a_mapping_fails_at_theme(defaults: ConfigTable) -> None:
    """A non-mapping ``theme`` fails with `InvalidSchema` at path ``theme``."""
    with pytest.raises(InvalidSchema) as excinfo:
        resolve(defaults, {"theme": "not-an-object"})

    assert excinfo.value.key_path == "theme"
    assert "theme" in str(excinfo.value)


@parametrize(
    "user, key_path",
    [
        ("not-a-mapping", ""),
        (["content"], ""),
        (None, ""),
        ({"content": "./src/**/*.html"}, "content"),
        ({"content": ["./a", 3]}, "content[1]"),
        ({"content": ["./a", None, "./b"]}, "content[1]"),
        ({"theme": {"extend": ["colors"]}}, "theme.extend"),
        ({"theme": {"extend": {"colors": "red"}}}, "theme.extend.colors"),
        ({"plugins": "acme:plugin"}, "plugins"),
        ({"plugins": ["acme:plugin", 42]}, "plugins[1]"),
    ],
)
def test_invalid_user_config_reports_key_path(
    defaults: ConfigTable, user: Any, key_path: str
) -> None:
    """Each structural violation is reported with the path of the offending value."""
    with pytest.raises(InvalidSchema) as excinfo:
        resolve(defaults, user)

    assert excinfo.value.key_path == key_path


def test_invalid_root_is_labelled_in_message(defaults: ConfigTable) -> None:
    """A non-mapping root is shown as ``<root>`` in the error message."""
    with pytest.raises(InvalidSchema, match="<root>"):
        resolve(defaults, 42)


def test_resolve_does_not_mutate_inputs(defaults: ConfigTable) -> None:
    """Neither the default nor the user configuration is modified."""
    user: ConfigTable = {
        "content": ["./a/**", "./a/**"],
        "theme": {
            "colors": {"brand": "#123456"},
            "extend": {"spacing": {"128": "32rem"}, "screens": {"3xl": "1920px"}},
        },
        "plugins": [{"transform": "acme.forms:plugin", "options": {"strategy": "class"}}],
        "darkMode": "class",
    }
    default_before: ConfigTable = deepcopy(defaults)
    user_before: ConfigTable = deepcopy(user)

    resolve(defaults, user)

    assert defaults == default_before
    assert user == user_before


def test_result_shares_no_containers_with_inputs(defaults: ConfigTable) -> None:
    """Mutating the inputs after resolution does not affect the result."""
    user: ConfigTable = {
        "theme": {"colors": {"brand": {"500": "#123456"}}},
        "darkMode": ["class", ".dark"],
    }
    resolved: ResolvedConfig = resolve(defaults, user)

    user["theme"]["colors"]["brand"]["500"] = "#000000"
    user["darkMode"].append("media")
    defaults["theme"]["spacing"]["0"] = "1px"

    assert resolved.theme["colors"]["brand"]["500"] == "#123456"
    assert resolved.extra["darkMode"] == ["class", ".dark"]
    assert resolved.theme["spacing"]["0"] == "0px"


def test_failed_resolution_leaves_inputs_untouched(defaults: ConfigTable) -> None:
    """An error late in validation still leaves both inputs unchanged."""
    user: ConfigTable = {
        "content": ["./a/**"],
        "theme": {"colors": {"brand": "#fff"}, "extend": {"spacing": 4}},
    }
    default_before: ConfigTable = deepcopy(defaults)
    user_before: ConfigTable = deepcopy(user)

    with pytest.raises(InvalidSchema):
        resolve(defaults, user)

    assert defaults == default_before
    assert user == user_before


def test_unknown_keys_pass_through_with_info_diagnostic(defaults: ConfigTable) -> None:
    """Unknown top-level keys are preserved verbatim and noted as INFO."""
    user: ConfigTable = {"darkMode": "class", "prefix": "tw-", "corePlugins": {"float": False}}

    resolved: ResolvedConfig = resolve(defaults, user)
    out: ConfigTable = resolved.to_dict()

    assert out["darkMode"] == "class"
    assert out["prefix"] == "tw-"
    assert out["corePlugins"] == {"float": False}
    assert [d.key_path for d in resolved.diagnostics] == ["darkMode", "prefix", "corePlugins"]
    assert all(d.level is DiagnosticLevel.INFO for d in resolved.diagnostics)


def test_unknown_default_keys_are_kept_and_user_overrides_them() -> None:
    """Unknown keys of the default configuration survive unless the user sets them."""
    default: ConfigTable = {"theme": {}, "separator": ":", "important": False}

    resolved: ResolvedConfig = resolve(default, {"important": True})

    assert resolved.extra == {"separator": ":", "important": True}


def test_duplicate_content_globs_produce_diagnostics(defaults: ConfigTable) -> None:
    """Each dropped duplicate is reported at its own index."""
    user: ConfigTable = {"content": ["a", "b", "a", "b", "c"]}

    resolved: ResolvedConfig = resolve(defaults, user)

    assert resolved.content == ("a", "b", "c")
    assert [d.key_path for d in resolved.diagnostics] == ["content[2]", "content[3]"]


def test_plugins_keep_declared_order(defaults: ConfigTable) -> None:
    """Plugin descriptors appear in the order they were declared."""

    def first(api: object) -> None:  # pragma: no cover - never invoked
        raise AssertionError("plugins must not be invoked during resolution")

    user: ConfigTable = {
        "plugins": [
            first,
            "acme.forms:plugin",
            {"transform": "acme.typography:plugin", "options": {"className": "prose"}},
        ]
    }

    resolved: ResolvedConfig = resolve(defaults, user)

    assert [p.kind for p in resolved.plugins] == [
        PluginKind.BARE,
        PluginKind.BARE,
        PluginKind.CONFIGURED,
    ]
    assert resolved.plugins[0].transform is first
    assert resolved.plugins[1].transform == "acme.forms:plugin"
    assert dict(resolved.plugins[2].options) == {"className": "prose"}


def test_user_mapping_may_be_any_mapping(defaults: ConfigTable) -> None:
    """Read-only mappings (e.g. a module's exported proxy) are accepted."""
    user = MappingProxyType({"content": ("./src/**/*.html",), "theme": MappingProxyType({})})

    resolved: ResolvedConfig = resolve(defaults, user)

    assert resolved.content == ("./src/**/*.html",)
    assert resolved.to_dict()["theme"] == defaults["theme"]


def test_source_is_recorded(defaults: ConfigTable, tmp_path: Any) -> None:
    """The optional source path is carried on the result."""
    resolved: ResolvedConfig = resolve(defaults, {}, source=tmp_path / "windvane.toml")

    assert resolved.source == tmp_path / "windvane.toml"


def test_extend_only_category_is_reported_as_warning(defaults: ConfigTable) -> None:
    """Theme warnings come before content notes in the diagnostics."""
    user: ConfigTable = {
        "content": ["a", "a"],
        "theme": {"extend": {"fontFamly": {"display": ["Oswald"]}}},
    }

    resolved: ResolvedConfig = resolve(defaults, user)

    assert resolved.theme["fontFamly"] == {"display": ["Oswald"]}
    assert [(d.level, d.key_path) for d in resolved.diagnostics] == [
        (DiagnosticLevel.WARNING, "theme.extend.fontFamly"),
        (DiagnosticLevel.INFO, "content[1]"),
    ]

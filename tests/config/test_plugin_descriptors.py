# topmark:header:start
#
#   project      : Windvane
#   file         : test_plugin_descriptors.py
#   file_relpath : tests/config/test_plugin_descriptors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `windvane.config.plugins.PluginDescriptor`."""

from __future__ import annotations

import os.path
from typing import Any

import pytest

from tests.conftest import parametrize
from windvane.config import InvalidSchema, PluginDescriptor, PluginKind, PluginLoadError
from windvane.config.plugins import is_import_reference


def sample_transform(api: Any) -> None:
    """Plugin transform used by the tests; never invoked."""


def test_callable_entry_is_bare() -> None:
    """A callable becomes a bare descriptor holding the same object."""
    desc: PluginDescriptor = PluginDescriptor.from_entry(sample_transform, "plugins[0]")

    assert desc.kind is PluginKind.BARE
    assert desc.transform is sample_transform
    assert dict(desc.options) == {}


def test_reference_entry_is_bare() -> None:
    """An import reference string becomes a bare descriptor (not imported)."""
    desc: PluginDescriptor = PluginDescriptor.from_entry("not_installed.pkg:plugin", "plugins[0]")

    assert desc.kind is PluginKind.BARE
    assert desc.transform == "not_installed.pkg:plugin"
    assert desc.name == "not_installed.pkg:plugin"


@parametrize("transform_key", ["transform", "handler"])
def test_mapping_entry_is_configured(transform_key: str) -> None:
    """``{transform, options}`` (or ``handler``) becomes a configured descriptor."""
    options: dict[str, Any] = {"className": "prose", "nested": {"a": [1, 2]}}
    desc: PluginDescriptor = PluginDescriptor.from_entry(
        {transform_key: "acme.typography:plugin", "options": options}, "plugins[2]"
    )

    assert desc.kind is PluginKind.CONFIGURED
    assert desc.transform == "acme.typography:plugin"
    assert dict(desc.options) == options

    options["nested"]["a"].append(3)
    assert desc.options["nested"]["a"] == [1, 2]


def test_configured_entry_without_options_has_empty_options() -> None:
    """Options default to an empty mapping."""
    desc: PluginDescriptor = PluginDescriptor.from_entry({"transform": sample_transform}, "p")

    assert desc.kind is PluginKind.CONFIGURED
    assert dict(desc.options) == {}


def test_existing_descriptor_passes_through() -> None:
    """Descriptors built in code are accepted as-is."""
    desc: PluginDescriptor = PluginDescriptor.configured("acme:plugin", {"x": 1})

    assert PluginDescriptor.from_entry(desc, "plugins[0]") is desc


@parametrize(
    "entry, key_path",
    [
        (42, "plugins[3]"),
        ({"options": {}}, "plugins[3]"),
        ({"transform": 3}, "plugins[3].transform"),
        ({"transform": "acme:plugin", "options": ["x"]}, "plugins[3].options"),
        ("", "plugins[3]"),
        ({"handler": "   "}, "plugins[3].handler"),
    ],
)
def test_unrecognized_entries_are_rejected(entry: Any, key_path: str) -> None:
    """Entries matching neither variant raise `InvalidSchema` at their path."""
    with pytest.raises(InvalidSchema) as excinfo:
        PluginDescriptor.from_entry(entry, "plugins[3]")

    assert excinfo.value.key_path == key_path


@parametrize(
    "value, expected",
    [
        ("acme:plugin", True),
        ("acme.forms.plugin:forms", True),
        ("acme:Plugin.create", True),
        ("acme", False),
        (":plugin", False),
        ("acme:", False),
        ("acme-forms:plugin", False),
        (3, False),
    ],
)
def test_is_import_reference(value: object, expected: bool) -> None:
    """Only ``module:attribute`` strings are import references."""
    assert is_import_reference(value) is expected


def test_load_transform_imports_reference() -> None:
    """``load_transform`` resolves a dotted attribute path in a real module."""
    desc: PluginDescriptor = PluginDescriptor.bare("os.path:join")

    assert desc.load_transform() is os.path.join


def test_load_transform_returns_callable_unchanged() -> None:
    """A callable transform is returned as-is."""
    assert PluginDescriptor.bare(sample_transform).load_transform() is sample_transform


@parametrize(
    "reference",
    [
        "windvane_missing_module:plugin",
        "os.path:does_not_exist",
        "os:sep",
        "@tailwindcss/typography",
    ],
)
def test_load_transform_failures_raise_plugin_load_error(reference: str) -> None:
    """Non-importable names, missing modules or attributes and non-callables all fail."""
    with pytest.raises(PluginLoadError) as excinfo:
        PluginDescriptor.bare(reference).load_transform()

    assert excinfo.value.reference == reference


def test_config_and_toml_views() -> None:
    """Raw entries round back to config values; TOML views name the callable."""
    bare = PluginDescriptor.bare(sample_transform)
    configured = PluginDescriptor.configured("acme:plugin", {"size": 2})

    assert bare.to_config_value() is sample_transform
    assert bare.to_toml_value() == f"{__name__}:sample_transform"
    assert configured.to_config_value() == {"transform": "acme:plugin", "options": {"size": 2}}
    assert configured.to_toml_value() == {"transform": "acme:plugin", "options": {"size": 2}}


@parametrize(
    "entry",
    [
        "@tailwindcss/typography",
        "tailwindcss-animate",
        {"transform": "@acme/forms", "options": {"strategy": "class"}},
    ],
)
def test_package_style_references_are_kept_opaque(entry: Any) -> None:
    """Reference strings need not be Python import paths until they are loaded."""
    desc: PluginDescriptor = PluginDescriptor.from_entry(entry, "plugins[0]")

    assert desc.to_config_value() == entry

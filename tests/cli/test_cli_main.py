# topmark:header:start
#
#   project      : Windvane
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the top-level `windvane` group and the `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize
from windvane.constants import WINDVANE_VERSION

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version() -> None:
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == WINDVANE_VERSION


@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload == {"version": WINDVANE_VERSION}


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "windvane config dump" in result.output
    assert "Commands:" in result.output


@mark_cli
@parametrize("argv", [["-h"], ["--help"], ["config", "--help"], ["content", "match", "-h"]])
def test_help(argv: list[str]) -> None:
    result: Result = run_cli(argv)

    assert_SUCCESS(result)
    assert "Usage:" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_invalid_format_is_rejected() -> None:
    result: Result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2
    assert "Must be one of: default, markdown, json" in result.output

# topmark:header:start
#
#   project      : Windvane
#   file         : options.py
#   file_relpath : src/windvane/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config file,
output format) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from windvane.cli.cli_types import EnumChoiceParam
from windvane.cli.errors import WindvaneUsageError
from windvane.cli.keys import ArgKey, CliOpt
from windvane.config.logging import get_logger
from windvane.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from collections.abc import Callable

    from windvane.config.logging import WindvaneLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: WindvaneLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet,
            ``0`` (terse) otherwise.

    Raises:
        WindvaneUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise WindvaneUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


#: Click context settings shared by all commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        ArgKey.VERBOSE,
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        ArgKey.QUIET,
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (OutputFormat | None): Output format; JSON is never colored.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors ``--color``/``--no-color`` first, then the ``FORCE_COLOR`` and
        ``NO_COLOR`` environment variables, and finally whether stdout is a TTY.
    """
    if is_machine_format(output_format):
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto/always/never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR,
        ArgKey.NO_COLOR,
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` selecting the configuration file explicitly.

    Without ``--config`` the configuration file is discovered by walking upward
    from the current working directory.
    """
    return click.option(
        CliOpt.CONFIG_PATH,
        ArgKey.CONFIG_PATH,
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=(
            "Configuration file to use (windvane_config.py, windvane.config.json, "
            "windvane.toml or pyproject.toml). Discovered from the current directory "
            "when omitted."
        ),
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` selecting the output format."""
    return click.option(
        CliOpt.OUTPUT_FORMAT,
        ArgKey.OUTPUT_FORMAT,
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)

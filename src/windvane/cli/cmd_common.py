# topmark:header:start
#
#   project      : Windvane
#   file         : cmd_common.py
#   file_relpath : src/windvane/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Windvane CLI commands.

Commands read their shared state (console, verbosity, color) from ``ctx.obj``
as initialized by `windvane.cli.main.init_common_state`, and build the
resolved configuration through `load_resolved_config` so that library
configuration errors surface as `WindvaneConfigError` (exit code 78).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from windvane.cli.console import ClickConsole
from windvane.cli.errors import WindvaneConfigError
from windvane.cli.keys import ArgKey
from windvane.config.defaults import load_defaults_dict
from windvane.config.errors import ConfigError
from windvane.config.io import resolve_discovered, resolve_file
from windvane.config.logging import get_logger
from windvane.config.resolver import resolve

if TYPE_CHECKING:
    from pathlib import Path

    from windvane.cli.console_api import ConsoleLike
    from windvane.config.logging import WindvaneLogger
    from windvane.config.model import ResolvedConfig

logger: WindvaneLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context (a plain one if absent)."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get(ArgKey.CONSOLE)
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj[ArgKey.CONSOLE] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 = terse)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get(ArgKey.VERBOSITY_LEVEL, 0))


def is_color_enabled(ctx: click.Context) -> bool:
    """Return whether human output may be colored."""
    ctx.ensure_object(dict)
    return bool(ctx.obj.get(ArgKey.COLOR_ENABLED, False))


def load_resolved_config(config_path: Path | None) -> ResolvedConfig:
    """Load and resolve the configuration for a CLI command.

    Args:
        config_path (Path | None): Explicit configuration file (``--config``), or
            ``None`` to discover one from the current working directory.

    Returns:
        ResolvedConfig: The resolved configuration.

    Raises:
        WindvaneConfigError: If the file cannot be loaded or fails validation.
    """
    try:
        if config_path is not None:
            return resolve_file(config_path)
        return resolve_discovered()
    except ConfigError as exc:
        logger.debug("Configuration error: %s", exc)
        raise WindvaneConfigError.from_config_error(exc) from exc


def load_resolved_defaults() -> ResolvedConfig:
    """Resolve the built-in defaults with an empty user configuration."""
    return resolve(load_defaults_dict(), {})

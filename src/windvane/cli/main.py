# topmark:header:start
#
#   project      : Windvane
#   file         : main.py
#   file_relpath : src/windvane/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane command line entry point.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read the console and verbosity from ``ctx.obj``.
- Internal logging is configured from ``WINDVANE_LOG_LEVEL``; program output
  verbosity comes from ``-v``/``-q``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from windvane.cli.commands.config import config_command
from windvane.cli.commands.content import content_command
from windvane.cli.commands.version import version_command
from windvane.cli.console import ClickConsole
from windvane.cli.keys import ArgKey
from windvane.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from windvane.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from windvane.cli.console_api import ConsoleLike
    from windvane.config.logging import WindvaneLogger

logger: WindvaneLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj[ArgKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj[ArgKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Windvane: resolve and inspect utility-CSS configuration.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Windvane CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'windvane config dump' to show the resolved configuration.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(config_command)
cli.add_command(content_command)

if __name__ == "__main__":
    cli()

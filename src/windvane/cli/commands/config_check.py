# topmark:header:start
#
#   project      : Windvane
#   file         : config_check.py
#   file_relpath : src/windvane/cli/commands/config_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `config check` command.

Loads and resolves a configuration and reports the outcome. Schema violations
and load failures are reported as errors with exit code 78 (``EX_CONFIG``);
diagnostics (unknown keys, duplicate content globs) are informational and do
not fail the check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from windvane.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    is_color_enabled,
    load_resolved_config,
)
from windvane.cli.emitters import emit_diagnostics
from windvane.cli.keys import CliCmd
from windvane.cli.options import CONTEXT_SETTINGS, common_config_options
from windvane.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from windvane.cli.console_api import ConsoleLike
    from windvane.config.logging import WindvaneLogger
    from windvane.config.model import ResolvedConfig

logger: WindvaneLogger = get_logger(__name__)


@click.command(
    name=CliCmd.CONFIG_CHECK,
    help="Validate the Windvane configuration and report any diagnostics.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def config_check_command(*, config_path: Path | None) -> None:
    """Validate the configuration.

    Args:
        config_path (Path | None): Explicit configuration file, or ``None`` to
            discover one from the current working directory.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    # Raises WindvaneConfigError (exit 78) on load or schema failure.
    config: ResolvedConfig = load_resolved_config(config_path)

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(f"Config file: {config.source or '<none, using defaults>'}")

    if config.diagnostics and vlevel >= 0:
        emit_diagnostics(
            console=console,
            diagnostics=config.diagnostics,
            color=is_color_enabled(ctx),
        )
    if vlevel >= 0:
        console.print(console.styled("Config OK", fg="green", bold=True))

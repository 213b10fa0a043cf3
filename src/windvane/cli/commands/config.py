# topmark:header:start
#
#   project      : Windvane
#   file         : config.py
#   file_relpath : src/windvane/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `config` command group.

Provides subcommands for inspecting Windvane configuration:

  * ``windvane config dump``: show the resolved configuration.
  * ``windvane config defaults``: show the built-in default configuration.
  * ``windvane config check``: validate a configuration and report diagnostics.
"""

from __future__ import annotations

import click

from windvane.cli.keys import CliCmd
from windvane.cli.options import CONTEXT_SETTINGS

from .config_check import config_check_command
from .config_defaults import config_defaults_command
from .config_dump import config_dump_command


@click.group(
    name=CliCmd.CONFIG,
    help="Inspect and validate Windvane configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


config_command.add_command(config_dump_command, name=CliCmd.CONFIG_DUMP)
config_command.add_command(config_defaults_command, name=CliCmd.CONFIG_DEFAULTS)
config_command.add_command(config_check_command, name=CliCmd.CONFIG_CHECK)

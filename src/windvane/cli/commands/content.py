# topmark:header:start
#
#   project      : Windvane
#   file         : content.py
#   file_relpath : src/windvane/cli/commands/content.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `content` command group.

  * ``windvane content match PATH...``: report which paths the resolved
    content globs select.
"""

from __future__ import annotations

import click

from windvane.cli.keys import CliCmd
from windvane.cli.options import CONTEXT_SETTINGS

from .content_match import content_match_command


@click.group(
    name=CliCmd.CONTENT,
    help="Inspect how content globs select files.",
    context_settings=CONTEXT_SETTINGS,
)
def content_command() -> None:
    """Group for content-related subcommands."""


content_command.add_command(content_match_command, name=CliCmd.CONTENT_MATCH)

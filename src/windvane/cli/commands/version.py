# topmark:header:start
#
#   project      : Windvane
#   file         : version.py
#   file_relpath : src/windvane/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `version` command.

Prints the current Windvane version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from windvane.cli.cmd_common import get_console, get_effective_verbosity
from windvane.cli.emitters import emit_json
from windvane.cli.keys import CliCmd
from windvane.cli.options import CONTEXT_SETTINGS, output_format_option
from windvane.constants import WINDVANE_VERSION
from windvane.core.formats import OutputFormat

if TYPE_CHECKING:
    from windvane.cli.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of Windvane.",
    context_settings=CONTEXT_SETTINGS,
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Windvane.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        emit_json(console=console, payload={"version": WINDVANE_VERSION})
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Windvane Version\n")
        console.print(f"**Windvane version: {WINDVANE_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Windvane version:", bold=True, underline=True))
        console.print(f"    {console.styled(WINDVANE_VERSION, bold=True)}")
    else:
        console.print(console.styled(WINDVANE_VERSION, bold=True))

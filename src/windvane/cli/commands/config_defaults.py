# topmark:header:start
#
#   project      : Windvane
#   file         : config_defaults.py
#   file_relpath : src/windvane/cli/commands/config_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `config defaults` command.

Prints Windvane's built-in default configuration. The output is the resolved
form of the defaults (an empty user configuration), so it uses the same
layout as ``windvane config dump``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from windvane.cli.cmd_common import get_console, get_effective_verbosity, load_resolved_defaults
from windvane.cli.emitters import emit_json, emit_toml_block, render_config_markdown
from windvane.cli.keys import CliCmd
from windvane.cli.options import CONTEXT_SETTINGS, output_format_option
from windvane.config.io import to_toml
from windvane.core.formats import OutputFormat

if TYPE_CHECKING:
    from windvane.cli.console_api import ConsoleLike
    from windvane.config.model import ResolvedConfig


@click.command(
    name=CliCmd.CONFIG_DEFAULTS,
    help="Display the built-in default Windvane configuration.",
    context_settings=CONTEXT_SETTINGS,
)
@output_format_option
def config_defaults_command(*, output_format: OutputFormat | None) -> None:
    """Display the built-in default configuration.

    Args:
        output_format (OutputFormat | None): Output format to use
            (``default``, ``markdown`` or ``json``).

    Raises:
        NotImplementedError: When providing an unsupported output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    defaults: ResolvedConfig = load_resolved_defaults()

    if fmt == OutputFormat.DEFAULT:
        emit_toml_block(
            console=console,
            title="Windvane Default Config (TOML):",
            toml_text=to_toml(defaults.to_toml_dict()),
            verbosity_level=get_effective_verbosity(ctx),
        )
    elif fmt == OutputFormat.JSON:
        emit_json(console=console, payload=defaults.to_json_dict())
    elif fmt == OutputFormat.MARKDOWN:
        console.print(
            render_config_markdown(title="Windvane Default Config", config=defaults),
            nl=False,
        )
    else:
        raise NotImplementedError(f"Unsupported output format: {fmt!r}")

# topmark:header:start
#
#   project      : Windvane
#   file         : config_dump.py
#   file_relpath : src/windvane/cli/commands/config_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `config dump` command.

Emits the resolved configuration: the user configuration (explicit
``--config`` or discovered from the current directory) merged over the
built-in defaults. When no configuration file exists, the resolved defaults
are dumped.

In the default format the TOML is wrapped between `TOML_BLOCK_START` and
`TOML_BLOCK_END` markers for easy parsing in tests or tooling.
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
from windvane.cli.emitters import (
    emit_diagnostics,
    emit_json,
    emit_toml_block,
    render_config_markdown,
)
from windvane.cli.keys import ArgKey, CliCmd
from windvane.cli.options import CONTEXT_SETTINGS, common_config_options, output_format_option
from windvane.config.io import to_toml
from windvane.config.logging import get_logger
from windvane.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from pathlib import Path

    from windvane.cli.console_api import ConsoleLike
    from windvane.config.logging import WindvaneLogger
    from windvane.config.model import ResolvedConfig

logger: WindvaneLogger = get_logger(__name__)


@click.command(
    name=CliCmd.CONFIG_DUMP,
    help="Dump the resolved Windvane configuration.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@output_format_option
def config_dump_command(
    *,
    config_path: Path | None,
    output_format: OutputFormat | None,
) -> None:
    """Dump the resolved configuration.

    Args:
        config_path (Path | None): Explicit configuration file, or ``None`` to
            discover one from the current working directory.
        output_format (OutputFormat | None): Output format to use
            (``default``, ``markdown`` or ``json``).

    Raises:
        NotImplementedError: When providing an unsupported output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if is_machine_format(fmt):
        ctx.obj[ArgKey.COLOR_ENABLED] = False

    config: ResolvedConfig = load_resolved_config(config_path)
    logger.trace("Resolved configuration: %s", config)

    vlevel: int = get_effective_verbosity(ctx)

    if fmt == OutputFormat.DEFAULT:
        if vlevel > 0:
            console.print(f"Config file: {config.source or '<none, using defaults>'}")
            if config.diagnostics:
                emit_diagnostics(
                    console=console,
                    diagnostics=config.diagnostics,
                    color=is_color_enabled(ctx),
                )
        emit_toml_block(
            console=console,
            title="Windvane Config Dump (TOML):",
            toml_text=to_toml(config.to_toml_dict()),
            verbosity_level=vlevel,
        )
    elif fmt == OutputFormat.JSON:
        emit_json(console=console, payload=config.to_json_dict())
    elif fmt == OutputFormat.MARKDOWN:
        console.print(
            render_config_markdown(title="Windvane Config Dump", config=config),
            nl=False,
        )
    else:
        raise NotImplementedError(f"Unsupported output format: {fmt!r}")

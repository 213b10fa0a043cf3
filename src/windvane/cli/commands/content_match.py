# topmark:header:start
#
#   project      : Windvane
#   file         : content_match.py
#   file_relpath : src/windvane/cli/commands/content_match.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windvane `content match` command.

Compiles the resolved content globs with `windvane.content.ContentMatcher`
and reports, for each PATH, whether it is selected. Paths are matched
relative to the directory of the configuration file (the current directory
when no file was found); paths outside that directory never match.

Exit status is 0 when every PATH matches, 1 otherwise.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from windvane.cli.cmd_common import get_console, get_effective_verbosity, load_resolved_config
from windvane.cli.emitters import emit_json
from windvane.cli.exit_codes import ExitCode
from windvane.cli.keys import ArgKey, CliCmd
from windvane.cli.options import CONTEXT_SETTINGS, common_config_options, output_format_option
from windvane.config.logging import get_logger
from windvane.content import ContentMatcher
from windvane.core.formats import OutputFormat

if TYPE_CHECKING:
    from windvane.cli.console_api import ConsoleLike
    from windvane.config.logging import WindvaneLogger
    from windvane.config.model import ResolvedConfig

logger: WindvaneLogger = get_logger(__name__)


@click.command(
    name=CliCmd.CONTENT_MATCH,
    help="Report which PATHS are selected by the resolved content globs.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument(ArgKey.PATHS, nargs=-1, required=True, type=click.Path(path_type=Path))
@common_config_options
@output_format_option
def content_match_command(
    *,
    paths: tuple[Path, ...],
    config_path: Path | None,
    output_format: OutputFormat | None,
) -> None:
    """Match PATHS against the resolved content globs.

    Args:
        paths (tuple[Path, ...]): Paths to test; they need not exist.
        config_path (Path | None): Explicit configuration file, or ``None`` to
            discover one from the current working directory.
        output_format (OutputFormat | None): ``default`` prints one line per
            path, ``json`` a single document; ``markdown`` renders a table.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: ResolvedConfig = load_resolved_config(config_path)
    base: Path = config.source.parent if config.source is not None else Path.cwd()
    matcher: ContentMatcher = ContentMatcher.from_patterns(config.content)

    results: list[tuple[Path, bool]] = [(p, matcher.matches(p, base)) for p in paths]
    all_matched: bool = all(ok for _, ok in results)
    logger.debug("content match: %d/%d path(s) selected", sum(ok for _, ok in results), len(results))

    if fmt == OutputFormat.JSON:
        emit_json(
            console=console,
            payload={
                "base": str(base),
                "content": list(config.content),
                "results": [{"path": str(p), "matched": ok} for p, ok in results],
            },
        )
    elif fmt == OutputFormat.MARKDOWN:
        console.print("| Path | Matched |")
        console.print("| --- | --- |")
        for p, ok in results:
            console.print(f"| `{p}` | {'yes' if ok else 'no'} |")
    else:
        if get_effective_verbosity(ctx) > 0:
            console.print(f"Content globs (relative to {base}):")
            for pattern in config.content:
                console.print(f"  {pattern}")
        for p, ok in results:
            mark: str = (
                console.styled("match", fg="green") if ok else console.styled("no match", fg="red")
            )
            console.print(f"{mark}: {p}")

    ctx.exit(ExitCode.SUCCESS if all_matched else ExitCode.FAILURE)

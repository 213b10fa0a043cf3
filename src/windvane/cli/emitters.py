# topmark:header:start
#
#   project      : Windvane
#   file         : emitters.py
#   file_relpath : src/windvane/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human and machine output helpers for CLI commands.

Every command renders through these helpers so that the three output formats
look the same across commands:

    * default: TOML between `TOML_BLOCK_START` and `TOML_BLOCK_END` markers,
      with an optional banner and diagnostics when verbose;
    * markdown: a heading plus a fenced TOML block, no ANSI styling;
    * json: a single JSON document on stdout.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from windvane.config.io import to_toml
from windvane.config.plugins import qualified_name
from windvane.constants import TOML_BLOCK_END, TOML_BLOCK_START
from windvane.core.diagnostics import compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Sequence

    from windvane.cli.console_api import ConsoleLike
    from windvane.config.model import ResolvedConfig
    from windvane.core.diagnostics import Diagnostic, DiagnosticStats


def emit_toml_block(
    *,
    console: ConsoleLike,
    title: str,
    toml_text: str,
    verbosity_level: int,
) -> None:
    """Emit a TOML snippet between BEGIN/END markers, with a banner when verbose.

    Args:
        console (ConsoleLike): Console instance for printing styled output.
        title (str): Title line shown above the block when verbosity > 0.
        toml_text (str): The TOML content to render.
        verbosity_level (int): Effective verbosity; 0 disables the banner.
    """
    if verbosity_level > 0:
        console.print(console.styled(title, bold=True, underline=True))
    console.print(console.styled(TOML_BLOCK_START, fg="cyan", dim=True))
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))
    console.print(console.styled(TOML_BLOCK_END, fg="cyan", dim=True))


def format_diagnostic(diag: Diagnostic, *, color: bool) -> str:
    """Return a one-line rendering of a diagnostic."""
    where: str = f" ({diag.key_path})" if diag.key_path else ""
    label: str = f"{diag.level.value}:"
    if color:
        label = diag.level.color(label)
    return f"- {label} {diag.message}{where}"


def emit_diagnostics(
    *,
    console: ConsoleLike,
    diagnostics: Sequence[Diagnostic],
    color: bool,
) -> None:
    """Emit a summary line followed by one line per diagnostic."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    console.print(
        f"Config diagnostics: {stats.n_error} error(s), "
        f"{stats.n_warning} warning(s), {stats.n_info} information(s)"
    )
    for diag in diagnostics:
        console.print(format_diagnostic(diag, color=color))


def render_config_markdown(*, title: str, config: ResolvedConfig) -> str:
    """Return a Markdown document with the configuration as a fenced TOML block."""
    lines: list[str] = [f"# {title}", ""]
    if config.source is not None:
        lines += [f"Source: `{config.source}`", ""]
    lines += ["```toml", to_toml(config.to_toml_dict()).rstrip("\n"), "```"]
    if config.diagnostics:
        lines += ["", "## Diagnostics", ""]
        for diag in config.diagnostics:
            where: str = f" (`{diag.key_path}`)" if diag.key_path else ""
            lines.append(f"- **{diag.level.value}**: {diag.message}{where}")
    return "\n".join(lines) + "\n"


def _json_default(value: object) -> str:
    """Render values JSON cannot represent: callables by name, anything else with `str`."""
    if callable(value):
        return qualified_name(value)
    return str(value)


def emit_json(*, console: ConsoleLike, payload: Any) -> None:
    """Emit a JSON document (see `_json_default` for non-JSON values)."""
    console.print(json.dumps(payload, indent=2, default=_json_default))

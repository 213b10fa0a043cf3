# topmark:header:start
#
#   project      : Windvane
#   file         : errors.py
#   file_relpath : src/windvane/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Windvane CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`windvane.config.errors`) are
    translated at the command boundary, see `WindvaneConfigError.from_config_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from windvane.cli.exit_codes import ExitCode
from windvane.cli.keys import ArgKey

if TYPE_CHECKING:
    from windvane.config.errors import ConfigError


class WindvaneError(click.ClickException):
    """Base class for all Windvane CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console: Any = ctx.obj.get(ArgKey.CONSOLE)
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class WindvaneUsageError(WindvaneError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WindvaneConfigError(WindvaneError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR

    @classmethod
    def from_config_error(cls, exc: ConfigError) -> WindvaneConfigError:
        """Wrap a library configuration error for display by Click."""
        return cls(str(exc))

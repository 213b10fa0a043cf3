# topmark:header:start
#
#   project      : Windvane
#   file         : diagnostics.py
#   file_relpath : src/windvane/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

Diagnostics are informational notes attached to a resolved configuration.
They never alter resolution results; schema violations raise
`windvane.config.errors.InvalidSchema` instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during resolution.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional key path."""

    level: DiagnosticLevel
    message: str
    key_path: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly view of this diagnostic."""
        return {"level": self.level.value, "message": self.message, "key_path": self.key_path}


@dataclass
class DiagnosticLog:
    """Mutable, ordered collection of diagnostics used while building a result."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str, key_path: str | None = None) -> None:
        """Append a diagnostic with the given level."""
        self.items.append(Diagnostic(level=level, message=message, key_path=key_path))

    def add_info(self, message: str, key_path: str | None = None) -> None:
        """Append an INFO diagnostic."""
        self.add(DiagnosticLevel.INFO, message, key_path)

    def add_warning(self, message: str, key_path: str | None = None) -> None:
        """Append a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message, key_path)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)

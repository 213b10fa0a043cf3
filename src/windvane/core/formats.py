# topmark:header:start
#
#   project      : Windvane
#   file         : formats.py
#   file_relpath : src/windvane/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions.

This module centralizes the `OutputFormat` enum so CLI commands and emitters
agree on the same format vocabulary without depending on `Click`.

Machine formats (JSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        DEFAULT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).

    Notes:
        - Use with `windvane.cli.cli_types.EnumChoiceParam` to parse
          ``--format`` from Click.
    """

    # Human formats:
    DEFAULT = "default"
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt (OutputFormat | None): The output format to be checked.

    Returns:
        bool: `True` if the format provided is a machine format, else `False`.
    """
    return fmt is OutputFormat.JSON

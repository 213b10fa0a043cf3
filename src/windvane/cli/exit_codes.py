# topmark:header:start
#
#   project      : Windvane
#   file         : exit_codes.py
#   file_relpath : src/windvane/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the Windvane CLI application.

The values follow the BSD ``sysexits.h`` conventions where one applies, so
scripts can tell a bad invocation from a bad configuration.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Windvane CLI.

    Attributes:
        SUCCESS (int): The command completed successfully.
        FAILURE (int): The command ran but reported a negative result (e.g.
            ``content match`` with unmatched paths).
        USAGE_ERROR (int): Invalid command line usage (``EX_USAGE``).
        CONFIG_ERROR (int): The configuration could not be loaded or is
            invalid (``EX_CONFIG``).
        UNEXPECTED_ERROR (int): Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255

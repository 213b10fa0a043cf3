# topmark:header:start
#
#   project      : Windvane
#   file         : __main__.py
#   file_relpath : src/windvane/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Windvane via ``python -m windvane``.

It delegates directly to :func:`windvane.cli.main.cli`, so the module
interface and the ``windvane`` console script share one entry point.

Examples:
    Dump the resolved configuration of the current project::

        python -m windvane config dump
"""

from __future__ import annotations

from windvane.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()

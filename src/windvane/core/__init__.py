# topmark:header:start
#
#   project      : Windvane
#   file         : __init__.py
#   file_relpath : src/windvane/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the config layer and the CLI.

Modules:
    - `windvane.core.diagnostics`: non-fatal diagnostics collected while
      resolving a configuration.
"""

from __future__ import annotations

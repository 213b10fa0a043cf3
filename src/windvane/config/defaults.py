# topmark:header:start
#
#   project      : Windvane
#   file         : defaults.py
#   file_relpath : src/windvane/config/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in default configuration.

The defaults are the base layer of every resolution. They are defined in code
and returned as a **new** dict on each call, so callers (including the resolver)
can never mutate the shipped data.

Only a representative subset of the design-token scales is shipped. Categories
not listed here are simply absent from the defaults; a user may still define
them through ``theme`` or ``theme.extend``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from windvane.config.keys import Keys

if TYPE_CHECKING:
    from windvane.config.types import ConfigTable, ThemeTable


def _spacing_scale() -> dict[str, str]:
    """Return the spacing scale (``0``, ``px`` and quarter-rem steps)."""
    scale: dict[str, str] = {"0": "0px", "px": "1px"}
    steps: tuple[str, ...] = (
        "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8", "9",
        "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40", "44",
        "48", "52", "56", "60", "64", "72", "80", "96",
    )  # fmt: skip
    for step in steps:
        rem: float = float(step) / 4
        scale[step] = f"{rem:g}rem"
    return scale


def default_theme() -> ThemeTable:
    """Return the default ``theme`` table (fresh copy)."""
    return {
        "screens": {
            "sm": "640px",
            "md": "768px",
            "lg": "1024px",
            "xl": "1280px",
            "2xl": "1536px",
        },
        "colors": {
            "inherit": "inherit",
            "current": "currentColor",
            "transparent": "transparent",
            "black": "#000",
            "white": "#fff",
            "slate": {
                "50": "#f8fafc",
                "100": "#f1f5f9",
                "200": "#e2e8f0",
                "300": "#cbd5e1",
                "400": "#94a3b8",
                "500": "#64748b",
                "600": "#475569",
                "700": "#334155",
                "800": "#1e293b",
                "900": "#0f172a",
            },
            "red": {
                "50": "#fef2f2",
                "100": "#fee2e2",
                "500": "#ef4444",
                "700": "#b91c1c",
                "900": "#7f1d1d",
            },
            "blue": {
                "50": "#eff6ff",
                "100": "#dbeafe",
                "500": "#3b82f6",
                "700": "#1d4ed8",
                "900": "#1e3a8a",
            },
        },
        "spacing": _spacing_scale(),
        "fontFamily": {
            "sans": [
                "ui-sans-serif",
                "system-ui",
                "sans-serif",
                '"Apple Color Emoji"',
                '"Segoe UI Emoji"',
            ],
            "serif": ["ui-serif", "Georgia", "Cambria", '"Times New Roman"', "Times", "serif"],
            "mono": ["ui-monospace", "SFMono-Regular", "Menlo", "Monaco", "Consolas", "monospace"],
        },
        "fontSize": {
            "xs": ["0.75rem", {"lineHeight": "1rem"}],
            "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
            "base": ["1rem", {"lineHeight": "1.5rem"}],
            "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
            "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
            "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        },
        "fontWeight": {
            "thin": "100",
            "light": "300",
            "normal": "400",
            "medium": "500",
            "semibold": "600",
            "bold": "700",
            "black": "900",
        },
        "lineHeight": {
            "none": "1",
            "tight": "1.25",
            "snug": "1.375",
            "normal": "1.5",
            "relaxed": "1.625",
            "loose": "2",
        },
        "borderRadius": {
            "none": "0px",
            "sm": "0.125rem",
            "DEFAULT": "0.25rem",
            "md": "0.375rem",
            "lg": "0.5rem",
            "full": "9999px",
        },
        "boxShadow": {
            "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
            "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
            "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
            "none": "none",
        },
        "opacity": {
            "0": "0",
            "25": "0.25",
            "50": "0.5",
            "75": "0.75",
            "100": "1",
        },
        "zIndex": {
            "auto": "auto",
            "0": "0",
            "10": "10",
            "20": "20",
            "50": "50",
        },
    }


DEFAULT_THEME_CATEGORIES: Final[tuple[str, ...]] = tuple(default_theme())


def load_defaults_dict() -> ConfigTable:
    """Return Windvane's built-in **default configuration** as a Python dict.

    This function performs **no I/O**.

    Returns:
        ConfigTable: A new dict with ``content``, ``theme`` and ``plugins``
            keys. The returned value is never shared, so callers can mutate it
            safely.
    """
    return {
        Keys.CONTENT: [],
        Keys.THEME: default_theme(),
        Keys.PLUGINS: [],
    }

"""Help and cheatsheet content for the datepick TUI."""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "Shortcuts",
    "",
    "Enter/Space  open picker / pick focused day",
    "hjkl         move focused day (range preview follows)",
    "H / L        previous / next month",
    "t            focus today",
    "v            toggle days / years view",
    "  years:     j/k year, Enter expand, h/l month, Enter jump",
    "r            toggle range mode (duo pickers)",
    "x            clear date / range",
    "Esc          close picker / dismiss overlays",
    "?            toggle this help",
    "q            quit and print the picked value",
)

__all__ = ["HELP_LINES"]

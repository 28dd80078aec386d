#!/usr/bin/env python3
"""Basic UI helpers for curses rendering."""

from __future__ import annotations

import curses
from typing import Iterable, Tuple

_BOX_COLOR_PAIR: int | None = None
_RANGE_COLOR_PAIR: int | None = None


def _init_pair(number: int, fg: int, bg: int) -> int:
    if not curses.has_colors():
        return 0
    try:
        curses.init_pair(number, fg, bg)
    except curses.error:
        return 0
    return curses.color_pair(number)


def box_attr() -> int:
    global _BOX_COLOR_PAIR
    if _BOX_COLOR_PAIR is None:
        _BOX_COLOR_PAIR = _init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLACK)
    return _BOX_COLOR_PAIR


def range_attr() -> int:
    """Attribute for days inside a committed or previewed range."""
    global _RANGE_COLOR_PAIR
    if _RANGE_COLOR_PAIR is None:
        _RANGE_COLOR_PAIR = _init_pair(2, curses.COLOR_BLACK, curses.COLOR_CYAN)
    return _RANGE_COLOR_PAIR or curses.A_UNDERLINE


def safe_addnstr(win: "curses.window", y: int, x: int, text: str, attr: int = 0) -> None:  # type: ignore[name-defined]
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w - 1:
        return
    width = w - 1 - x
    try:
        win.addnstr(y, x, text, width, attr)
    except curses.error:
        pass


def draw_header(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    if w <= 0 or h <= 0:
        return
    stdscr.addnstr(0, 0, text.ljust(max(1, w - 1)), max(0, w - 1))


def draw_footer(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    if w <= 0 or h <= 0:
        return
    stdscr.addnstr(h - 1, 0, text.ljust(max(1, w - 1)), max(0, w - 1))


def centered_origin(stdscr: "curses.window", win_h: int, win_w: int) -> Tuple[int, int]:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    return max(0, (h - win_h) // 2), max(0, (w - win_w) // 2)


def open_panel(stdscr: "curses.window", win_h: int, win_w: int) -> "curses.window":  # type: ignore[name-defined]
    """Bordered sub-window centered on screen, clipped to the terminal."""
    h, w = stdscr.getmaxyx()
    win_h = clamp(win_h, 3, max(3, h - 2))
    win_w = clamp(win_w, 4, max(4, w - 2))
    y, x = centered_origin(stdscr, win_h, win_w)
    win = stdscr.derwin(win_h, win_w, y, x)
    attr = box_attr()
    if attr:
        win.bkgd(" ", attr)
        win.attrset(attr)
    win.erase()
    win.border()
    return win


def draw_centered_box(stdscr: "curses.window", lines: Iterable[str]) -> None:  # type: ignore[name-defined]
    lines_list = list(lines)
    win = open_panel(stdscr, len(lines_list) + 2, max(len(line) for line in lines_list) + 4)
    for idx, line in enumerate(lines_list, start=1):
        safe_addnstr(win, idx, 2, line, box_attr())
    win.refresh()


def clamp(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(value, max_value))


__all__ = [
    "box_attr",
    "range_attr",
    "safe_addnstr",
    "draw_header",
    "draw_footer",
    "centered_origin",
    "open_panel",
    "draw_centered_box",
    "clamp",
]

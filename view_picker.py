#!/usr/bin/env python3
"""Picker rendering: trigger line, day grid and the years accordion."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from models import DAY_NAMES, MONTHS, YEARS
from picker import DatePickerController, DayView, YearEntry
from state import UiState
from ui_base import box_attr, clamp, open_panel, range_attr, safe_addnstr

CELL_W = 4
GRID_COLS = 7
MONTHS_PER_ROW = 4
BODY_ROWS = 7  # weekday header + up to six weeks
PANEL_W = CELL_W * GRID_COLS + 4
TRIGGER_ICON = "[cal]"


@dataclass(frozen=True)
class YearLine:
    year: int
    # None for the year row itself; month indices for an expanded month row
    months: Optional[Tuple[int, ...]] = None


def build_year_lines(expanded_year: Optional[int]) -> List[YearLine]:
    lines: List[YearLine] = []
    for year in YEARS:
        lines.append(YearLine(year))
        if year == expanded_year:
            for offset in range(0, len(MONTHS), MONTHS_PER_ROW):
                lines.append(YearLine(year, tuple(range(offset, offset + MONTHS_PER_ROW))))
    return lines


def year_line_index(year: int, expanded_year: Optional[int]) -> Optional[int]:
    for idx, line in enumerate(build_year_lines(expanded_year)):
        if line.year == year and line.months is None:
            return idx
    return None


def cell_text(view: DayView, focused: bool) -> str:
    label = f"{view.day.day:>2}"
    if focused:
        return f"[{label}]"
    if view.is_today:
        return f" {label}*"
    return f" {label} "


def cell_attr(view: DayView) -> int:
    attr = 0
    if view.is_today:
        attr |= curses.A_BOLD
    if view.is_selected or view.is_range_start or view.is_range_end:
        return attr | curses.A_REVERSE
    if view.in_range:
        attr |= range_attr()
    return attr


class PickerView:
    def __init__(self, picker: DatePickerController):
        self.picker = picker

    def panel_height(self) -> int:
        extra = 0
        if self.picker.mode == "duo":
            extra += 1
        if self.picker.can_reset():
            extra += 1
        return 2 + 1 + BODY_ROWS + extra

    def render(self, stdscr: "curses.window", ui: UiState) -> None:  # type: ignore[name-defined]
        self._draw_trigger(stdscr)
        if not self.picker.is_open:
            return
        win = open_panel(stdscr, self.panel_height(), PANEL_W)
        self._draw_title(win)
        if self.picker.view == "days":
            self._draw_days(win, ui)
        else:
            self._draw_years(win, ui)
        self._draw_controls(win)
        win.refresh()

    def _draw_trigger(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        text = f"[ {self.picker.display_text()} ] {TRIGGER_ICON}"
        attr = curses.A_DIM if self.picker.is_muted() else curses.A_BOLD
        safe_addnstr(stdscr, 2, 2, text, attr)

    def _draw_title(self, win: "curses.window") -> None:  # type: ignore[name-defined]
        marker = "^" if self.picker.view == "years" else "v"
        safe_addnstr(win, 1, 2, f"{self.picker.header_text()} {marker}", curses.A_BOLD | box_attr())
        _, w = win.getmaxyx()
        safe_addnstr(win, 1, max(2, w - 7), "<  >", box_attr())

    def _draw_days(self, win: "curses.window", ui: UiState) -> None:  # type: ignore[name-defined]
        top = 2
        for idx, name in enumerate(DAY_NAMES):
            safe_addnstr(win, top, 2 + idx * CELL_W, f" {name} ", curses.A_DIM | box_attr())
        cells = self.picker.day_cells()
        for idx, view in enumerate(cells):
            if view is None:
                continue
            row, col = divmod(idx, GRID_COLS)
            focused = view.day == ui.focused_day
            safe_addnstr(
                win,
                top + 1 + row,
                2 + col * CELL_W,
                cell_text(view, focused),
                cell_attr(view) | box_attr(),
            )

    def _draw_years(self, win: "curses.window", ui: UiState) -> None:  # type: ignore[name-defined]
        top = 2
        lines = build_year_lines(ui.expanded_year)
        start = clamp(ui.year_scroll, 0, max(0, len(lines) - BODY_ROWS))
        entries = {entry.year: entry for entry in self.picker.year_entries()}
        focused_year = YEARS[clamp(ui.year_index, 0, len(YEARS) - 1)]
        for offset, line in enumerate(lines[start : start + BODY_ROWS]):
            y = top + offset
            entry = entries[line.year]
            if line.months is None:
                self._draw_year_row(win, y, entry, ui, focused_year)
            else:
                self._draw_month_row(win, y, entry, line.months, ui, focused_year)

    def _draw_year_row(
        self,
        win: "curses.window",  # type: ignore[name-defined]
        y: int,
        entry: YearEntry,
        ui: UiState,
        focused_year: int,
    ) -> None:
        arrow = "v" if entry.year == ui.expanded_year else ">"
        attr = box_attr()
        if entry.is_current:
            attr |= curses.A_BOLD
        if entry.year == focused_year and ui.expanded_year != focused_year:
            attr |= curses.A_STANDOUT
        safe_addnstr(win, y, 2, f"{arrow} {entry.year}", attr)

    def _draw_month_row(
        self,
        win: "curses.window",  # type: ignore[name-defined]
        y: int,
        entry: YearEntry,
        months: Tuple[int, ...],
        ui: UiState,
        focused_year: int,
    ) -> None:
        for col, month_index in enumerate(months):
            attr = box_attr()
            if entry.current_month == month_index:
                attr |= curses.A_REVERSE
            if entry.year == focused_year and ui.month_focus == month_index:
                attr |= curses.A_UNDERLINE | curses.A_BOLD
            safe_addnstr(win, y, 4 + col * 6, f" {MONTHS[month_index][0]} ", attr)

    def _draw_controls(self, win: "curses.window") -> None:  # type: ignore[name-defined]
        h, _ = win.getmaxyx()
        y = h - 2
        if self.picker.can_reset():
            noun = "range" if self.picker.is_range_mode else "date"
            safe_addnstr(win, y, 2, f"Clear {noun} (x)", box_attr())
            y -= 1
        if self.picker.mode == "duo":
            state = "on" if self.picker.is_range_mode else "off"
            safe_addnstr(win, y, 2, f"Range mode [{state}] (r)", box_attr())


def outside_cursor_month(current: date, cursor: date) -> bool:
    """True when ``current`` is outside the month the grid is showing."""
    return (current.year, current.month) != (cursor.year, cursor.month)


__all__ = [
    "PickerView",
    "YearLine",
    "build_year_lines",
    "year_line_index",
    "cell_text",
    "cell_attr",
    "outside_cursor_month",
    "PANEL_W",
]

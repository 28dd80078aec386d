#!/usr/bin/env python3
"""Orchestrator for datepick."""
from __future__ import annotations

import curses
import logging
from datetime import date, timedelta

from config import Config
from date_ranges import add_months
from help_content import HELP_LINES
from keys import (
    KEY_CAP_H,
    KEY_CAP_L,
    KEY_CAP_Q,
    KEY_CLEAR,
    KEY_ENTER_KEYS,
    KEY_ESC,
    KEY_H,
    KEY_HELP,
    KEY_J,
    KEY_K,
    KEY_L,
    KEY_Q,
    KEY_RANGE_MODE,
    KEY_SPACE,
    KEY_TODAY,
    KEY_VIEW,
)
from models import MONTHS, YEARS, NoValue, SelectionValue
from picker import DatePickerController
from scheduler import monotonic_ms
from state import UiState
from ui_base import clamp, draw_centered_box, draw_footer, draw_header
from view_picker import (
    BODY_ROWS,
    PickerView,
    outside_cursor_month,
    year_line_index,
)

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 100
FOOTER = "Enter: open/pick   hjkl: move   H/L: month   v: years   r: range   x: clear   ?: help   q: quit"


class Orchestrator:
    """Owns the picker instance and the curses lifecycle."""

    def __init__(
        self,
        config: Config,
        *,
        value: object = None,
        version: str = "0.0.0",
    ) -> None:
        self.version = version
        self.config = config
        self.ui = UiState()
        self.result: SelectionValue = NoValue()
        self.picker = DatePickerController(
            mode=config.mode,
            value=value,
            placeholder=config.placeholder,
            on_value_change=self._on_value_change,
            on_mode_change=self._on_mode_change,
            on_reset=self._on_reset if config.reset_enabled else None,
            on_scroll_to_year=self._on_scroll_to_year,
        )
        self.result = self.picker.value
        self.ui.focused_day = self.picker.cursor

    def run(self) -> int:
        logger.info("starting picker mode=%s", self.picker.mode)
        try:
            curses.wrapper(self._curses_main)
        except curses.error:
            logger.exception("curses failure")
            return 1
        finally:
            self.picker.dispose()
        return 0

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.timeout(POLL_TIMEOUT_MS)

        self._draw(stdscr)

        while True:
            ch = stdscr.getch()
            fired = self.picker.tick(monotonic_ms())

            if ch in (-1, curses.ERR):
                if fired:
                    self._draw(stdscr)
                continue
            if ch in (KEY_Q, KEY_CAP_Q) and self.ui.overlay == "none":
                break

            if self.handle_key(ch) or fired:
                self._draw(stdscr)

    # Picker signals
    def _on_value_change(self, value: SelectionValue) -> None:
        logger.debug("value changed: %r", value)
        self.result = value

    def _on_mode_change(self, mode: str) -> None:
        self.ui.focused_day = self.picker.cursor

    def _on_reset(self) -> None:
        self.ui.overlay = "message"
        self.ui.overlay_message = "Selection cleared"

    def _on_scroll_to_year(self, year: int) -> None:
        line = year_line_index(year, self.ui.expanded_year)
        if line is not None:
            self.ui.year_scroll = max(0, line)

    # Rendering
    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        header = f"datepick {self.version} - {self.picker.mode}"
        if self.picker.mode == "duo":
            header += f" ({self.picker.sub_mode})"
        draw_header(stdscr, header)
        draw_footer(stdscr, FOOTER)

        PickerView(self.picker).render(stdscr, self.ui)

        if self.ui.overlay == "help":
            draw_centered_box(stdscr, list(HELP_LINES) + ["", "Esc to dismiss"])
        elif self.ui.overlay == "message":
            draw_centered_box(stdscr, [self.ui.overlay_message, "", "Press any key to dismiss"])

        stdscr.refresh()

    # Key handling
    def handle_key(self, ch: int) -> bool:
        if self.ui.overlay == "help":
            if ch in (KEY_ESC, KEY_HELP):
                self.ui.overlay = "none"
            return True
        if self.ui.overlay == "message":
            self.ui.overlay = "none"
            return True

        if ch == KEY_HELP:
            self.ui.overlay = "help"
            return True

        if not self.picker.is_open:
            if ch in KEY_ENTER_KEYS or ch == KEY_SPACE:
                self.picker.open()
                self._sync_focus()
                return True
            return False

        if ch == KEY_ESC:
            self.picker.close()
            return True
        if ch == KEY_RANGE_MODE:
            self.picker.set_range_mode(not self.picker.is_range_mode)
            return True
        if ch == KEY_CLEAR:
            if not self.picker.can_reset():
                return False
            self.picker.reset()
            return True
        if ch == KEY_VIEW:
            return self._toggle_view()

        if self.picker.view == "days":
            return self._handle_day_keys(ch)
        return self._handle_year_keys(ch)

    def _toggle_view(self) -> bool:
        if self.picker.view == "days":
            year_idx = self.picker.current_year_index()
            if year_idx is not None:
                self.ui.year_index = year_idx
                self.ui.expanded_year = YEARS[year_idx]
            self.ui.month_focus = self.picker.cursor.month - 1
        self.picker.toggle_view()
        return True

    def _handle_day_keys(self, ch: int) -> bool:
        deltas = {KEY_H: -1, KEY_L: 1, KEY_K: -7, KEY_J: 7}
        if ch in deltas:
            self._move_focus(self.ui.focused_day + timedelta(days=deltas[ch]))
            return True
        if ch == KEY_CAP_H:
            self.picker.previous_month()
            self.ui.focused_day = add_months(self.ui.focused_day, -1)
            return True
        if ch == KEY_CAP_L:
            self.picker.next_month()
            self.ui.focused_day = add_months(self.ui.focused_day, 1)
            return True
        if ch == KEY_TODAY:
            self._move_focus(date.today())
            return True
        if ch in KEY_ENTER_KEYS or ch == KEY_SPACE:
            self.picker.select_day(self.ui.focused_day)
            return True
        return False

    def _move_focus(self, target: date) -> None:
        while outside_cursor_month(target, self.picker.cursor):
            cursor = self.picker.cursor
            if (target.year, target.month) < (cursor.year, cursor.month):
                self.picker.previous_month()
            else:
                self.picker.next_month()
        self.ui.focused_day = target
        self.picker.hover_day(target)

    def _handle_year_keys(self, ch: int) -> bool:
        if ch in (KEY_J, KEY_K):
            step = 1 if ch == KEY_J else -1
            self.ui.year_index = clamp(self.ui.year_index + step, 0, len(YEARS) - 1)
            self._keep_year_visible()
            return True
        if ch in (KEY_H, KEY_L):
            step = 1 if ch == KEY_L else -1
            self.ui.month_focus = clamp(self.ui.month_focus + step, 0, len(MONTHS) - 1)
            return True
        if ch in KEY_ENTER_KEYS or ch == KEY_SPACE:
            year = YEARS[self.ui.year_index]
            if self.ui.expanded_year != year:
                self.ui.expanded_year = year
                self._keep_year_visible()
                return True
            self.picker.select_month_year(year, self.ui.month_focus)
            self._sync_focus()
            return True
        return False

    def _keep_year_visible(self) -> None:
        line = year_line_index(YEARS[self.ui.year_index], self.ui.expanded_year) or 0
        if line < self.ui.year_scroll:
            self.ui.year_scroll = line
        elif line >= self.ui.year_scroll + BODY_ROWS:
            self.ui.year_scroll = line - BODY_ROWS + 1

    def _sync_focus(self) -> None:
        if outside_cursor_month(self.ui.focused_day, self.picker.cursor):
            self.ui.focused_day = self.picker.cursor


__all__ = ["Orchestrator"]

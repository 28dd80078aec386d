#!/usr/bin/env python3
"""Date picker controller: the single public surface of datepick."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from calendar_grid import build_month_grid
from date_ranges import (
    add_months,
    format_long,
    format_month_year,
    format_short,
    set_year_month,
)
from mode_controller import ModeController
from models import (
    MONTHS,
    YEARS,
    DayCell,
    Mode,
    NoValue,
    RangeValue,
    SelectionValue,
    SingleValue,
    SubMode,
    coerce_value,
    normalize_mode,
)
from scheduler import DeferredScheduler
from selection import EngineResult
from state import PickerState
from view_state import ViewName, ViewStateMachine

logger = logging.getLogger(__name__)

DEFAULT_SINGLE_PLACEHOLDER = "Pick a date"
DEFAULT_RANGE_PLACEHOLDER = "Pick a date range"
UNKNOWN_END = "?"

ValueCallback = Callable[[SelectionValue], None]
ModeCallback = Callable[[SubMode], None]


@dataclass(frozen=True)
class DayView:
    day: date
    is_today: bool = False
    is_selected: bool = False
    in_range: bool = False
    is_range_start: bool = False
    is_range_end: bool = False


@dataclass(frozen=True)
class YearEntry:
    year: int
    is_current: bool
    # 0-indexed month highlighted inside this year, if any
    current_month: Optional[int] = None


class DatePickerController:
    """Routes input to the active engine and derives display state.

    Signals go out through the ``on_*`` callbacks; ``on_reset`` being set is
    what enables ``reset()``.
    """

    def __init__(
        self,
        *,
        mode: Mode | str = "duo",
        value: object = None,
        placeholder: Optional[str] = None,
        on_value_change: Optional[ValueCallback] = None,
        on_mode_change: Optional[ModeCallback] = None,
        on_reset: Optional[Callable[[], None]] = None,
        on_open_change: Optional[Callable[[bool], None]] = None,
        on_scroll_to_year: Optional[Callable[[int], None]] = None,
        scheduler: Optional[DeferredScheduler] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.mode: Mode = normalize_mode(mode)
        self.placeholder = placeholder
        self.on_value_change = on_value_change
        self.on_mode_change = on_mode_change
        self.on_reset = on_reset
        self.on_open_change = on_open_change
        self.on_scroll_to_year = on_scroll_to_year
        self._today = today or date.today

        self.scheduler = scheduler or DeferredScheduler()
        self.modes = ModeController(self.mode)
        self.views = ViewStateMachine(self.scheduler, on_scroll_request=self._scroll_to_cursor_year)

        initial = coerce_value(value)
        self._seed(initial)
        self.state = PickerState(cursor=self._value_anchor(initial) or self._today())

    # Derived accessors
    @property
    def cursor(self) -> date:
        return self.state.cursor

    @property
    def view(self) -> ViewName:
        return self.views.view

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def sub_mode(self) -> SubMode:
        return self.modes.sub_mode

    @property
    def is_range_mode(self) -> bool:
        return self.modes.is_range_mode

    @property
    def value(self) -> SelectionValue:
        return self.modes.current_value()

    # Commands
    def select_day(self, day: date) -> None:
        if self.state.disposed:
            return
        self._apply(self.modes.select(day))

    def hover_day(self, day: date) -> None:
        if self.state.disposed:
            return
        self.modes.hover(day)

    def previous_month(self) -> None:
        if not self.state.disposed:
            self.state.cursor = add_months(self.state.cursor, -1)

    def next_month(self) -> None:
        if not self.state.disposed:
            self.state.cursor = add_months(self.state.cursor, 1)

    def toggle_view(self) -> None:
        if not self.state.disposed:
            self.views.toggle()

    def select_month_year(self, year: int, month_index: int) -> None:
        if self.state.disposed or not 0 <= month_index < len(MONTHS):
            return
        self.state.cursor = set_year_month(self.state.cursor, year, month_index)
        self.views.force_days()

    def set_range_mode(self, enabled: bool) -> None:
        if self.state.disposed:
            return
        switch = self.modes.set_range_mode(enabled)
        if switch is None:
            return
        if switch.cursor is not None:
            self.state.cursor = switch.cursor
        self._emit(switch.emit)
        if self.on_mode_change is not None:
            self.on_mode_change(switch.mode)

    def reset(self) -> None:
        if self.state.disposed or self.on_reset is None:
            return
        logger.debug("reset %s selection", self.sub_mode)
        self._apply(self.modes.reset())
        self.on_reset()

    def open(self) -> None:
        if self.state.disposed or self.state.is_open:
            return
        self.state.is_open = True
        self.views.on_panel_opened()
        self._notify_open()

    def close(self) -> None:
        if self.state.disposed or not self.state.is_open:
            return
        self.state.is_open = False
        self.views.on_panel_closed()
        self._notify_open()

    def set_value(self, value: object) -> None:
        """Sync an externally controlled value into the engines without emitting."""
        if self.state.disposed:
            return
        incoming = coerce_value(value)
        if isinstance(incoming, NoValue):
            return
        self._seed(incoming)

    def tick(self, now_ms: Optional[int] = None) -> int:
        if self.state.disposed:
            return 0
        return self.scheduler.tick(now_ms)

    def dispose(self) -> None:
        if self.state.disposed:
            return
        self.views.dispose()
        self.scheduler.close()
        self.state.disposed = True

    # Display
    def placeholder_text(self) -> str:
        if self.placeholder:
            return self.placeholder
        return DEFAULT_RANGE_PLACEHOLDER if self.is_range_mode else DEFAULT_SINGLE_PLACEHOLDER

    def display_text(self) -> str:
        if not self.is_range_mode:
            selected = self.modes.single.selected
            return format_long(selected) if selected else self.placeholder_text()
        start, end = self.modes.range.start, self.modes.range.end
        if start and end:
            return f"{format_short(start)} - {format_short(end)}"
        if start:
            return f"{format_short(start)} - {UNKNOWN_END}"
        return self.placeholder_text()

    def is_muted(self) -> bool:
        if self.is_range_mode:
            return self.modes.range.start is None
        return self.modes.single.selected is None

    def header_text(self) -> str:
        return format_month_year(self.state.cursor)

    def day_cells(self) -> List[Optional[DayView]]:
        today = self._today()
        cursor = self.state.cursor
        ranged = self.is_range_mode
        out: List[Optional[DayView]] = []
        for cell in build_month_grid(cursor.year, cursor.month):
            if not isinstance(cell, DayCell):
                out.append(None)
                continue
            day = cell.day
            out.append(
                DayView(
                    day=day,
                    is_today=day == today,
                    is_selected=not ranged and self.modes.single.is_selected(day),
                    in_range=ranged and self.modes.range.in_range(day),
                    is_range_start=ranged and self.modes.range.is_range_start(day),
                    is_range_end=ranged and self.modes.range.is_range_end(day),
                )
            )
        return out

    def year_entries(self) -> List[YearEntry]:
        cursor = self.state.cursor
        return [
            YearEntry(
                year=year,
                is_current=year == cursor.year,
                current_month=cursor.month - 1 if year == cursor.year else None,
            )
            for year in YEARS
        ]

    def current_year_index(self) -> Optional[int]:
        year = self.state.cursor.year
        if YEARS[0] <= year <= YEARS[-1]:
            return year - YEARS[0]
        return None

    def can_reset(self) -> bool:
        return self.on_reset is not None and self.modes.active_engine.has_value

    # Internals
    def _seed(self, value: SelectionValue) -> None:
        if isinstance(value, NoValue):
            return
        if isinstance(value, SingleValue):
            self.modes.single.selected = value.day
            return
        if isinstance(value, RangeValue):
            self.modes.range.seed(value.range)
            return
        raise TypeError(f"Unsupported selection value: {value!r}")

    @staticmethod
    def _value_anchor(value: SelectionValue) -> Optional[date]:
        if isinstance(value, NoValue):
            return None
        if isinstance(value, SingleValue):
            return value.day
        if isinstance(value, RangeValue):
            return value.range.from_ or value.range.to
        raise TypeError(f"Unsupported selection value: {value!r}")

    def _apply(self, result: EngineResult) -> None:
        if result.cursor is not None:
            self.state.cursor = result.cursor
        if result.emit is not None:
            self._emit(result.emit)
        if result.close_panel:
            self.close()

    def _emit(self, value: SelectionValue) -> None:
        if self.on_value_change is not None:
            self.on_value_change(value)

    def _notify_open(self) -> None:
        if self.on_open_change is not None:
            self.on_open_change(self.state.is_open)

    def _scroll_to_cursor_year(self) -> None:
        if self.current_year_index() is None:
            return
        if self.on_scroll_to_year is not None:
            self.on_scroll_to_year(self.state.cursor.year)


__all__ = [
    "DatePickerController",
    "DayView",
    "YearEntry",
    "DEFAULT_SINGLE_PLACEHOLDER",
    "DEFAULT_RANGE_PLACEHOLDER",
]

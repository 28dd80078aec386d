#!/usr/bin/env python3
"""Single-date and two-click range selection engines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional

from date_ranges import (
    DateRange,
    end_of_day,
    is_same_day,
    is_within_interval,
    start_of_day,
)
from models import NoValue, RangeValue, SelectionValue, SingleValue

logger = logging.getLogger(__name__)

RangeStateName = Literal["empty", "start_selected", "complete"]


@dataclass
class EngineResult:
    """Side effects requested by an engine.

    ``emit`` is the value-changed payload, or None when nothing is signalled.
    """

    emit: Optional[SelectionValue] = None
    close_panel: bool = False
    cursor: Optional[date] = None


class SingleSelectionEngine:
    def __init__(self, selected: Optional[date] = None) -> None:
        self.selected = selected

    def commit(self, day: date) -> EngineResult:
        self.selected = day
        logger.debug("single commit %s", day)
        return EngineResult(emit=SingleValue(day), close_panel=True, cursor=day)

    def reset(self) -> EngineResult:
        self.selected = None
        return EngineResult(emit=NoValue())

    def current_value(self) -> SelectionValue:
        if self.selected is None:
            return NoValue()
        return SingleValue(self.selected)

    def is_selected(self, day: date) -> bool:
        return is_same_day(day, self.selected)

    @property
    def has_value(self) -> bool:
        return self.selected is not None


class RangeSelectionEngine:
    """Empty -> StartSelected(start) -> Complete(start, end), start <= end.

    Hover only records a provisional end while a start is pending; it never
    touches the committed endpoints.
    """

    def __init__(self) -> None:
        self.start: Optional[date] = None
        self.end: Optional[date] = None
        self.hover_day: Optional[date] = None

    @property
    def state(self) -> RangeStateName:
        if self.start is None:
            return "empty"
        if self.end is None:
            return "start_selected"
        return "complete"

    def seed(self, value: DateRange) -> None:
        self.hover_day = None
        from_, to = value.from_, value.to
        if from_ is None:
            from_, to = to, None
        if from_ is not None and to is not None and to < from_:
            from_, to = to, from_
        self.start, self.end = from_, to

    def click(self, day: date) -> EngineResult:
        start = self.start
        if start is None or self.end is not None:
            self.start = day
            self.end = None
            self.hover_day = None
            return EngineResult()

        if day > start:
            self.end = day
        else:
            self.start, self.end = day, start
        self.hover_day = None
        logger.debug("range commit %s..%s", self.start, self.end)
        return EngineResult(
            emit=RangeValue(DateRange(from_=self.start, to=self.end)),
            close_panel=True,
        )

    def hover(self, day: date) -> None:
        if self.state == "start_selected":
            self.hover_day = day

    def reset(self) -> EngineResult:
        self.start = None
        self.end = None
        self.hover_day = None
        return EngineResult(emit=RangeValue(DateRange(from_=None, to=None)))

    def committed_value(self) -> SelectionValue:
        if self.state == "complete":
            return RangeValue(DateRange(from_=self.start, to=self.end))
        return NoValue()

    def in_range(self, day: date) -> bool:
        if self.start is None:
            return False
        if self.end is not None:
            return is_within_interval(day, start_of_day(self.start), end_of_day(self.end))
        if self.hover_day is None:
            return False
        low, high = sorted((self.start, self.hover_day))
        return is_within_interval(day, start_of_day(low), end_of_day(high))

    def is_range_start(self, day: date) -> bool:
        return is_same_day(day, self.start)

    def is_range_end(self, day: date) -> bool:
        return is_same_day(day, self.end)

    @property
    def has_value(self) -> bool:
        return self.start is not None or self.end is not None


__all__ = [
    "EngineResult",
    "SingleSelectionEngine",
    "RangeSelectionEngine",
    "RangeStateName",
]

#!/usr/bin/env python3
"""Date range and calendar arithmetic helpers for datepick."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class DateRange:
    from_: Optional[date] = None
    to: Optional[date] = None

    @property
    def is_complete(self) -> bool:
        return self.from_ is not None and self.to is not None

    @property
    def is_empty(self) -> bool:
        return self.from_ is None and self.to is None


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, datetime.min.time())


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, datetime.max.time())


def is_within_interval(day: date, start: datetime, end: datetime) -> bool:
    """Inclusive containment test of ``day`` (taken at midnight) in [start, end]."""
    moment = start_of_day(day)
    return start <= moment <= end


def is_same_day(left: Optional[date], right: Optional[date]) -> bool:
    if left is None or right is None:
        return False
    return (left.year, left.month, left.day) == (right.year, right.month, right.day)


def add_months(day: date, months: int) -> date:
    # relativedelta clamps the day to the end of shorter months (Jan 31 + 1 -> Feb 28/29)
    return day + relativedelta(months=months)


def set_year_month(day: date, year: int, month_index: int) -> date:
    """Move ``day`` to ``year`` and the 0-indexed ``month_index``, clamping the day."""
    return day + relativedelta(year=year, month=month_index + 1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def weekday_of_first(year: int, month: int) -> int:
    """Weekday index of day 1 with Sunday as 0."""
    # date.weekday() is Monday=0; shift so Sunday=0
    return (date(year, month, 1).weekday() + 1) % 7


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_long(day: date) -> str:
    """Long date, e.g. ``March 10th, 2024``."""
    return f"{calendar.month_name[day.month]} {_ordinal(day.day)}, {day.year}"


def format_short(day: date) -> str:
    """Short date, e.g. ``Mar 10, 2024``."""
    return f"{calendar.month_abbr[day.month]} {day.day}, {day.year}"


def format_month_year(day: date) -> str:
    return f"{calendar.month_name[day.month]} {day.year}"


__all__ = [
    "DateRange",
    "start_of_day",
    "end_of_day",
    "is_within_interval",
    "is_same_day",
    "add_months",
    "set_year_month",
    "days_in_month",
    "weekday_of_first",
    "format_long",
    "format_short",
    "format_month_year",
]

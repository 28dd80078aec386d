#!/usr/bin/env python3
"""Core models and validation helpers for datepick."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Optional, Sequence, Tuple, Union

from dateutil.parser import isoparse

from date_ranges import DateRange

ISO_DATE_FMT = "%Y-%m-%d"
RANGE_SEPARATOR = ".."

Mode = Literal["single", "range", "duo"]
SubMode = Literal["single", "range"]
MODES: Sequence[Mode] = ("single", "range", "duo")
DEFAULT_MODE: Mode = "duo"

YEAR_MIN = 1950
YEAR_MAX = 2050
YEARS: Tuple[int, ...] = tuple(range(YEAR_MIN, YEAR_MAX + 1))

MONTHS: Tuple[Tuple[str, str], ...] = (
    ("Jan", "January"),
    ("Feb", "February"),
    ("Mar", "March"),
    ("Apr", "April"),
    ("May", "May"),
    ("Jun", "June"),
    ("Jul", "July"),
    ("Aug", "August"),
    ("Sep", "September"),
    ("Oct", "October"),
    ("Nov", "November"),
    ("Dec", "December"),
)

DAY_NAMES: Tuple[str, ...] = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


@dataclass(frozen=True)
class Placeholder:
    """Empty grid cell used only for weekday alignment."""


@dataclass(frozen=True)
class DayCell:
    day: date


Cell = Union[Placeholder, DayCell]


@dataclass(frozen=True)
class NoValue:
    pass


@dataclass(frozen=True)
class SingleValue:
    day: date


@dataclass(frozen=True)
class RangeValue:
    range: DateRange


SelectionValue = Union[NoValue, SingleValue, RangeValue]


class ValidationError(Exception):
    pass


def normalize_mode(raw_mode: object | None) -> Mode:
    if raw_mode is None:
        return DEFAULT_MODE
    mode = str(raw_mode).strip().lower()
    if mode not in MODES:
        valid = ", ".join(MODES)
        raise ValidationError(f"Invalid mode '{mode}'. Expected one of: {valid}")
    return mode  # type: ignore[return-value]


def parse_date(value: str) -> date:
    """Parse an ISO 8601 date.

    Reduced forms (``2024-03`` is March 1st) and full timestamps are
    accepted; any time component is dropped.
    """
    value = value.strip()
    try:
        parsed = isoparse(value)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date format: '{value}'. Expected an ISO 8601 date such as YYYY-MM-DD"
        ) from exc
    return parsed.date()


def parse_value(value: str) -> SelectionValue:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DD..YYYY-MM-DD`` (either side may be blank)."""
    value = value.strip()
    if not value:
        return NoValue()
    if RANGE_SEPARATOR not in value:
        return SingleValue(parse_date(value))

    raw_from, raw_to = value.split(RANGE_SEPARATOR, 1)
    from_ = parse_date(raw_from) if raw_from.strip() else None
    to = parse_date(raw_to) if raw_to.strip() else None
    return RangeValue(DateRange(from_=from_, to=to))


def _as_day(value: Optional[date]) -> Optional[date]:
    # Grid cells are plain dates; datetimes would not compare against them.
    if isinstance(value, datetime):
        return value.date()
    return value


def _coerce_range(span: DateRange) -> DateRange:
    return DateRange(from_=_as_day(span.from_), to=_as_day(span.to))


def coerce_value(value: object) -> SelectionValue:
    """Accept a bare ``date``, a ``DateRange``, ``None`` or a tagged value.

    ``datetime`` inputs, including range endpoints, are truncated to dates.
    """
    if value is None or isinstance(value, NoValue):
        return NoValue()
    if isinstance(value, SingleValue):
        return SingleValue(_as_day(value.day))
    if isinstance(value, RangeValue):
        return RangeValue(_coerce_range(value.range))
    if isinstance(value, DateRange):
        return RangeValue(_coerce_range(value))
    if isinstance(value, date):
        return SingleValue(_as_day(value))
    raise ValidationError(f"Unsupported selection value: {value!r}")


def _format_optional(day: Optional[date]) -> Optional[str]:
    return day.strftime(ISO_DATE_FMT) if day is not None else None


def value_to_jsonable(value: SelectionValue) -> object:
    if isinstance(value, NoValue):
        return None
    if isinstance(value, SingleValue):
        return value.day.strftime(ISO_DATE_FMT)
    if isinstance(value, RangeValue):
        return {
            "from": _format_optional(value.range.from_),
            "to": _format_optional(value.range.to),
        }
    raise TypeError(f"Unsupported selection value: {value!r}")


__all__ = [
    "Mode",
    "SubMode",
    "MODES",
    "DEFAULT_MODE",
    "YEAR_MIN",
    "YEAR_MAX",
    "YEARS",
    "MONTHS",
    "DAY_NAMES",
    "Placeholder",
    "DayCell",
    "Cell",
    "NoValue",
    "SingleValue",
    "RangeValue",
    "SelectionValue",
    "ValidationError",
    "normalize_mode",
    "parse_date",
    "parse_value",
    "coerce_value",
    "value_to_jsonable",
    "ISO_DATE_FMT",
]

#!/usr/bin/env python3
"""Month day-grid generation."""

from __future__ import annotations

from datetime import date
from typing import List

from date_ranges import days_in_month, weekday_of_first
from models import Cell, DayCell, Placeholder

WEEK_LENGTH = 7


def build_month_grid(year: int, month: int) -> List[Cell]:
    """Return the cells for ``month`` (1-12) of ``year``, Sunday-first.

    Leading placeholders equal the weekday index of day 1; trailing
    placeholders complete the last week so the length is a multiple of 7.
    """
    cells: List[Cell] = [Placeholder() for _ in range(weekday_of_first(year, month))]
    for day in range(1, days_in_month(year, month) + 1):
        cells.append(DayCell(date(year, month, day)))
    remainder = len(cells) % WEEK_LENGTH
    if remainder:
        cells.extend(Placeholder() for _ in range(WEEK_LENGTH - remainder))
    return cells


def grid_rows(cells: List[Cell]) -> List[List[Cell]]:
    return [cells[i : i + WEEK_LENGTH] for i in range(0, len(cells), WEEK_LENGTH)]


__all__ = ["build_month_grid", "grid_rows", "WEEK_LENGTH"]

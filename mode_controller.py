#!/usr/bin/env python3
"""Reconciles the single and range selection slots under duo mode."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from models import Mode, SelectionValue, SubMode
from selection import EngineResult, RangeSelectionEngine, SingleSelectionEngine

logger = logging.getLogger(__name__)

Engine = Union[SingleSelectionEngine, RangeSelectionEngine]


@dataclass
class ModeSwitch:
    mode: SubMode
    emit: SelectionValue
    cursor: Optional[date] = None


class ModeController:
    """Owns both engines; only the active one receives clicks.

    Flipping the sub-mode never clears either engine, so a user can leave a
    half-finished range, pick a single date, and come back to the range.
    """

    def __init__(self, mode: Mode) -> None:
        self.mode = mode
        self.single = SingleSelectionEngine()
        self.range = RangeSelectionEngine()
        self.sub_mode: SubMode = "range" if mode == "range" else "single"

    @property
    def is_range_mode(self) -> bool:
        return self.sub_mode == "range"

    @property
    def active_engine(self) -> Engine:
        return self.range if self.is_range_mode else self.single

    def select(self, day: date) -> EngineResult:
        if self.is_range_mode:
            return self.range.click(day)
        return self.single.commit(day)

    def hover(self, day: date) -> None:
        if self.is_range_mode:
            self.range.hover(day)

    def reset(self) -> EngineResult:
        return self.active_engine.reset()

    def current_value(self) -> SelectionValue:
        if self.is_range_mode:
            return self.range.committed_value()
        return self.single.current_value()

    def set_range_mode(self, enabled: bool) -> Optional[ModeSwitch]:
        if self.mode != "duo":
            return None
        self.sub_mode = "range" if enabled else "single"
        logger.debug("sub-mode -> %s", self.sub_mode)
        if enabled:
            return ModeSwitch(
                mode="range",
                emit=self.range.committed_value(),
                cursor=self.range.start,
            )
        return ModeSwitch(
            mode="single",
            emit=self.single.current_value(),
            cursor=self.single.selected,
        )


__all__ = ["ModeController", "ModeSwitch", "Engine"]

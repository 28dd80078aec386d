#!/usr/bin/env python3
"""State containers for datepick."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

OverlayKind = Literal["none", "help", "message"]


@dataclass
class PickerState:
    """Per-instance controller state; never shared between pickers."""

    cursor: date = field(default_factory=lambda: date.today())
    is_open: bool = False
    disposed: bool = False


@dataclass
class UiState:
    overlay: OverlayKind = "none"
    overlay_message: str = ""
    focused_day: date = field(default_factory=lambda: date.today())

    # Years view
    year_index: int = 0
    expanded_year: Optional[int] = None
    month_focus: int = 0
    year_scroll: int = 0


__all__ = ["PickerState", "UiState", "OverlayKind"]

#!/usr/bin/env python3
"""Days/years view toggling with deferred reset and scroll timing."""

from __future__ import annotations

import logging
from typing import Callable, Literal, Optional

from scheduler import DeferredScheduler, TaskHandle

logger = logging.getLogger(__name__)

ViewName = Literal["days", "years"]

# Must exceed the panel close animation so the view never flips while visible.
CLOSE_RESET_DELAY_MS = 200
SCROLL_SETTLE_DELAY_MS = 100


class ViewStateMachine:
    """Tracks the visible view; a closed panel always drifts back to days."""

    def __init__(
        self,
        scheduler: DeferredScheduler,
        *,
        on_scroll_request: Optional[Callable[[], None]] = None,
    ) -> None:
        self.view: ViewName = "days"
        self.panel_open = False
        self._scheduler = scheduler
        self._on_scroll_request = on_scroll_request
        self.pending_reset: Optional[TaskHandle] = None

    def toggle(self) -> ViewName:
        self._set("years" if self.view == "days" else "days")
        return self.view

    def force_days(self) -> None:
        self._set("days")

    def on_panel_closed(self) -> None:
        self.panel_open = False
        if self.view == "years":
            self._schedule_reset()

    def on_panel_opened(self) -> None:
        self.panel_open = True
        self._cancel_reset()

    def dispose(self) -> None:
        self._cancel_reset()

    def _set(self, view: ViewName) -> None:
        if view == self.view:
            return
        logger.debug("view %s -> %s", self.view, view)
        self.view = view
        if view == "days":
            self._cancel_reset()
            return
        self._scheduler.schedule(SCROLL_SETTLE_DELAY_MS, self._scroll_if_years)
        if not self.panel_open:
            self._schedule_reset()

    def _schedule_reset(self) -> None:
        self._scheduler.cancel(self.pending_reset)
        self.pending_reset = self._scheduler.schedule(
            CLOSE_RESET_DELAY_MS, self._reset_after_close
        )

    def _cancel_reset(self) -> None:
        self._scheduler.cancel(self.pending_reset)
        self.pending_reset = None

    def _reset_after_close(self) -> None:
        self.pending_reset = None
        self._set("days")

    def _scroll_if_years(self) -> None:
        if self.view == "years" and self._on_scroll_request is not None:
            self._on_scroll_request()


__all__ = [
    "ViewStateMachine",
    "ViewName",
    "CLOSE_RESET_DELAY_MS",
    "SCROLL_SETTLE_DELAY_MS",
]

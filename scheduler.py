#!/usr/bin/env python3
"""Cancelable deferred tasks driven by the UI loop's millisecond clock."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class TaskHandle:
    task_id: int
    due_ms: int
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class DeferredScheduler:
    """Holds callbacks until ``tick`` is called at or after their due time.

    Nothing runs on its own: the owner polls ``tick`` from its event loop,
    the same way the curses loop checks timeouts between key reads.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or monotonic_ms
        self._tasks: Dict[int, TaskHandle] = {}
        self._ids = itertools.count(1)
        self._closed = False

    def now(self) -> int:
        return self._clock()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        handle = TaskHandle(
            task_id=next(self._ids),
            due_ms=self.now() + max(0, delay_ms),
            callback=callback,
        )
        if self._closed:
            handle.cancelled = True
            return handle
        self._tasks[handle.task_id] = handle
        return handle

    def cancel(self, handle: Optional[TaskHandle]) -> None:
        if handle is None or not handle.pending:
            return
        handle.cancelled = True
        self._tasks.pop(handle.task_id, None)

    def cancel_all(self) -> None:
        for handle in list(self._tasks.values()):
            handle.cancelled = True
        self._tasks.clear()

    def close(self) -> None:
        self.cancel_all()
        self._closed = True

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def tick(self, now_ms: Optional[int] = None) -> int:
        """Run every task due at ``now_ms``; returns how many fired."""
        if now_ms is None:
            now_ms = self.now()
        due: List[TaskHandle] = sorted(
            (h for h in self._tasks.values() if h.due_ms <= now_ms),
            key=lambda h: (h.due_ms, h.task_id),
        )
        fired = 0
        for handle in due:
            # an earlier callback may have cancelled this one
            if not handle.pending:
                continue
            self._tasks.pop(handle.task_id, None)
            handle.fired = True
            handle.callback()
            fired += 1
        return fired


__all__ = ["DeferredScheduler", "TaskHandle", "monotonic_ms"]

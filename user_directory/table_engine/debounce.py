# This file provides the cancellable timer behind debounced search input.
# Scheduling a new fire atomically cancels the pending one, so only the latest callback can run.
# A generation counter guards against a cancelled handle firing anyway, and close() makes teardown final.
# The default scheduler binds to the running loop at construction, so a missing loop fails before any state changes.
# Hosts without an event loop and tests inject their own scheduler or use a zero delay.

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def event_loop_scheduler() -> Scheduler:
    """Bind to the running loop now; raises RuntimeError when called outside one."""

    return asyncio.get_running_loop().call_later


class CancellableTimer:
    def __init__(self, *, delay_seconds: float, schedule: Scheduler | None = None) -> None:
        self.delay_seconds = delay_seconds
        if schedule is None and delay_seconds > 0:
            schedule = event_loop_scheduler()
        self._schedule = schedule
        self._handle: TimerHandle | None = None
        self._generation = 0
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, callback: Callable[[], None]) -> None:
        if self._closed:
            return
        self.cancel()
        generation = self._generation

        if self.delay_seconds <= 0 or self._schedule is None:
            callback()
            return

        self._handle = self._schedule(
            self.delay_seconds, lambda: self._fire(generation, callback)
        )

    def cancel(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    def _fire(self, generation: int, callback: Callable[[], None]) -> None:
        if self._closed or generation != self._generation:
            return
        self._handle = None
        callback()

"""Scheduling primitives used by Timer.

The core layer never talks to an event loop directly. It depends on two
small protocols shaped after Kivy's Clock:

- Scheduler.schedule_interval(callback, interval) -> ScheduledEvent
- Scheduler.schedule_once(callback, timeout) -> ScheduledEvent

Intervals and timeouts are in seconds and callbacks receive the elapsed
``dt`` in seconds. ScheduledEvent.cancel() must be synchronous: a cancelled
callback never runs afterwards.

Wall-clock instants come from a separate ``WallClock`` callable returning
monotonic milliseconds, so drift can be reconciled independently of how
often the scheduler delivers ticks.
"""

import time
from collections.abc import Callable
from typing import Protocol

ScheduleCallback = Callable[[float], object]
WallClock = Callable[[], int]


class ScheduledEvent(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule_interval(self, callback: ScheduleCallback, interval: float) -> ScheduledEvent: ...

    def schedule_once(self, callback: ScheduleCallback, timeout: float) -> ScheduledEvent: ...


def monotonic_ms() -> int:
    """Current monotonic instant in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000

"""Countdown timer.

A Timer tracks one player's remaining thinking time for a TimeControl.

State machine::

    IDLE --resume--> RUNNING --pause--> PAUSED --resume--> RUNNING ...
                        |
                     (expiry) --Continue--> RUNNING (next period)
                        |
                        +------Terminal--> EXPIRED

    any state --close--> CLOSED (an EXPIRED timer stays EXPIRED)

While running, two schedules are installed on the host scheduler:

- a periodic tick that deducts the wall-clock time elapsed since the last
  reconciliation, so the displayed time stays accurate however late the
  ticks arrive;
- a one-shot expiry at ``time + timeout_tolerance``, independent of the
  ticks, so expiry fires on time even if ticks are starved.

Both schedules are cancelled before any state is mutated on pause, expiry
and close; resume cancels stale schedules before installing new ones.
All callbacks run on the host's cooperative loop, so no locking is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from gameclock.core.duration import Duration
from gameclock.core.expiry import Continue
from gameclock.core.scheduler import ScheduledEvent, Scheduler, WallClock, monotonic_ms
from gameclock.core.state import Event, EventType, StateNotifier
from gameclock.core.time_control import TimeControl

_logger = logging.getLogger(__name__)


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"
    CLOSED = "closed"


_TERMINAL_STATES = (TimerState.EXPIRED, TimerState.CLOSED)


class Timer:
    """Countdown engine bound to one TimeControl.

    Args:
        time_control: Clock policy. Referenced, never copied or mutated.
        scheduler: Host scheduler delivering tick and expiry callbacks.
        clock: Monotonic wall clock in milliseconds.
        tick_interval_ms: Reconciliation granularity while running.
        on_expired: Called once when the timer reaches EXPIRED.
        notifier: Optional StateNotifier for TIMER_EXPIRED / PERIOD_STARTED.

    Example:
        >>> timer = Timer(TimeControl.byoyomi(10, 30, 5), KivyScheduler())
        >>> timer.resume()   # owning player's turn starts
        >>> timer.pause()    # turn ends
        >>> label.text = timer.time.format_clock()
    """

    DEFAULT_TICK_INTERVAL_MS = Duration.SECOND // 4

    def __init__(
        self,
        time_control: TimeControl,
        scheduler: Scheduler,
        *,
        clock: WallClock = monotonic_ms,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        on_expired: Callable[[], Any] | None = None,
        notifier: StateNotifier | None = None,
    ) -> None:
        if tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {tick_interval_ms}")
        self._time_control = time_control
        self._policy = time_control.expiry_policy()
        self._scheduler = scheduler
        self._clock = clock
        self._tick_interval_ms = tick_interval_ms
        self._on_expired = on_expired
        self._notifier = notifier

        self._time = Duration.copy(time_control.main)
        self._periods_left = time_control.period_count
        self._state = TimerState.IDLE
        self._tick_event: ScheduledEvent | None = None
        self._expiry_event: ScheduledEvent | None = None
        self._last_timestamp: int | None = None

    @property
    def time(self) -> Duration:
        """Remaining time as of the last reconciliation."""
        return self._time

    @property
    def periods_left(self) -> int:
        return self._periods_left

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    def is_expired(self) -> bool:
        return self._state is TimerState.EXPIRED

    def resume(self) -> None:
        """Start or resume the countdown. No-op when running, expired or closed."""
        if self._state is TimerState.RUNNING:
            return
        if self._state in _TERMINAL_STATES:
            _logger.debug("Ignoring resume() on %s timer", self._state.value)
            return

        self._cancel_schedules()
        self._last_timestamp = self._clock()
        self._tick_event = self._scheduler.schedule_interval(
            self._on_tick, self._tick_interval_ms / Duration.SECOND
        )
        horizon_ms = self._time.milliseconds + self._time_control.timeout_tolerance.milliseconds
        self._expiry_event = self._scheduler.schedule_once(self._on_expiry, horizon_ms / Duration.SECOND)
        self._state = TimerState.RUNNING
        _logger.debug("Timer resumed: %dms left, expiry in %dms", self._time.milliseconds, horizon_ms)

    def pause(self) -> None:
        """Stop the countdown, deducting time spent since the last tick. No-op unless running."""
        if self._state is not TimerState.RUNNING:
            return

        self._cancel_schedules()
        self._reconcile()
        self._last_timestamp = None
        self._state = TimerState.PAUSED
        _logger.debug("Timer paused: %dms left", self._time.milliseconds)

    def set_time(self, duration: Duration) -> None:
        """Pause, then replace the countdown with a copy of ``duration``.

        The timer is left paused (or idle if it never ran); call resume() to
        continue. Ignored once the timer has expired or been closed.
        """
        if self._state in _TERMINAL_STATES:
            _logger.warning("Ignoring set_time() on %s timer", self._state.value)
            return
        self.pause()
        self._time = Duration.copy(duration)

    def close(self) -> None:
        """Cancel all schedules. Idempotent; the timer cannot be resumed afterwards."""
        self._cancel_schedules()
        self._last_timestamp = None
        if self._state is not TimerState.EXPIRED:
            self._state = TimerState.CLOSED

    def _reconcile(self) -> None:
        if self._last_timestamp is None:
            return
        now = self._clock()
        self._time.consume(now - self._last_timestamp)
        self._last_timestamp = now

    def _cancel_schedules(self) -> None:
        if self._tick_event is not None:
            self._tick_event.cancel()
            self._tick_event = None
        if self._expiry_event is not None:
            self._expiry_event.cancel()
            self._expiry_event = None

    def _on_tick(self, _dt: float) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._reconcile()

    def _on_expiry(self, _dt: float) -> None:
        if self._state is not TimerState.RUNNING:
            return

        self._cancel_schedules()
        self._last_timestamp = None

        try:
            decision = self._policy.on_expiry(self._periods_left)
        except Exception:
            _logger.exception("Expiry policy %r failed, expiring timer", self._policy)
            self._expire()
            raise

        if isinstance(decision, Continue):
            if decision.consumes_period:
                self._periods_left = max(0, self._periods_left - 1)
            self._time = Duration.copy(decision.duration)
            self._state = TimerState.PAUSED
            _logger.info(
                "Entering overtime: %dms, %d period(s) left", self._time.milliseconds, self._periods_left
            )
            self.resume()
            self._publish(
                EventType.PERIOD_STARTED,
                {"periods_left": self._periods_left, "period_ms": self._time.milliseconds},
            )
            return

        self._expire()

    def _expire(self) -> None:
        self._state = TimerState.EXPIRED
        self._time = Duration.zero()
        _logger.info("Timer expired")
        self._publish(EventType.TIMER_EXPIRED)
        if self._on_expired is not None:
            self._on_expired()

    def _publish(self, event_type: EventType, payload: dict[str, Any] | None = None) -> None:
        if self._notifier is not None:
            self._notifier.notify(Event.create(event_type, payload, source=self))

    def __repr__(self) -> str:
        return (
            f"Timer(state={self._state.value}, time={self._time.milliseconds}ms, "
            f"periods_left={self._periods_left})"
        )

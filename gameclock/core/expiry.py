"""Expiry policies.

When a countdown reaches its expiry horizon the Timer asks its policy what
to do next. A policy answers with one of two decisions:

- Terminal: the timer is out of time for good.
- Continue: reset the countdown to a new Duration and keep running.

Two policies exist, selected from the TimeControl:

- PeriodExpiryPolicy: fixed-length overtime periods (byoyomi). Default.
- CallbackExpiryPolicy: a host-configured callback returns the next
  Duration, or None to stop.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from gameclock.core.duration import Duration

_logger = logging.getLogger(__name__)

TimeoutCallback = Callable[[], "Duration | None"]


@dataclass(frozen=True)
class Terminal:
    """End the countdown."""


@dataclass(frozen=True)
class Continue:
    """Reset the countdown to ``duration`` and keep running.

    Attributes:
        duration: Next countdown allotment (the Timer copies it).
        consumes_period: Whether entering it uses up an overtime period.
    """

    duration: Duration
    consumes_period: bool = True

    __hash__ = None  # type: ignore[assignment]


ExpiryDecision = Terminal | Continue


class ExpiryPolicy(ABC):
    """Decides what happens when a countdown expires."""

    @abstractmethod
    def on_expiry(self, periods_left: int) -> ExpiryDecision:
        """Return the decision for an expiry with ``periods_left`` remaining."""


class PeriodExpiryPolicy(ExpiryPolicy):
    """Byoyomi: continue with a fresh period while more than one is left."""

    def __init__(self, period: Duration) -> None:
        self._period = period

    def on_expiry(self, periods_left: int) -> ExpiryDecision:
        if periods_left > 1:
            return Continue(self._period, consumes_period=True)
        return Terminal()

    def __repr__(self) -> str:
        return f"PeriodExpiryPolicy(period={self._period.milliseconds}ms)"


class CallbackExpiryPolicy(ExpiryPolicy):
    """Ask a configured callback for the next allotment.

    The callback returns a Duration to keep going or None to stop. Overtime
    periods are not consumed by this policy.
    """

    def __init__(self, callback: TimeoutCallback) -> None:
        self._callback = callback

    def on_expiry(self, periods_left: int) -> ExpiryDecision:
        new_time = self._callback()
        if new_time is None:
            return Terminal()
        if new_time.is_zero():
            # zero would re-expire immediately
            _logger.warning("Timeout callback returned a zero duration, treating as terminal")
            return Terminal()
        return Continue(new_time, consumes_period=False)

    def __repr__(self) -> str:
        name = getattr(self._callback, "__name__", repr(self._callback))
        return f"CallbackExpiryPolicy(callback={name})"

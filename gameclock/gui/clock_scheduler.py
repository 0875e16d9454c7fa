"""Kivy Clock adapter for the core Scheduler protocol.

Timers in gameclock.core only know the Scheduler protocol. Inside a Kivy
app, KivyScheduler routes their tick and expiry callbacks through the
application Clock so they run on the main (UI) thread.
"""

import logging

from kivy.clock import Clock

from gameclock.core.scheduler import ScheduleCallback, ScheduledEvent

_logger = logging.getLogger(__name__)


class KivyScheduler:
    """Scheduler backed by ``kivy.clock.Clock``.

    Returned ClockEvents are cancelled synchronously by ``cancel()``; Kivy
    removes them from the pending list before the next frame.
    """

    def schedule_interval(self, callback: ScheduleCallback, interval: float) -> ScheduledEvent:
        if interval <= 0:
            # Kivy treats 0 as "every frame"
            raise ValueError(f"interval must be positive, got {interval}")
        return Clock.schedule_interval(callback, interval)

    def schedule_once(self, callback: ScheduleCallback, timeout: float) -> ScheduledEvent:
        # Kivy reserves negative timeouts for "before the next frame"
        timeout = max(0.0, timeout)
        _logger.debug("Scheduling one-shot callback in %.3fs", timeout)
        return Clock.schedule_once(callback, timeout)

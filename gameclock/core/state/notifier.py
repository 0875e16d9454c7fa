# gameclock/core/state/notifier.py
"""Pub-sub channel for clock and session events.

Timers publish TIMER_EXPIRED / PERIOD_STARTED here and GameSession
publishes GAME_BOOTED / GAME_CLOSED, so several listeners (UI, sound,
game logic) can react without the core knowing about them.

Semantics:
- notify() snapshots the subscriber list first; a listener removed during
  notify() still receives the current event but no later ones.
- A failing listener never prevents the others from running. The failure
  is reported through the injected logger, or the module logger when none
  is given.
"""

import logging
import threading
import traceback
from collections.abc import Callable

from gameclock.core.state.events import Event, EventType

_logger = logging.getLogger(__name__)

# Log level is bound by the caller (e.g. a closure over logger.debug)
LoggerType = Callable[[str], None]
Listener = Callable[[Event], None]


class StateNotifier:
    """Thread-safe event dispatcher.

    Example:
        >>> notifier = StateNotifier()
        >>> notifier.subscribe(EventType.TIMER_EXPIRED, lambda e: print("flag fell"))
        >>> notifier.notify(Event.create(EventType.TIMER_EXPIRED))
        flag fell
    """

    def __init__(self, logger: LoggerType | None = None) -> None:
        self._subscribers: dict[EventType, list[Listener]] = {}
        self._lock = threading.RLock()
        self._logger = logger

    def subscribe(self, event_type: EventType, callback: Listener) -> None:
        """Register ``callback`` for ``event_type``. Duplicates are ignored."""
        with self._lock:
            callbacks = self._subscribers.setdefault(event_type, [])
            if callback not in callbacks:
                callbacks.append(callback)

    def unsubscribe(self, event_type: EventType, callback: Listener) -> None:
        """Remove ``callback``; unknown callbacks are ignored."""
        with self._lock:
            callbacks = self._subscribers.get(event_type)
            if callbacks and callback in callbacks:
                callbacks.remove(callback)

    def notify(self, event: Event) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(event.event_type, ()))

        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                self._report_failure(event, callback, e)

    def subscriber_count(self, event_type: EventType) -> int:
        with self._lock:
            return len(self._subscribers.get(event_type, ()))

    def clear(self, event_type: EventType | None = None) -> None:
        """Drop subscribers of one type, or all of them (mainly for tests)."""
        with self._lock:
            if event_type is None:
                self._subscribers.clear()
            else:
                self._subscribers.pop(event_type, None)

    def _report_failure(self, event: Event, callback: Listener, e: Exception) -> None:
        cb_name = getattr(callback, "__name__", repr(callback))
        msg = f"[StateNotifier] {event.event_type.value}: {cb_name} failed: {type(e).__name__}: {e!r}"
        full_msg = f"{msg}\n{traceback.format_exc()}"

        if self._logger is not None:
            try:
                self._logger(full_msg)
                return
            except Exception:
                _logger.exception("Injected notifier logger failed")
        _logger.error(full_msg)

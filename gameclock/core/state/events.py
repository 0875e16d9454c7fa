# gameclock/core/state/events.py
"""Event types and the Event class published through StateNotifier.

Events are frozen dataclasses. The payload is copied and wrapped in a
MappingProxyType, so its top level is read-only; nested values are not
frozen.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class EventType(Enum):
    """Kinds of clock and session events."""

    TIMER_EXPIRED = "timer_expired"  # a Timer reached its terminal state
    PERIOD_STARTED = "period_started"  # a Timer continued into a new overtime period
    GAME_BOOTED = "game_booted"
    GAME_CLOSED = "game_closed"


def _freeze_payload(payload: dict[str, Any] | None) -> Mapping[str, Any] | None:
    if payload is None:
        return None
    return MappingProxyType(dict(payload))


@dataclass(frozen=True)
class Event:
    """Immutable notification.

    Attributes:
        event_type: What happened.
        source: The object that published the event (Timer, GameSession, ...).
        _payload: Frozen payload storage; read it through ``payload``.

    Example:
        >>> event = Event.create(EventType.PERIOD_STARTED, payload={"periods_left": 2})
        >>> event.payload["periods_left"]
        2
    """

    event_type: EventType
    source: Any = field(default=None, compare=False)
    _payload: Mapping[str, Any] | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls, event_type: EventType, payload: dict[str, Any] | None = None, *, source: Any = None
    ) -> "Event":
        return cls(event_type=event_type, source=source, _payload=_freeze_payload(payload))

    @property
    def payload(self) -> Mapping[str, Any] | None:
        return self._payload

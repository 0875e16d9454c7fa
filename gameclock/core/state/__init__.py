# gameclock/core/state/__init__.py
"""Event notification for clocks and sessions (Kivy-independent).

Public API:
    - EventType: TIMER_EXPIRED, PERIOD_STARTED, GAME_BOOTED, GAME_CLOSED
    - Event: immutable event with optional frozen payload
    - StateNotifier: pub-sub dispatcher
"""
from gameclock.core.state.events import Event, EventType
from gameclock.core.state.notifier import StateNotifier

__all__ = ["EventType", "Event", "StateNotifier"]

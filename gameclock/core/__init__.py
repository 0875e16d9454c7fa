# -*- coding: utf-8 -*-
"""Clock core (Kivy-independent).

Public API:
    - Duration: non-negative millisecond span, consumable in place
    - TimeControl: main time, overtime periods, tolerance, timeout callback
    - Timer / TimerState: countdown state machine with drift reconciliation
    - PlayerClocks: one Timer per player, switched on turn boundaries
    - GameSession: caller-owned holder of the active game
    - Terminal / Continue / ExpiryPolicy: expiry decisions and policies
    - GameClockError / InvalidConfiguration / NotBooted

Example usage:
    >>> from gameclock.core import TimeControl, Timer
    >>> from gameclock.gui.clock_scheduler import KivyScheduler
    >>> timer = Timer(TimeControl.byoyomi(10, 30, 5), KivyScheduler(), on_expired=flag_fell)
    >>> timer.resume()
"""

from .clocks import PlayerClocks
from .duration import Duration
from .errors import GameClockError, InvalidConfiguration, NotBooted
from .expiry import CallbackExpiryPolicy, Continue, ExpiryPolicy, PeriodExpiryPolicy, Terminal
from .scheduler import ScheduledEvent, Scheduler, monotonic_ms
from .session import Game, GameSession
from .time_control import TimeControl
from .timer import Timer, TimerState

__all__ = [
    "Duration",
    "TimeControl",
    "Timer",
    "TimerState",
    "PlayerClocks",
    "Game",
    "GameSession",
    # Expiry policies
    "ExpiryPolicy",
    "PeriodExpiryPolicy",
    "CallbackExpiryPolicy",
    "Terminal",
    "Continue",
    # Scheduling
    "Scheduler",
    "ScheduledEvent",
    "monotonic_ms",
    # Errors
    "GameClockError",
    "InvalidConfiguration",
    "NotBooted",
]

"""Per-player clocks.

PlayerClocks is the host side of the Timer contract for a two-player (or
N-player) game: one Timer per player, all built from the same TimeControl,
with exactly one of them running at a time. When a player's timer expires
that player is recorded as flagged and the clocks stop switching.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from gameclock.core.scheduler import Scheduler, WallClock, monotonic_ms
from gameclock.core.state import StateNotifier
from gameclock.core.time_control import TimeControl
from gameclock.core.timer import Timer, TimerState

_logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = ("B", "W")


class PlayerClocks:
    """One Timer per player, switched on turn boundaries.

    Args:
        time_control: Shared clock policy.
        scheduler: Host scheduler passed to every Timer.
        players: Player identifiers in turn order (default Black, White).
        clock: Monotonic wall clock in milliseconds.
        on_flag: Called with the player id when that player's time runs out.
        notifier: Optional StateNotifier passed to every Timer.
        tick_interval_ms: Reconciliation granularity for every Timer.
    """

    def __init__(
        self,
        time_control: TimeControl,
        scheduler: Scheduler,
        players: Sequence[str] = DEFAULT_PLAYERS,
        *,
        clock: WallClock = monotonic_ms,
        on_flag: Callable[[str], Any] | None = None,
        notifier: StateNotifier | None = None,
        tick_interval_ms: int = Timer.DEFAULT_TICK_INTERVAL_MS,
    ) -> None:
        if len(players) < 2 or len(set(players)) != len(players):
            raise ValueError(f"Need at least two distinct players, got {players!r}")
        self._players = tuple(players)
        self._on_flag = on_flag
        self._active: str | None = None
        self._flagged: str | None = None
        self._timers: dict[str, Timer] = {
            player: Timer(
                time_control,
                scheduler,
                clock=clock,
                tick_interval_ms=tick_interval_ms,
                on_expired=self._flag_callback(player),
                notifier=notifier,
            )
            for player in self._players
        }

    @property
    def players(self) -> tuple[str, ...]:
        return self._players

    @property
    def active_player(self) -> str | None:
        return self._active

    @property
    def flagged_player(self) -> str | None:
        return self._flagged

    def timer(self, player: str) -> Timer:
        try:
            return self._timers[player]
        except KeyError:
            raise KeyError(f"Unknown player {player!r}") from None

    def start(self, player: str | None = None) -> None:
        """Run ``player``'s clock (first player by default), pausing all others."""
        player = self._players[0] if player is None else player
        target = self.timer(player)
        if self._flagged is not None:
            _logger.debug("Clocks already flagged (%s), not starting %s", self._flagged, player)
            return
        if target.state is TimerState.CLOSED:
            _logger.debug("Clock for %s is closed, not starting it", player)
            return
        for name, timer in self._timers.items():
            if name != player:
                timer.pause()
        self._active = player
        target.resume()

    def switch(self) -> str | None:
        """End the active player's turn and start the next player's clock.

        Returns:
            The player now on move, or None if nothing was running.
        """
        if self._active is None or self._flagged is not None:
            return None
        index = self._players.index(self._active)
        self.start(self._players[(index + 1) % len(self._players)])
        return self._active

    end_turn = switch

    def pause_all(self) -> None:
        for timer in self._timers.values():
            timer.pause()

    def close(self) -> None:
        for timer in self._timers.values():
            timer.close()
        self._active = None

    def _flag_callback(self, player: str) -> Callable[[], None]:
        def on_expired() -> None:
            self._flagged = player
            _logger.info("Player %s ran out of time", player)
            if self._on_flag is not None:
                self._on_flag(player)

        return on_expired

"""Game session.

Holds at most one active game instance. A GameSession is created once by
the application and passed by reference to whatever needs the current
game; there is no module-level instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from gameclock.core.errors import NotBooted
from gameclock.core.state import Event, EventType, StateNotifier

_logger = logging.getLogger(__name__)


class Game(Protocol):
    """What the session needs from a game instance."""

    has_started: bool

    def close(self) -> None: ...


G = TypeVar("G", bound=Game)


class GameSession:
    """Owner of the currently booted game.

    Example:
        >>> session = GameSession()
        >>> game = session.boot(GoGame)
        >>> session.get_current() is game
        True
        >>> session.close()
    """

    def __init__(self, notifier: StateNotifier | None = None) -> None:
        self._game: Game | None = None
        self._notifier = notifier

    def boot(self, game_factory: Callable[[], G]) -> G:
        """Construct and install a new game.

        A game that is already active is replaced but not closed; call
        close() first to release it.
        """
        if self._game is not None:
            _logger.warning("Replacing active game %r without closing it", self._game)
        game = game_factory()
        self._game = game
        _logger.info("Booted game %r", game)
        self._publish(EventType.GAME_BOOTED, game)
        return game

    def close(self) -> None:
        """Close and clear the active game. No-op when nothing is booted."""
        game = self._game
        if game is None:
            return
        game.close()
        self._game = None
        _logger.info("Closed game %r", game)
        self._publish(EventType.GAME_CLOSED, game)

    def is_booted(self) -> bool:
        return self._game is not None

    def is_started(self) -> bool:
        return self._game is not None and bool(self._game.has_started)

    def get_current(self) -> Game:
        """Return the active game.

        Raises:
            NotBooted: no game has been booted, or it was closed.
        """
        if self._game is None:
            raise NotBooted(
                "The game has not been booted",
                user_message="No game is currently running.",
            )
        return self._game

    def _publish(self, event_type: EventType, game: Game) -> None:
        if self._notifier is not None:
            self._notifier.notify(Event.create(event_type, {"game": game}, source=self))

"""
gameclock exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for configuration and session errors.
"""

from typing import Any, Dict, Optional


class GameClockError(Exception):
    """Base exception for gameclock errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class InvalidConfiguration(GameClockError):
    """Time control validation errors (e.g. zero-length overtime periods)."""

    pass


class NotBooted(GameClockError):
    """The game session was queried before a game was booted."""

    pass

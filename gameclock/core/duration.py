"""Duration value.

A non-negative span of time in whole milliseconds. Durations are copied
rather than shared: a Timer owns its countdown Duration and mutates it in
place through consume(), while the Durations held by a TimeControl are
never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(eq=False)
class Duration:
    """Span of time in milliseconds (never negative).

    Example:
        >>> d = Duration.from_seconds(3)
        >>> d.consume(1200).milliseconds
        1800
        >>> d.consume(5000).milliseconds
        0
    """

    SECOND = 1000
    MINUTE = 60 * SECOND

    milliseconds: int = 0

    def __post_init__(self) -> None:
        self.milliseconds = int(round(self.milliseconds))
        if self.milliseconds < 0:
            raise ValueError(f"Duration cannot be negative: {self.milliseconds}ms")

    @classmethod
    def from_milliseconds(cls, ms: float) -> Duration:
        return cls(int(round(ms)))

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls(int(round(seconds * cls.SECOND)))

    @classmethod
    def from_minutes(cls, minutes: float) -> Duration:
        return cls(int(round(minutes * cls.MINUTE)))

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @classmethod
    def copy(cls, other: Duration) -> Duration:
        """Independent Duration with the same value as ``other``."""
        return cls(other.milliseconds)

    def clone(self) -> Duration:
        return Duration(self.milliseconds)

    def consume(self, elapsed_ms: float) -> Duration:
        """Subtract elapsed time in place, flooring at zero.

        Negative elapsed values (e.g. a clock read out of order) consume
        nothing.

        Returns:
            self, for chaining
        """
        elapsed = int(round(elapsed_ms))
        if elapsed > 0:
            self.milliseconds = max(0, self.milliseconds - elapsed)
        return self

    @property
    def seconds(self) -> float:
        return self.milliseconds / self.SECOND

    def is_zero(self) -> bool:
        return self.milliseconds == 0

    def format_clock(self) -> str:
        """Render as ``M:SS`` or ``H:MM:SS``, rounding partial seconds up."""
        total_seconds = -(-self.milliseconds // self.SECOND)
        hours, rest = divmod(total_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.milliseconds == other.milliseconds

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.milliseconds < other.milliseconds

    __hash__ = None  # type: ignore[assignment]

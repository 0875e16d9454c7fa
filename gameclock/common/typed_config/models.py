# gameclock/common/typed_config/models.py
#
# Frozen dataclass config sections and the value coercion helpers they use.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from gameclock.core.duration import Duration
from gameclock.core.time_control import TimeControl

# =============================================================================
# Helper Functions
# =============================================================================


def safe_int(value: Any, default: int) -> int:
    """int conversion. None, bool, float and unparsable values give ``default``.

    Note:
        bool is an int subclass but is rejected so True does not become 1.
        float is rejected to avoid silent truncation.
    """
    if value is None or isinstance(value, (bool, float)):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """float conversion. None, bool and unparsable values give ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def non_negative(value: float, default: float) -> float:
    return value if math.isfinite(value) and value >= 0 else default


def positive(value: float, default: float) -> float:
    return value if math.isfinite(value) and value > 0 else default


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class TimerConfig:
    """Clock settings (``timer`` section).

    Attributes:
        main_time: Main time in minutes.
        byo_length: Length of one byoyomi period in seconds (at least 1).
        byo_periods: Number of byoyomi periods (0 for sudden death).
        timeout_tolerance: Grace window before expiry fires, in seconds.
        tick_interval: Display reconciliation interval, in seconds.

    Note:
        Negative or malformed values fall back to the defaults; byo_length
        is clamped to 1 second so an overtime period is never empty.
    """

    main_time: float = 0.0
    byo_length: int = 30
    byo_periods: int = 5
    timeout_tolerance: float = 0.0
    tick_interval: float = 0.25

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "TimerConfig":
        return cls(
            main_time=non_negative(safe_float(d.get("main_time"), 0.0), 0.0),
            byo_length=max(1, safe_int(d.get("byo_length"), 30)),
            byo_periods=int(non_negative(safe_int(d.get("byo_periods"), 5), 5)),
            timeout_tolerance=non_negative(safe_float(d.get("timeout_tolerance"), 0.0), 0.0),
            tick_interval=positive(safe_float(d.get("tick_interval"), 0.25), 0.25),
        )

    @property
    def tick_interval_ms(self) -> int:
        return max(1, int(round(self.tick_interval * Duration.SECOND)))

    def to_time_control(self) -> TimeControl:
        """Build the validated TimeControl for these settings."""
        return TimeControl(
            main=Duration.from_minutes(self.main_time),
            period=Duration.from_seconds(self.byo_length),
            period_count=self.byo_periods,
            timeout_tolerance=Duration.from_seconds(self.timeout_tolerance),
        )

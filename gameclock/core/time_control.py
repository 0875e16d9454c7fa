"""Time control configuration.

A TimeControl describes the clock policy for one timer's lifetime: a main
allotment, an optional overtime period length and count, an expiry
tolerance, and optionally a timeout callback that replaces the period
scheme. It is validated once at construction and never mutated; Timers
copy its Durations into their own state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gameclock.core.duration import Duration
from gameclock.core.errors import InvalidConfiguration
from gameclock.core.expiry import CallbackExpiryPolicy, ExpiryPolicy, PeriodExpiryPolicy, TimeoutCallback


@dataclass(frozen=True)
class TimeControl:
    """Clock policy shared by reference between Timers.

    Attributes:
        main: Primary allotment.
        period: Length of one overtime period (only meaningful if period_count > 0).
        period_count: Number of overtime periods, 0 for sudden death.
        timeout_tolerance: Grace window added before an expiry fires.
        timeout_callback: Optional callback consulted on expiry instead of
            the period scheme. Returns the next Duration or None to stop.

    Raises:
        InvalidConfiguration: period_count is negative, or positive with a
            zero-length period.
    """

    main: Duration
    period: Duration = field(default_factory=Duration.zero)
    period_count: int = 0
    timeout_tolerance: Duration = field(default_factory=Duration.zero)
    timeout_callback: TimeoutCallback | None = field(default=None, compare=False)

    # Duration fields are mutable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.period_count < 0:
            raise InvalidConfiguration(
                f"period_count must be >= 0, got {self.period_count}",
                user_message="The number of overtime periods cannot be negative.",
                context={"period_count": self.period_count},
            )
        if self.period_count > 0 and self.period.is_zero():
            raise InvalidConfiguration(
                f"{self.period_count} overtime periods configured with a zero-length period",
                user_message="Overtime periods must have a positive length.",
                context={"period_count": self.period_count, "period_ms": self.period.milliseconds},
            )

    @classmethod
    def sudden_death(cls, main_minutes: float) -> TimeControl:
        return cls(main=Duration.from_minutes(main_minutes))

    @classmethod
    def byoyomi(cls, main_minutes: float, period_seconds: float, periods: int) -> TimeControl:
        """Japanese byoyomi: main time followed by ``periods`` fixed-length periods."""
        return cls(
            main=Duration.from_minutes(main_minutes),
            period=Duration.from_seconds(period_seconds),
            period_count=periods,
        )

    @property
    def has_overtime(self) -> bool:
        return self.period_count > 0 or self.timeout_callback is not None

    def expiry_policy(self) -> ExpiryPolicy:
        """Policy a Timer applies when its countdown expires.

        A configured timeout callback takes precedence over the period scheme.
        """
        if self.timeout_callback is not None:
            return CallbackExpiryPolicy(self.timeout_callback)
        return PeriodExpiryPolicy(self.period)

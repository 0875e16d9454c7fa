"""
Pytest configuration and shared fixtures for gameclock tests.

This module provides:
- Headless Kivy environment defaults (set before any kivy import)
- Virtual time fixtures (FakeClock + FakeScheduler)
- Timer / TimeControl factories
"""

import os

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

from typing import Optional

import pytest

from gameclock.core import Duration, TimeControl, Timer
from gameclock.core.state import StateNotifier
from tests.fakes import FakeClock, FakeScheduler


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(start_ms=1_000_000)


@pytest.fixture
def scheduler(fake_clock: FakeClock) -> FakeScheduler:
    return FakeScheduler(fake_clock)


@pytest.fixture
def notifier() -> StateNotifier:
    return StateNotifier()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def make_time_control(
    main_ms: int,
    period_ms: int = 0,
    period_count: int = 0,
    tolerance_ms: int = 0,
    timeout_callback=None,
) -> TimeControl:
    """Build a TimeControl from plain millisecond values."""
    return TimeControl(
        main=Duration(main_ms),
        period=Duration(period_ms),
        period_count=period_count,
        timeout_tolerance=Duration(tolerance_ms),
        timeout_callback=timeout_callback,
    )


class ExpiryRecorder:
    """Callable on_expired hook counting how often it was called."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def expiry_recorder() -> ExpiryRecorder:
    return ExpiryRecorder()


@pytest.fixture
def make_timer(scheduler: FakeScheduler, fake_clock: FakeClock, expiry_recorder: ExpiryRecorder):
    """Factory fixture: make_timer(main_ms, ...) -> Timer on virtual time."""

    def _make(
        main_ms: int,
        period_ms: int = 0,
        period_count: int = 0,
        tolerance_ms: int = 0,
        timeout_callback=None,
        notifier: Optional[StateNotifier] = None,
        tick_interval_ms: int = Timer.DEFAULT_TICK_INTERVAL_MS,
    ) -> Timer:
        tc = make_time_control(main_ms, period_ms, period_count, tolerance_ms, timeout_callback)
        return Timer(
            tc,
            scheduler,
            clock=fake_clock,
            tick_interval_ms=tick_interval_ms,
            on_expired=expiry_recorder,
            notifier=notifier,
        )

    return _make

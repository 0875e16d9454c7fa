"""Tests for TimeControl validation and expiry policy selection."""

import dataclasses

import pytest

from gameclock.core import (
    CallbackExpiryPolicy,
    Continue,
    Duration,
    GameClockError,
    InvalidConfiguration,
    PeriodExpiryPolicy,
    Terminal,
    TimeControl,
)


class TestTimeControlValidation:
    def test_defaults(self):
        tc = TimeControl(main=Duration.from_minutes(10))
        assert tc.period == Duration.zero()
        assert tc.period_count == 0
        assert tc.timeout_tolerance == Duration.zero()
        assert tc.timeout_callback is None
        assert not tc.has_overtime

    def test_zero_period_with_positive_count_rejected(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            TimeControl(main=Duration.from_seconds(60), period=Duration.zero(), period_count=3)

        err = exc_info.value
        assert isinstance(err, GameClockError)
        assert err.context == {"period_count": 3, "period_ms": 0}
        assert "positive length" in err.user_message

    def test_negative_period_count_rejected(self):
        with pytest.raises(InvalidConfiguration):
            TimeControl(main=Duration.from_seconds(60), period=Duration.from_seconds(30), period_count=-1)

    def test_zero_period_without_count_is_fine(self):
        tc = TimeControl(main=Duration.from_seconds(60), period=Duration.zero(), period_count=0)
        assert tc.period_count == 0

    def test_zero_main_time_allowed(self):
        """Pure byoyomi: no main time at all."""
        tc = TimeControl(main=Duration.zero(), period=Duration.from_seconds(30), period_count=3)
        assert tc.main.is_zero()
        assert tc.has_overtime

    def test_frozen(self):
        tc = TimeControl.sudden_death(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tc.period_count = 2  # type: ignore[misc]

    def test_unhashable(self):
        with pytest.raises(TypeError, match="unhashable"):
            hash(TimeControl.byoyomi(1, 30, 3))

    def test_equality_ignores_callback(self):
        a = TimeControl(main=Duration(1000), timeout_callback=lambda: None)
        b = TimeControl(main=Duration(1000))
        assert a == b


class TestConvenienceConstructors:
    def test_sudden_death(self):
        tc = TimeControl.sudden_death(5)
        assert tc.main.milliseconds == 300_000
        assert tc.period_count == 0

    def test_byoyomi(self):
        tc = TimeControl.byoyomi(10, 30, 5)
        assert tc.main.milliseconds == 600_000
        assert tc.period.milliseconds == 30_000
        assert tc.period_count == 5

    def test_byoyomi_zero_period_rejected(self):
        with pytest.raises(InvalidConfiguration):
            TimeControl.byoyomi(10, 0, 5)


class TestExpiryPolicySelection:
    def test_period_policy_is_default(self):
        tc = TimeControl.byoyomi(1, 30, 3)
        assert isinstance(tc.expiry_policy(), PeriodExpiryPolicy)

    def test_sudden_death_uses_period_policy_and_terminates(self):
        policy = TimeControl.sudden_death(1).expiry_policy()
        assert policy.on_expiry(0) == Terminal()

    def test_callback_takes_precedence(self):
        tc = TimeControl(
            main=Duration.from_seconds(10),
            period=Duration.from_seconds(5),
            period_count=3,
            timeout_callback=lambda: None,
        )
        assert isinstance(tc.expiry_policy(), CallbackExpiryPolicy)


class TestPeriodExpiryPolicy:
    def test_continues_while_more_than_one_period_left(self):
        policy = PeriodExpiryPolicy(Duration(2000))
        decision = policy.on_expiry(3)
        assert decision == Continue(Duration(2000), consumes_period=True)

    @pytest.mark.parametrize("periods_left", [0, 1])
    def test_terminal_at_last_period(self, periods_left):
        policy = PeriodExpiryPolicy(Duration(2000))
        assert isinstance(policy.on_expiry(periods_left), Terminal)


class TestCallbackExpiryPolicy:
    def test_returned_duration_continues_without_consuming_period(self):
        policy = CallbackExpiryPolicy(lambda: Duration(700))
        decision = policy.on_expiry(0)
        assert isinstance(decision, Continue)
        assert decision.duration == Duration(700)
        assert decision.consumes_period is False

    def test_none_terminates(self):
        policy = CallbackExpiryPolicy(lambda: None)
        assert isinstance(policy.on_expiry(5), Terminal)

    def test_zero_duration_terminates(self):
        policy = CallbackExpiryPolicy(Duration.zero)
        assert isinstance(policy.on_expiry(0), Terminal)

    def test_callback_called_once_per_expiry(self):
        calls = []

        def callback():
            calls.append(1)
            return Duration(100)

        policy = CallbackExpiryPolicy(callback)
        policy.on_expiry(0)
        policy.on_expiry(0)
        assert len(calls) == 2

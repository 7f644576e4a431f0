import math

import pytest

from discovery.utils import (
    age_factor,
    completion_rate,
    days_between,
    freshness_boost,
    hours_between,
    round_half_up,
    time_decay,
    velocity_multiplier,
)

from .conftest import NOW, ago


def test_hours_and_days_between():
    assert hours_between(ago(hours=36), NOW) == 36.0
    assert days_between(ago(hours=36), NOW) == 1.5


def test_time_decay_is_one_without_events_or_at_now():
    assert time_decay([], NOW) == 1.0
    assert time_decay([NOW], NOW) == 1.0


def test_time_decay_uses_most_recent_event():
    times = [ago(hours=100), ago(hours=48), ago(hours=200)]
    assert time_decay(times, NOW) == pytest.approx(math.exp(-1))


@pytest.mark.parametrize("hours", [0, 1, 24, 48, 168, 1000])
def test_time_decay_in_unit_interval(hours):
    decay = time_decay([ago(hours=hours)], NOW)
    assert 0 < decay <= 1


def test_velocity_is_one_without_events():
    assert velocity_multiplier([], NOW) == 1.0


def test_velocity_span_is_floored_at_one_hour():
    # 3 events at now -> 3 per (1/24 day) = 72/day -> capped at 3
    assert velocity_multiplier([NOW, NOW, NOW], NOW) == 3.0


def test_velocity_below_cap():
    # 2 events over 4 days -> 0.5/day -> 1.05
    assert velocity_multiplier([ago(days=4), ago(days=1)], NOW) == pytest.approx(1.05)


@pytest.mark.parametrize("count,days", [(1, 7), (5, 3), (50, 1), (500, 7), (2, 0)])
def test_velocity_bounds(count, days):
    times = [ago(days=days)] * count
    assert 1.0 <= velocity_multiplier(times, NOW) <= 3.0


def test_freshness_boost_boundary():
    assert freshness_boost(ago(hours=48), NOW) == 1.5
    assert freshness_boost(ago(hours=48, seconds=1), NOW) == 1.0
    assert freshness_boost(NOW, NOW) == 1.5


def test_completion_rate():
    assert completion_rate(0, 0) == 0.0
    assert completion_rate(3, 4) == 75.0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_half_up(0.0) == 0


class TestAgeFactor:
    def test_new_accounts_are_halved(self):
        assert age_factor(0) == 0.5
        assert age_factor(6.99) == 0.5

    def test_jump_at_seven_days(self):
        assert age_factor(7) == pytest.approx(1 + 7 / 60 * 0.5)
        assert age_factor(7) == pytest.approx(1.0583, abs=1e-4)

    def test_peak_at_sixty_days(self):
        assert age_factor(60) == 1.5
        assert age_factor(60.0001) == pytest.approx(1.5, abs=1e-5)

    def test_ramp_down(self):
        assert age_factor(120) == pytest.approx(1.25)
        assert age_factor(180) == pytest.approx(1.0)

    def test_old_accounts(self):
        assert age_factor(180.5) == 1.0
        assert age_factor(1000) == 1.0

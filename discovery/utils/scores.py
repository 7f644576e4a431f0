"""
Score helpers: time spans, decay, velocity, freshness and age factors used by both scorers.

Every helper takes `now` explicitly; nothing here reads the clock.
"""

import math
from datetime import datetime
from typing import Sequence

SECONDS_PER_HOUR = 3600.0
HOURS_PER_DAY = 24.0


def hours_between(earlier: datetime, now: datetime) -> float:
    """Fractional hours from earlier to now."""
    return (now - earlier).total_seconds() / SECONDS_PER_HOUR


def days_between(earlier: datetime, now: datetime) -> float:
    """Fractional days from earlier to now."""
    return hours_between(earlier, now) / HOURS_PER_DAY


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def time_decay(
    event_times: Sequence[datetime],
    now: datetime,
    decay_hours: float = 48.0,
) -> float:
    """
    Exponential decay on the age of the most recent event.

    1.0 when the latest event is at `now`; 1.0 for no events.
    """
    if not event_times:
        return 1.0
    hours_ago = hours_between(max(event_times), now)
    return math.exp(-hours_ago / decay_hours)


def velocity_multiplier(
    event_times: Sequence[datetime],
    now: datetime,
    min_span_hours: float = 1.0,
    divisor: float = 10.0,
    cap: float = 3.0,
) -> float:
    """
    Boost for engagement accumulating quickly: events per day since the oldest event.

    Span is floored at min_span_hours; result is in [1, cap]. 1.0 for no events.
    """
    if not event_times:
        return 1.0
    span_hours = max(min_span_hours, hours_between(min(event_times), now))
    per_day = len(event_times) / (span_hours / HOURS_PER_DAY)
    return min(cap, 1.0 + per_day / divisor)


def freshness_boost(
    created_at: datetime,
    now: datetime,
    window_hours: float = 48.0,
    boost: float = 1.5,
) -> float:
    """Flat boost for entities created within window_hours (inclusive)."""
    if hours_between(created_at, now) <= window_hours:
        return boost
    return 1.0


def completion_rate(completed: int, total: int) -> float:
    """Percentage of plays completed; 0 when there are no plays."""
    if total <= 0:
        return 0.0
    return completed / total * 100


def age_factor(
    age_days: float,
    new_account_days: float = 7.0,
    new_account_factor: float = 0.5,
    peak_days: float = 60.0,
    ramp_end_days: float = 180.0,
    peak_bonus: float = 0.5,
) -> float:
    """
    Account-age multiplier for the rising score.

    Ramps up to 1 + peak_bonus at peak_days, back down to 1 at ramp_end_days.
    Accounts younger than new_account_days get new_account_factor; note the jump
    at that boundary (0.5 -> ~1.058 with defaults) is kept as-is.
    """
    if age_days < new_account_days:
        return new_account_factor
    if age_days <= peak_days:
        return 1.0 + (age_days / peak_days) * peak_bonus
    if age_days <= ramp_end_days:
        ramp = (age_days - peak_days) / (ramp_end_days - peak_days)
        return 1.0 + peak_bonus - ramp * peak_bonus
    return 1.0

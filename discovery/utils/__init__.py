"""Shared utilities for time spans and score factors."""

from .scores import (
    age_factor,
    completion_rate,
    days_between,
    freshness_boost,
    hours_between,
    round_half_up,
    time_decay,
    velocity_multiplier,
)

__all__ = [
    "age_factor",
    "completion_rate",
    "days_between",
    "freshness_boost",
    "hours_between",
    "round_half_up",
    "time_decay",
    "velocity_multiplier",
]

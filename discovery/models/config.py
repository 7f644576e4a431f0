"""
Algorithm configuration: trending (recordings) and rising talent (users).

TrendingConfig and RisingConfig defaults are defined here. The server may pass a dict
(e.g. from algorithm_config.json if present); from_dict() merges it with these defaults.
"""

from datetime import timedelta
from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class TrendingConfig(BaseModel):
    """Configuration for the trending recordings score."""

    # -------------------------------------------------------------------------
    # Window
    # -------------------------------------------------------------------------

    # Only engagement in the trailing window is counted. The store applies it.
    window_days: int = 7

    # Max number of recordings returned by the trending endpoint.
    max_results: int = 20

    # -------------------------------------------------------------------------
    # Base engagement score
    # base = likes * like_weight + comments * comment_weight + plays * play_weight
    # -------------------------------------------------------------------------

    like_weight: float = 3.0
    comment_weight: float = 2.0
    play_weight: float = 1.0

    # -------------------------------------------------------------------------
    # Time decay
    # decay = exp(-hours_since_most_recent_event / decay_hours)
    # -------------------------------------------------------------------------

    decay_hours: float = 48.0

    # -------------------------------------------------------------------------
    # Velocity multiplier
    # rate = events / (max(min_span_hours, span_hours) / 24)
    # velocity = min(velocity_cap, 1 + rate / velocity_divisor)
    # -------------------------------------------------------------------------

    min_span_hours: float = 1.0
    velocity_divisor: float = 10.0
    velocity_cap: float = 3.0

    # -------------------------------------------------------------------------
    # Freshness boost: recordings younger than freshness_hours (inclusive)
    # -------------------------------------------------------------------------

    freshness_hours: float = 48.0
    freshness_boost: float = 1.5

    @model_validator(mode="after")
    def check_ranges(self):
        if self.window_days <= 0:
            raise ValueError(f"window_days must be positive, got {self.window_days}")
        if self.max_results < 1:
            raise ValueError(f"max_results must be >= 1, got {self.max_results}")
        if self.decay_hours <= 0:
            raise ValueError(f"decay_hours must be positive, got {self.decay_hours}")
        if self.min_span_hours <= 0 or self.velocity_divisor <= 0:
            raise ValueError("min_span_hours and velocity_divisor must be positive")
        if self.velocity_cap < 1:
            raise ValueError(f"velocity_cap must be >= 1, got {self.velocity_cap}")
        return self

    @property
    def window(self) -> timedelta:
        return timedelta(days=self.window_days)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "TrendingConfig":
        """Create config from dictionary (flat, or nested under "trending")."""
        flat = dict(config_dict.get("trending", config_dict))
        weights = flat.pop("weights", None)
        if isinstance(weights, dict):
            for kind in ("like", "comment", "play"):
                if kind in weights:
                    flat[f"{kind}_weight"] = weights[kind]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


class RisingConfig(BaseModel):
    """Configuration for the rising talent score."""

    window_days: int = 30
    max_results: int = 20

    # base = recordings * content_weight + engagement + followers * follower_weight
    # engagement = likes + comments + plays * play_weight
    content_weight: float = 5.0
    follower_weight: float = 3.0
    play_weight: float = 0.1

    # -------------------------------------------------------------------------
    # Age factor (piecewise on account age in days)
    #   age < new_account_days                 -> new_account_factor
    #   new_account_days <= age <= peak_days   -> 1 + (age / peak_days) * peak_bonus
    #   peak_days < age <= ramp_end_days       -> ramp down from 1 + peak_bonus to 1
    #   age > ramp_end_days                    -> 1
    # -------------------------------------------------------------------------

    new_account_days: float = 7.0
    new_account_factor: float = 0.5
    peak_days: float = 60.0
    ramp_end_days: float = 180.0
    peak_bonus: float = 0.5

    @model_validator(mode="after")
    def check_ranges(self):
        if self.window_days <= 0:
            raise ValueError(f"window_days must be positive, got {self.window_days}")
        if self.max_results < 1:
            raise ValueError(f"max_results must be >= 1, got {self.max_results}")
        if not (0 <= self.new_account_days <= self.peak_days < self.ramp_end_days):
            raise ValueError(
                "Age breakpoints must satisfy 0 <= new_account_days <= peak_days < ramp_end_days, "
                f"got {self.new_account_days}, {self.peak_days}, {self.ramp_end_days}"
            )
        if self.peak_days <= 0:
            raise ValueError(f"peak_days must be positive, got {self.peak_days}")
        return self

    @property
    def window(self) -> timedelta:
        return timedelta(days=self.window_days)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RisingConfig":
        """Create config from dictionary (flat, or nested under "rising")."""
        flat = dict(config_dict.get("rising", config_dict))
        age = flat.pop("age_factor", None)
        if isinstance(age, dict):
            flat.update(age)
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_TRENDING_CONFIG = TrendingConfig()
DEFAULT_RISING_CONFIG = RisingConfig()


def resolve_trending_config(config: Optional[TrendingConfig]) -> TrendingConfig:
    """Return config or DEFAULT_TRENDING_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_TRENDING_CONFIG


def resolve_rising_config(config: Optional[RisingConfig]) -> RisingConfig:
    """Return config or DEFAULT_RISING_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_RISING_CONFIG

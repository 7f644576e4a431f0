"""
Beatstage Discovery: trending recordings and rising talent scoring

Single entry point for the algorithm package:
- models/: TrendingConfig, RisingConfig, engagement inputs, scoring results
- utils/: time decay, velocity, freshness, and age factor helpers
- stages/: trending and rising scorers, ranking assembler, badges, queues

Everything here is pure: callers pass `now` and fully materialized inputs.
"""

from .models import (
    DEFAULT_RISING_CONFIG,
    DEFAULT_TRENDING_CONFIG,
    EngagementEvent,
    EngagementKind,
    RecentActivity,
    RisingConfig,
    RisingResult,
    ScorableEntity,
    ScorableUser,
    TrendingConfig,
    TrendingResult,
    ensure_entities,
    ensure_users,
)
from .stages import (
    compute_rising_score,
    compute_trending_score,
    create_rising_queue,
    create_trending_queue,
    get_trending_badge,
    rank,
    select_top,
)

TRENDING_DESCRIPTION = (
    "Trending Score = (Likes × 3 + Comments × 2 + Plays × 1) "
    "× Time Decay × Velocity Multiplier × Freshness Boost"
)
RISING_DESCRIPTION = (
    "Rising Score = (Recent Recordings × 5 + Engagement + Recent Followers × 3) × Age Factor"
)

__all__ = [
    "DEFAULT_RISING_CONFIG",
    "DEFAULT_TRENDING_CONFIG",
    "EngagementEvent",
    "EngagementKind",
    "RISING_DESCRIPTION",
    "RecentActivity",
    "RisingConfig",
    "RisingResult",
    "ScorableEntity",
    "ScorableUser",
    "TRENDING_DESCRIPTION",
    "TrendingConfig",
    "TrendingResult",
    "compute_rising_score",
    "compute_trending_score",
    "create_rising_queue",
    "create_trending_queue",
    "ensure_entities",
    "ensure_users",
    "get_trending_badge",
    "rank",
    "select_top",
]

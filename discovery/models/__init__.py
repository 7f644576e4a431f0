"""Data models for the discovery scoring algorithms."""

from .config import (
    DEFAULT_RISING_CONFIG,
    DEFAULT_TRENDING_CONFIG,
    RisingConfig,
    TrendingConfig,
    resolve_rising_config,
    resolve_trending_config,
)
from .engagement import (
    EngagementEvent,
    EngagementKind,
    ScorableEntity,
    ScorableUser,
    as_utc,
    ensure_entities,
    ensure_users,
)
from .scoring import RecentActivity, RisingResult, TrendingResult

__all__ = [
    "DEFAULT_RISING_CONFIG",
    "DEFAULT_TRENDING_CONFIG",
    "EngagementEvent",
    "EngagementKind",
    "RecentActivity",
    "RisingConfig",
    "RisingResult",
    "ScorableEntity",
    "ScorableUser",
    "TrendingConfig",
    "TrendingResult",
    "as_utc",
    "ensure_entities",
    "ensure_users",
    "resolve_rising_config",
    "resolve_trending_config",
]

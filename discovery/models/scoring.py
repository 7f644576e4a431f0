"""
Scoring models: per-entity results with every intermediate metric exposed.

Results are derived on every request and never persisted.
"""

from pydantic import BaseModel


class TrendingResult(BaseModel):
    """A recording's trending score and the factors that produced it."""

    entity_id: str
    trending_score: float
    recent_likes: int
    recent_comments: int
    recent_plays: int
    completed_plays: int
    completion_rate: float
    velocity_multiplier: float
    time_decay: float
    freshness_boost: float
    engagement_score: float


class RecentActivity(BaseModel):
    recordings: int
    followers: int
    likes: int
    comments: int
    plays: int


class RisingResult(BaseModel):
    """A user's rising talent score."""

    user_id: str
    rising_score: int
    recent_activity: RecentActivity
    account_age_in_days: int
    age_factor: float
    engagement_score: float

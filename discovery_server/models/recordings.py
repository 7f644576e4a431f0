"""Response models for trending recordings."""

from datetime import datetime
from typing import List, Optional

from .common import AlgorithmInfo, BeatInfo, CamelModel, UserCard


class TrendingRecording(CamelModel):
    """A recording card with every trending metric the UI displays."""

    id: str
    title: Optional[str] = None
    audio_url: Optional[str] = None
    duration: Optional[float] = None
    created_at: datetime
    likes_count: Optional[int] = None
    comments_count: Optional[int] = None
    plays_count: Optional[int] = None
    user: Optional[UserCard] = None
    beat: Optional[BeatInfo] = None

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
    badge: str


class TrendingResponse(CamelModel):
    recordings: List[TrendingRecording]
    algorithm: AlgorithmInfo

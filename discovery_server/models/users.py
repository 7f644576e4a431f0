"""Response models for rising talent."""

from typing import List, Optional

from .common import AlgorithmInfo, CamelModel


class RecentActivityOut(CamelModel):
    recordings: int
    followers: int
    likes: int
    comments: int
    plays: int


class RisingUser(CamelModel):
    """User card with profile counters and the rising score breakdown."""

    id: str
    name: Optional[str] = None
    username: Optional[str] = None
    image: Optional[str] = None
    tier: Optional[str] = None
    bio: Optional[str] = None
    total_votes: Optional[int] = None
    public_recordings: int = 0
    followers_count: int = 0
    following_count: int = 0

    rising_score: int
    recent_activity: RecentActivityOut
    account_age_in_days: int
    age_factor: float


class RisingTalentResponse(CamelModel):
    users: List[RisingUser]
    algorithm: AlgorithmInfo

"""
Rising talent score for users.

rising = round((recordings * 5 + engagement + followers * 3) * age_factor)
engagement = likes + comments + plays * 0.1
"""

from datetime import datetime
from typing import Optional

from ..models.config import RisingConfig, resolve_rising_config
from ..models.engagement import ScorableUser
from ..models.scoring import RecentActivity, RisingResult
from ..utils.scores import age_factor, days_between, round_half_up


def compute_rising_score(
    user: ScorableUser,
    now: datetime,
    config: Optional[RisingConfig] = None,
) -> RisingResult:
    """Score one user from activity aggregated over the trailing window."""
    config = resolve_rising_config(config)

    engagement_score = (
        user.recent_likes_received
        + user.recent_comments_received
        + user.recent_plays_received * config.play_weight
    )
    followers = len(user.recent_follower_gains)
    base_score = (
        user.recent_content_count * config.content_weight
        + engagement_score
        + followers * config.follower_weight
    )

    age_days = days_between(user.created_at, now)
    factor = age_factor(
        age_days,
        new_account_days=config.new_account_days,
        new_account_factor=config.new_account_factor,
        peak_days=config.peak_days,
        ramp_end_days=config.ramp_end_days,
        peak_bonus=config.peak_bonus,
    )

    return RisingResult(
        user_id=user.id,
        rising_score=round_half_up(base_score * factor),
        recent_activity=RecentActivity(
            recordings=user.recent_content_count,
            followers=followers,
            likes=user.recent_likes_received,
            comments=user.recent_comments_received,
            plays=user.recent_plays_received,
        ),
        account_age_in_days=round_half_up(age_days),
        age_factor=factor,
        engagement_score=engagement_score,
    )

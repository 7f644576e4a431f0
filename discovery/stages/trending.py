"""
Trending score for recordings: recent engagement weighted by decay, velocity, and freshness.

trending = (likes * 3 + comments * 2 + plays * 1) * time_decay * velocity * freshness
"""

from datetime import datetime
from typing import List, Optional

from ..models.config import TrendingConfig, resolve_trending_config
from ..models.engagement import EngagementKind, ScorableEntity
from ..models.scoring import TrendingResult
from ..utils.scores import completion_rate, freshness_boost, time_decay, velocity_multiplier


def compute_trending_score(
    entity: ScorableEntity,
    now: datetime,
    config: Optional[TrendingConfig] = None,
) -> TrendingResult:
    """
    Score one recording from its events inside the trailing window.

    The caller is trusted to have filtered entity.events to the window
    (config.window_days); `now` drives decay, velocity, and freshness.
    """
    config = resolve_trending_config(config)
    events = entity.events

    recent_likes = sum(1 for e in events if e.kind == EngagementKind.LIKE)
    recent_comments = sum(1 for e in events if e.kind == EngagementKind.COMMENT)
    recent_plays = sum(1 for e in events if e.kind == EngagementKind.PLAY)
    completed_plays = sum(
        1 for e in events if e.kind == EngagementKind.PLAY and e.completed
    )

    base_score = (
        recent_likes * config.like_weight
        + recent_comments * config.comment_weight
        + recent_plays * config.play_weight
    )

    times: List[datetime] = [e.occurred_at for e in events]
    decay = time_decay(times, now, config.decay_hours)
    velocity = velocity_multiplier(
        times,
        now,
        min_span_hours=config.min_span_hours,
        divisor=config.velocity_divisor,
        cap=config.velocity_cap,
    )
    freshness = freshness_boost(
        entity.created_at, now, config.freshness_hours, config.freshness_boost
    )

    return TrendingResult(
        entity_id=entity.id,
        trending_score=base_score * decay * velocity * freshness,
        recent_likes=recent_likes,
        recent_comments=recent_comments,
        recent_plays=recent_plays,
        completed_plays=completed_plays,
        completion_rate=completion_rate(completed_plays, recent_plays),
        velocity_multiplier=velocity,
        time_decay=decay,
        freshness_boost=freshness,
        engagement_score=base_score,
    )

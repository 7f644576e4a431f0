"""
Queue orchestration: score every candidate, then rank to the top N.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.config import (
    RisingConfig,
    TrendingConfig,
    resolve_rising_config,
    resolve_trending_config,
)
from ..models.engagement import ScorableEntity, ScorableUser, ensure_entities, ensure_users
from ..models.scoring import RisingResult, TrendingResult
from .ranking import select_top
from .rising import compute_rising_score
from .trending import compute_trending_score


def create_trending_queue(
    entities: List[Union[Dict[str, Any], ScorableEntity]],
    now: datetime,
    config: Optional[TrendingConfig] = None,
    top_n: Optional[int] = None,
) -> List[Tuple[ScorableEntity, TrendingResult]]:
    """
    Trending recordings, highest score first.

    Returns (entity, result) pairs with trending_score > 0, at most
    top_n (defaults to config.max_results).
    """
    config = resolve_trending_config(config)
    scored = [
        (entity, compute_trending_score(entity, now, config))
        for entity in ensure_entities(entities)
    ]
    limit = config.max_results if top_n is None else min(top_n, config.max_results)
    return select_top(scored, lambda pair: pair[1].trending_score, limit)


def create_rising_queue(
    users: List[Union[Dict[str, Any], ScorableUser]],
    now: datetime,
    config: Optional[RisingConfig] = None,
    top_n: Optional[int] = None,
) -> List[Tuple[ScorableUser, RisingResult]]:
    """Rising users, highest score first; (user, result) pairs with rising_score > 0."""
    config = resolve_rising_config(config)
    scored = [
        (user, compute_rising_score(user, now, config))
        for user in ensure_users(users)
    ]
    limit = config.max_results if top_n is None else min(top_n, config.max_results)
    return select_top(scored, lambda pair: pair[1].rising_score, limit)

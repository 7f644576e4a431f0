"""Rising talent endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from discovery import RISING_DESCRIPTION, create_rising_queue

from ..models import AlgorithmInfo, RisingTalentResponse, RisingUser
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/rising-talent", response_model=RisingTalentResponse)
def get_rising_talent(limit: Optional[int] = Query(None, ge=1)):
    """Top active users by rising score over the trailing window (30 days by default)."""
    state = get_state()
    config = state.rising_config
    now = state.now()
    try:
        candidates = state.engagement_store.get_rising_candidates(now - config.window)
        queue = create_rising_queue(candidates, now, config, top_n=limit)
        logger.debug("Rising talent: %d candidates, %d returned", len(candidates), len(queue))

        users = []
        for user, result in queue:
            card = user.model_dump(exclude={"recent_follower_gains"})
            card.update(result.model_dump(exclude={"user_id", "engagement_score"}))
            users.append(RisingUser.model_validate(card))

        return RisingTalentResponse(
            users=users,
            algorithm=AlgorithmInfo(
                description=RISING_DESCRIPTION,
                time_window=f"{config.window_days} days",
                max_results=config.max_results,
            ),
        )
    except Exception:
        logger.exception("Error fetching rising talent")
        raise HTTPException(status_code=500, detail="Failed to fetch rising talent")

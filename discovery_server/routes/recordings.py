"""Trending recordings endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from discovery import TRENDING_DESCRIPTION, create_trending_queue, get_trending_badge

from ..models import AlgorithmInfo, TrendingRecording, TrendingResponse
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/trending", response_model=TrendingResponse)
def get_trending_recordings(limit: Optional[int] = Query(None, ge=1)):
    """
    Top public recordings by trending score over the trailing window (7 days by default).

    Each card carries the recent counts, decay, velocity, and freshness factors
    alongside the final score.
    """
    state = get_state()
    config = state.trending_config
    now = state.now()
    try:
        candidates = state.engagement_store.get_trending_candidates(now - config.window)
        queue = create_trending_queue(candidates, now, config, top_n=limit)
        logger.debug("Trending: %d candidates, %d returned", len(candidates), len(queue))

        recordings = []
        for entity, result in queue:
            card = entity.model_dump(exclude={"events"})
            card.update(result.model_dump(exclude={"entity_id"}))
            card["badge"] = get_trending_badge(result)
            recordings.append(TrendingRecording.model_validate(card))

        return TrendingResponse(
            recordings=recordings,
            algorithm=AlgorithmInfo(
                description=TRENDING_DESCRIPTION,
                time_window=f"{config.window_days} days",
                max_results=config.max_results,
            ),
        )
    except Exception:
        logger.exception("Error fetching trending recordings")
        raise HTTPException(status_code=500, detail="Failed to fetch trending recordings")

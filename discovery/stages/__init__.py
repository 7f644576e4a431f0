"""Scoring stages: trending (recordings), rising (users), ranking, badges, queue orchestration."""

from .badges import get_trending_badge
from .queue import create_rising_queue, create_trending_queue
from .ranking import DEFAULT_TOP_N, rank, select_top
from .rising import compute_rising_score
from .trending import compute_trending_score

__all__ = [
    "DEFAULT_TOP_N",
    "compute_rising_score",
    "compute_trending_score",
    "create_rising_queue",
    "create_trending_queue",
    "get_trending_badge",
    "rank",
    "select_top",
]

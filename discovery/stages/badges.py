"""
Display badge for a trending recording (hot, trending, rising, popular).
"""

from ..models.scoring import TrendingResult

HOT_VELOCITY = 2.0
TRENDING_SCORE = 50.0
RISING_SCORE = 20.0


def get_trending_badge(result: TrendingResult) -> str:
    """Velocity wins over raw score; everything else on the list is "popular"."""
    if result.velocity_multiplier >= HOT_VELOCITY:
        return "hot"
    if result.trending_score >= TRENDING_SCORE:
        return "trending"
    if result.trending_score >= RISING_SCORE:
        return "rising"
    return "popular"

"""
Ranking assembler: drop non-positive scores, sort descending, keep the top N.

Sorting is stable, so equal scores keep the caller's order.
"""

from typing import Callable, Iterable, List, Mapping, TypeVar

T = TypeVar("T")

DEFAULT_TOP_N = 20


def select_top(
    items: Iterable[T],
    score: Callable[[T], float],
    top_n: int = DEFAULT_TOP_N,
) -> List[T]:
    """Items with score > 0, highest first, truncated to top_n."""
    if top_n <= 0:
        return []
    kept = [item for item in items if score(item) > 0]
    kept.sort(key=score, reverse=True)
    return kept[:top_n]


def rank(results: Iterable[Mapping], top_n: int = DEFAULT_TOP_N) -> List[str]:
    """Ids of the top_n results ({"id", "score"} mappings) with a positive score."""
    return [r["id"] for r in select_top(results, lambda r: r["score"], top_n)]

"""
tilewalk.tiling.scoring - Pick the best of many scored candidates.

Tile navigation, span growth and display selection all reduce to the
same loop: score every candidate, keep the lowest. Candidates are
scored as ``primary * weight + secondary`` so that the primary key
dominates and the secondary only breaks near-ties.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

T = TypeVar("T")

# Large enough that one pixel of primary key outweighs any on-screen distance
OVERLAP_WEIGHT = 1e6


def pick_best(
    candidates: Iterable[T],
    secondary: Callable[[T], float],
    primary: Optional[Callable[[T], float]] = None,
    weight: float = OVERLAP_WEIGHT,
) -> Optional[T]:
    """
    Return the candidate with the lowest score, or None if there are none.

    Args:
        candidates: Items already filtered to the valid ones.
        secondary:  Tie-breaking key (e.g. centroid distance).
        primary:    Dominant key, scaled by *weight*. Omit to rank by
                    *secondary* alone.
        weight:     Scale applied to the primary key.

    Ties keep the first candidate seen, so the result depends only on
    iteration order.
    """
    best: Optional[T] = None
    best_score = math.inf

    for candidate in candidates:
        score = secondary(candidate)
        if primary is not None:
            score += primary(candidate) * weight
        if score < best_score:
            best = candidate
            best_score = score

    return best

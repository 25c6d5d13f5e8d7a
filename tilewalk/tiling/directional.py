"""
tilewalk.tiling.directional - Directional neighbour selection.

Implements the geometric choices behind directional navigation:
    - choose_adjacent: the best tile next to the current one in a
      direction (single-tile move).
    - choose_adjacent_to_span: the best tile to grow a multi-tile span
      into (span mode).
    - pick_display_in_direction: the neighbouring display to jump to
      when the current display has no tile in that direction.

Tiles are compared by their centers. A candidate must lie strictly on
the requested side; among those, the one sharing the most extent on
the perpendicular axis wins, and center distance breaks near-ties.
This keeps moves "in line" in grid-like layouts instead of jumping to
a diagonal neighbour that happens to be closer.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Sequence
from typing import Optional

from tilewalk.tiling.leaves import Leaf
from tilewalk.tiling.rect import Rect
from tilewalk.tiling.scoring import pick_best

log = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal directions for navigation."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @classmethod
    def parse(cls, name: str) -> Direction:
        """
        Parse a direction name, case-insensitively.

        Raises:
            ValueError: If *name* is not one of left/right/up/down.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {name!r}") from None


def _is_on_side(dx: float, dy: float, direction: Direction) -> bool:
    """True if the offset (dx, dy) points strictly toward *direction*."""
    if direction == Direction.LEFT:
        return dx < 0
    if direction == Direction.RIGHT:
        return dx > 0
    if direction == Direction.UP:
        return dy < 0
    return dy > 0


def _ortho_overlap(origin: Rect, other: Rect, direction: Direction) -> float:
    """Overlap along the axis perpendicular to *direction*."""
    if direction.is_horizontal:
        return origin.vertical_overlap(other)
    return origin.horizontal_overlap(other)


def _best_neighbour(
    candidates: list[Leaf],
    origin: Rect,
    direction: Direction,
) -> Optional[Leaf]:
    cx, cy = origin.center
    in_direction = [
        leaf for leaf in candidates
        if _is_on_side(leaf.rect.center_x - cx, leaf.rect.center_y - cy, direction)
    ]
    return pick_best(
        in_direction,
        primary=lambda leaf: -_ortho_overlap(origin, leaf.rect, direction),
        secondary=lambda leaf: origin.center_distance(leaf.rect),
    )


def choose_adjacent(
    leaves: list[Leaf],
    current_rect: Rect,
    direction: Direction,
) -> Optional[Leaf]:
    """
    Find the best tile next to *current_rect* in a given direction.

    The algorithm:
        1. Compute the center of the current tile.
        2. Keep tiles whose center lies strictly on the requested side
           (e.g. for LEFT, tile.cx < current.cx).
        3. Score each by perpendicular overlap with the current tile
           (dominant, weighted by OVERLAP_WEIGHT), then by center
           distance.
        4. The lowest score wins; ties keep the first tile in *leaves*.

    Args:
        leaves:       All tiles of the display.
        current_rect: Rect of the tile the window is in.
        direction:    The direction to search.

    Returns:
        The chosen Leaf, or None if no tile lies in that direction.
    """
    candidates = [leaf for leaf in leaves if leaf.rect != current_rect]
    best = _best_neighbour(candidates, current_rect, direction)
    if best is None:
        log.debug("choose_adjacent %s: no tile from %s", direction.value, current_rect)
    return best


def choose_adjacent_to_span(
    leaves: list[Leaf],
    span: Rect,
    direction: Direction,
) -> Optional[Leaf]:
    """
    Find the tile to grow a span into.

    Same scoring as choose_adjacent, measured against the span rect.
    Tiles already inside the span are never candidates, so repeated
    calls in one direction only ever grow the span outward.

    Returns:
        The chosen Leaf, or None if the span cannot grow that way.
    """
    candidates = [leaf for leaf in leaves if not span.contains_rect(leaf.rect)]
    best = _best_neighbour(candidates, span, direction)
    if best is None:
        log.debug("choose_adjacent_to_span %s: span %s cannot grow", direction.value, span)
    return best


def pick_display_in_direction(
    geometries: Sequence[Rect],
    from_index: int,
    direction: Direction,
) -> int:
    """
    Choose the display to jump to from *from_index*.

    A display qualifies if its center lies strictly on the requested
    side and its perpendicular offset is within its own extent
    (|dy| <= height for LEFT/RIGHT, |dx| <= width for UP/DOWN), which
    rules out displays that are far out of alignment. The closest
    qualifying center wins.

    Args:
        geometries: Full geometry of every display, by index.
        from_index: The display the window is on.
        direction:  Direction to search.

    Returns:
        Index of the chosen display, or *from_index* if none qualifies.
    """
    if not 0 <= from_index < len(geometries):
        log.warning("pick_display_in_direction: unknown display %d", from_index)
        return from_index

    here = geometries[from_index]
    hx, hy = here.center

    def qualifies(index: int) -> bool:
        g = geometries[index]
        dx = g.center_x - hx
        dy = g.center_y - hy
        if not _is_on_side(dx, dy, direction):
            return False
        if direction.is_horizontal:
            return abs(dy) <= g.h
        return abs(dx) <= g.w

    chosen = pick_best(
        (i for i in range(len(geometries)) if i != from_index and qualifies(i)),
        secondary=lambda i: math.hypot(geometries[i].center_x - hx, geometries[i].center_y - hy),
    )
    if chosen is None:
        log.debug("pick_display_in_direction %s: no display from %d", direction.value, from_index)
        return from_index
    return chosen

"""Shared fakes and fixtures for navigation and rendering tests."""

from __future__ import annotations

from typing import Optional

import pytest

from tilewalk.tiling.layout_tree import LayoutTree, default_2x2
from tilewalk.tiling.leaves import Leaf, collect_leaves
from tilewalk.tiling.rect import Rect


class FakeWindow:
    """In-memory ManagedWindow that records what the navigator did to it."""

    def __init__(self, rect: Rect, monitor: int = 0) -> None:
        self.rect = rect
        self.monitor = monitor
        self.moves: list[Rect] = []
        self.calls: list[str] = []
        self.fail_normalize = False
        self.accept_moves = True

    def frame_rect(self) -> Rect:
        return self.rect

    def monitor_index(self) -> int:
        return self.monitor

    def unmaximize(self) -> None:
        self.calls.append("unmaximize")
        if self.fail_normalize:
            raise OSError("window went away")

    def unfullscreen(self) -> None:
        self.calls.append("unfullscreen")

    def move_resize(self, rect: Rect) -> bool:
        if not self.accept_moves:
            return False
        self.moves.append(rect)
        self.rect = rect
        return True


class FakeDisplays:
    """In-memory DisplayService; work area defaults to the full geometry."""

    def __init__(
        self,
        geometries: list[Rect],
        work_areas: Optional[dict[int, Optional[Rect]]] = None,
        focused: Optional[FakeWindow] = None,
    ) -> None:
        self.geometries = geometries
        self.work_areas = work_areas or {}
        self.focused = focused

    def focused_window(self) -> Optional[FakeWindow]:
        return self.focused

    def monitor_count(self) -> int:
        return len(self.geometries)

    def monitor_geometry(self, index: int) -> Rect:
        return self.geometries[index]

    def work_area(self, index: int) -> Optional[Rect]:
        if index in self.work_areas:
            return self.work_areas[index]
        return self.geometries[index]


class RecordingContext:
    """Stand-in for cairo.Context that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def __getattr__(self, name: str):
        def record(*args):
            self.calls.append((name, args))
        return record

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


DISPLAY = Rect(0, 0, 1000, 1000)


@pytest.fixture
def grid_tree() -> LayoutTree:
    tree = default_2x2()
    tree.calculate_rects(DISPLAY.x, DISPLAY.y, DISPLAY.w, DISPLAY.h)
    return tree


@pytest.fixture
def grid_leaves(grid_tree: LayoutTree) -> dict[str, Leaf]:
    """The 2x2 grid on a 1000x1000 display, keyed by position."""
    by_rect = {leaf.rect: leaf for leaf in collect_leaves(grid_tree)}
    return {
        "top_left": by_rect[Rect(0, 0, 500, 500)],
        "top_right": by_rect[Rect(500, 0, 500, 500)],
        "bottom_left": by_rect[Rect(0, 500, 500, 500)],
        "bottom_right": by_rect[Rect(500, 500, 500, 500)],
    }

"""Tests for Navigator orchestration against in-memory services."""

from conftest import DISPLAY, FakeDisplays, FakeWindow

from tilewalk.errors import LayoutLoadError
from tilewalk.tiling.directional import Direction
from tilewalk.tiling.layout_tree import LayoutTree
from tilewalk.tiling.navigator import Navigator
from tilewalk.tiling.providers import StaticLayoutProvider
from tilewalk.tiling.rect import Rect

TOP_LEFT = Rect(0, 0, 500, 500)
TOP_RIGHT = Rect(500, 0, 500, 500)
BOTTOM_LEFT = Rect(0, 500, 500, 500)


class FailingProvider:
    def load_layout_for_display(self, display_index: int) -> LayoutTree:
        raise LayoutLoadError(f"cannot read layout {display_index}")


def _navigator(displays: FakeDisplays, layouts=None) -> Navigator:
    return Navigator(StaticLayoutProvider(layouts or {}), displays)


def test_move_right_and_down_in_default_grid() -> None:
    window = FakeWindow(Rect(100, 100, 300, 300))
    nav = _navigator(FakeDisplays([DISPLAY]))

    assert nav.navigate(window, Direction.RIGHT) == TOP_RIGHT
    assert window.moves == [TOP_RIGHT]

    window.rect = TOP_LEFT
    assert nav.navigate(window, Direction.DOWN) == BOTTOM_LEFT


def test_no_neighbour_and_no_display_is_noop() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = _navigator(FakeDisplays([DISPLAY]))

    assert nav.navigate(window, Direction.LEFT) is None
    assert nav.navigate(window, Direction.UP) is None
    assert window.moves == []


def test_window_state_normalized_first() -> None:
    window = FakeWindow(TOP_LEFT)
    _navigator(FakeDisplays([DISPLAY])).navigate(window, Direction.RIGHT)
    assert window.calls == ["unfullscreen", "unmaximize"]


def test_normalization_failure_does_not_block_move() -> None:
    window = FakeWindow(TOP_LEFT)
    window.fail_normalize = True
    assert _navigator(FakeDisplays([DISPLAY])).navigate(window, Direction.RIGHT) == TOP_RIGHT


def test_window_outside_every_tile_uses_nearest() -> None:
    window = FakeWindow(Rect(1100, 100, 100, 100))
    assert _navigator(FakeDisplays([DISPLAY])).navigate(window, Direction.LEFT) == TOP_LEFT


def test_span_grows_to_row_then_full_display() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = _navigator(FakeDisplays([DISPLAY]))

    assert nav.navigate(window, Direction.RIGHT, span=True) == Rect(0, 0, 1000, 500)
    assert nav.navigate(window, Direction.DOWN, span=True) == Rect(0, 0, 1000, 1000)
    assert nav.navigate(window, Direction.DOWN, span=True) is None
    assert len(window.moves) == 2


def test_span_never_changes_display() -> None:
    displays = FakeDisplays([DISPLAY, Rect(1000, 0, 1000, 1000)])
    window = FakeWindow(TOP_RIGHT)
    assert _navigator(displays).navigate(window, Direction.RIGHT, span=True) is None
    assert window.moves == []


def test_jump_to_display_on_the_right() -> None:
    single = {"percentage": 0}
    displays = FakeDisplays([DISPLAY, Rect(1000, 0, 1000, 1000)])
    window = FakeWindow(Rect(100, 600, 800, 300))
    nav = _navigator(displays, {0: single})

    # the default 2x2 on display 1; nearest to the window's original center
    assert nav.navigate(window, Direction.RIGHT) == Rect(1000, 500, 500, 500)


def test_jump_to_single_tile_display() -> None:
    displays = FakeDisplays([DISPLAY, Rect(1000, 0, 1000, 1000)])
    window = FakeWindow(DISPLAY)
    nav = _navigator(displays, {0: {}, 1: {}})
    assert nav.navigate(window, Direction.RIGHT) == Rect(1000, 0, 1000, 1000)


def test_misaligned_display_is_not_a_target() -> None:
    displays = FakeDisplays([DISPLAY, Rect(1000, 2500, 1000, 1000)])
    window = FakeWindow(TOP_RIGHT)
    assert _navigator(displays).navigate(window, Direction.RIGHT) is None


def test_provider_failure_falls_back_to_default_layout() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = Navigator(FailingProvider(), FakeDisplays([DISPLAY]))
    assert nav.navigate(window, Direction.RIGHT) == TOP_RIGHT


def test_custom_default_layout_strategy() -> None:
    def two_columns() -> LayoutTree:
        return LayoutTree.from_dict({"children": [{"percentage": 0.5}, {}]})

    nav = Navigator(FailingProvider(), FakeDisplays([DISPLAY]), default_layout=two_columns)
    window = FakeWindow(TOP_LEFT)
    assert nav.navigate(window, Direction.RIGHT) == Rect(500, 0, 500, 1000)


def test_missing_work_area_is_noop() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = _navigator(FakeDisplays([DISPLAY], work_areas={0: None}))
    assert nav.navigate(window, Direction.RIGHT) is None
    assert window.moves == []


def test_work_area_excludes_panel() -> None:
    window = FakeWindow(Rect(0, 40, 500, 480))
    nav = _navigator(FakeDisplays([DISPLAY], work_areas={0: Rect(0, 40, 1000, 960)}))
    assert nav.navigate(window, Direction.DOWN) == Rect(0, 520, 500, 480)


def test_navigate_focused() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = _navigator(FakeDisplays([DISPLAY], focused=window))
    assert nav.navigate_focused(Direction.DOWN) == BOTTOM_LEFT
    assert _navigator(FakeDisplays([DISPLAY])).navigate_focused(Direction.DOWN) is None


class SettingsStoreError(Exception):
    pass


class CorruptProvider:
    def load_layout_for_display(self, display_index: int) -> LayoutTree:
        raise SettingsStoreError("corrupt settings store")


def test_any_provider_exception_falls_back_to_default_layout() -> None:
    window = FakeWindow(TOP_LEFT)
    nav = Navigator(CorruptProvider(), FakeDisplays([DISPLAY]))
    assert nav.navigate(window, Direction.RIGHT) == TOP_RIGHT
    assert window.moves == [TOP_RIGHT]


def test_rejected_move_returns_none() -> None:
    window = FakeWindow(TOP_LEFT)
    window.accept_moves = False
    nav = _navigator(FakeDisplays([DISPLAY]))

    assert nav.navigate(window, Direction.RIGHT) is None
    assert nav.navigate(window, Direction.RIGHT, span=True) is None
    assert window.rect == TOP_LEFT

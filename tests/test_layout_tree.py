"""Tests for the layout tree, providers and leaf collection."""

import pytest

from tilewalk.errors import LayoutLoadError
from tilewalk.tiling.layout_tree import LayoutTree, default_2x2
from tilewalk.tiling.leaves import (
    collect_leaves,
    find_leaf_for_point,
    leaves_overlapping,
    nearest_leaf,
    set_highlight,
    span_rect,
)
from tilewalk.tiling.providers import StaticLayoutProvider
from tilewalk.tiling.rect import Rect


def test_default_2x2_rects(grid_tree) -> None:
    rects = {leaf.rect for leaf in collect_leaves(grid_tree)}
    assert rects == {
        Rect(0, 0, 500, 500),
        Rect(500, 0, 500, 500),
        Rect(0, 500, 500, 500),
        Rect(500, 500, 500, 500),
    }


def test_rects_follow_work_area_origin() -> None:
    tree = default_2x2()
    tree.calculate_rects(1920, 40, 1000, 600)
    rects = [leaf.rect for leaf in collect_leaves(tree)]
    assert Rect(1920, 40, 500, 300) in rects
    assert Rect(2420, 340, 500, 300) in rects


def test_uneven_split() -> None:
    tree = LayoutTree.from_dict({"children": [{"percentage": 0.25}, {"percentage": 0}]})
    tree.calculate_rects(0, 0, 800, 400)
    assert [leaf.rect for leaf in collect_leaves(tree)] == [
        Rect(0, 0, 200, 400),
        Rect(200, 0, 600, 400),
    ]


def test_third_child_rejected() -> None:
    tree = LayoutTree()
    tree.add_node(0.5, parent=0)
    tree.add_node(0, parent=0)
    with pytest.raises(ValueError):
        tree.add_node(0, parent=0)


@pytest.mark.parametrize(
    "definition",
    [
        {"children": [{"percentage": 0.5}]},
        {"children": [{"percentage": "wide"}, {}]},
        {"children": [{}, {}], "inset": {"box": [0, 0, 1]}},
        {"children": ["left", "right"]},
    ],
)
def test_malformed_definition_raises_layout_load_error(definition) -> None:
    with pytest.raises(LayoutLoadError):
        LayoutTree.from_dict(definition)


def test_zero_split_leaves_children_without_rects() -> None:
    tree = LayoutTree.from_dict({"children": [{"percentage": 0}, {"percentage": 0}]})
    tree.calculate_rects(0, 0, 100, 100)
    assert collect_leaves(tree) == []


def test_inset_is_laid_out_but_not_a_leaf() -> None:
    tree = LayoutTree.from_dict(
        {
            "children": [{"percentage": 0.5}, {"percentage": 0}],
            "inset": {"box": [0.25, 0.25, 0.5, 0.5], "margin": 2},
        }
    )
    tree.calculate_rects(0, 0, 1000, 1000)

    inset = tree.node(tree.root.inset)
    assert inset.rect == Rect(250, 250, 500, 500)
    assert inset.margin == 2
    assert len(collect_leaves(tree)) == 2


def test_clone_is_independent(grid_tree) -> None:
    copy = grid_tree.clone()
    copy.calculate_rects(0, 0, 10, 10)
    assert grid_tree.node(3).rect == Rect(0, 0, 500, 500)
    assert copy.node(3).rect == Rect(0, 0, 5, 5)


def test_static_provider_returns_fresh_trees() -> None:
    provider = StaticLayoutProvider({0: default_2x2(), 1: {"children": [{"percentage": -0.5}, {}]}})

    first = provider.load_layout_for_display(0)
    first.calculate_rects(0, 0, 100, 100)
    assert provider.load_layout_for_display(0).root.rect is None

    second = provider.load_layout_for_display(1)
    second.calculate_rects(0, 0, 100, 100)
    assert [leaf.rect for leaf in collect_leaves(second)] == [Rect(0, 0, 100, 50), Rect(0, 50, 100, 50)]

    assert provider.load_layout_for_display(7) is None


def test_leaf_lookups(grid_leaves) -> None:
    leaves = list(grid_leaves.values())
    assert find_leaf_for_point(leaves, 250, 250) == grid_leaves["top_left"]
    assert find_leaf_for_point(leaves, 1500, 250) is None
    assert nearest_leaf(leaves, 1500, 250) == grid_leaves["top_right"]


def test_overlapping_and_span(grid_leaves) -> None:
    leaves = list(grid_leaves.values())
    frame = Rect(100, 100, 600, 200)
    overlapped = leaves_overlapping(leaves, frame)
    assert set(overlapped) == {grid_leaves["top_left"], grid_leaves["top_right"]}
    assert span_rect(overlapped) == Rect(0, 0, 1000, 500)
    assert span_rect([]) is None


def test_set_highlight_marks_one_node(grid_tree, grid_leaves) -> None:
    target = grid_leaves["bottom_right"].node
    set_highlight(grid_tree, target)
    assert [n.index for n in grid_tree if n.is_highlighted] == [target]

    set_highlight(grid_tree, None)
    assert not any(n.is_highlighted for n in grid_tree)

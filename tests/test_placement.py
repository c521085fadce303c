"""
Strategy table and calculate_child_position: containment, determinism, gap,
alignment, mirror symmetry, fallback, unknown names and degenerate sizes.
"""

from __future__ import annotations

import numpy as np
import pytest

import anchorplace
from anchorplace.core.axes import PRIMARY_AXIS, SECONDARY_AXIS, PrimaryPlacement, SecondaryPlacement
from anchorplace.core.error_codes import INVALID_STRATEGY, InvalidStrategyError
from anchorplace.core.placement import (
    STRATEGIES,
    STRATEGY_NAMES,
    calculate_child_position,
    calculate_placement,
    get_strategy,
)
from anchorplace.core.strategy import Strategy
from anchorplace.core.types import Dimension, Position, Rect

VIEWPORT = Dimension(width=1280.0, height=720.0)
PARENT = Rect(top=300.0, left=500.0, width=100.0, height=40.0)
CHILD = Dimension(width=200.0, height=100.0)

EXPECTED_NAMES = {
    "top", "bottom", "left", "right",
    "top left", "top center", "top right",
    "bottom left", "bottom center", "bottom right",
    "left top", "left center", "left bottom",
    "right top", "right center", "right bottom",
}


def test_strategy_table_has_sixteen_names() -> None:
    assert len(STRATEGY_NAMES) == 16
    assert set(STRATEGY_NAMES) == EXPECTED_NAMES
    assert STRATEGY_NAMES[:4] == ("top", "bottom", "left", "right")


@pytest.mark.parametrize(
    "name, h_axis, h_pref, v_axis, v_pref",
    [
        ("top", SECONDARY_AXIS, SecondaryPlacement.CENTER, PRIMARY_AXIS, PrimaryPlacement.START),
        ("bottom", SECONDARY_AXIS, SecondaryPlacement.CENTER, PRIMARY_AXIS, PrimaryPlacement.END),
        ("left", PRIMARY_AXIS, PrimaryPlacement.START, SECONDARY_AXIS, SecondaryPlacement.CENTER),
        ("right", PRIMARY_AXIS, PrimaryPlacement.END, SECONDARY_AXIS, SecondaryPlacement.CENTER),
        ("top left", SECONDARY_AXIS, SecondaryPlacement.START, PRIMARY_AXIS, PrimaryPlacement.START),
        ("bottom right", SECONDARY_AXIS, SecondaryPlacement.END, PRIMARY_AXIS, PrimaryPlacement.END),
        ("left bottom", PRIMARY_AXIS, PrimaryPlacement.START, SECONDARY_AXIS, SecondaryPlacement.END),
        ("right top", PRIMARY_AXIS, PrimaryPlacement.END, SECONDARY_AXIS, SecondaryPlacement.START),
        ("right center", PRIMARY_AXIS, PrimaryPlacement.END, SECONDARY_AXIS, SecondaryPlacement.CENTER),
    ],
)
def test_strategy_axis_roles(name, h_axis, h_pref, v_axis, v_pref) -> None:
    s = get_strategy(name)
    assert s.name == name
    assert s.horizontal.axis is h_axis and s.horizontal.preferred is h_pref
    assert s.vertical.axis is v_axis and s.vertical.preferred is v_pref


def test_edge_names_match_center_names() -> None:
    for side in ("top", "bottom", "left", "right"):
        edge, centered = STRATEGIES[side], STRATEGIES[f"{side} center"]
        assert (edge.horizontal, edge.vertical) == (centered.horizontal, centered.vertical)


def test_fallback_concrete_case_bottom() -> None:
    pos = calculate_child_position(
        "bottom",
        Rect(top=0.0, left=0.0, width=100.0, height=20.0),
        Dimension(width=50.0, height=200.0),
        Dimension(width=300.0, height=220.0),
    )
    assert pos == Position(left=25.0, top=20.0)


def test_fallback_replaces_suggested_position_that_covers_parent() -> None:
    # "left" cannot fit beside the parent; the child moves below it instead
    parent = Rect(top=0.0, left=50.0, width=100.0, height=50.0)
    child = Dimension(width=120.0, height=100.0)
    viewport = Dimension(width=200.0, height=300.0)
    choices = get_strategy("left").choices(parent, child, viewport, 0.0)
    assert choices[0].overlapped_area > 0
    pos = calculate_child_position("left", parent, child, viewport)
    assert pos == Position(left=50.0, top=50.0)


def test_fallback_beside_parent_wins_when_above_and_below_overlap() -> None:
    # a tall parent fills the viewport height; only the spot to its right is clear
    parent = Rect(top=0.0, left=0.0, width=50.0, height=200.0)
    child = Dimension(width=100.0, height=100.0)
    viewport = Dimension(width=300.0, height=200.0)
    choices = get_strategy("top").choices(parent, child, viewport, 0.0)
    assert [c.overlapped_area for c in choices] == [5000.0, 5000.0, 0.0]
    assert choices[2].position == Position(left=50.0, top=0.0)
    pos = calculate_child_position("top", parent, child, viewport)
    assert pos == Position(left=50.0, top=0.0)


def test_gap_respected_when_unclamped_top() -> None:
    pos = calculate_child_position("top", PARENT, CHILD, VIEWPORT, gap=8.0)
    assert pos.top + CHILD.height + 8.0 == pytest.approx(PARENT.top)
    assert pos == Position(left=450.0, top=192.0)


@pytest.mark.parametrize("name", ["top", "bottom"])
def test_centered_when_unclamped(name: str) -> None:
    pos = calculate_child_position(name, PARENT, CHILD, VIEWPORT, gap=4.0)
    assert pos.left + CHILD.width / 2 == pytest.approx(PARENT.left + PARENT.width / 2)


def test_bottom_and_side_placements_unclamped() -> None:
    assert calculate_child_position("bottom", PARENT, CHILD, VIEWPORT, gap=8.0).top == 348.0
    assert calculate_child_position("top left", PARENT, CHILD, VIEWPORT).left == PARENT.left
    right_aligned = calculate_child_position("top right", PARENT, CHILD, VIEWPORT)
    assert right_aligned.left + CHILD.width == PARENT.left + PARENT.width
    assert calculate_child_position("right center", PARENT, CHILD, VIEWPORT, gap=4.0) == Position(left=604.0, top=270.0)
    assert calculate_child_position("left top", PARENT, CHILD, VIEWPORT, gap=4.0) == Position(left=296.0, top=300.0)


@pytest.mark.parametrize("parent_top", [120.0, 300.0, 480.0])
def test_top_bottom_vertical_mirror_symmetry(parent_top: float) -> None:
    parent = Rect(top=parent_top, left=500.0, width=100.0, height=40.0)
    mirrored = Rect(top=VIEWPORT.height - parent_top - parent.height, left=500.0, width=100.0, height=40.0)
    a = calculate_child_position("top", parent, CHILD, VIEWPORT, gap=6.0)
    b = calculate_child_position("bottom", mirrored, CHILD, VIEWPORT, gap=6.0)
    assert b.left == pytest.approx(a.left)
    assert b.top == pytest.approx(VIEWPORT.height - a.top - CHILD.height)


def test_top_flips_below_near_viewport_top() -> None:
    parent = Rect(top=10.0, left=500.0, width=100.0, height=40.0)
    pos = calculate_child_position("top", parent, CHILD, VIEWPORT, gap=4.0)
    assert pos.top == 54.0


def test_containment_random_cases() -> None:
    rng = np.random.default_rng(7)
    for _ in range(300):
        vw, vh = float(rng.uniform(50, 2000)), float(rng.uniform(50, 2000))
        viewport = Dimension(vw, vh)
        child = Dimension(float(rng.uniform(0, vw)), float(rng.uniform(0, vh)))
        parent = Rect(
            top=float(rng.uniform(-200, vh + 200)),
            left=float(rng.uniform(-200, vw + 200)),
            width=float(rng.uniform(0, vw)),
            height=float(rng.uniform(0, vh)),
        )
        gap = float(rng.uniform(0, 40))
        for name in STRATEGY_NAMES:
            pos = calculate_child_position(name, parent, child, viewport, gap=gap)
            assert 0.0 <= pos.left <= vw - child.width + 1e-9
            assert 0.0 <= pos.top <= vh - child.height + 1e-9


def test_deterministic() -> None:
    for name in STRATEGY_NAMES:
        a = calculate_child_position(name, PARENT, CHILD, VIEWPORT, gap=3.0)
        b = calculate_child_position(name, PARENT, CHILD, VIEWPORT, gap=3.0)
        assert a == b


@pytest.mark.parametrize("name", STRATEGY_NAMES)
def test_zero_size_child_inside_viewport(name: str) -> None:
    pos = calculate_child_position(name, PARENT, Dimension(0.0, 0.0), VIEWPORT, gap=5.0)
    assert 0.0 <= pos.left <= VIEWPORT.width
    assert 0.0 <= pos.top <= VIEWPORT.height


def test_oversized_child_pins_to_origin() -> None:
    pos = calculate_child_position("bottom", PARENT, Dimension(2000.0, 1000.0), VIEWPORT)
    assert pos == Position(left=0.0, top=0.0)


@pytest.mark.parametrize("bad", ["middle", "Top", "top-left", "", None])
def test_unknown_strategy_raises(bad) -> None:
    with pytest.raises(InvalidStrategyError) as exc:
        calculate_child_position(bad, PARENT, CHILD, VIEWPORT)
    assert exc.value.name == bad
    assert exc.value.valid_names == STRATEGY_NAMES
    assert exc.value.error_key == INVALID_STRATEGY
    assert isinstance(exc.value, ValueError)


def test_unknown_strategy_message_lists_valid_names() -> None:
    with pytest.raises(InvalidStrategyError, match="bottom right"):
        get_strategy("nowhere")


def test_calculate_placement_metrics_and_warnings() -> None:
    ok = calculate_placement("top", PARENT, CHILD, VIEWPORT, gap=8.0)
    assert ok.position == Position(left=450.0, top=192.0)
    assert ok.inside_viewport is True
    assert ok.overlap_area == 0.0
    assert ok.warnings == []

    wide = calculate_placement("bottom", PARENT, Dimension(2000.0, 50.0), VIEWPORT)
    assert wide.inside_viewport is False
    assert any("wider" in w for w in wide.warnings)

    covered = calculate_placement("top", Rect(top=0.0, left=0.0, width=300.0, height=200.0),
                                  Dimension(100.0, 100.0), Dimension(300.0, 200.0))
    assert covered.overlap_area > 0
    assert "Child overlaps the parent." in covered.warnings


def test_strategies_are_hashable_values() -> None:
    top = get_strategy("top")
    assert hash(top) == hash(Strategy(name="top", horizontal=top.horizontal, vertical=top.vertical))
    assert hash(top.vertical) == hash(STRATEGIES["top center"].vertical)
    assert len({STRATEGIES[name] for name in STRATEGY_NAMES}) == len(STRATEGY_NAMES)


def test_package_reexports_entry_point() -> None:
    assert anchorplace.calculate_child_position is calculate_child_position
    assert anchorplace.STRATEGY_NAMES == STRATEGY_NAMES


def test_user_message_for_error_keys() -> None:
    from anchorplace.core.error_codes import user_message

    assert "strategy" in user_message(INVALID_STRATEGY)
    assert user_message(None, fallback="x") == "x"
    assert user_message("unknown_key", fallback="y") == "y"

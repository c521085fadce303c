# anchorplace/core/placement.py
"""
Strategy table and public entry point.

Sixteen named strategies: four edges ("top", "bottom", "left", "right", child
centered along the edge) and twelve edge + alignment pairs ("top left",
"right center", ...). The first word picks the side of the parent, the second
which child edge lines up with the parent.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from anchorplace.core.axes import PRIMARY_AXIS, SECONDARY_AXIS, PrimaryPlacement, SecondaryPlacement
from anchorplace.core.config import DEFAULT_GAP
from anchorplace.core.error_codes import InvalidStrategyError
from anchorplace.core.strategy import AxisResolver, Strategy
from anchorplace.core.types import Dimension, PlacementResult, Position, Rect
from anchorplace.core.validate import validate_child_position

logger = logging.getLogger(__name__)

_SIDES: dict[str, tuple[bool, PrimaryPlacement]] = {
    # side -> (primary axis is vertical, primary placement)
    "top": (True, PrimaryPlacement.START),
    "bottom": (True, PrimaryPlacement.END),
    "left": (False, PrimaryPlacement.START),
    "right": (False, PrimaryPlacement.END),
}

_ALIGNMENTS: dict[bool, dict[str, SecondaryPlacement]] = {
    # primary axis is vertical -> alignment words for the secondary axis
    True: {"left": SecondaryPlacement.START, "center": SecondaryPlacement.CENTER, "right": SecondaryPlacement.END},
    False: {"top": SecondaryPlacement.START, "center": SecondaryPlacement.CENTER, "bottom": SecondaryPlacement.END},
}


def _build_strategy(side: str, alignment: str | None) -> Strategy:
    vertical_primary, primary = _SIDES[side]
    secondary = _ALIGNMENTS[vertical_primary][alignment] if alignment else SecondaryPlacement.CENTER
    primary_resolver = AxisResolver(PRIMARY_AXIS, primary)
    secondary_resolver = AxisResolver(SECONDARY_AXIS, secondary)
    name = f"{side} {alignment}" if alignment else side
    if vertical_primary:
        return Strategy(name=name, horizontal=secondary_resolver, vertical=primary_resolver)
    return Strategy(name=name, horizontal=primary_resolver, vertical=secondary_resolver)


def _build_table() -> Mapping[str, Strategy]:
    table: dict[str, Strategy] = {}
    for side in _SIDES:
        table[side] = _build_strategy(side, None)
    for side, (vertical_primary, _) in _SIDES.items():
        for alignment in _ALIGNMENTS[vertical_primary]:
            strategy = _build_strategy(side, alignment)
            table[strategy.name] = strategy
    return MappingProxyType(table)


STRATEGIES: Mapping[str, Strategy] = _build_table()
STRATEGY_NAMES: tuple[str, ...] = tuple(STRATEGIES)


def get_strategy(name: str) -> Strategy:
    """Checked lookup; raises InvalidStrategyError for unknown names."""
    try:
        return STRATEGIES[name]
    except (KeyError, TypeError):
        raise InvalidStrategyError(name, STRATEGY_NAMES) from None


def calculate_child_position(
    strategy_name: str,
    parent_rect: Rect,
    child_dimension: Dimension,
    viewport_dimension: Dimension,
    gap: float = DEFAULT_GAP,
) -> Position:
    """
    Position (left, top) of the child for the named strategy, kept inside
    [0, viewport.width] x [0, viewport.height] whenever the child fits.
    """
    strategy = get_strategy(strategy_name)
    position = strategy.resolve(parent_rect, child_dimension, viewport_dimension, gap)
    logger.debug("%s -> left=%s top=%s", strategy_name, position.left, position.top)
    return position


def calculate_placement(
    strategy_name: str,
    parent_rect: Rect,
    child_dimension: Dimension,
    viewport_dimension: Dimension,
    gap: float = DEFAULT_GAP,
) -> PlacementResult:
    """calculate_child_position plus containment/overlap metrics and warnings."""
    position = calculate_child_position(
        strategy_name, parent_rect, child_dimension, viewport_dimension, gap=gap
    )
    ok, overlap = validate_child_position(parent_rect, position, child_dimension, viewport_dimension)
    warnings: list[str] = []
    if child_dimension.width > viewport_dimension.width:
        warnings.append("Child is wider than the viewport; it overflows horizontally.")
    if child_dimension.height > viewport_dimension.height:
        warnings.append("Child is taller than the viewport; it overflows vertically.")
    if overlap > 0:
        warnings.append("Child overlaps the parent.")
    for w in warnings:
        logger.info("%s: %s", strategy_name, w)
    return PlacementResult(
        strategy=strategy_name,
        parent=parent_rect,
        child=child_dimension,
        viewport=viewport_dimension,
        gap=gap,
        position=position,
        inside_viewport=ok,
        overlap_area=overlap,
        warnings=warnings,
    )

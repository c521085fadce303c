"""Child-to-anchor placement: position tooltips, dropdowns and popovers inside a viewport."""

from anchorplace.core.error_codes import InvalidStrategyError
from anchorplace.core.placement import (
    STRATEGY_NAMES,
    calculate_child_position,
    calculate_placement,
)
from anchorplace.core.types import Dimension, Offset, Position, Rect

__all__ = [
    "Dimension",
    "InvalidStrategyError",
    "Offset",
    "Position",
    "Rect",
    "STRATEGY_NAMES",
    "calculate_child_position",
    "calculate_placement",
]

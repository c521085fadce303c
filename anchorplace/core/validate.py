"""
Validate a resolved child position: containment in the viewport and overlap
with the parent. Return (ok, overlap_area).
"""

from __future__ import annotations

from anchorplace.core.config import CONTAINMENT_TOLERANCE
from anchorplace.core.geometry import child_geometry, parent_polygon, viewport_polygon
from anchorplace.core.types import Dimension, Position, Rect


def child_inside_viewport(
    position: Position,
    child: Dimension,
    viewport: Dimension,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> bool:
    """True if the child's full extent lies within [0, width] x [0, height]."""
    if viewport.width <= 0 or viewport.height <= 0:
        return (
            -tolerance <= position.left
            and position.left + child.width <= viewport.width + tolerance
            and -tolerance <= position.top
            and position.top + child.height <= viewport.height + tolerance
        )
    area = viewport_polygon(viewport)
    if tolerance > 0:
        area = area.buffer(tolerance, join_style="mitre")
    return bool(area.covers(child_geometry(position, child)))


def parent_overlap_area(parent: Rect, position: Position, child: Dimension) -> float:
    """Area of the parent covered by the child."""
    if parent.width <= 0 or parent.height <= 0:
        return 0.0
    return float(parent_polygon(parent).intersection(child_geometry(position, child)).area)


def validate_child_position(
    parent: Rect,
    position: Position,
    child: Dimension,
    viewport: Dimension,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> tuple[bool, float]:
    """
    True if the child is fully inside the viewport (with tolerance).
    Also returns the area it shares with the parent.
    """
    ok = child_inside_viewport(position, child, viewport, tolerance=tolerance)
    return ok, parent_overlap_area(parent, position, child)

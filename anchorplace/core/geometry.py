# anchorplace/core/geometry.py
"""
Geometry helpers: 1-D clamping and interval overlap, 2-D overlap area,
shapely boxes for validation and rendering.
"""

from __future__ import annotations

from shapely.geometry import LineString, Point, Polygon, box
from shapely.geometry.base import BaseGeometry

from anchorplace.core.types import Dimension, Position, Rect


def adjust_position(suggested: float, child_length: float, viewport_length: float) -> float:
    """
    Adjust the raw (suggested) position to keep the entire child onscreen.
    A child longer than the viewport collapses to 0.
    """
    return max(0.0, min(viewport_length - child_length, suggested))


def overlapping_length(
    parent_start: float,
    parent_length: float,
    child_start: float,
    child_length: float,
) -> float:
    """Length of the overlapping section between two ranges; 0 when disjoint."""
    return max(
        0.0,
        min(child_start + child_length, parent_start + parent_length)
        - max(child_start, parent_start),
    )


def overlap_area(parent: Rect, position: Position, child: Dimension) -> float:
    """Area shared by parent and the child placed at position."""
    return overlapping_length(
        parent.left, parent.width, position.left, child.width
    ) * overlapping_length(parent.top, parent.height, position.top, child.height)


def rect_to_polygon(left: float, top: float, width: float, height: float) -> Polygon:
    """Axis-aligned box; y grows downwards as in screen space."""
    return box(left, top, left + width, top + height)


def parent_polygon(parent: Rect) -> Polygon:
    return rect_to_polygon(parent.left, parent.top, parent.width, parent.height)


def child_geometry(position: Position, child: Dimension) -> BaseGeometry:
    """
    Child footprint. Zero-size children degrade to a point or a segment
    so containment checks stay valid.
    """
    left, top = position.left, position.top
    if child.width > 0 and child.height > 0:
        return rect_to_polygon(left, top, child.width, child.height)
    if child.width <= 0 and child.height <= 0:
        return Point(left, top)
    return LineString([(left, top), (left + max(0.0, child.width), top + max(0.0, child.height))])


def viewport_polygon(viewport: Dimension) -> Polygon:
    return rect_to_polygon(0.0, 0.0, viewport.width, viewport.height)

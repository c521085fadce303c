# anchorplace/core/types.py
"""
Dataclasses for rectangles, positions, scored candidates and placement results.
Coordinates share one space whose origin is the viewport's top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Dimension:
    """Size of a rectangle."""
    width: float
    height: float


@dataclass(frozen=True)
class Offset:
    """Top-left corner of a rectangle."""
    top: float
    left: float


@dataclass(frozen=True)
class Rect:
    """Anchor (parent) bounding box: offset plus dimension."""
    top: float
    left: float
    width: float
    height: float


@dataclass(frozen=True)
class Position:
    """Resolved top-left coordinate of the child."""
    left: float
    top: float


@dataclass(frozen=True)
class AxisCandidate:
    """One placement evaluated along a single axis."""
    position: float
    adjustment: float
    deviation: float
    overlap: float


@dataclass(frozen=True)
class PositionChoice:
    """A 2-D position scored against the suggested one."""
    position: Position
    deviation: float
    overlapped_area: float


@dataclass
class PlacementResult:
    """
    Placement output with validation metrics.
    Serializes to placement.json.
    """
    strategy: str
    parent: Rect
    child: Dimension
    viewport: Dimension
    gap: float
    position: Position

    # metrics
    inside_viewport: bool
    overlap_area: float

    warnings: list[str] = field(default_factory=list)

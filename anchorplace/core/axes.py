# anchorplace/core/axes.py
"""
Axis model: the primary (separation) and secondary (alignment) axis kinds,
their placement functions, and the horizontal/vertical directions that feed
them scalars from rectangles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from anchorplace.core.types import Dimension, Offset, Rect

PlacementFn = Callable[[float, float, float, float], float]


class PrimaryPlacement(Enum):
    """Child before or after the parent along the separation axis."""
    START = "start"
    END = "end"


class SecondaryPlacement(Enum):
    """Child edge alignment with the parent along the alignment axis."""
    START = "start"
    END = "end"
    CENTER = "center"


def _primary_start(parent_start: float, parent_length: float, child_length: float, gap: float) -> float:
    return parent_start - gap - child_length


def _primary_end(parent_start: float, parent_length: float, child_length: float, gap: float) -> float:
    return parent_start + parent_length + gap


def _secondary_start(parent_start: float, parent_length: float, child_length: float, gap: float) -> float:
    return parent_start


def _secondary_end(parent_start: float, parent_length: float, child_length: float, gap: float) -> float:
    return parent_start - child_length + parent_length


def _secondary_center(parent_start: float, parent_length: float, child_length: float, gap: float) -> float:
    return parent_start - child_length / 2 + parent_length / 2


@dataclass(frozen=True)
class AxisKind:
    """
    Placement table for one kind of axis.
    avoid_overlap: True ranks candidates by least overlap with the parent,
    False by most overlap.
    """
    name: str
    placements: tuple[tuple[Enum, PlacementFn], ...]
    avoid_overlap: bool

    @property
    def kinds(self) -> tuple[Enum, ...]:
        return tuple(p for p, _ in self.placements)

    def raw_position(
        self,
        placement: Enum,
        parent_start: float,
        parent_length: float,
        child_length: float,
        gap: float,
    ) -> float:
        for kind, fn in self.placements:
            if kind is placement:
                return fn(parent_start, parent_length, child_length, gap)
        raise ValueError(f"{placement!r} is not a placement of the {self.name} axis")


# Table order is candidate order; exact ties keep it.
PRIMARY_AXIS = AxisKind(
    name="primary",
    placements=(
        (PrimaryPlacement.START, _primary_start),
        (PrimaryPlacement.END, _primary_end),
    ),
    avoid_overlap=True,
)

SECONDARY_AXIS = AxisKind(
    name="secondary",
    placements=(
        (SecondaryPlacement.START, _secondary_start),
        (SecondaryPlacement.END, _secondary_end),
        (SecondaryPlacement.CENTER, _secondary_center),
    ),
    avoid_overlap=False,
)


@dataclass(frozen=True)
class Direction:
    """Reads the start coordinate and length of a rectangle along one screen axis."""
    name: str
    start: Callable[[Offset | Rect], float]
    length: Callable[[Dimension | Rect], float]


HORIZONTAL = Direction(name="horizontal", start=lambda r: r.left, length=lambda r: r.width)
VERTICAL = Direction(name="vertical", start=lambda r: r.top, length=lambda r: r.height)

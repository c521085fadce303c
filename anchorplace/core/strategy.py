# anchorplace/core/strategy.py
"""
Axis resolvers and strategy composition.

An AxisResolver ranks every placement of one axis kind for one direction and
returns the winning clamped coordinate. A Strategy binds one resolver to each
screen direction, then cross-checks the combined position against two fallback
combinations so the child never ends up covering the parent when an
alternative exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from anchorplace.core.axes import (
    HORIZONTAL,
    PRIMARY_AXIS,
    SECONDARY_AXIS,
    VERTICAL,
    AxisKind,
    Direction,
    PrimaryPlacement,
    SecondaryPlacement,
)
from anchorplace.core.config import PLACEMENT_DEBUG
from anchorplace.core.geometry import adjust_position, overlap_area, overlapping_length
from anchorplace.core.scoring import rank_axis_candidates, rank_choices
from anchorplace.core.types import AxisCandidate, Dimension, Position, PositionChoice, Rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisResolver:
    """One axis kind with its preferred placement."""
    axis: AxisKind
    preferred: Enum

    def __post_init__(self) -> None:
        if self.preferred not in self.axis.kinds:
            raise ValueError(f"{self.preferred!r} is not a placement of the {self.axis.name} axis")

    def candidates(
        self,
        parent_start: float,
        parent_length: float,
        child_length: float,
        gap: float,
        viewport_length: float,
    ) -> list[AxisCandidate]:
        """Evaluate every placement of the axis; the preferred raw position is the deviation reference."""
        preferred_position = self.axis.raw_position(
            self.preferred, parent_start, parent_length, child_length, gap
        )
        out: list[AxisCandidate] = []
        for placement in self.axis.kinds:
            suggested = self.axis.raw_position(placement, parent_start, parent_length, child_length, gap)
            adjusted = adjust_position(suggested, child_length, viewport_length)
            out.append(
                AxisCandidate(
                    position=adjusted,
                    adjustment=abs(suggested - adjusted),
                    deviation=abs(preferred_position - adjusted),
                    overlap=overlapping_length(parent_start, parent_length, adjusted, child_length),
                )
            )
        return out

    def resolve(
        self,
        parent_start: float,
        parent_length: float,
        child_length: float,
        gap: float,
        viewport_length: float,
    ) -> float:
        ranked = rank_axis_candidates(
            self.candidates(parent_start, parent_length, child_length, gap, viewport_length),
            self.axis.avoid_overlap,
        )
        if PLACEMENT_DEBUG:
            logger.debug("%s axis prefer %s: %s", self.axis.name, self.preferred.value, ranked)
        return ranked[0].position

    def resolve_along(
        self,
        direction: Direction,
        parent: Rect,
        child: Dimension,
        viewport: Dimension,
        gap: float,
    ) -> float:
        """Resolve using the scalars one direction reads from the rectangles."""
        return self.resolve(
            direction.start(parent),
            direction.length(parent),
            direction.length(child),
            gap,
            direction.length(viewport),
        )


FALLBACK_PRIMARY = AxisResolver(PRIMARY_AXIS, PrimaryPlacement.END)
FALLBACK_SECONDARY = AxisResolver(SECONDARY_AXIS, SecondaryPlacement.START)


@dataclass(frozen=True)
class Strategy:
    """A named pair of resolvers, one per screen direction."""
    name: str
    horizontal: AxisResolver
    vertical: AxisResolver

    def _position(
        self,
        horizontal: AxisResolver,
        vertical: AxisResolver,
        parent: Rect,
        child: Dimension,
        viewport: Dimension,
        gap: float,
    ) -> Position:
        return Position(
            left=horizontal.resolve_along(HORIZONTAL, parent, child, viewport, gap),
            top=vertical.resolve_along(VERTICAL, parent, child, viewport, gap),
        )

    def choices(
        self,
        parent: Rect,
        child: Dimension,
        viewport: Dimension,
        gap: float,
    ) -> list[PositionChoice]:
        """Suggested position first, then the two fallback combinations."""
        suggested = self._position(self.horizontal, self.vertical, parent, child, viewport, gap)
        positions = [
            suggested,
            self._position(FALLBACK_SECONDARY, FALLBACK_PRIMARY, parent, child, viewport, gap),
            self._position(FALLBACK_PRIMARY, FALLBACK_SECONDARY, parent, child, viewport, gap),
        ]
        return [
            PositionChoice(
                position=p,
                deviation=(p.left - suggested.left) ** 2 + (p.top - suggested.top) ** 2,
                overlapped_area=overlap_area(parent, p, child),
            )
            for p in positions
        ]

    def resolve(
        self,
        parent: Rect,
        child: Dimension,
        viewport: Dimension,
        gap: float,
    ) -> Position:
        ranked = rank_choices(self.choices(parent, child, viewport, gap))
        if PLACEMENT_DEBUG:
            logger.debug("strategy %r choices: %s", self.name, ranked)
        return ranked[0].position

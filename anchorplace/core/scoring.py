# anchorplace/core/scoring.py
"""
Candidate ranking: per-axis ordering of placements and the final 2-D choice
between the suggested position and its fallbacks. Lower keys rank first.
"""

from __future__ import annotations

from anchorplace.core.types import AxisCandidate, PositionChoice


def axis_rank_key(candidate: AxisCandidate, avoid_overlap: bool) -> tuple[int, float, float, float]:
    """
    Prefer a placement that needs no adjustment, then the least (avoid_overlap)
    or most overlap, then the one closest to the preferred position, then the
    smallest adjustment needed to stay fully onscreen.
    """
    sign = 1.0 if avoid_overlap else -1.0
    return (
        1 if candidate.adjustment > 0 else 0,
        candidate.overlap * sign,
        candidate.deviation,
        candidate.adjustment,
    )


def rank_axis_candidates(candidates: list[AxisCandidate], avoid_overlap: bool) -> list[AxisCandidate]:
    """Stable sort; candidates with identical keys keep their input order."""
    return sorted(candidates, key=lambda c: axis_rank_key(c, avoid_overlap))


def choice_rank_key(choice: PositionChoice) -> tuple[float, float]:
    """Least overlapped area with the parent, then closest to the suggested position."""
    return (choice.overlapped_area, choice.deviation)


def rank_choices(choices: list[PositionChoice]) -> list[PositionChoice]:
    return sorted(choices, key=choice_rank_key)

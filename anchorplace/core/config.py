# anchorplace/core/config.py
"""
Central configuration for child/anchor placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Placement defaults -----
DEFAULT_GAP: float = 0.0
"""Spacing between parent and child on the primary (separation) axis."""

DEFAULT_STRATEGY: str = "bottom"
"""Strategy used by the CLI, smoke run and demo UI when none is given."""

# ----- Validation -----
CONTAINMENT_TOLERANCE: float = 1e-9
"""Tolerance for child-in-viewport containment checks."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600

# ----- Evaluation sweep -----
SEED: int | None = 42
"""Random seed for generated cases; None for non-deterministic."""

EVAL_N_CASES: int = 200
"""Number of random parent/child cases per strategy in the evaluation sweep."""

EVAL_VIEWPORT: tuple[float, float] = (1280.0, 720.0)
"""(width, height) of the viewport used by the evaluation sweep."""

EVAL_MAX_CHILD_FRAC: float = 0.5
"""Upper bound of child size as a fraction of the viewport per axis."""

EVAL_MAX_GAP: float = 16.0
"""Upper bound of the random gap in the evaluation sweep."""

# ----- Logging / debug flags -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for entry points (CLI, Streamlit). Set env LOG_LEVEL=DEBUG for development."""

PLACEMENT_DEBUG: bool = os.environ.get("PLACEMENT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every ranked candidate. Set env PLACEMENT_DEBUG=1 to enable."""

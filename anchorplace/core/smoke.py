"""
Single entrypoint to verify placement end-to-end: one default case, report and
previews under reports/smoke. Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from anchorplace.core.config import DEFAULT_GAP, DEFAULT_STRATEGY
from anchorplace.core.placement import calculate_placement, get_strategy
from anchorplace.core.render import render_after, render_debug
from anchorplace.core.reporting import (
    ensure_report_dir,
    write_placement_json,
    write_run_metadata_json,
)
from anchorplace.core.types import Dimension, Rect

SMOKE_PARENT = Rect(top=300.0, left=560.0, width=160.0, height=32.0)
SMOKE_CHILD = Dimension(width=240.0, height=120.0)
SMOKE_VIEWPORT = Dimension(width=1280.0, height=720.0)


def main(repo_root: Path | None = None) -> Path:
    """Run the default strategy with run_name='smoke'. Returns the report dir."""
    root = repo_root or Path.cwd().resolve()
    result = calculate_placement(DEFAULT_STRATEGY, SMOKE_PARENT, SMOKE_CHILD, SMOKE_VIEWPORT, gap=DEFAULT_GAP)
    if not result.inside_viewport:
        raise ValueError(f"Smoke placement left the viewport: {result.position}")

    report_dir = ensure_report_dir(root, "smoke")
    write_placement_json(report_dir, result)
    write_run_metadata_json(report_dir, "smoke", DEFAULT_STRATEGY, DEFAULT_GAP)
    render_after(result, report_dir / "after.png")
    choices = get_strategy(DEFAULT_STRATEGY).choices(SMOKE_PARENT, SMOKE_CHILD, SMOKE_VIEWPORT, DEFAULT_GAP)
    render_debug(result, choices, report_dir / "debug.png")
    return report_dir


if __name__ == "__main__":
    main()

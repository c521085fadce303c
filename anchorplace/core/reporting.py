# anchorplace/core/reporting.py
"""
Create reports/<run_name>/ and write placement.json, run_metadata.json.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from anchorplace.core.config import (
    CONTAINMENT_TOLERANCE,
    DEFAULT_GAP,
    DEFAULT_STRATEGY,
    REPORTS_DIR,
)
from anchorplace.core.types import PlacementResult

SCHEMA_VERSION = "1.0"


def placement_to_dict(result: PlacementResult) -> dict:
    """Structure of placement.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "strategy": result.strategy,
            "parent": asdict(result.parent),
            "child": asdict(result.child),
            "viewport": asdict(result.viewport),
            "gap": result.gap,
        },
        "result": {
            "left": result.position.left,
            "top": result.position.top,
        },
        "metrics": {
            "inside_viewport": result.inside_viewport,
            "overlap_area": result.overlap_area,
        },
        "warnings": list(result.warnings),
    }


def run_metadata_dict(run_name: str, strategy: str, gap: float, source: str | None = None) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "strategy": strategy,
        "gap": gap,
        "config": {
            "DEFAULT_GAP": DEFAULT_GAP,
            "DEFAULT_STRATEGY": DEFAULT_STRATEGY,
            "CONTAINMENT_TOLERANCE": CONTAINMENT_TOLERANCE,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placement_json(report_dir: Path, result: PlacementResult) -> Path:
    """Write placement.json to report_dir. Returns path to file."""
    path = report_dir / "placement.json"
    path.write_text(json.dumps(placement_to_dict(result), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    strategy: str,
    gap: float,
    source: str | None = None,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, strategy, gap, source=source)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path

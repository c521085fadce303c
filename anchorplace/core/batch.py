# anchorplace/core/batch.py
"""
Batch mode: run placement for every case of a CSV/JSON manifest.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with placement.json and after.png.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path
from typing import Mapping

from anchorplace.core.config import REPORTS_DIR
from anchorplace.core.error_codes import INVALID_CASE, INVALID_STRATEGY, InvalidStrategyError
from anchorplace.core.io import case_from_record, load_manifest_rows
from anchorplace.core.placement import calculate_placement
from anchorplace.core.render import render_after
from anchorplace.core.reporting import ensure_report_dir, write_placement_json, write_run_metadata_json

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id", "strategy", "mode_used", "left", "top",
    "inside_viewport", "overlap_area", "duration_ms", "warnings_count", "error",
]


def _error_row(case_id: str, strategy: str, error_key: str, t0: float) -> dict:
    return {
        "case_id": case_id, "strategy": strategy, "mode_used": "error", "left": "", "top": "",
        "inside_viewport": "", "overlap_area": "",
        "duration_ms": int((time.perf_counter() - t0) * 1000), "warnings_count": 0, "error": error_key,
    }


def run_batch(
    run_name: str,
    manifest_path: Path,
    limit: int | None = None,
    repo_root: Path | None = None,
    output_dir: str = REPORTS_DIR,
    render: bool = True,
) -> Path:
    """
    Run every case in the manifest. Malformed cases and unknown strategies become
    'error' rows instead of aborting the batch.
    Returns report directory containing index.csv and cases/<case_id>/.
    """
    root = repo_root or Path.cwd().resolve()
    records = load_manifest_rows(manifest_path, repo_root=root)
    batch_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)
    cases_dir = batch_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    rows: list[dict] = []
    for i, record in enumerate(records):
        if limit and i >= limit:
            break
        case_id = f"case_{i:04d}"
        strategy = str(record.get("strategy") or "") if isinstance(record, Mapping) else ""
        t0 = time.perf_counter()
        try:
            case = case_from_record(record)
        except ValueError as e:
            logger.warning("%s: invalid case: %s", case_id, e)
            rows.append(_error_row(case_id, strategy, INVALID_CASE, t0))
            continue
        try:
            result = calculate_placement(case.strategy, case.parent, case.child, case.viewport, gap=case.gap)
        except InvalidStrategyError as e:
            logger.warning("%s: %s", case_id, e)
            rows.append(_error_row(case_id, case.strategy, INVALID_STRATEGY, t0))
            continue
        duration_ms = int((time.perf_counter() - t0) * 1000)

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        write_placement_json(case_dir, result)
        write_run_metadata_json(case_dir, run_name, case.strategy, case.gap, source=str(manifest_path))
        if render:
            render_after(result, case_dir / "after.png")
        rows.append({
            "case_id": case_id, "strategy": case.strategy, "mode_used": "placed",
            "left": result.position.left, "top": result.position.top,
            "inside_viewport": result.inside_viewport, "overlap_area": result.overlap_area,
            "duration_ms": duration_ms, "warnings_count": len(result.warnings), "error": "",
        })

    with open(batch_dir / "index.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Batch %s: %d cases -> %s", run_name, len(rows), batch_dir)
    return batch_dir

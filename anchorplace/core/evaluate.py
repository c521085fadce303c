"""
Evaluation runner: compare a clamp-only baseline against the ranked strategies
on seeded random parent/child cases.
Saves evaluation_results.csv, evaluation_summary.json and leaderboard.json under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from anchorplace.core.axes import HORIZONTAL, VERTICAL, Direction
from anchorplace.core.config import (
    EVAL_MAX_CHILD_FRAC,
    EVAL_MAX_GAP,
    EVAL_N_CASES,
    EVAL_VIEWPORT,
    LOG_LEVEL,
    SEED,
)
from anchorplace.core.geometry import adjust_position
from anchorplace.core.io import PlacementCase
from anchorplace.core.placement import STRATEGIES, STRATEGY_NAMES, calculate_placement
from anchorplace.core.reporting import ensure_report_dir
from anchorplace.core.strategy import AxisResolver, Strategy
from anchorplace.core.types import Dimension, Position, Rect
from anchorplace.core.validate import validate_child_position

logger = logging.getLogger(__name__)

METHODS = ("baseline_clamp_only", "ranked")


def random_cases(
    n: int,
    seed: int | None = SEED,
    viewport: tuple[float, float] = EVAL_VIEWPORT,
    max_child_frac: float = EVAL_MAX_CHILD_FRAC,
    max_gap: float = EVAL_MAX_GAP,
) -> list[PlacementCase]:
    """
    n cases per strategy; the child always fits the viewport and the parent
    always lies inside it.
    """
    rng = np.random.default_rng(seed)
    vw, vh = viewport
    view = Dimension(width=vw, height=vh)
    out: list[PlacementCase] = []
    for name in STRATEGY_NAMES:
        for _ in range(n):
            pw = float(rng.uniform(0.0, vw * 0.3))
            ph = float(rng.uniform(0.0, vh * 0.3))
            parent = Rect(
                top=float(rng.uniform(0.0, vh - ph)),
                left=float(rng.uniform(0.0, vw - pw)),
                width=pw,
                height=ph,
            )
            child = Dimension(
                width=float(rng.uniform(0.0, vw * max_child_frac)),
                height=float(rng.uniform(0.0, vh * max_child_frac)),
            )
            out.append(PlacementCase(name, parent, child, view, float(rng.uniform(0.0, max_gap))))
    return out


def _clamp_only(strategy: Strategy, case: PlacementCase) -> Position:
    """Baseline: preferred placement per axis, clamped into the viewport, no ranking or fallback."""
    def along(resolver: AxisResolver, direction: Direction) -> float:
        raw = resolver.axis.raw_position(
            resolver.preferred,
            direction.start(case.parent),
            direction.length(case.parent),
            direction.length(case.child),
            case.gap,
        )
        return adjust_position(raw, direction.length(case.child), direction.length(case.viewport))

    return Position(left=along(strategy.horizontal, HORIZONTAL), top=along(strategy.vertical, VERTICAL))


def _row(case: PlacementCase, method: str, position: Position, inside: bool, overlap: float) -> dict:
    return {
        "strategy": case.strategy,
        "method": method,
        "left": position.left,
        "top": position.top,
        "success": inside and overlap <= 0,
        "inside_viewport": inside,
        "overlap_area": overlap,
    }


def evaluate_cases(cases: list[PlacementCase]) -> list[dict]:
    rows: list[dict] = []
    for case in cases:
        base = _clamp_only(STRATEGIES[case.strategy], case)
        ok, overlap = validate_child_position(case.parent, base, case.child, case.viewport)
        rows.append(_row(case, "baseline_clamp_only", base, ok, overlap))

        result = calculate_placement(case.strategy, case.parent, case.child, case.viewport, gap=case.gap)
        rows.append(_row(case, "ranked", result.position, result.inside_viewport, result.overlap_area))
    return rows


def summarize(rows: list[dict]) -> dict:
    """Per-method and per-strategy success, containment and overlap rates."""
    def rates(list_r: list[dict]) -> dict:
        n = len(list_r)
        return {
            "n": n,
            "success_rate": sum(1 for r in list_r if r["success"]) / n if n else 0.0,
            "containment_rate": sum(1 for r in list_r if r["inside_viewport"]) / n if n else 0.0,
            "overlap_rate": sum(1 for r in list_r if r["overlap_area"] > 0) / n if n else 0.0,
            "mean_overlap_area": sum(r["overlap_area"] for r in list_r) / n if n else 0.0,
        }

    by_method: dict[str, dict] = {}
    by_strategy: dict[str, dict] = {}
    for method in METHODS:
        method_rows = [r for r in rows if r["method"] == method]
        by_method[method] = rates(method_rows)
        by_strategy[method] = {
            name: rates([r for r in method_rows if r["strategy"] == name])
            for name in STRATEGY_NAMES
        }
    return {"by_method": by_method, "by_strategy": by_strategy}


def run_evaluation(
    run_name: str = "eval_01",
    n_cases: int = EVAL_N_CASES,
    seed: int | None = SEED,
    repo_root: Path | None = None,
) -> Path:
    """
    Run baseline and ranked placement on n_cases random cases per strategy.
    Returns report_dir.
    """
    root = repo_root or Path.cwd().resolve()
    report_dir = ensure_report_dir(root, run_name)
    rows = evaluate_cases(random_cases(n_cases, seed=seed))
    leaderboard = summarize(rows)

    summary = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "n_cases": len(rows) // len(METHODS),
        "seed": seed,
        "success_rate": {m: v["success_rate"] for m, v in leaderboard["by_method"].items()},
        "containment_rate": {m: v["containment_rate"] for m, v in leaderboard["by_method"].items()},
        "overlap_rate": {m: v["overlap_rate"] for m, v in leaderboard["by_method"].items()},
    }
    (report_dir / "evaluation_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    (report_dir / "leaderboard.json").write_text(json.dumps(leaderboard, indent=2), encoding="utf-8")

    if rows:
        keys = list(rows[0].keys())
        with open(report_dir / "evaluation_results.csv", "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=keys)
            w.writeheader()
            w.writerows(rows)
    logger.info("Evaluation %s: success rate %s", run_name, summary["success_rate"])
    return report_dir


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    p = argparse.ArgumentParser(description="Run evaluation: clamp-only baseline vs ranked strategies.")
    p.add_argument("--run-name", default="eval_01", dest="run_name", help="Reports subdir name")
    p.add_argument("--n-cases", type=int, default=EVAL_N_CASES, dest="n_cases", help="Random cases per strategy")
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--repo-root", default=None, dest="repo_root")
    args = p.parse_args()
    root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    report_dir = run_evaluation(
        run_name=args.run_name,
        n_cases=args.n_cases,
        seed=args.seed,
        repo_root=root,
    )
    print(report_dir)


if __name__ == "__main__":
    main()

# anchorplace/core/runner.py
"""
CLI entrypoint: resolve one placement (from flags or a JSON case file), export
placement.json, run_metadata.json and PNG previews. Batch mode with --batch-manifest.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from anchorplace.core.config import DEFAULT_GAP, DEFAULT_STRATEGY, LOG_LEVEL, REPORTS_DIR
from anchorplace.core.error_codes import InvalidStrategyError
from anchorplace.core.io import PlacementCase, load_case
from anchorplace.core.placement import STRATEGY_NAMES, calculate_placement, get_strategy
from anchorplace.core.render import render_after, render_debug
from anchorplace.core.reporting import ensure_report_dir, write_placement_json, write_run_metadata_json
from anchorplace.core.types import Dimension, Rect


def _floats(s: str, n: int, what: str) -> list[float]:
    parts = [p.strip() for p in (s or "").split(",") if p.strip()]
    if len(parts) != n:
        raise argparse.ArgumentTypeError(f"{what} needs {n} comma-separated numbers, got {s!r}")
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"{what} must be numeric, got {s!r}") from None


def parse_rect_arg(s: str) -> Rect:
    """'top,left,width,height'"""
    top, left, width, height = _floats(s, 4, "parent")
    return Rect(top=top, left=left, width=width, height=height)


def parse_dimension_arg(s: str) -> Dimension:
    """'width,height'"""
    width, height = _floats(s, 2, "dimension")
    return Dimension(width=width, height=height)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Position a child rectangle relative to an anchor inside a viewport.")
    p.add_argument("--strategy", type=str, default=DEFAULT_STRATEGY, help=f"One of: {', '.join(STRATEGY_NAMES)}")
    p.add_argument("--parent", type=parse_rect_arg, default=None, help="Parent rect 'top,left,width,height'")
    p.add_argument("--child", type=parse_dimension_arg, default=None, help="Child size 'width,height'")
    p.add_argument("--viewport", type=parse_dimension_arg, default=None, help="Viewport size 'width,height'")
    p.add_argument("--gap", type=float, default=DEFAULT_GAP, help="Gap between parent and child")
    p.add_argument("--case", type=str, default=None, help="JSON case file (overrides the flags above)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip PNG previews")
    p.add_argument("--batch-manifest", type=str, default=None, dest="batch_manifest", help="Batch mode: CSV/JSON manifest path")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def _case_from_args(args: argparse.Namespace, repo_root: Path) -> PlacementCase:
    if args.case:
        return load_case(args.case, repo_root=repo_root)
    missing = [k for k in ("parent", "child", "viewport") if getattr(args, k) is None]
    if missing:
        raise SystemExit(f"Missing --{', --'.join(missing)} (or pass --case)")
    return PlacementCase(args.strategy, args.parent, args.child, args.viewport, args.gap)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.batch_manifest:
        from anchorplace.core.batch import run_batch
        out = run_batch(
            run_name=args.run_name,
            manifest_path=Path(args.batch_manifest),
            limit=args.batch_limit,
            repo_root=repo_root,
            output_dir=args.output_dir,
            render=not args.no_render,
        )
        print(out / "index.csv")
        return 0

    case = _case_from_args(args, repo_root)
    try:
        result = calculate_placement(case.strategy, case.parent, case.child, case.viewport, gap=case.gap)
    except InvalidStrategyError as e:
        print(e, file=sys.stderr)
        return 2

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_placement_json(report_dir, result),
        write_run_metadata_json(report_dir, args.run_name, case.strategy, case.gap, source=args.case),
    ]
    if not args.no_render:
        after_path = report_dir / "after.png"
        debug_path = report_dir / "debug.png"
        render_after(result, after_path)
        choices = get_strategy(case.strategy).choices(case.parent, case.child, case.viewport, case.gap)
        render_debug(result, choices, debug_path)
        paths += [after_path, debug_path]

    for p in paths:
        print(p)
    print(f"Position: left={result.position.left:g} top={result.position.top:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Batch mode: manifest with valid, unknown-strategy and malformed cases;
run batch and assert index.csv rows and per-case outputs.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from anchorplace.core.batch import run_batch
from anchorplace.core.error_codes import INVALID_CASE, INVALID_STRATEGY

HEADER = "strategy,parent_top,parent_left,parent_width,parent_height,child_width,child_height,viewport_width,viewport_height,gap"


def test_batch_from_csv_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "cases.csv"
    manifest.write_text(
        "\n".join([
            HEADER,
            "bottom,0,0,100,20,50,200,300,220,0",
            "top right,300,500,100,40,200,100,1280,720,8",
            "sideways,0,0,10,10,5,5,100,100,0",
            "left,0,0,10,,5,5,100,100,0",
        ]) + "\n",
        encoding="utf-8",
    )
    report_dir = run_batch(run_name="test_batch", manifest_path=manifest, repo_root=tmp_path)
    index_csv = report_dir / "index.csv"
    assert index_csv.exists()
    with open(index_csv, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert [r["mode_used"] for r in rows] == ["placed", "placed", "error", "error"]
    assert rows[2]["error"] == INVALID_STRATEGY
    assert rows[3]["error"] == INVALID_CASE
    assert float(rows[0]["left"]) == 25.0 and float(rows[0]["top"]) == 20.0

    case_dir = report_dir / "cases" / "case_0000"
    assert (case_dir / "placement.json").exists()
    assert (case_dir / "after.png").exists()
    assert not (report_dir / "cases" / "case_0002").exists()


def test_batch_from_json_manifest_with_limit(tmp_path: Path) -> None:
    case = {
        "strategy": "left center",
        "parent": {"top": 100, "left": 400, "width": 80, "height": 30},
        "child": {"width": 120, "height": 60},
        "viewport": {"width": 800, "height": 600},
        "gap": 2,
    }
    manifest = tmp_path / "cases.json"
    manifest.write_text(json.dumps([case, case, case]), encoding="utf-8")
    report_dir = run_batch(run_name="json", manifest_path=manifest, limit=2, repo_root=tmp_path, render=False)
    with open(report_dir / "index.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert float(rows[0]["left"]) == 278.0
    assert float(rows[0]["top"]) == 85.0
    assert not (report_dir / "cases" / "case_0000" / "after.png").exists()


def _json_case() -> dict:
    return {
        "strategy": "bottom",
        "parent": {"top": 0, "left": 0, "width": 100, "height": 20},
        "child": {"width": 50, "height": 200},
        "viewport": {"width": 300, "height": 220},
    }


def test_batch_keeps_going_after_malformed_json_entries(tmp_path: Path) -> None:
    good = _json_case()
    manifest = tmp_path / "cases.json"
    manifest.write_text(
        json.dumps([good, 5, {**good, "gap": [1]}, {**good, "strategy": "  "}]),
        encoding="utf-8",
    )
    report_dir = run_batch(run_name="malformed", manifest_path=manifest, repo_root=tmp_path, render=False)
    index_csv = report_dir / "index.csv"
    assert index_csv.exists()
    with open(index_csv, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["mode_used"] for r in rows] == ["placed", "error", "error", "error"]
    assert [r["error"] for r in rows[1:]] == [INVALID_CASE] * 3
    assert float(rows[0]["left"]) == 25.0 and float(rows[0]["top"]) == 20.0
    assert rows[1]["strategy"] == ""


def test_batch_blank_strategy_cell_is_invalid_case(tmp_path: Path) -> None:
    manifest = tmp_path / "cases.csv"
    manifest.write_text(HEADER + "\n" + ",0,0,100,20,50,200,300,220,0\n", encoding="utf-8")
    report_dir = run_batch(run_name="blank", manifest_path=manifest, repo_root=tmp_path, render=False)
    with open(report_dir / "index.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["mode_used"] == "error"
    assert rows[0]["error"] == INVALID_CASE

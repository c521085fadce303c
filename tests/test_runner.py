"""CLI entrypoint: flags, JSON case file, invalid strategy exit code."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from anchorplace.core.runner import main, parse_dimension_arg, parse_rect_arg
from anchorplace.core.types import Dimension, Rect


def test_parse_args_helpers() -> None:
    assert parse_rect_arg("1, 2,3,4") == Rect(top=1.0, left=2.0, width=3.0, height=4.0)
    assert parse_dimension_arg("5,6") == Dimension(5.0, 6.0)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_dimension_arg("5")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_rect_arg("a,b,c,d")


def test_runner_writes_placement(tmp_path: Path) -> None:
    code = main([
        "--strategy", "bottom",
        "--parent", "0,0,100,20",
        "--child", "50,200",
        "--viewport", "300,220",
        "--run-name", "cli",
        "--repo-root", str(tmp_path),
    ])
    assert code == 0
    report_dir = tmp_path / "reports" / "cli"
    data = json.loads((report_dir / "placement.json").read_text(encoding="utf-8"))
    assert data["result"] == {"left": 25.0, "top": 20.0}
    assert (report_dir / "after.png").exists()
    assert (report_dir / "debug.png").exists()


def test_runner_case_file(tmp_path: Path) -> None:
    case = {
        "strategy": "top",
        "parent": {"top": 300, "left": 500, "width": 100, "height": 40},
        "child": {"width": 200, "height": 100},
        "viewport": {"width": 1280, "height": 720},
        "gap": 8,
    }
    (tmp_path / "case.json").write_text(json.dumps(case), encoding="utf-8")
    code = main(["--case", "case.json", "--run-name", "c", "--repo-root", str(tmp_path), "--no-render"])
    assert code == 0
    data = json.loads((tmp_path / "reports" / "c" / "placement.json").read_text(encoding="utf-8"))
    assert data["result"] == {"left": 450.0, "top": 192.0}
    assert not (tmp_path / "reports" / "c" / "after.png").exists()


def test_runner_invalid_strategy(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main([
        "--strategy", "middle",
        "--parent", "0,0,10,10",
        "--child", "5,5",
        "--viewport", "100,100",
        "--repo-root", str(tmp_path),
    ])
    assert code == 2
    assert "middle" in capsys.readouterr().err
    assert not (tmp_path / "reports").exists()

"""
Load placement cases from dicts, JSON or CSV.
A case is a strategy name, a parent rect, a child dimension, a viewport
dimension and an optional gap.
"""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from anchorplace.core.config import DEFAULT_GAP, DEFAULT_STRATEGY
from anchorplace.core.types import Dimension, Rect


@dataclass(frozen=True)
class PlacementCase:
    """Inputs of one calculate_child_position call."""
    strategy: str
    parent: Rect
    child: Dimension
    viewport: Dimension
    gap: float = DEFAULT_GAP


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _number(data: Mapping[str, Any], key: str, where: str) -> float:
    if key not in data or data[key] in (None, ""):
        raise ValueError(f"{where}: missing {key!r}")
    try:
        return float(data[key])
    except (TypeError, ValueError):
        raise ValueError(f"{where}: {key!r} is not a number: {data[key]!r}") from None


def parse_rect(data: Mapping[str, Any]) -> Rect:
    """Parent rect from {'top', 'left', 'width', 'height'}."""
    return Rect(
        top=_number(data, "top", "parent"),
        left=_number(data, "left", "parent"),
        width=_number(data, "width", "parent"),
        height=_number(data, "height", "parent"),
    )


def parse_dimension(data: Mapping[str, Any], where: str = "dimension") -> Dimension:
    return Dimension(width=_number(data, "width", where), height=_number(data, "height", where))


def parse_case(data: Mapping[str, Any]) -> PlacementCase:
    """
    Case from a nested dict:
    {"strategy": "top", "parent": {...}, "child": {...}, "viewport": {...}, "gap": 4}
    """
    for key in ("parent", "child", "viewport"):
        if not isinstance(data.get(key), Mapping):
            raise ValueError(f"case: missing {key!r}")
    gap = _number(data, "gap", "case") if data.get("gap") not in (None, "") else DEFAULT_GAP
    return PlacementCase(
        strategy=str(data.get("strategy") or DEFAULT_STRATEGY),
        parent=parse_rect(data["parent"]),
        child=parse_dimension(data["child"], "child"),
        viewport=parse_dimension(data["viewport"], "viewport"),
        gap=gap,
    )


def parse_flat_case(row: Mapping[str, Any]) -> PlacementCase:
    """
    Case from a flat CSV row. Columns: strategy, parent_top, parent_left,
    parent_width, parent_height, child_width, child_height, viewport_width,
    viewport_height, gap (optional).
    """
    def section(prefix: str) -> dict[str, Any]:
        return {k[len(prefix):]: v for k, v in row.items() if k and k.startswith(prefix)}

    return parse_case({
        "strategy": row.get("strategy"),
        "parent": section("parent_"),
        "child": section("child_"),
        "viewport": section("viewport_"),
        "gap": row.get("gap"),
    })


def load_case(path: str | Path, repo_root: Path | None = None) -> PlacementCase:
    """Read a single case from a JSON file."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Case file not found: {resolved}")
    return parse_case(json.loads(resolved.read_text(encoding="utf-8")))


def load_manifest_rows(path: str | Path, repo_root: Path | None = None) -> list[Any]:
    """
    Raw case records from a manifest: JSON list of nested cases, or CSV of flat rows.
    Records are parsed later so one bad row does not fail the whole batch; JSON
    entries that are not objects are kept as-is and rejected by case_from_record.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Manifest not found: {resolved}")
    if resolved.suffix.lower() == ".json":
        data = json.loads(resolved.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data.get("cases", [])
        if not isinstance(data, list):
            raise ValueError(f"Manifest {resolved} must hold a list of cases")
        return [dict(d) if isinstance(d, Mapping) else d for d in data]
    with open(resolved, newline="", encoding="utf-8") as f:
        return [dict(r) for r in csv.DictReader(f)]


def case_from_record(record: Any) -> PlacementCase:
    """
    Nested (JSON) or flat (CSV) manifest record. Unlike parse_case, a manifest
    record must name its strategy; a blank one is an invalid case, not the default.
    """
    if not isinstance(record, Mapping):
        raise ValueError(f"case: expected an object, got {type(record).__name__}")
    if not str(record.get("strategy") or "").strip():
        raise ValueError("case: missing 'strategy'")
    if isinstance(record.get("parent"), Mapping):
        return parse_case(record)
    return parse_flat_case(record)

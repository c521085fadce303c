# anchorplace/core/render.py
"""
Matplotlib PNG rendering: viewport, parent and resolved child (after.png),
plus a debug overlay with the suggested and fallback positions (debug.png).
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry.base import BaseGeometry

from anchorplace.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from anchorplace.core.geometry import child_geometry, parent_polygon, viewport_polygon
from anchorplace.core.types import PlacementResult, PositionChoice


def set_axes_to_viewport(ax: plt.Axes, result: PlacementResult, pad_frac: float = 0.05) -> None:
    """Limits cover viewport, parent and child with margin; y axis points down like the screen."""
    geoms = [
        viewport_polygon(result.viewport),
        parent_polygon(result.parent),
        child_geometry(result.position, result.child),
    ]
    minx = min(g.bounds[0] for g in geoms)
    miny = min(g.bounds[1] for g in geoms)
    maxx = max(g.bounds[2] for g in geoms)
    maxy = max(g.bounds[3] for g in geoms)
    dx = max(1.0, (maxx - minx) * pad_frac)
    dy = max(1.0, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(maxy + dy, miny - dy)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])
    ax.axis("off")
    return fig, ax


def _draw_geom(
    ax: plt.Axes,
    geom: BaseGeometry,
    facecolor: str,
    edgecolor: str,
    alpha: float = 1.0,
    linewidth: float = 1.0,
    label: str | None = None,
) -> None:
    if geom is None or geom.is_empty:
        return
    if geom.geom_type == "Polygon":
        xy = np.array(geom.exterior.coords)
        ax.fill(xy[:, 0], xy[:, 1], facecolor=facecolor, edgecolor=edgecolor, linewidth=linewidth, alpha=alpha, label=label)
    else:
        # zero-size child: point or segment
        xy = np.array(geom.coords)
        ax.plot(xy[:, 0], xy[:, 1], marker="o", color=edgecolor, linewidth=linewidth, label=label)


def _save(fig: plt.Figure, output_path: str | Path, **kwargs) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white", **kwargs)
    plt.close(fig)


def render_after(
    result: PlacementResult,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render viewport, parent and child. scale multiplies output resolution (1x, 2x, 4x)."""
    fig, ax = _new_fig(width_px * scale, height_px * scale)
    _draw_geom(ax, viewport_polygon(result.viewport), "whitesmoke", "gray")
    _draw_geom(ax, parent_polygon(result.parent), "lightblue", "navy")
    _draw_geom(ax, child_geometry(result.position, result.child), "moccasin", "darkorange", alpha=0.85)
    ax.text(
        result.position.left, result.position.top, result.strategy,
        fontsize=9, ha="left", va="top", color="black", zorder=6,
    )
    set_axes_to_viewport(ax, result)
    _save(fig, output_path)


def render_debug(
    result: PlacementResult,
    choices: list[PositionChoice],
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render result with the suggested and fallback outlines; choices as returned by Strategy.choices."""
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    # Leave bottom margin so legend does not overlap the image
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")
    _draw_geom(ax, viewport_polygon(result.viewport), "whitesmoke", "gray", label="viewport")
    _draw_geom(ax, parent_polygon(result.parent), "lightblue", "navy", label="parent")

    names = ("suggested", "fallback A", "fallback B")
    for name, choice in zip(names, choices):
        geom = child_geometry(choice.position, result.child)
        if geom.geom_type == "Polygon":
            xy = np.array(geom.exterior.coords)
            ax.plot(xy[:, 0], xy[:, 1], linestyle="--", linewidth=1,
                    label=f"{name} (area {choice.overlapped_area:g})")

    _draw_geom(ax, child_geometry(result.position, result.child), "none", "darkorange", linewidth=2, label="chosen")
    set_axes_to_viewport(ax, result)
    leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.04), ncol=3, fontsize=8)
    _save(fig, output_path, bbox_inches="tight", bbox_extra_artists=[leg])

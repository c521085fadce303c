"""
Streamlit UI: sidebar (strategy, parent, child, viewport, gap), tabs Demo/Debug/All strategies.
Run from the repo root: streamlit run anchorplace/ui/app.py
"""

from __future__ import annotations

import io
import json
import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from anchorplace.core.config import DEFAULT_GAP, DEFAULT_STRATEGY
from anchorplace.core.error_codes import InvalidStrategyError, user_message
from anchorplace.core.placement import STRATEGY_NAMES, calculate_placement, get_strategy
from anchorplace.core.render import render_after, render_debug
from anchorplace.core.reporting import placement_to_dict
from anchorplace.core.types import Dimension, PlacementResult, Rect


def _png_bytes(render_fn, *args) -> bytes:
    buf = io.BytesIO()
    render_fn(*args, buf)
    return buf.getvalue()


st.set_page_config(page_title="anchorplace", layout="wide")
st.title("Child placement around an anchor")

with st.sidebar:
    strategy = st.selectbox("Strategy", STRATEGY_NAMES, index=STRATEGY_NAMES.index(DEFAULT_STRATEGY))
    st.subheader("Viewport")
    vw = st.number_input("Viewport width", min_value=0.0, value=1280.0, step=10.0)
    vh = st.number_input("Viewport height", min_value=0.0, value=720.0, step=10.0)
    st.subheader("Parent (anchor)")
    p_left = st.number_input("Parent left", value=560.0, step=10.0)
    p_top = st.number_input("Parent top", value=300.0, step=10.0)
    p_w = st.number_input("Parent width", min_value=0.0, value=160.0, step=10.0)
    p_h = st.number_input("Parent height", min_value=0.0, value=32.0, step=4.0)
    st.subheader("Child")
    c_w = st.number_input("Child width", min_value=0.0, value=240.0, step=10.0)
    c_h = st.number_input("Child height", min_value=0.0, value=120.0, step=10.0)
    gap = st.number_input("Gap", value=float(DEFAULT_GAP), step=1.0, help="Spacing between parent and child.")

parent = Rect(top=p_top, left=p_left, width=p_w, height=p_h)
child = Dimension(width=c_w, height=c_h)
viewport = Dimension(width=vw, height=vh)

try:
    result: PlacementResult = calculate_placement(strategy, parent, child, viewport, gap=gap)
except InvalidStrategyError as e:
    st.error(user_message(e.error_key))
    st.stop()

tab_demo, tab_debug, tab_all = st.tabs(["Demo", "Debug", "All strategies"])

with tab_demo:
    left_col, right_col = st.columns([3, 1])
    with left_col:
        st.image(_png_bytes(render_after, result))
    with right_col:
        st.metric("left", f"{result.position.left:g}")
        st.metric("top", f"{result.position.top:g}")
        st.metric("Inside viewport", "yes" if result.inside_viewport else "no")
        st.metric("Overlap with parent", f"{result.overlap_area:g}")
        for w in result.warnings:
            st.warning(w)
        st.download_button(
            "Download placement.json",
            data=json.dumps(placement_to_dict(result), indent=2),
            file_name="placement.json",
            mime="application/json",
        )

with tab_debug:
    choices = get_strategy(strategy).choices(parent, child, viewport, gap)
    st.image(_png_bytes(render_debug, result, choices))
    st.dataframe(
        [
            {
                "candidate": name,
                "left": c.position.left,
                "top": c.position.top,
                "overlapped_area": c.overlapped_area,
                "deviation": c.deviation,
            }
            for name, c in zip(("suggested", "fallback A", "fallback B"), choices)
        ]
    )

with tab_all:
    rows = []
    for name in STRATEGY_NAMES:
        r = calculate_placement(name, parent, child, viewport, gap=gap)
        rows.append({
            "strategy": name,
            "left": r.position.left,
            "top": r.position.top,
            "inside_viewport": r.inside_viewport,
            "overlap_area": r.overlap_area,
        })
    st.dataframe(rows)

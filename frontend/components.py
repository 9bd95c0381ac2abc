"""Reusable Streamlit UI components for RetailIQ."""

from __future__ import annotations

import os
from typing import Any

import plotly.graph_objects as go
import streamlit as st

from retailiq.tools.chart_tool import build_chart

API_BASE = os.environ.get("RETAILIQ_API_URL", "http://localhost:5000")


def api_url(path: str) -> str:
    """Build full API URL."""
    return f"{API_BASE}{path}"


def chart_color(chart_type: str | None) -> str:
    """Return color for chart-type badge."""
    return {
        "bar": "#4C78A8",
        "line": "#F58518",
        "pie": "#54A24B",
    }.get(chart_type or "", "#6B7280")


def badge(text: str, color: str) -> str:
    """Return HTML for a colored badge."""
    return f'<span style="background-color:{color};color:white;padding:2px 8px;border-radius:4px;font-size:0.8em;font-weight:600;">{text}</span>'


def render_chart(rows: list[dict[str, Any]], chart_type: str | None, title: str = "") -> bool:
    """Render result rows as a Plotly chart. Returns False if nothing was plottable."""
    spec = build_chart(rows, chart_type or "bar", title=title)
    if spec is None:
        return False
    fig = go.Figure(data=spec["data"], layout=spec["layout"])
    st.plotly_chart(fig, use_container_width=True)
    return True

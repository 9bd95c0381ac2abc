"""Chart Tool — picks a chart kind for an insight and builds Plotly chart data.

suggest_chart_type() is the keyword heuristic behind the API's chartType.
build_chart() turns result rows into a config Streamlit can render directly
with st.plotly_chart().
"""

from __future__ import annotations

from numbers import Number
from typing import Any

from retailiq.models.schemas import ChartType

_COLORS = ["#4C78A8", "#F58518", "#E45756", "#72B7B2", "#54A24B"]


def suggest_chart_type(insights: str | None) -> ChartType:
    """Map insight text to a chart kind. Case-sensitive, first match wins."""
    if not insights:
        return ChartType.bar
    if "trend" in insights:
        return ChartType.line
    if "compare" in insights:
        return ChartType.bar
    if "percentage" in insights or "proportion" in insights:
        return ChartType.pie
    return ChartType.bar


def _pick_axes(rows: list[dict[str, Any]]) -> tuple[str | None, str | None]:
    """Return (category column, value column) from the first row."""
    first = rows[0]
    category = next((k for k, v in first.items() if isinstance(v, str)), None)
    value = next(
        (k for k, v in first.items() if isinstance(v, Number) and not isinstance(v, bool)),
        None,
    )
    return category, value


def build_chart(
    rows: list[dict[str, Any]],
    chart_type: str | ChartType = ChartType.bar,
    title: str = "",
) -> dict[str, Any] | None:
    """Build a Plotly-compatible chart specification from query results.

    Args:
        rows: result rows as returned by /api/analyze
        chart_type: 'bar', 'line', or 'pie'
        title: chart title

    Returns:
        dict with 'type', 'data', 'layout' keys for Plotly rendering,
        or None if there is nothing to plot.
    """
    if not rows:
        return None

    category_col, value_col = _pick_axes(rows)
    if value_col is None:
        return None

    chart_type = ChartType(chart_type).value
    if category_col is None:
        categories = [str(i + 1) for i in range(len(rows))]
    else:
        categories = [str(row.get(category_col, "")) for row in rows]
    values = [float(row.get(value_col) or 0) for row in rows]

    if chart_type == "line":
        trace = {
            "type": "scatter",
            "mode": "lines+markers",
            "x": categories,
            "y": values,
            "line": {"color": _COLORS[0], "width": 2},
            "marker": {"size": 8},
        }
    elif chart_type == "pie":
        trace = {
            "type": "pie",
            "labels": categories,
            "values": values,
            "marker": {"colors": _COLORS[:len(categories)]},
        }
    else:
        trace = {
            "type": "bar",
            "x": categories,
            "y": values,
            "marker": {"color": _COLORS[:len(categories)]},
        }

    layout = {
        "title": {"text": title, "font": {"size": 16}},
        "xaxis": {"title": category_col or ""},
        "yaxis": {"title": value_col},
        "template": "plotly_white",
        "height": 400,
        "margin": {"l": 60, "r": 30, "t": 50, "b": 60},
    }

    return {
        "type": chart_type,
        "data": [trace],
        "layout": layout,
    }

"""Tests for chart-type heuristic and Plotly chart building."""

import pytest

from retailiq.models.schemas import ChartType
from retailiq.tools.chart_tool import build_chart, suggest_chart_type


class TestSuggestChartType:
    def test_trend_is_line(self):
        assert suggest_chart_type("Sales show an upward trend") == ChartType.line

    def test_compare_is_bar(self):
        assert suggest_chart_type("Let's compare Q1 and Q2") == ChartType.bar

    def test_proportion_is_pie(self):
        assert suggest_chart_type("Electronics account for 40% proportion of sales") == ChartType.pie

    def test_percentage_is_pie(self):
        assert suggest_chart_type("North holds the larger percentage of revenue") == ChartType.pie

    def test_default_is_bar(self):
        assert suggest_chart_type("Revenue is healthy.") == ChartType.bar

    def test_empty_is_bar(self):
        assert suggest_chart_type("") == ChartType.bar
        assert suggest_chart_type(None) == ChartType.bar

    def test_trend_beats_percentage(self):
        assert suggest_chart_type("the percentage trend is rising") == ChartType.line

    def test_compare_beats_proportion(self):
        assert suggest_chart_type("compare the proportion per region") == ChartType.bar

    def test_case_sensitive(self):
        assert suggest_chart_type("Trend: up, percentage: 40") == ChartType.pie
        assert suggest_chart_type("TREND and PROPORTION") == ChartType.bar

    def test_serializes_as_plain_string(self):
        assert suggest_chart_type("a trend").value == "line"


class TestBuildChart:
    ROWS = [
        {"region": "North", "total_sales": 129.98},
        {"region": "South", "total_sales": 199.99},
    ]

    def test_bar(self):
        chart = build_chart(self.ROWS, "bar", title="Sales by region")
        assert chart["type"] == "bar"
        trace = chart["data"][0]
        assert trace["x"] == ["North", "South"]
        assert trace["y"] == [129.98, 199.99]
        assert chart["layout"]["title"]["text"] == "Sales by region"

    def test_line(self):
        trace = build_chart(self.ROWS, ChartType.line)["data"][0]
        assert trace["type"] == "scatter"
        assert trace["mode"] == "lines+markers"

    def test_pie(self):
        trace = build_chart(self.ROWS, "pie")["data"][0]
        assert trace["labels"] == ["North", "South"]
        assert trace["values"] == [129.98, 199.99]

    def test_no_rows(self):
        assert build_chart([], "bar") is None

    def test_no_numeric_column(self):
        assert build_chart([{"name": "John Smith"}], "bar") is None

    def test_numeric_only_uses_row_numbers(self):
        trace = build_chart([{"n": 2}, {"n": 3}], "bar")["data"][0]
        assert trace["x"] == ["1", "2"]
        assert trace["y"] == [2.0, 3.0]

    def test_unknown_chart_type_rejected(self):
        with pytest.raises(ValueError):
            build_chart(self.ROWS, "scatter3d")

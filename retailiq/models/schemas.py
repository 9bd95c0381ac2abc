"""Pydantic models for RetailIQ — used across API, agents, and services."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChartType(str, Enum):
    bar = "bar"
    line = "line"
    pie = "pie"


# ---------------------------------------------------------------------------
# Schema introspection
# ---------------------------------------------------------------------------

class ColumnInfo(BaseModel):
    name: str
    type: str  # declared type, e.g. TEXT, REAL, INTEGER


class TableSchema(BaseModel):
    table: str
    columns: list[ColumnInfo] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Analyze
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    question: Optional[str] = None


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sql: Optional[str] = None
    data: list[dict[str, Any]] = Field(default_factory=list)
    insights: str = ""
    chart_type: Optional[ChartType] = Field(default=None, alias="chartType")


# ---------------------------------------------------------------------------
# API Responses
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "ok"
    database: str = "connected"
    ai: str = "ready"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

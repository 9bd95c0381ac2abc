"""Analyst Agent — orchestrates business Q&A: question → SQL → rows → insights.

Flow:
  1. Validate the question
  2. Introspect the store schema (data_service)
  3. Ask the LLM for SQL; stop early if it refuses the question
  4. Extract and conditionally execute the SQL (sql_tool)
  5. Ask the LLM for insights over the rows
  6. Pick a chart type from the insight text (chart_tool)
  7. Return AnalyzeResponse

Every step is sequential; the second LLM call depends on the first's rows.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from retailiq.adapters.llm_client import LLMClient
from retailiq.agents.prompts import REFUSAL_SENTINEL, build_insight_messages, build_sql_messages
from retailiq.errors import InvalidQuestionError
from retailiq.models.schemas import AnalyzeResponse
from retailiq.services.data_service import get_schema_info
from retailiq.tools.chart_tool import suggest_chart_type
from retailiq.tools.sql_tool import execute_generated_sql, extract_sql

MIN_QUESTION_LENGTH = 3


def validate_question(question: Optional[str]) -> str:
    """Return the question unchanged, or raise InvalidQuestionError."""
    if not question or len(question.strip()) < MIN_QUESTION_LENGTH:
        raise InvalidQuestionError()
    return question


def analyze(
    question: Optional[str],
    conn: sqlite3.Connection,
    llm: LLMClient,
    temperature: float = 0.3,
    query_timeout: float | None = None,
) -> AnalyzeResponse:
    """Process a business question and return SQL, rows, insights and chart type.

    Raises:
        InvalidQuestionError: question missing or shorter than 3 characters
        QueryExecutionError: the store rejected the generated SQL
    """
    question = validate_question(question)
    print(f"[analyst_agent] Question: {question}")

    schema = get_schema_info(conn)
    print(f"  Schema: {len(schema)} tables")

    sql_text = llm.chat(build_sql_messages(schema, question), temperature=temperature, purpose="generate_sql")

    if REFUSAL_SENTINEL in sql_text:
        print("  Refused: question outside business scope")
        return AnalyzeResponse(insights=sql_text, data=[], sql=None, chart_type=None)

    sql = extract_sql(sql_text)
    print(f"  SQL: {sql!r}")

    data = execute_generated_sql(conn, sql, timeout=query_timeout)
    print(f"  Rows: {len(data)}")

    insights = llm.chat(build_insight_messages(data, question), temperature=temperature, purpose="generate_insights")
    chart_type = suggest_chart_type(insights)
    print(f"  Chart: {chart_type.value}")

    return AnalyzeResponse(
        sql=sql,
        data=data,
        insights=insights,
        chart_type=chart_type,
    )

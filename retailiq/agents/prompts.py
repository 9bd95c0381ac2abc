"""Message transcripts for the two completion calls in an analysis."""

from __future__ import annotations

import json
from typing import Any

from retailiq.models.schemas import TableSchema

# The model is told to answer out-of-scope questions with REFUSAL_MESSAGE;
# the analyst agent short-circuits on REFUSAL_SENTINEL.
REFUSAL_SENTINEL = "Please ask about"
REFUSAL_MESSAGE = "Please ask about sales, products, or customers."


def build_sql_messages(schema: list[TableSchema], question: str) -> list[dict[str, str]]:
    schema_json = json.dumps([t.model_dump() for t in schema])
    system = (
        "You are a SQL expert analyzing a retail database.\n"
        "Only respond to business questions about sales, customers, or products.\n"
        f'For non-business questions, say "{REFUSAL_MESSAGE}"\n'
        f"Database schema: {schema_json}"
    )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": question},
    ]


def build_insight_messages(rows: list[dict[str, Any]], question: str) -> list[dict[str, str]]:
    system = (
        f"Analyze this retail data and provide business insights: {json.dumps(rows, default=str)}.\n"
        "Suggest visualization type (bar, line, pie)."
    )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": question},
    ]

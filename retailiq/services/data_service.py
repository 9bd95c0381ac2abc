"""SQLite data service — catalog introspection and raw query execution.

Usage:
    from retailiq.services.data_service import get_schema_info, query_rows

    schema = get_schema_info(conn)
    rows = query_rows(conn, "SELECT region, count(*) AS n FROM customers GROUP BY region")
"""

from __future__ import annotations

import sqlite3
import time
from typing import Any

from retailiq.models.schemas import ColumnInfo, TableSchema

# Progress handler fires every N SQLite VM instructions.
_PROGRESS_STEPS = 1000


def get_loaded_tables(conn: sqlite3.Connection) -> list[str]:
    """Return table names in catalog order."""
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    return [r["name"] for r in rows]


def get_table_info(conn: sqlite3.Connection, table: str) -> list[ColumnInfo]:
    """Return column names and declared types for a table, in declared order."""
    rows = conn.execute(f'PRAGMA table_info("{table}")').fetchall()
    return [ColumnInfo(name=r["name"], type=r["type"]) for r in rows]


def get_schema_info(conn: sqlite3.Connection) -> list[TableSchema]:
    """Describe every table in the store.

    Any catalog error propagates; a partial schema is never returned.
    """
    return [
        TableSchema(table=table, columns=get_table_info(conn, table))
        for table in get_loaded_tables(conn)
    ]


def query_rows(conn: sqlite3.Connection, sql: str, timeout: float | None = None) -> list[dict[str, Any]]:
    """Execute SQL and return a list of dicts keyed by column name.

    With a timeout, the statement is interrupted once the deadline passes
    and sqlite3.OperationalError is raised.
    """
    if timeout is not None:
        deadline = time.monotonic() + timeout
        conn.set_progress_handler(lambda: int(time.monotonic() > deadline), _PROGRESS_STEPS)
    try:
        rows = conn.execute(sql).fetchall()
    finally:
        if timeout is not None:
            conn.set_progress_handler(None, _PROGRESS_STEPS)
    return [dict(r) for r in rows]

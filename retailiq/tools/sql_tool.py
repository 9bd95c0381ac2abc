"""SQL Tool — recovers SQL from model output and runs it against the store.

Extraction is heuristic string matching, not parsing:
  1. a ```sql fenced block wins, its interior returned verbatim
  2. otherwise the first inline SELECT ... FROM fragment, whole match returned
  3. otherwise nothing

Execution uses a crude allow-list: the statement must contain "select"
somewhere (any case). It does not stop a destructive statement that merely
mentions SELECT, nor a UNION read into unrelated tables.
"""

from __future__ import annotations

import re
import sqlite3
from typing import Any

from retailiq.errors import QueryExecutionError
from retailiq.services.data_service import query_rows


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

_FENCED_SQL = re.compile(r"```sql\n([\s\S]*?)\n```")
_INLINE_SELECT = re.compile(r"SELECT .*?FROM[^;`\n]*", re.IGNORECASE)


def extract_sql(text: str | None) -> str | None:
    """Return the candidate SQL statement in a completion, or None."""
    if not text:
        return None

    fenced = _FENCED_SQL.search(text)
    if fenced:
        return fenced.group(1)

    inline = _INLINE_SELECT.search(text)
    if inline:
        return inline.group(0).rstrip()

    return None


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

def should_execute(sql: str | None) -> bool:
    """True when the candidate passes the "contains select" allow-list."""
    return bool(sql) and "select" in sql.lower()


def execute_generated_sql(
    conn: sqlite3.Connection,
    sql: str | None,
    timeout: float | None = None,
) -> list[dict[str, Any]]:
    """Run model-generated SQL and return its rows.

    Returns [] without touching the store when the candidate is absent or
    fails the allow-list. Store failures are logged and re-raised as a
    generic QueryExecutionError.
    """
    if not should_execute(sql):
        print("  [sql_tool] No executable SQL, skipping query")
        return []

    try:
        return query_rows(conn, sql, timeout=timeout)
    except (sqlite3.Error, sqlite3.Warning) as e:
        print(f"  [sql_tool] SQL error: {e}")
        raise QueryExecutionError() from e

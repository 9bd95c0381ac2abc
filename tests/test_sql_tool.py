"""Tests for SQL extraction and guarded execution."""

import pytest

from retailiq.errors import QueryExecutionError
from retailiq.tools.sql_tool import execute_generated_sql, extract_sql, should_execute


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

class TestExtractSql:
    def test_fenced_block(self):
        assert extract_sql("Here you go:\n```sql\nSELECT 1\n```") == "SELECT 1"

    def test_fenced_block_returned_verbatim(self):
        text = "```sql\nSELECT region,\n       count(*)\nFROM customers\nGROUP BY region;\n```"
        assert extract_sql(text) == "SELECT region,\n       count(*)\nFROM customers\nGROUP BY region;"

    def test_fenced_block_wins_over_inline(self):
        text = "Try SELECT x FROM y, or better:\n```sql\nSELECT 1\n```"
        assert extract_sql(text) == "SELECT 1"

    def test_unlabeled_fence_falls_back_to_inline(self):
        text = "```\nSELECT name FROM products\n```"
        assert extract_sql(text) == "SELECT name FROM products"

    def test_inline_select(self):
        assert extract_sql("SELECT a FROM b") == "SELECT a FROM b"

    def test_inline_select_case_insensitive(self):
        assert extract_sql("use select name from customers; then sort") == "select name from customers"

    def test_inline_select_stops_at_line_end(self):
        text = "The query is SELECT id FROM orders\nIt lists every order."
        assert extract_sql(text) == "SELECT id FROM orders"

    def test_no_sql(self):
        assert extract_sql("Sales look healthy this quarter.") is None

    def test_empty_and_none(self):
        assert extract_sql("") is None
        assert extract_sql(None) is None


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

class _ExplodingConn:
    def execute(self, *args, **kwargs):
        raise AssertionError("store should not be queried")

    def set_progress_handler(self, *args, **kwargs):
        raise AssertionError("store should not be queried")


class TestShouldExecute:
    @pytest.mark.parametrize("sql", ["SELECT 1", "select 1", "SeLeCt 1"])
    def test_select_any_case(self, sql):
        assert should_execute(sql) is True

    @pytest.mark.parametrize("sql", [None, "", "DELETE FROM orders", "PRAGMA table_info(orders)"])
    def test_rejected(self, sql):
        assert should_execute(sql) is False


class TestExecuteGeneratedSql:
    def test_none_skips_store(self):
        assert execute_generated_sql(_ExplodingConn(), None) == []

    def test_non_select_skips_store(self):
        assert execute_generated_sql(_ExplodingConn(), "DROP TABLE orders") == []

    def test_returns_rows_as_dicts(self, store):
        rows = execute_generated_sql(store, "SELECT id, name FROM customers ORDER BY id")
        assert rows == [
            {"id": "C001", "name": "John Smith"},
            {"id": "C002", "name": "Sarah Johnson"},
        ]

    def test_empty_result(self, store):
        assert execute_generated_sql(store, "SELECT * FROM orders WHERE status = 'Cancelled'") == []

    def test_store_error_is_generic(self, store):
        with pytest.raises(QueryExecutionError) as exc:
            execute_generated_sql(store, "SELECT * FROM no_such_table")
        assert str(exc.value) == "Error executing query"
        assert "no_such_table" not in str(exc.value)

    def test_multiple_statements_rejected_by_store(self, store):
        with pytest.raises(QueryExecutionError):
            execute_generated_sql(store, "SELECT 1; SELECT 2")

    def test_runaway_query_interrupted(self, store):
        sql = "WITH RECURSIVE c(x) AS (SELECT 1 UNION ALL SELECT x + 1 FROM c) SELECT count(*) FROM c"
        with pytest.raises(QueryExecutionError):
            execute_generated_sql(store, sql, timeout=0.05)

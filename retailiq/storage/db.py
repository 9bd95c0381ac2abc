"""SQLite connection and table initialization for the retail store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from retailiq.storage.seed_data import seed


def connect(db_path: str | Path, busy_timeout: float = 5.0) -> sqlite3.Connection:
    """Open the retail store, creating and seeding the tables if needed.

    The connection is shared by every request for the life of the process.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), timeout=busy_timeout, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    _create_tables(conn)
    seed(conn)
    print(f"[db] Connected to SQLite database at {db_path}")
    return conn


def _create_tables(conn: sqlite3.Connection) -> None:
    # No foreign keys: order/product references are assumed, never enforced.
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS customers (
            id          TEXT PRIMARY KEY,
            name        TEXT,
            email       TEXT,
            region      TEXT,
            signup_date TEXT
        );

        CREATE TABLE IF NOT EXISTS products (
            id          TEXT PRIMARY KEY,
            name        TEXT,
            category    TEXT,
            price       REAL,
            cost        REAL
        );

        CREATE TABLE IF NOT EXISTS orders (
            id           TEXT PRIMARY KEY,
            customer_id  TEXT,
            order_date   TEXT,
            total_amount REAL,
            status       TEXT
        );

        CREATE TABLE IF NOT EXISTS order_items (
            order_id    TEXT,
            product_id  TEXT,
            quantity    INTEGER,
            price       REAL
        );
    """)
    conn.commit()

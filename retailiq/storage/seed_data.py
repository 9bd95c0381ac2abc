"""
Fixed sample data for the retail store.

Two customers, three products, two orders and their line items. Seeding runs
on every start and never duplicates rows:
  - keyed tables use INSERT OR IGNORE
  - order_items has no key, so it is only filled while empty
"""

from __future__ import annotations

import sqlite3

CUSTOMERS = [
    ("C001", "John Smith", "john@example.com", "North", "2023-01-15"),
    ("C002", "Sarah Johnson", "sarah@example.com", "South", "2023-02-20"),
]

PRODUCTS = [
    ("P001", "Wireless Headphones", "Electronics", 99.99, 45.00),
    ("P002", "Smart Watch", "Electronics", 199.99, 120.00),
    ("P003", "Cotton T-Shirt", "Apparel", 29.99, 12.50),
]

ORDERS = [
    ("O001", "C001", "2023-05-15", 129.98, "Completed"),
    ("O002", "C002", "2023-05-16", 199.99, "Completed"),
]

ORDER_ITEMS = [
    ("O001", "P001", 1, 99.99),
    ("O001", "P003", 1, 29.99),
    ("O002", "P002", 1, 199.99),
]


def seed(conn: sqlite3.Connection) -> None:
    """Insert the sample rows that are not already present."""
    conn.executemany("INSERT OR IGNORE INTO customers VALUES (?, ?, ?, ?, ?)", CUSTOMERS)
    conn.executemany("INSERT OR IGNORE INTO products VALUES (?, ?, ?, ?, ?)", PRODUCTS)
    conn.executemany("INSERT OR IGNORE INTO orders VALUES (?, ?, ?, ?, ?)", ORDERS)

    item_count = conn.execute("SELECT count(*) FROM order_items").fetchone()[0]
    if item_count == 0:
        conn.executemany("INSERT INTO order_items VALUES (?, ?, ?, ?)", ORDER_ITEMS)
    conn.commit()

"""Shared fixtures."""

import sqlite3

import pytest
from schema_dumper.config import DatabaseTarget, DumperConfig


class FakeConnection:
    """Stands in for a BaseConnection, answering queries from canned results.

    ``responses`` maps a query prefix to the rows returned for it. Every query
    run is recorded in ``queries`` with its parameters.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.queries = []

    def _lookup(self, query, params):
        self.queries.append((" ".join(query.split()), params))
        normalized = " ".join(query.split())
        for prefix, result in self.responses.items():
            if normalized.startswith(prefix):
                return result
        return []

    def execute(self, query, params=()):
        return self._lookup(query, params)

    def execute_dict(self, query, params=()):
        return self._lookup(query, params)

    def execute_scalar(self, query, params=()):
        rows = self._lookup(query, params)
        return rows[0][0] if rows else None

    def fetch_rows(self, query, params=()):
        return self._lookup(query, params) or ([], [])


@pytest.fixture
def fake_connection():
    return FakeConnection


@pytest.fixture
def shop_db(tmp_path):
    """SQLite file with one table `orders` holding the row (1, NULL)."""
    path = tmp_path / "shop.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE orders (id INTEGER PRIMARY KEY, note TEXT)")
    conn.execute("INSERT INTO orders (id, note) VALUES (1, NULL)")
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def catalog_db(tmp_path):
    """SQLite file with several tables, a view and awkward values."""
    path = tmp_path / "catalog.db"
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE zebra (id INTEGER PRIMARY KEY);
        CREATE TABLE Apple (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE customers (id INTEGER PRIMARY KEY, name TEXT, nickname TEXT);
        CREATE TABLE empty_table (id INTEGER);
        CREATE TABLE tags (label TEXT, weight INTEGER);
        INSERT INTO customers VALUES (2, 'Zed', NULL);
        INSERT INTO customers VALUES (1, 'O''Brien', 'Obi');
        INSERT INTO tags VALUES ('b', 2);
        INSERT INTO tags VALUES ('a', 1);
        CREATE VIEW named_customers AS SELECT name FROM customers WHERE name IS NOT NULL;
        """
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def sqlite_config(tmp_path):
    """Build a DumperConfig for a SQLite file, writing into tmp_path."""

    def build(db_path, **kwargs):
        kwargs.setdefault("output_path", tmp_path / "out" / "Database Design.md")
        target = DatabaseTarget(connection_string=str(db_path), database=db_path.stem, db_type="sqlite")
        return DumperConfig(target=target, **kwargs)

    return build

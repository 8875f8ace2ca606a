"""End-to-end export tests against SQLite databases."""

import re
import sqlite3

import pytest
from schema_dumper.backends.sqlite import SQLiteConnection
from schema_dumper.base.models import ObjectCategory
from schema_dumper.exceptions import ConnectionError, ExtractionError
from schema_dumper.exporter import build_dump, export_database


class TestShopScenario:
    """The single-table `shop` database."""

    def test_document(self, shop_db, sqlite_config):
        """The document holds one linked table with its drop, create and one insert."""
        config = sqlite_config(shop_db)
        path = export_database(config)
        text = path.read_text(encoding="utf-8")

        assert text.startswith("# Database Schema: shop\n")
        assert "    - [[#Table orders|orders]]" in text
        assert "### Table orders" in text
        assert "DROP TABLE IF EXISTS `orders`;" in text
        assert "CREATE TABLE orders (id INTEGER PRIMARY KEY, note TEXT)" in text
        inserts = re.findall(r"^INSERT INTO .*$", text, re.MULTILINE)
        assert inserts == ["INSERT INTO `orders` (`id`, `note`) VALUES ('1', NULL);"]
        assert "### View" not in text
        assert "### Procedure" not in text
        assert "\n## Views\n" in text
        assert "\n## Stored Procedures\n" in text

    def test_markdown_links(self, shop_db, sqlite_config):
        """Standard markdown links can be chosen instead."""
        path = export_database(sqlite_config(shop_db, obsidian_links=False))
        text = path.read_text(encoding="utf-8")
        assert "    - [orders](#table-orders)" in text
        assert "[Back to Table of Contents](#table-of-contents)" in text

    def test_dry_run(self, shop_db, sqlite_config):
        """Dry runs connect and render but leave no file."""
        path = export_database(sqlite_config(shop_db, dry_run=True))
        assert not path.exists()

    def test_progress_messages(self, shop_db, sqlite_config):
        """A progress callback receives one message per category."""
        messages = []
        build_dump(sqlite_config(shop_db), progress=messages.append)
        assert messages == [
            "Exporting 1 tables...",
            "Exporting 0 views...",
            "Exporting 0 stored procedures...",
        ]


class TestCatalogExport:
    """A database with several tables and a view."""

    def test_tables_sorted_by_code_point(self, catalog_db, sqlite_config):
        """Uppercase names sort before lowercase ones."""
        dump = build_dump(sqlite_config(catalog_db))
        assert [t.name for t in dump.tables] == ["Apple", "customers", "empty_table", "tags", "zebra"]
        assert [v.name for v in dump.views] == ["named_customers"]
        assert dump.procedures == []

    def test_toc_matches_body_order(self, catalog_db, sqlite_config):
        """Table links and table headings enumerate the same sorted names."""
        text = export_database(sqlite_config(catalog_db)).read_text(encoding="utf-8")
        toc = text.split("\n## Tables\n", 1)[0]
        linked = re.findall(r"\[\[#Table ([^|]+)\|", toc)
        headings = re.findall(r"^### Table (.+)$", text, re.MULTILINE)
        assert linked == headings == sorted(headings)

    def test_escaping(self, catalog_db, sqlite_config):
        """Nulls are bare and single quotes doubled."""
        dump = build_dump(sqlite_config(catalog_db))
        customers = next(t for t in dump.tables if t.name == "customers")
        assert "INSERT INTO `customers` (`id`, `name`, `nickname`) VALUES ('2', 'Zed', NULL);" in customers.insert_statements
        assert "INSERT INTO `customers` (`id`, `name`, `nickname`) VALUES ('1', 'O''Brien', 'Obi');" in customers.insert_statements

    def test_empty_table(self, catalog_db, sqlite_config):
        """Empty tables have no inserts but keep their definitions."""
        dump = build_dump(sqlite_config(catalog_db))
        empty = next(t for t in dump.tables if t.name == "empty_table")
        assert empty.insert_statements == []
        assert empty.drop_statement == "DROP TABLE IF EXISTS `empty_table`;"
        assert empty.create_statement == "CREATE TABLE empty_table (id INTEGER)"

    def test_view(self, catalog_db, sqlite_config):
        """Views have drop and create but no inserts."""
        dump = build_dump(sqlite_config(catalog_db))
        named = dump.views[0]
        assert named.category is ObjectCategory.VIEW
        assert named.drop_statement == "DROP VIEW IF EXISTS `named_customers`;"
        assert named.create_statement.startswith("CREATE VIEW named_customers")
        assert named.insert_statements == []

    def test_order_rows_by_primary_key(self, catalog_db, sqlite_config):
        """With ordering on, rows follow the primary key."""
        dump = build_dump(sqlite_config(catalog_db, order_rows=True))
        customers = next(t for t in dump.tables if t.name == "customers")
        assert [s.split("VALUES ('")[1][0] for s in customers.insert_statements] == ["1", "2"]

    def test_order_rows_without_key(self, catalog_db, sqlite_config):
        """Tables without a key are ordered by all columns."""
        dump = build_dump(sqlite_config(catalog_db, order_rows=True))
        tags = next(t for t in dump.tables if t.name == "tags")
        assert tags.insert_statements == [
            "INSERT INTO `tags` (`label`, `weight`) VALUES ('a', '1');",
            "INSERT INTO `tags` (`label`, `weight`) VALUES ('b', '2');",
        ]


class TestReplay:
    """Generated SQL recreates the table it came from."""

    def test_round_trip(self, catalog_db, sqlite_config, tmp_path):
        """Running drop, create and inserts in a fresh database reproduces the rows."""
        dump = build_dump(sqlite_config(catalog_db))
        customers = next(t for t in dump.tables if t.name == "customers")

        replay = sqlite3.connect(tmp_path / "replay.db")
        try:
            replay.execute(customers.drop_statement)
            replay.execute(customers.create_statement)
            for statement in customers.insert_statements:
                replay.execute(statement)
            rows = replay.execute("SELECT id, name, nickname FROM customers ORDER BY id").fetchall()
        finally:
            replay.close()

        assert rows == [(1, "O'Brien", "Obi"), (2, "Zed", None)]


class TestFailures:
    """Errors abort the export and leave no output."""

    def test_missing_database_file(self, tmp_path, sqlite_config):
        """A missing SQLite file fails before anything is written."""
        config = sqlite_config(tmp_path / "nope.db")
        with pytest.raises(ConnectionError, match="not found"):
            export_database(config)
        assert not config.output_path.exists()
        assert not (tmp_path / "nope.db").exists()

    def test_driver_errors_wrapped(self, shop_db, sqlite_config):
        """Driver errors surface as ExtractionError."""
        config = sqlite_config(shop_db)
        with SQLiteConnection(config) as conn:
            with pytest.raises(ExtractionError, match="no such table"):
                conn.execute("SELECT * FROM missing")

    def test_connection_closed_after_failure(self, shop_db, sqlite_config, monkeypatch):
        """The connection is closed even when serialization fails."""
        closed = []
        original = SQLiteConnection.disconnect

        def tracking_disconnect(self):
            closed.append(True)
            original(self)

        def failing_rows(self, query, params=()):
            raise ExtractionError("Query failed: boom")

        monkeypatch.setattr(SQLiteConnection, "disconnect", tracking_disconnect)
        monkeypatch.setattr(SQLiteConnection, "fetch_rows", failing_rows)

        config = sqlite_config(shop_db)
        with pytest.raises(ExtractionError):
            export_database(config)
        assert closed == [True]
        assert not config.output_path.exists()

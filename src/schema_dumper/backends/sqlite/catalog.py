"""SQLite catalog reader."""

import logging

from ...base import BaseCatalogReader
from ...base.models import ObjectCategory

logger = logging.getLogger(__name__)


class SQLiteCatalogReader(BaseCatalogReader):
    """Reads table and view metadata from sqlite_master.

    SQLite has no stored procedures, so that list is always empty.
    """

    def list_tables(self) -> list[str]:
        return self._list_master("table")

    def list_views(self) -> list[str]:
        return self._list_master("view")

    def list_procedures(self) -> list[str]:
        return []

    def _list_master(self, object_type: str) -> list[str]:
        query = """
            SELECT name FROM sqlite_master
            WHERE type = ? AND name NOT LIKE 'sqlite_%'
        """
        return [row[0] for row in self.connection.execute(query, (object_type,))]

    def get_create_statement(self, category: ObjectCategory, name: str) -> str:
        if category is ObjectCategory.PROCEDURE:
            return ""
        definition = self.connection.execute_scalar(
            "SELECT sql FROM sqlite_master WHERE type = ? AND name = ?",
            (category.value, name),
        )
        if definition is None:
            logger.warning(f"No definition returned for {category.label.lower()} {name}")
            return ""
        return definition

    def primary_key_columns(self, table: str) -> list[str]:
        rows = self.connection.execute(
            "SELECT name FROM pragma_table_info(?) WHERE pk > 0 ORDER BY pk", (table,)
        )
        return [row[0] for row in rows]

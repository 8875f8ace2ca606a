"""MySQL catalog reader."""

import logging

from ...base import BaseCatalogReader
from ...base.models import ObjectCategory
from ...sql import quote_identifier

logger = logging.getLogger(__name__)

# Column holding the definition in each SHOW CREATE result (keys are lower-cased)
CREATE_STATEMENT_COLUMNS = {
    ObjectCategory.TABLE: "create table",
    ObjectCategory.VIEW: "create view",
    ObjectCategory.PROCEDURE: "create procedure",
}


class MySQLCatalogReader(BaseCatalogReader):
    """Reads table, view and procedure metadata from MySQL."""

    def list_tables(self) -> list[str]:
        return self._list_full_tables("BASE TABLE")

    def list_views(self) -> list[str]:
        return self._list_full_tables("VIEW")

    def _list_full_tables(self, table_type: str) -> list[str]:
        """List objects of the connected database by SHOW FULL TABLES type."""
        rows = self.connection.execute("SHOW FULL TABLES WHERE Table_type = %s", (table_type,))
        return [row[0] for row in rows]

    def list_procedures(self) -> list[str]:
        rows = self.connection.execute_dict(
            "SHOW PROCEDURE STATUS WHERE Db = %s", (self.config.database,)
        )
        return [row["name"] for row in rows]

    def get_create_statement(self, category: ObjectCategory, name: str) -> str:
        query = f"SHOW CREATE {category.keyword} {quote_identifier(name)}"
        rows = self.connection.execute_dict(query)
        if not rows:
            logger.warning(f"No definition returned for {category.label.lower()} {name}")
            return ""
        # Create Procedure is NULL when the user lacks privileges on the routine body
        return rows[0].get(CREATE_STATEMENT_COLUMNS[category]) or ""

    def primary_key_columns(self, table: str) -> list[str]:
        query = """
            SELECT column_name
            FROM information_schema.key_column_usage
            WHERE table_schema = %s AND table_name = %s
            AND constraint_name = 'PRIMARY'
            ORDER BY ordinal_position
        """
        rows = self.connection.execute_dict(query, (self.config.database, table))
        return [row["column_name"] for row in rows]

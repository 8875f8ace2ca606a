"""Abstract base class for catalog readers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator

from ..sql import quote_identifier
from .connection import BaseConnection
from .models import ObjectCategory, RowRecord


class BaseCatalogReader(ABC):
    """Lists schema objects and fetches their definitions and rows.

    Subclasses supply the dialect-specific metadata queries. Name lists are
    returned in whatever order the server produces; ``list_objects`` is the
    sorted view every caller should use.
    """

    def __init__(self, connection: BaseConnection, config: Any):
        self.connection = connection
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def list_tables(self) -> list[str]:
        """Names of the base tables in the target database."""
        pass

    @abstractmethod
    def list_views(self) -> list[str]:
        """Names of the views in the target database."""
        pass

    @abstractmethod
    def list_procedures(self) -> list[str]:
        """Names of the stored procedures in the target database."""
        pass

    @abstractmethod
    def get_create_statement(self, category: ObjectCategory, name: str) -> str:
        """Definition of an object, or an empty string when none is returned."""
        pass

    def primary_key_columns(self, table: str) -> list[str]:
        """Primary key columns of a table in key order; empty if it has none."""
        return []

    def list_objects(self, category: ObjectCategory) -> list[str]:
        """Names of one category, sorted by code point."""
        listers = {
            ObjectCategory.TABLE: self.list_tables,
            ObjectCategory.VIEW: self.list_views,
            ObjectCategory.PROCEDURE: self.list_procedures,
        }
        names = sorted(listers[category]())
        self.logger.info(f"Found {len(names)} {category.section_title.lower()}")
        return names

    def column_names(self, table: str) -> list[str]:
        """Column names of a table in ordinal order."""
        columns, _ = self.connection.fetch_rows(
            f"SELECT * FROM {quote_identifier(table)} WHERE 1 = 0"
        )
        return columns

    def select_rows_query(self, table: str, ordered: bool = False) -> str:
        """Build the query that selects every row of a table."""
        query = f"SELECT * FROM {quote_identifier(table)}"
        if ordered:
            order_columns = self.primary_key_columns(table) or self.column_names(table)
            if order_columns:
                query += " ORDER BY " + ", ".join(quote_identifier(c) for c in order_columns)
        return query

    def iter_rows(self, table: str, ordered: bool = False) -> Iterator[RowRecord]:
        """Yield every row of a table.

        All rows are fetched before the first is yielded, so the cursor is
        closed and the connection free for the caller's next query.
        """
        columns, rows = self.connection.fetch_rows(self.select_rows_query(table, ordered))
        column_names = tuple(columns)
        for row in rows:
            yield RowRecord(columns=column_names, values=tuple(row))

"""Turns catalog objects into replayable SQL fragments."""

import logging
from typing import TYPE_CHECKING

from .base.models import ObjectCategory, RowRecord, SchemaObject
from .sql import quote_identifier, render_value

if TYPE_CHECKING:
    from .base.catalog import BaseCatalogReader

logger = logging.getLogger(__name__)


def drop_statement(category: ObjectCategory, name: str) -> str:
    return f"DROP {category.keyword} IF EXISTS {quote_identifier(name)};"


def insert_statement(table: str, record: RowRecord) -> str:
    """Build one INSERT statement for a table row."""
    columns = ", ".join(quote_identifier(column) for column, _ in record)
    values = ", ".join(render_value(value) for _, value in record)
    return f"INSERT INTO {quote_identifier(table)} ({columns}) VALUES ({values});"


class ObjectSerializer:
    """Fetches definitions and rows for named objects and renders them as SQL."""

    def __init__(self, reader: "BaseCatalogReader", order_rows: bool = False):
        self.reader = reader
        self.order_rows = order_rows

    def serialize(self, category: ObjectCategory, name: str) -> SchemaObject:
        """Build the drop, create and (for tables) insert fragments of an object."""
        obj = SchemaObject(
            name=name,
            category=category,
            drop_statement=drop_statement(category, name),
            create_statement=self.reader.get_create_statement(category, name),
        )
        if category is ObjectCategory.TABLE:
            obj.insert_statements = self.insert_statements(name)
        return obj

    def insert_statements(self, table: str) -> list[str]:
        """Generate one INSERT statement per row of a table."""
        statements = [
            insert_statement(table, record)
            for record in self.reader.iter_rows(table, ordered=self.order_rows)
        ]
        logger.debug(f"Table {table}: {len(statements)} rows")
        return statements

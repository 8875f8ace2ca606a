"""SQLite backend."""

from .catalog import SQLiteCatalogReader
from .connection import SQLiteConnection

__all__ = [
    "SQLiteCatalogReader",
    "SQLiteConnection",
]

"""MySQL backend."""

from .catalog import MySQLCatalogReader
from .connection import MySQLConnection, parse_connection_string

__all__ = [
    "MySQLCatalogReader",
    "MySQLConnection",
    "parse_connection_string",
]

"""Base classes and shared interfaces."""

from .catalog import BaseCatalogReader
from .connection import BaseConnection
from .models import DatabaseDump, ObjectCategory, RowRecord, SchemaObject

__all__ = [
    "BaseConnection",
    "BaseCatalogReader",
    "DatabaseDump",
    "ObjectCategory",
    "RowRecord",
    "SchemaObject",
]

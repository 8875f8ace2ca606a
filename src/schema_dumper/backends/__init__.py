"""Database backend implementations."""

from typing import TYPE_CHECKING, Type

from ..exceptions import BackendNotAvailableError, ConfigurationError

if TYPE_CHECKING:
    from ..base import BaseCatalogReader, BaseConnection


def get_backend(db_type: str) -> tuple[Type["BaseConnection"], Type["BaseCatalogReader"]]:
    """
    Get the connection class and catalog reader for a database type.

    Returns:
        Tuple of (ConnectionClass, CatalogReaderClass)
    """
    if db_type == "mysql":
        try:
            from .mysql import MySQLCatalogReader, MySQLConnection
            return MySQLConnection, MySQLCatalogReader
        except ImportError as e:
            raise BackendNotAvailableError(
                f"MySQL backend requires mysql-connector-python. "
                f"Install with: pip install mysql-connector-python\n"
                f"Error: {e}"
            )

    elif db_type == "sqlite":
        from .sqlite import SQLiteCatalogReader, SQLiteConnection
        return SQLiteConnection, SQLiteCatalogReader

    else:
        raise ConfigurationError(
            f"Unknown database type: {db_type}. "
            f"Supported types: mysql, sqlite"
        )

"""Abstract base class for database connections."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generator

from ..exceptions import ExtractionError

logger = logging.getLogger(__name__)


class BaseConnection(ABC):
    """Abstract base class for database connections.

    Used as a context manager: the connection is opened on enter and closed
    on exit, whether or not the body raised. Every query runs on its own
    cursor, which is closed before the query helper returns.
    """

    # Driver exception type wrapped into ExtractionError by the query helpers
    driver_error: type[Exception] = Exception

    def __init__(self, config: Any):
        self.config = config
        self._connection = None

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    @property
    @abstractmethod
    def connection(self) -> Any:
        """Get the active connection."""
        pass

    @abstractmethod
    def get_version(self) -> str:
        """Get the server version string."""
        pass

    @contextmanager
    def cursor(self) -> Generator[Any, None, None]:
        """Get a cursor context manager."""
        cur = self.connection.cursor()
        try:
            yield cur
        except self.driver_error as e:
            raise ExtractionError(f"Query failed: {e}") from e
        finally:
            cur.close()

    def execute(self, query: str, params: tuple = ()) -> list[Any]:
        """Execute a query and return all results."""
        logger.debug(f"Executing: {query.strip()}")
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.fetchall()

    def execute_scalar(self, query: str, params: tuple = ()) -> Any:
        """Execute a query and return a single value."""
        logger.debug(f"Executing: {query.strip()}")
        with self.cursor() as cur:
            cur.execute(query, params)
            row = cur.fetchone()
            return row[0] if row else None

    def execute_dict(self, query: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a query and return results as dictionaries."""
        logger.debug(f"Executing: {query.strip()}")
        with self.cursor() as cur:
            cur.execute(query, params)
            columns = [column[0] for column in cur.description] if cur.description else []
            return [dict(zip(columns, row)) for row in cur.fetchall()]

    def fetch_rows(self, query: str, params: tuple = ()) -> tuple[list[str], list[tuple]]:
        """Execute a query and return its column names and all rows."""
        logger.debug(f"Executing: {query.strip()}")
        with self.cursor() as cur:
            cur.execute(query, params)
            columns = [column[0] for column in cur.description] if cur.description else []
            return columns, [tuple(row) for row in cur.fetchall()]

    def __enter__(self) -> "BaseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()

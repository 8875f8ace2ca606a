"""SQLite database connection."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from ...base.connection import BaseConnection
from ...config import DumperConfig
from ...exceptions import ConnectionError

logger = logging.getLogger(__name__)


class SQLiteConnection(BaseConnection):
    """SQLite connection using sqlite3; the connection string is the file path."""

    driver_error = sqlite3.Error

    def __init__(self, config: DumperConfig):
        super().__init__(config)
        self._connection: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        """Establish database connection."""
        db_path = Path(self.config.target.connection_string)
        # sqlite3.connect would silently create an empty database
        if not db_path.is_file():
            raise ConnectionError(f"Database file not found: {db_path}")
        try:
            logger.debug(f"Connecting to SQLite: {db_path}")
            self._connection = sqlite3.connect(db_path)
            logger.info(f"Connected to {db_path}")
        except sqlite3.Error as e:
            raise ConnectionError(f"Failed to connect to database: {e}") from e

    def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from database")

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the active connection."""
        if not self._connection:
            raise ConnectionError("Not connected to database")
        return self._connection

    def get_version(self) -> str:
        """Get SQLite version."""
        return self.execute_scalar("SELECT sqlite_version()") or "Unknown"

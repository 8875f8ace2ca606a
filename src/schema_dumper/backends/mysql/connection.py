"""MySQL database connection."""

import logging
from typing import Any, Optional

import mysql.connector
from mysql.connector import Error as MySQLError

from ...base.connection import BaseConnection
from ...config import DumperConfig
from ...exceptions import ConfigurationError, ConnectionError

logger = logging.getLogger(__name__)

# Connection string keys (lower-cased, spaces removed) -> mysql.connector argument
CONNECTION_STRING_KEYS = {
    "server": "host",
    "host": "host",
    "datasource": "host",
    "address": "host",
    "addr": "host",
    "networkaddress": "host",
    "port": "port",
    "database": "database",
    "initialcatalog": "database",
    "userid": "user",
    "uid": "user",
    "user": "user",
    "username": "user",
    "password": "password",
    "pwd": "password",
    "sslmode": "ssl_mode",
    "charset": "charset",
    "characterset": "charset",
    "connectiontimeout": "connection_timeout",
    "connecttimeout": "connection_timeout",
}

INTEGER_ARGUMENTS = ("port", "connection_timeout")


def parse_connection_string(connection_string: str) -> dict[str, Any]:
    """
    Parse a ``key=value;`` connection string into mysql.connector arguments.

    Keys are matched case-insensitively and ignoring spaces, so ``User ID``,
    ``userid`` and ``UID`` are equivalent. Unknown keys are skipped.

    Raises:
        ConfigurationError: if a segment has no ``=`` or a numeric value is invalid.
    """
    params: dict[str, Any] = {}
    for segment in connection_string.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        if "=" not in segment:
            raise ConfigurationError(f"Malformed connection string segment: {segment!r}")

        key, value = segment.split("=", 1)
        normalized = key.strip().lower().replace(" ", "")
        argument = CONNECTION_STRING_KEYS.get(normalized)
        if argument is None:
            logger.debug(f"Ignoring connection string key: {key.strip()}")
            continue

        value = value.strip()
        if argument in INTEGER_ARGUMENTS:
            try:
                params[argument] = int(value)
            except ValueError:
                raise ConfigurationError(f"Invalid {key.strip()} in connection string: {value!r}")
        elif argument == "ssl_mode":
            if value.lower() == "none":
                params["ssl_disabled"] = True
        else:
            params[argument] = value

    return params


class MySQLConnection(BaseConnection):
    """MySQL connection using mysql-connector-python."""

    driver_error = MySQLError

    def __init__(self, config: DumperConfig):
        super().__init__(config)
        self._connection: Optional[mysql.connector.MySQLConnection] = None

    def connect(self) -> None:
        """Establish database connection."""
        conn_params = parse_connection_string(self.config.target.connection_string)
        conn_params.setdefault("database", self.config.database)
        conn_params.setdefault("port", 3306)
        if "host" not in conn_params:
            raise ConfigurationError("Connection string must name a server")

        try:
            logger.debug(
                f"Connecting to MySQL: {conn_params['host']}:{conn_params['port']}/{conn_params['database']}"
            )
            self._connection = mysql.connector.connect(**conn_params)
            logger.info(f"Connected to {conn_params['database']}")
        except MySQLError as e:
            raise ConnectionError(f"Failed to connect to database: {e}") from e

    def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from database")

    @property
    def connection(self) -> mysql.connector.MySQLConnection:
        """Get the active connection."""
        if not self._connection:
            raise ConnectionError("Not connected to database")
        return self._connection

    def execute_dict(self, query: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a query and return results as dictionaries with lowercase keys."""
        rows = super().execute_dict(query, params)
        # Normalize keys to lowercase for consistency
        return [{k.lower(): v for k, v in row.items()} for row in rows]

    def get_version(self) -> str:
        """Get MySQL version."""
        return self.execute_scalar("SELECT VERSION()") or "Unknown"

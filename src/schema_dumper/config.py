"""Configuration dataclasses for the schema dumper."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from . import SUPPORTED_BACKENDS
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.txt"
DEFAULT_OUTPUT_FILE = "Database Design.md"


@dataclass(frozen=True)
class DatabaseTarget:
    """The database to export: how to reach it and what it is called."""

    connection_string: str
    database: str
    db_type: str = "mysql"

    def validate(self) -> None:
        """Validate the target is complete."""
        if self.db_type not in SUPPORTED_BACKENDS:
            raise ConfigurationError(
                f"Unknown database type: {self.db_type}. "
                f"Supported types: {', '.join(SUPPORTED_BACKENDS)}"
            )
        if not self.connection_string:
            raise ConfigurationError("Connection string is required")
        if not self.database:
            raise ConfigurationError("Database name is required")


@dataclass(frozen=True)
class DumperConfig:
    """Configuration for a single export run."""

    target: DatabaseTarget

    # Output settings
    output_path: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))
    obsidian_links: bool = True

    # Behavior
    order_rows: bool = False
    dry_run: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.output_path, str):
            object.__setattr__(self, "output_path", Path(self.output_path))

    @property
    def database(self) -> str:
        return self.target.database

    @property
    def db_type(self) -> str:
        return self.target.db_type

    def validate(self) -> None:
        """Validate the configuration is complete and consistent."""
        self.target.validate()
        if not str(self.output_path).strip():
            raise ConfigurationError("Output path is required")


def read_config_file(path: Union[str, Path] = DEFAULT_CONFIG_FILE, db_type: str = "mysql") -> DatabaseTarget:
    """
    Read a database target from a two-line config file.

    Line 1 holds the connection string and line 2 the database name. Both are
    stripped of surrounding whitespace; any further lines are ignored.

    Raises:
        ConfigurationError: if the file is missing, short, or has a blank value.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(
            f"{path} not found. Create it or pass CONNECTION and DATABASE arguments. "
            "Expected two lines: connection string, then database name"
        )

    lines = path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 2:
        raise ConfigurationError(
            f"{path} is missing required lines. "
            "Expected line 1: connection string, line 2: database name"
        )
    if len(lines) > 2:
        logger.debug(f"Ignoring {len(lines) - 2} extra line(s) in {path}")

    connection_string = lines[0].strip()
    database = lines[1].strip()
    if not connection_string:
        raise ConfigurationError(f"{path}: line 1 (connection string) is empty")
    if not database:
        raise ConfigurationError(f"{path}: line 2 (database name) is empty")

    return DatabaseTarget(connection_string=connection_string, database=database, db_type=db_type)

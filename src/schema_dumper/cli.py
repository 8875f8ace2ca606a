"""Click CLI interface for the schema dumper."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import SUPPORTED_BACKENDS, __version__
from .backends import get_backend
from .config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT_FILE,
    DatabaseTarget,
    DumperConfig,
    read_config_file,
)
from .exceptions import (
    BackendNotAvailableError,
    ConfigurationError,
    ConnectionError,
    ExtractionError,
    GenerationError,
    SchemaDumperError,
)
from .exporter import export_database

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def resolve_target(
    connection_string: Optional[str],
    database: Optional[str],
    db_type: str,
    config_file: str,
) -> DatabaseTarget:
    """Build the target from both arguments, or fall back to the config file."""
    if connection_string is not None and database is not None:
        target = DatabaseTarget(connection_string=connection_string, database=database, db_type=db_type)
    else:
        click.echo(f"No arguments provided. Attempting to read from {config_file}...")
        target = read_config_file(config_file, db_type=db_type)
    target.validate()
    return target


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
def cli():
    """Schema Dumper - Export a database schema and data to one markdown file.

    Supports: MySQL, SQLite
    """
    pass


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("connection_string", required=False)
@click.argument("database", required=False)
@click.option("--db-type", "-t", type=click.Choice(SUPPORTED_BACKENDS, case_sensitive=False),
              default="mysql", help="Database type")
@click.option("--config-file", default=DEFAULT_CONFIG_FILE, type=click.Path(dir_okay=False),
              help="Two-line file (connection string, database name) read when arguments are missing")
@click.option("-o", "--output", default=DEFAULT_OUTPUT_FILE, type=click.Path(dir_okay=False),
              help="Output markdown file (overwritten)")
@click.option("--link-style", type=click.Choice(["obsidian", "markdown"], case_sensitive=False),
              default="obsidian", help="Internal link syntax")
@click.option("--order-rows", is_flag=True,
              help="Order inserted rows by primary key (or all columns) for stable output")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--dry-run", is_flag=True, help="Build the document without writing it")
def dump(
    connection_string: Optional[str],
    database: Optional[str],
    db_type: str,
    config_file: str,
    output: str,
    link_style: str,
    order_rows: bool,
    verbose: int,
    dry_run: bool,
) -> None:
    """Export tables, views and stored procedures to markdown.

    CONNECTION_STRING is a MySQL connection string such as
    "Server=localhost;Database=mydb;User ID=myuser;Password=secret;Port=3306;SslMode=None;"
    or, for SQLite, the database file path. DATABASE names the database.
    Without both arguments they are read from the config file.
    """
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        target = resolve_target(connection_string, database, db_type.lower(), config_file)
        config = DumperConfig(
            target=target,
            output_path=Path(output),
            obsidian_links=link_style.lower() == "obsidian",
            order_rows=order_rows,
            dry_run=dry_run,
        )

        path = export_database(config, progress=click.echo)

        if dry_run:
            click.echo(f"\n[DRY RUN] Would write {path}")
        else:
            click.echo(f"\nDatabase schema exported successfully to {path}")

    except BackendNotAvailableError as e:
        click.echo(f"Backend not available: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection error: {e}", err=True)
        sys.exit(1)
    except ExtractionError as e:
        click.echo(f"Export failed: {e}", err=True)
        sys.exit(1)
    except GenerationError as e:
        click.echo(f"Write failed: {e}", err=True)
        sys.exit(1)
    except SchemaDumperError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


@cli.command("test-connection", context_settings=CONTEXT_SETTINGS)
@click.argument("connection_string", required=False)
@click.argument("database", required=False)
@click.option("--db-type", "-t", type=click.Choice(SUPPORTED_BACKENDS, case_sensitive=False),
              default="mysql", help="Database type")
@click.option("--config-file", default=DEFAULT_CONFIG_FILE, type=click.Path(dir_okay=False),
              help="Two-line file (connection string, database name) read when arguments are missing")
def test_connection(
    connection_string: Optional[str],
    database: Optional[str],
    db_type: str,
    config_file: str,
) -> None:
    """Test database connection."""
    try:
        target = resolve_target(connection_string, database, db_type.lower(), config_file)
        config = DumperConfig(target=target)

        ConnectionClass, _ = get_backend(target.db_type)

        click.echo(f"Connecting to {target.db_type} database...")
        with ConnectionClass(config) as conn:
            version = conn.get_version()
            click.echo("Connection successful!")
            click.echo(f"\nServer version:\n{version}")

    except BackendNotAvailableError as e:
        click.echo(f"Backend not available: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except (ConnectionError, ExtractionError) as e:
        click.echo(f"Connection failed: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()

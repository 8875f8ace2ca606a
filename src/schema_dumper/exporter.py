"""The export routine: catalog -> serialized objects -> document -> file."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .backends import get_backend
from .base.models import DatabaseDump, ObjectCategory
from .config import DumperConfig
from .generators import MarkdownGenerator
from .serializer import ObjectSerializer

logger = logging.getLogger(__name__)


def build_dump(config: DumperConfig, progress: Optional[Callable[[str], None]] = None) -> DatabaseDump:
    """
    Connect to the target database and serialize every table, view and procedure.

    The connection is opened once and closed before returning, including when
    any query fails. Errors are not recovered; a partial dump is never returned.
    """
    ConnectionClass, ReaderClass = get_backend(config.db_type)

    dump = DatabaseDump(name=config.database, generated_at=datetime.now())

    with ConnectionClass(config) as conn:
        reader = ReaderClass(conn, config)
        serializer = ObjectSerializer(reader, order_rows=config.order_rows)

        names = {category: reader.list_objects(category) for category in ObjectCategory}
        for category, category_names in names.items():
            if progress:
                progress(f"Exporting {len(category_names)} {category.section_title.lower()}...")
            objects = dump.objects(category)
            for name in category_names:
                logger.debug(f"Serializing {category.label.lower()} {name}")
                objects.append(serializer.serialize(category, name))

    return dump


def export_database(config: DumperConfig, progress: Optional[Callable[[str], None]] = None) -> Path:
    """Export the whole database to one markdown file and return its path.

    The document is fully assembled in memory before anything is written.
    """
    config.validate()
    dump = build_dump(config, progress)
    logger.info(
        f"Exported {len(dump.tables)} tables, {len(dump.views)} views, "
        f"{len(dump.procedures)} procedures from {dump.name}"
    )
    return MarkdownGenerator(config).generate(dump)

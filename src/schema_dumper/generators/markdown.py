"""Markdown document generator."""

import logging
from pathlib import Path

from ..base.models import DatabaseDump, ObjectCategory, SchemaObject
from ..config import DumperConfig
from ..exceptions import GenerationError

logger = logging.getLogger(__name__)

TOC_HEADING = "Table of Contents"
CATEGORY_ORDER = (ObjectCategory.TABLE, ObjectCategory.VIEW, ObjectCategory.PROCEDURE)


def slugify(heading: str) -> str:
    """Anchor for a heading: lower-cased, spaces replaced by hyphens."""
    return heading.lower().replace(" ", "-")


def make_link(heading: str, display_text: str, obsidian_links: bool = True) -> str:
    """Link to a heading in the same document.

    Obsidian style is ``[[#heading|text]]``; standard markdown style is
    ``[text](#slug)``.
    """
    if obsidian_links:
        return f"[[#{heading}|{display_text}]]"
    return f"[{display_text}](#{slugify(heading)})"


def sql_block(statement: str) -> list[str]:
    return ["```sql", statement, "```"]


class MarkdownGenerator:
    """Assembles the schema document and writes it in a single call."""

    def __init__(self, config: DumperConfig):
        self.config = config
        self.output_path = config.output_path

    def link(self, heading: str, display_text: str) -> str:
        return make_link(heading, display_text, self.config.obsidian_links)

    def render(self, dump: DatabaseDump) -> str:
        """Build the whole document as one string."""
        lines = [
            f"# Database Schema: {dump.name}",
            f"## Generated on: {dump.generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
        ]
        lines.extend(self._table_of_contents(dump))
        for category in CATEGORY_ORDER:
            lines.extend(self._section(category, dump.objects(category)))
        return "\n".join(lines) + "\n"

    def _table_of_contents(self, dump: DatabaseDump) -> list[str]:
        lines = [f"## {TOC_HEADING}"]
        for category in CATEGORY_ORDER:
            title = category.section_title
            lines.append(f"- {self.link(title, title)}")
            for obj in dump.objects(category):
                lines.append(f"    - {self.link(obj.heading, obj.name)}")
        return lines

    def _section(self, category: ObjectCategory, objects: list[SchemaObject]) -> list[str]:
        lines = ["", f"## {category.section_title}"]
        for obj in objects:
            lines.extend(self._object_section(obj))
        return lines

    def _object_section(self, obj: SchemaObject) -> list[str]:
        lines = ["", f"### {obj.heading}", "#### Drop Statement"]
        lines.extend(sql_block(obj.drop_statement))
        lines.append("#### Create Statement")
        lines.extend(sql_block(obj.create_statement))
        for insert in obj.insert_statements:
            lines.extend(sql_block(insert))
        lines.extend(["", self.link(TOC_HEADING, f"Back to {TOC_HEADING}")])
        return lines

    def write(self, content: str) -> Path:
        """Write the finished document to the output path, replacing any old one."""
        path = self.output_path
        if self.config.dry_run:
            logger.info(f"[DRY RUN] Would write: {path}")
            return path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GenerationError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote: {path}")
        return path

    def generate(self, dump: DatabaseDump) -> Path:
        """Render the document and write it."""
        return self.write(self.render(dump))

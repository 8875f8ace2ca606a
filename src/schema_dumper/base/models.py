"""Dataclasses for exported schema objects."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterator


class ObjectCategory(str, Enum):
    """Kind of schema object; decides its queries and its document section."""

    TABLE = "table"
    VIEW = "view"
    PROCEDURE = "procedure"

    @property
    def keyword(self) -> str:
        """SQL keyword used in DROP statements."""
        return self.name

    @property
    def label(self) -> str:
        """Prefix of the per-object heading, e.g. "Table"."""
        return self.value.capitalize()

    @property
    def section_title(self) -> str:
        """Title of the document section holding this category."""
        titles = {
            ObjectCategory.TABLE: "Tables",
            ObjectCategory.VIEW: "Views",
            ObjectCategory.PROCEDURE: "Stored Procedures",
        }
        return titles[self]


@dataclass(frozen=True)
class RowRecord:
    """One retrieved table row, columns in query order."""

    columns: tuple[str, ...]
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if len(self.columns) != len(self.values):
            raise ValueError(
                f"Row has {len(self.values)} values for {len(self.columns)} columns"
            )

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(zip(self.columns, self.values))


@dataclass
class SchemaObject:
    """A table, view or procedure with its generated SQL fragments."""

    name: str
    category: ObjectCategory
    drop_statement: str = ""
    create_statement: str = ""
    insert_statements: list[str] = field(default_factory=list)

    @property
    def heading(self) -> str:
        """Heading text used in the document body and as link target."""
        return f"{self.category.label} {self.name}"


@dataclass
class DatabaseDump:
    """Everything needed to assemble the output document."""

    name: str
    generated_at: datetime = field(default_factory=datetime.now)
    tables: list[SchemaObject] = field(default_factory=list)
    views: list[SchemaObject] = field(default_factory=list)
    procedures: list[SchemaObject] = field(default_factory=list)

    def objects(self, category: ObjectCategory) -> list[SchemaObject]:
        """Get the objects of one category."""
        if category is ObjectCategory.TABLE:
            return self.tables
        if category is ObjectCategory.VIEW:
            return self.views
        return self.procedures

"""SQL quoting helpers shared by the catalog readers and the serializer.

Names come from the database catalog, never from user input, so plain
interpolation into query text is acceptable as long as every name passes
through ``quote_identifier``.

Value rendering is intentionally minimal: ``NULL`` for the null marker, and
otherwise the value's text wrapped in single quotes with embedded single quotes
doubled. Numbers and dates are quoted too; no backslash escaping is applied.
"""

from datetime import timedelta
from typing import Any


def quote_identifier(name: str) -> str:
    """Backtick-quote an identifier, doubling embedded backticks."""
    return "`" + name.replace("`", "``") + "`"


def time_text(value: timedelta) -> str:
    """Render a TIME value as ``[-]HH:MM:SS[.ffffff]`` with total hours."""
    sign = "-" if value < timedelta(0) else ""
    total = abs(value)
    minutes, seconds = divmod(total.days * 86400 + total.seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if total.microseconds:
        text += f".{total.microseconds:06d}"
    return text


def value_text(value: Any) -> str:
    """Text representation of a non-null column value."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    # mysql.connector returns SET columns as sets and TIME columns as timedeltas
    if isinstance(value, (set, frozenset)):
        return ",".join(sorted(value))
    if isinstance(value, timedelta):
        return time_text(value)
    return str(value)


def render_value(value: Any) -> str:
    """Render a column value as a SQL literal."""
    if value is None:
        return "NULL"
    return "'" + value_text(value).replace("'", "''") + "'"

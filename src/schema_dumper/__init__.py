"""Schema Dumper - Export a database schema and its data to a single markdown file."""

__version__ = "0.1.0"

SUPPORTED_BACKENDS = ["mysql", "sqlite"]

__all__ = ["SUPPORTED_BACKENDS", "__version__"]

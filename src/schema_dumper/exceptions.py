"""Custom exceptions for the schema dumper."""


class SchemaDumperError(Exception):
    """Base exception for all schema dumper errors."""

    pass


class ConnectionError(SchemaDumperError):
    """Error establishing database connection."""

    pass


class ConfigurationError(SchemaDumperError):
    """Error in configuration, arguments or the config file."""

    pass


class ExtractionError(SchemaDumperError):
    """A catalog, definition or row query failed."""

    pass


class GenerationError(SchemaDumperError):
    """Error writing the output document."""

    pass


class BackendNotAvailableError(SchemaDumperError):
    """Required backend driver is not installed."""

    pass

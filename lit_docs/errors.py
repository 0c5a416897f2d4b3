"""Exception types raised by the documentation generator."""


class LitDocsError(Exception):
    """Base class for generator failures."""


class ConfigError(LitDocsError):
    """Raised when a configuration value cannot be used."""


class UnsupportedSourceError(LitDocsError):
    """Raised when an entry file has no matching grammar."""

    def __init__(self, path: str) -> None:
        """Record the offending path."""
        super().__init__(f"No grammar available for source file: {path}")
        self.path = path

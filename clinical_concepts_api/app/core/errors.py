"""
Exception types raised by the catalog.

Every error derives from ``CatalogError`` so the HTTP layer can map
the whole family to status codes in one place.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog exceptions."""
    pass


class StorageError(CatalogError):
    """Raised when the backing database fails (I/O or constraint)."""
    pass


class IngestError(CatalogError):
    """Raised when a tabular resource cannot be found or read."""
    pass


class CsvFormatError(IngestError):
    """Raised for a data line that does not carry six fields."""

    def __init__(self, line_number: int, message: Optional[str] = None) -> None:
        self.line_number = line_number
        super().__init__(message or f"malformed CSV record at line {line_number}")


class ValidationError(CatalogError, ValueError):
    """Raised when a concept is missing its id or display name."""
    pass

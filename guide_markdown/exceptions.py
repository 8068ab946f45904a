"""Package-specific exception types."""

from __future__ import annotations


class DocumentError(ValueError):
    """Base class for document-related errors.

    Represents problems with the structure of a guide that prevent rendering.
    """


class TooManyHeadingsError(DocumentError):
    """Raised when a document contains more section headings than allowed.

    Args:
        limit: Maximum number of headings permitted.
    """

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too many headings (limit: {self.limit})")


class ReadFileError(Exception):
    """Raised when a guide file cannot be read or decoded."""

"""Exceptions raised by docverify."""

from pathlib import Path


class DocverifyError(Exception):
    """Base class for all docverify errors."""


class UnsupportedDocumentTypeError(DocverifyError, ValueError):
    """Raised when a document type has no check profile."""

    def __init__(self, document_type: object):
        self.document_type = document_type
        super().__init__(f"Unsupported document type: {document_type}")


class ExtractionError(DocverifyError):
    """Raised when text cannot be extracted from a file."""

    def __init__(self, message: str, file_path: str | Path | None = None):
        self.file_path = file_path
        if file_path is not None:
            message = f"{message}: {file_path}"
        super().__init__(message)


class ProfileError(DocverifyError):
    """Raised when a check or check profile is built with inconsistent points."""

"""Core modules for docverify."""

from docverify.core.config import Config
from docverify.core.document import Document, FileKind

__all__ = ["Config", "Document", "FileKind"]

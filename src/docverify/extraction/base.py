"""Interface of the text extraction collaborator."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSource(Protocol):
    """Anything that turns a file reference into document text.

    Implementations return the visible text of the whole document as one
    string and raise on failure. Empty text is a valid result and is not a
    failure. Case does not need to be normalized.
    """

    def extract_text(self, file_ref: str | Path) -> str:
        """Extract the text of a document."""
        ...


class StaticTextSource:
    """Text source that returns fixed text for every file reference."""

    def __init__(self, text: str):
        self.text = text

    def extract_text(self, file_ref: str | Path) -> str:
        return self.text

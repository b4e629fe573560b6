"""Text extraction from PDF documents with text layers."""

from dataclasses import dataclass
from pathlib import Path

import pdfplumber


@dataclass
class TextExtractionResult:
    """Result of text extraction for a page."""

    page_number: int
    raw_text: str = ""
    char_count: int = 0

    def __post_init__(self):
        """Calculate derived fields."""
        if self.raw_text:
            self.char_count = len(self.raw_text.strip())

    def is_empty(self, min_chars: int = 10) -> bool:
        """Check if the page has too little text to be a text layer."""
        return self.char_count < min_chars


class PdfTextExtractor:
    """Text extractor for PDFs with text layers."""

    def extract_pages(
        self,
        pdf_path: str | Path,
        max_pages: int | None = None,
    ) -> list[TextExtractionResult]:
        """Extract text from the leading pages of a PDF.

        Args:
            pdf_path: Path to PDF file
            max_pages: Maximum number of pages to read (None = all pages)

        Returns:
            List of TextExtractionResult, one per page read
        """
        results = []

        with pdfplumber.open(Path(pdf_path)) as pdf:
            pages = pdf.pages if max_pages is None else pdf.pages[:max_pages]
            for index, page in enumerate(pages, start=1):
                raw_text = page.extract_text() or ""
                results.append(TextExtractionResult(page_number=index, raw_text=raw_text))

        return results

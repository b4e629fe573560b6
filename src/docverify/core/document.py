"""Document class for uploaded supporting files."""

from enum import Enum
from pathlib import Path

from pdf2image import convert_from_path
from PIL import Image
from pypdf import PdfReader


class FileKind(str, Enum):
    """How text is obtained from a file."""

    TEXT = "text"  # Plain text, read directly
    PDF = "pdf"  # PDF, text layer with OCR fallback
    IMAGE = "image"  # Scanned image, OCR only


class Document:
    """Wrapper for an uploaded document file."""

    SUPPORTED_TEXT_EXTENSIONS = {".txt", ".text", ".md"}
    SUPPORTED_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tiff", ".tif", ".bmp"}
    SUPPORTED_PDF_EXTENSIONS = {".pdf"}

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")

        self._page_count: int | None = None

    @classmethod
    def is_supported(cls, file_path: str | Path) -> bool:
        """Check if a file suffix is supported."""
        suffix = Path(file_path).suffix.lower()
        return suffix in (
            cls.SUPPORTED_TEXT_EXTENSIONS
            | cls.SUPPORTED_IMAGE_EXTENSIONS
            | cls.SUPPORTED_PDF_EXTENSIONS
        )

    @property
    def kind(self) -> FileKind:
        """Get the file kind from its suffix."""
        suffix = self.file_path.suffix.lower()
        if suffix in self.SUPPORTED_TEXT_EXTENSIONS:
            return FileKind.TEXT
        if suffix in self.SUPPORTED_PDF_EXTENSIONS:
            return FileKind.PDF
        if suffix in self.SUPPORTED_IMAGE_EXTENSIONS:
            return FileKind.IMAGE
        raise ValueError(f"Unsupported file type: {self.file_path.suffix or self.file_path.name}")

    @property
    def filename(self) -> str:
        return self.file_path.name

    @property
    def page_count(self) -> int:
        """Get the number of pages."""
        if self._page_count is None:
            if self.kind == FileKind.PDF:
                self._page_count = len(PdfReader(self.file_path).pages)
            else:
                self._page_count = 1
        return self._page_count

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read a plain text document."""
        if self.kind != FileKind.TEXT:
            raise ValueError("Direct reading only supported for text files")
        return self.file_path.read_text(encoding=encoding)

    def render_page(self, page_number: int, dpi: int = 300) -> Image.Image:
        """Render a page as an image.

        Args:
            page_number: 1-indexed page number
            dpi: Resolution for rendering

        Returns:
            PIL Image object
        """
        if self.kind == FileKind.IMAGE:
            if page_number != 1:
                raise ValueError("Image documents only have 1 page")
            return Image.open(self.file_path)

        if self.kind == FileKind.PDF:
            images = convert_from_path(
                self.file_path,
                first_page=page_number,
                last_page=page_number,
                dpi=dpi,
            )
            if not images:
                raise ValueError(f"Failed to render page {page_number}")
            return images[0]

        raise ValueError(f"Cannot render page for file kind: {self.kind.value}")

    def __repr__(self) -> str:
        return f"Document({self.file_path.name})"

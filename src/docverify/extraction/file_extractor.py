"""Default text extractor for uploaded files."""

from pathlib import Path

from docverify.core.config import Config
from docverify.core.document import Document, FileKind
from docverify.exceptions import ExtractionError
from docverify.extraction.ocr_extractor import TesseractExtractor
from docverify.extraction.text_extractor import PdfTextExtractor
from docverify.utils.logging import get_logger

logger = get_logger(__name__)


class FileTextExtractor:
    """Extract document text from plain text, PDF and image files.

    PDF pages are read from their text layer. Pages with too little text are
    treated as scanned and rendered for OCR. Images always go through OCR.
    """

    def __init__(
        self,
        config: Config | None = None,
        pdf_extractor: PdfTextExtractor | None = None,
        ocr_extractor: TesseractExtractor | None = None,
    ):
        self.config = config or Config.load()
        self.pdf_extractor = pdf_extractor or PdfTextExtractor()
        self.ocr_extractor = ocr_extractor or TesseractExtractor(
            languages=self.config.ocr.languages,
            config=self.config.ocr.tesseract_config,
        )

    def extract_text(self, file_ref: str | Path) -> str:
        """Extract the text of a document file.

        Args:
            file_ref: Path to the uploaded file

        Returns:
            Document text

        Raises:
            ExtractionError: If the file is missing, unsupported or unreadable
        """
        path = Path(file_ref)
        if not path.exists():
            raise ExtractionError("File not found", path)
        if not Document.is_supported(path):
            raise ExtractionError("Unsupported file type", path)

        document = Document(path)
        logger.debug(f"Extracting text from {document.filename} ({document.kind.value})")

        try:
            if document.kind == FileKind.TEXT:
                return document.read_text()
            if document.kind == FileKind.PDF:
                return self._extract_pdf(document)
            ocr_result = self.ocr_extractor.extract_from_file(path)
            logger.debug(f"OCR confidence {ocr_result.average_confidence:.2f}")
            return ocr_result.raw_text
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Could not read document ({exc})", path) from exc

    def _extract_pdf(self, document: Document) -> str:
        """Read the PDF text layer, falling back to OCR page by page."""
        min_chars = self.config.extraction.min_text_chars
        max_pages = self.config.extraction.max_pages
        page_texts = []

        for page in self.pdf_extractor.extract_pages(
            document.file_path, max_pages=max_pages
        ):
            if not page.is_empty(min_chars):
                page_texts.append(page.raw_text)
                continue

            logger.debug(f"Page {page.page_number} has no text layer, running OCR")
            image = document.render_page(page.page_number, dpi=self.config.ocr.dpi)
            ocr_result = self.ocr_extractor.extract(image, page_number=page.page_number)
            logger.debug(
                f"OCR page {page.page_number}: {len(ocr_result.blocks)} words, "
                f"confidence {ocr_result.average_confidence:.2f}"
            )
            if ocr_result.raw_text:
                page_texts.append(ocr_result.raw_text)

        if document.page_count > max_pages:
            logger.warning(
                f"{document.filename} has {document.page_count} pages, only the first {max_pages} were checked"
            )

        return "\n\n".join(page_texts)

"""Text extraction collaborators."""

from docverify.extraction.base import StaticTextSource, TextSource
from docverify.extraction.file_extractor import FileTextExtractor
from docverify.extraction.ocr_extractor import OCRResult, TesseractExtractor
from docverify.extraction.samples import SAMPLE_TEXTS, SampleTextExtractor, get_sample_text
from docverify.extraction.text_extractor import PdfTextExtractor, TextExtractionResult

__all__ = [
    "FileTextExtractor",
    "OCRResult",
    "PdfTextExtractor",
    "SAMPLE_TEXTS",
    "SampleTextExtractor",
    "StaticTextSource",
    "TesseractExtractor",
    "TextExtractionResult",
    "TextSource",
    "get_sample_text",
]

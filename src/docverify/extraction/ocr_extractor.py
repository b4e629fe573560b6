"""OCR extraction for scanned documents using Tesseract."""

from dataclasses import dataclass, field
from pathlib import Path

import pytesseract
from PIL import Image


@dataclass
class OCRBlock:
    """A single OCR word with its confidence."""

    text: str
    confidence: float
    line_key: tuple[int, int, int] = (0, 0, 0)  # (block, paragraph, line)


@dataclass
class OCRResult:
    """Result of OCR processing for a page."""

    page_number: int
    blocks: list[OCRBlock] = field(default_factory=list)
    average_confidence: float = 0.0
    raw_text: str = ""

    def __post_init__(self):
        """Calculate derived fields."""
        if self.blocks:
            self.average_confidence = sum(b.confidence for b in self.blocks) / len(self.blocks)
            self.raw_text = self._join_lines()

    def _join_lines(self) -> str:
        """Rebuild line structure from word blocks."""
        lines: list[list[str]] = []
        current_key = None
        for block in self.blocks:
            if block.line_key != current_key:
                lines.append([])
                current_key = block.line_key
            lines[-1].append(block.text)
        return "\n".join(" ".join(words) for words in lines)


class TesseractExtractor:
    """OCR extractor using Tesseract."""

    LANGUAGE_MAP = {
        "en": "eng",
        "fr": "fra",
        "pt": "por",
    }

    def __init__(
        self,
        languages: list[str] | None = None,
        config: str = "",
    ):
        """Initialize Tesseract extractor.

        Args:
            languages: List of language codes
            config: Additional Tesseract config
        """
        self.languages = languages or ["en"]
        self.config = config

    def _get_lang_string(self) -> str:
        """Get Tesseract language string."""
        langs = [self.LANGUAGE_MAP.get(lang, lang) for lang in self.languages]
        return "+".join(langs)

    def extract(self, image: Image.Image, page_number: int = 1) -> OCRResult:
        """Extract text from an image using Tesseract.

        Args:
            image: PIL Image to process
            page_number: Page number for reference

        Returns:
            OCRResult with recognized words
        """
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")

        data = pytesseract.image_to_data(
            image,
            lang=self._get_lang_string(),
            config=self.config,
            output_type=pytesseract.Output.DICT,
        )

        blocks = []
        for i in range(len(data["text"])):
            text = data["text"][i].strip()
            conf = float(data["conf"][i])

            # Skip empty boxes and layout rows (conf -1)
            if not text or conf < 0:
                continue

            blocks.append(
                OCRBlock(
                    text=text,
                    confidence=conf / 100.0,
                    line_key=(
                        int(data["block_num"][i]),
                        int(data["par_num"][i]),
                        int(data["line_num"][i]),
                    ),
                )
            )

        return OCRResult(page_number=page_number, blocks=blocks)

    def extract_from_file(self, image_path: str | Path, page_number: int = 1) -> OCRResult:
        """Extract text from an image file."""
        with Image.open(image_path) as image:
            return self.extract(image, page_number)


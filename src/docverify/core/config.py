"""Configuration management for docverify."""

import json
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load .env file from current directory or project root
def _find_dotenv() -> Path | None:
    """Find .env file in current directory or parent directories."""
    current = Path.cwd()
    for _ in range(5):  # Check up to 5 levels
        env_file = current / ".env"
        if env_file.exists():
            return env_file
        if current.parent == current:
            break
        current = current.parent
    return None


_env_file = _find_dotenv()
if _env_file:
    load_dotenv(_env_file)


class ScoringConfig(BaseModel):
    """Verdict thresholds."""

    pass_threshold: float = Field(default=70.0, ge=0, le=100)
    # Fraction of the pass threshold where the suspicious band starts
    suspicious_factor: float = Field(default=0.7, ge=0, le=1)


class OCRConfig(BaseModel):
    """OCR-related configuration."""

    languages: list[str] = Field(default_factory=lambda: ["en"])
    dpi: int = 300
    tesseract_config: str = ""


class ExtractionConfig(BaseModel):
    """Extraction-related configuration."""

    # Maximum PDF pages read per document
    max_pages: int = 10
    # PDF pages with less text than this are rendered and sent to OCR
    min_text_chars: int = 20


class Config(BaseSettings):
    """Main configuration for docverify.

    Loads settings from environment variables and .env file. Nested values
    use a double underscore, e.g. DOCVERIFY_SCORING__PASS_THRESHOLD=60.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCVERIFY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    ocr: OCRConfig = Field(default_factory=OCRConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from a JSON file or return defaults.

        Environment variables still apply to fields the file leaves unset.
        """
        if path and path.exists():
            data = json.loads(path.read_text())
            return cls(**data)
        return cls()

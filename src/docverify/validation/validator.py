"""Validation entry point for uploaded documents."""

from pathlib import Path

from docverify.core.config import Config
from docverify.extraction.base import TextSource
from docverify.extraction.file_extractor import FileTextExtractor
from docverify.models.document_type import DocumentType
from docverify.models.results import ValidationResult
from docverify.utils.logging import get_logger
from docverify.validation.profiles import CheckProfile
from docverify.validation.registry import DEFAULT_REGISTRY, ProfileRegistry
from docverify.validation.scorer import VerdictScorer

logger = get_logger(__name__)


class DocumentValidator:
    """Validate a document file against the profile of its declared type.

    A call moves through extraction, checking and scoring. Content problems
    (unreadable file, missing text, failed checks) never raise: they come
    back as a result with a low score. An unsupported document type is a
    caller error and raises before the file is touched.

    The validator keeps no state between calls, so one instance can serve
    concurrent requests as long as its text source can.
    """

    def __init__(
        self,
        extractor: TextSource | None = None,
        registry: ProfileRegistry | None = None,
        scorer: VerdictScorer | None = None,
        config: Config | None = None,
    ):
        """Initialize validator.

        Args:
            extractor: Text source for file references (default: FileTextExtractor)
            registry: Profile registry (default: built-in profiles)
            scorer: Verdict scorer (default: thresholds from config)
            config: Configuration used for defaults
        """
        self.config = config or Config.load()
        self.extractor = extractor or FileTextExtractor(self.config)
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.scorer = scorer or VerdictScorer(
            pass_threshold=self.config.scoring.pass_threshold,
            suspicious_factor=self.config.scoring.suspicious_factor,
        )

    def validate(
        self,
        document_type: DocumentType | str,
        file_ref: str | Path,
        pass_threshold: float | None = None,
    ) -> ValidationResult:
        """Validate a document file.

        Args:
            document_type: Declared type of the document
            file_ref: Reference passed to the text source, usually a path
            pass_threshold: Percentage required for a valid verdict
                (default: configured threshold, 70)

        Returns:
            ValidationResult. If text extraction fails the result is invalid
            with no checks.

        Raises:
            UnsupportedDocumentTypeError: If the type has no check profile
            ValueError: If pass_threshold is outside 0-100
        """
        profile = self.registry.get(document_type)
        scorer = self.scorer.with_threshold(pass_threshold)

        logger.debug(f"Validating {file_ref} as {profile.document_type.value}")

        try:
            text = self.extractor.extract_text(file_ref)
        except Exception as e:
            logger.warning(f"Text extraction failed for {file_ref}: {e}")
            return scorer.failed(profile.document_type, error=str(e) or type(e).__name__)

        if not isinstance(text, str):
            logger.warning(f"Text source returned {type(text).__name__} for {file_ref}")
            return scorer.failed(profile.document_type, error="Text source returned no text")

        return self._evaluate(profile, text, scorer)

    def validate_text(
        self,
        document_type: DocumentType | str,
        text: str,
        pass_threshold: float | None = None,
    ) -> ValidationResult:
        """Validate already extracted text.

        Args:
            document_type: Declared type of the document
            text: Document text
            pass_threshold: Percentage required for a valid verdict

        Returns:
            ValidationResult
        """
        profile = self.registry.get(document_type)
        scorer = self.scorer.with_threshold(pass_threshold)
        return self._evaluate(profile, text, scorer)

    def _evaluate(
        self,
        profile: CheckProfile,
        text: str,
        scorer: VerdictScorer,
    ) -> ValidationResult:
        """Run every check of the profile and score the results."""
        checks = profile.run(text)
        for check in checks:
            logger.debug(
                f"  {check.name}: {check.score}/{check.max_score} "
                f"({'pass' if check.passed else 'fail'}) - {check.details}"
            )

        result = scorer.score(checks, document_type=profile.document_type)
        logger.info(
            f"{profile.document_type.value}: {result.score}/{result.max_score} "
            f"({result.percentage:.1f}%) -> {result.overall_status.value}"
        )
        return result


def create_validator(
    extractor: TextSource | None = None,
    config: Config | None = None,
) -> DocumentValidator:
    """Factory function to create a document validator.

    Args:
        extractor: Text source for file references
        config: Configuration

    Returns:
        DocumentValidator instance
    """
    return DocumentValidator(extractor=extractor, config=config)

"""Aggregate check results into a graded verdict."""

from collections.abc import Sequence

from docverify.models.document_type import DocumentType
from docverify.models.results import CheckResult, OverallStatus, ValidationResult

DEFAULT_PASS_THRESHOLD = 70.0

# Documents scoring at least threshold * SUSPICIOUS_FACTOR but below the
# threshold are flagged for manual review instead of rejected.
SUSPICIOUS_FACTOR = 0.7

# Max score reported when no checks could run
FAILED_MAX_SCORE = 100


class VerdictScorer:
    """Turn check results into a score, percentage and overall status."""

    def __init__(
        self,
        pass_threshold: float | None = None,
        suspicious_factor: float | None = None,
    ):
        """Initialize scorer.

        Args:
            pass_threshold: Percentage (0-100) at which a document is valid
            suspicious_factor: Fraction (0-1) of the threshold where the
                suspicious band starts

        Raises:
            ValueError: If either value is out of range
        """
        if pass_threshold is None:
            pass_threshold = DEFAULT_PASS_THRESHOLD
        if suspicious_factor is None:
            suspicious_factor = SUSPICIOUS_FACTOR

        if not 0 <= pass_threshold <= 100:
            raise ValueError(f"Pass threshold must be within 0-100, got {pass_threshold}")
        if not 0 <= suspicious_factor <= 1:
            raise ValueError(f"Suspicious factor must be within 0-1, got {suspicious_factor}")

        self.pass_threshold = float(pass_threshold)
        self.suspicious_factor = float(suspicious_factor)

    @property
    def suspicious_threshold(self) -> float:
        """Lowest percentage in the suspicious band."""
        return self.pass_threshold * self.suspicious_factor

    def with_threshold(self, pass_threshold: float | None) -> "VerdictScorer":
        """Return a scorer using another pass threshold and the same band factor."""
        if pass_threshold is None:
            return self
        return VerdictScorer(pass_threshold, self.suspicious_factor)

    def classify(self, percentage: float) -> OverallStatus:
        """Classify a percentage into valid, suspicious or invalid."""
        if percentage >= self.pass_threshold:
            return OverallStatus.VALID
        if percentage >= self.suspicious_threshold:
            return OverallStatus.SUSPICIOUS
        return OverallStatus.INVALID

    def score(
        self,
        checks: Sequence[CheckResult],
        document_type: DocumentType | None = None,
    ) -> ValidationResult:
        """Aggregate check results.

        Args:
            checks: Check results in profile order
            document_type: Document type the checks belong to

        Returns:
            ValidationResult with totals and status
        """
        total = sum(c.score for c in checks)
        max_total = sum(c.max_score for c in checks)
        if max_total == 0:
            return self.failed(document_type)

        # Exact for integer totals out of 100, e.g. 57 * 100 / 100 == 57.0
        percentage = total * 100 / max_total

        return ValidationResult(
            score=total,
            max_score=max_total,
            percentage=percentage,
            is_valid=percentage >= self.pass_threshold,
            overall_status=self.classify(percentage),
            checks=tuple(checks),
            document_type=document_type,
            pass_threshold=self.pass_threshold,
        )

    def failed(
        self,
        document_type: DocumentType | None = None,
        error: str | None = None,
    ) -> ValidationResult:
        """Fail-closed result for a document whose checks never ran."""
        return ValidationResult(
            score=0,
            max_score=FAILED_MAX_SCORE,
            percentage=0.0,
            is_valid=False,
            overall_status=OverallStatus.INVALID,
            checks=(),
            document_type=document_type,
            pass_threshold=self.pass_threshold,
            error=error,
        )


def create_scorer(
    pass_threshold: float | None = None,
    suspicious_factor: float | None = None,
) -> VerdictScorer:
    """Factory function to create a verdict scorer.

    Args:
        pass_threshold: Percentage at which a document is valid
        suspicious_factor: Fraction of the threshold where review starts

    Returns:
        VerdictScorer instance
    """
    return VerdictScorer(
        pass_threshold=pass_threshold,
        suspicious_factor=suspicious_factor,
    )

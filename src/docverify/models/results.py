"""Validation result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from docverify.models.document_type import DocumentType


class OverallStatus(str, Enum):
    """Tri-state verdict for a validated document."""

    VALID = "valid"
    SUSPICIOUS = "suspicious"  # Below the pass threshold, flagged for manual review
    INVALID = "invalid"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check against document text."""

    name: str
    passed: bool
    score: int
    max_score: int
    details: str
    matched: tuple[str, ...] = ()

    def __post_init__(self):
        if self.max_score <= 0:
            raise ValueError(f"max_score must be positive, got {self.max_score}")
        if not 0 <= self.score <= self.max_score:
            raise ValueError(
                f"score {self.score} outside 0..{self.max_score} for check '{self.name}'"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "passed": self.passed,
            "score": self.score,
            "maxScore": self.max_score,
            "details": self.details,
            "matched": list(self.matched),
        }


@dataclass(frozen=True)
class ValidationResult:
    """Final verdict for one validation call.

    Instances are built once per call and never mutated. ``checks`` keeps the
    order of the check profile so results can be audited and compared.
    """

    score: int
    max_score: int
    percentage: float
    is_valid: bool
    overall_status: OverallStatus
    checks: tuple[CheckResult, ...] = field(default_factory=tuple)
    document_type: DocumentType | None = None
    pass_threshold: float | None = None
    error: str | None = None

    @property
    def failed_checks(self) -> list[CheckResult]:
        """Checks that did not clear their pass bar."""
        return [c for c in self.checks if not c.passed]

    @property
    def needs_review(self) -> bool:
        """True when the document should go to a human reviewer."""
        return self.overall_status == OverallStatus.SUSPICIOUS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "isValid": self.is_valid,
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": round(self.percentage, 2),
            "checks": [c.to_dict() for c in self.checks],
            "overallStatus": self.overall_status.value,
        }
        if self.document_type is not None:
            result["documentType"] = self.document_type.value
        if self.pass_threshold is not None:
            result["passThreshold"] = self.pass_threshold
        if self.error:
            result["error"] = self.error
        return result

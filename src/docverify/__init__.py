"""docverify: rule-based validation of gazette supporting documents."""

__version__ = "0.1.0"

from docverify.exceptions import (
    DocverifyError,
    ExtractionError,
    ProfileError,
    UnsupportedDocumentTypeError,
)
from docverify.models import CheckResult, DocumentType, OverallStatus, ValidationResult
from docverify.validation import DocumentValidator, create_validator

__all__ = [
    "__version__",
    "CheckResult",
    "DocumentType",
    "DocumentValidator",
    "DocverifyError",
    "ExtractionError",
    "OverallStatus",
    "ProfileError",
    "UnsupportedDocumentTypeError",
    "ValidationResult",
    "create_validator",
]

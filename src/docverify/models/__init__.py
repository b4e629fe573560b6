"""Data models for document types and validation verdicts."""

from docverify.models.document_type import DocumentType
from docverify.models.results import CheckResult, OverallStatus, ValidationResult

__all__ = ["CheckResult", "DocumentType", "OverallStatus", "ValidationResult"]

"""Validation and scoring modules."""

from docverify.validation.checks import Check, ScoreMode, SubSignal
from docverify.validation.matchers import AnyOf, FieldLabel, Keyword, Matcher, Pattern
from docverify.validation.profiles import PROFILE_TOTAL, CheckProfile
from docverify.validation.registry import (
    DEFAULT_REGISTRY,
    ProfileRegistry,
    get_profile,
    supported_document_types,
)
from docverify.validation.scorer import (
    DEFAULT_PASS_THRESHOLD,
    SUSPICIOUS_FACTOR,
    VerdictScorer,
    create_scorer,
)
from docverify.validation.validator import DocumentValidator, create_validator

__all__ = [
    # Matchers
    "AnyOf",
    "FieldLabel",
    "Keyword",
    "Matcher",
    "Pattern",
    # Checks and profiles
    "Check",
    "CheckProfile",
    "PROFILE_TOTAL",
    "ScoreMode",
    "SubSignal",
    # Registry
    "DEFAULT_REGISTRY",
    "ProfileRegistry",
    "get_profile",
    "supported_document_types",
    # Scorer
    "DEFAULT_PASS_THRESHOLD",
    "SUSPICIOUS_FACTOR",
    "VerdictScorer",
    "create_scorer",
    # Validator
    "DocumentValidator",
    "create_validator",
]

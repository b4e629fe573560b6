"""Supported document types."""

from enum import Enum

from docverify.exceptions import UnsupportedDocumentTypeError


class DocumentType(str, Enum):
    """Document types accepted as gazette supporting documents."""

    STATUTORY_DECLARATION = "statutory-declaration"
    GHANA_CARD = "ghana-card"
    BIRTH_CERTIFICATE = "birth-certificate"
    MARRIAGE_CERTIFICATE = "marriage-certificate"

    @classmethod
    def parse(cls, value: "DocumentType | str") -> "DocumentType":
        """Resolve a document type from an enum member or its string value.

        Args:
            value: DocumentType member or value such as "ghana-card"

        Returns:
            Matching DocumentType

        Raises:
            UnsupportedDocumentTypeError: If the value names no known type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            try:
                return cls(normalized)
            except ValueError:
                pass
        raise UnsupportedDocumentTypeError(value)

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Ghana Card"."""
        return self.value.replace("-", " ").title()

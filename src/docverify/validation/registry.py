"""Registry mapping document types to their check profiles."""

from collections.abc import Iterable

from docverify.exceptions import ProfileError, UnsupportedDocumentTypeError
from docverify.models.document_type import DocumentType
from docverify.validation.profiles import DEFAULT_PROFILES, CheckProfile


class ProfileRegistry:
    """Lookup table from DocumentType to CheckProfile.

    Adding a document type means adding a DocumentType member and
    registering its profile here. The default registry is built once at
    import time and never changes afterwards.
    """

    def __init__(self, profiles: Iterable[CheckProfile] = ()):
        self._profiles: dict[DocumentType, CheckProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: CheckProfile) -> None:
        """Register a profile for its document type.

        Raises:
            ProfileError: If the document type already has a profile
        """
        if profile.document_type in self._profiles:
            raise ProfileError(
                f"Document type {profile.document_type.value} is already registered"
            )
        self._profiles[profile.document_type] = profile

    def get(self, document_type: DocumentType | str) -> CheckProfile:
        """Get the profile for a document type.

        Raises:
            UnsupportedDocumentTypeError: If the type is unknown or has no profile
        """
        resolved = DocumentType.parse(document_type)
        try:
            return self._profiles[resolved]
        except KeyError:
            raise UnsupportedDocumentTypeError(document_type) from None

    def document_types(self) -> list[DocumentType]:
        """Registered document types, in registration order."""
        return list(self._profiles)

    def profiles(self) -> list[CheckProfile]:
        """Registered profiles, in registration order."""
        return list(self._profiles.values())

    def __contains__(self, document_type: object) -> bool:
        try:
            resolved = DocumentType.parse(document_type)  # type: ignore[arg-type]
        except UnsupportedDocumentTypeError:
            return False
        return resolved in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


DEFAULT_REGISTRY = ProfileRegistry(DEFAULT_PROFILES)


def get_profile(document_type: DocumentType | str) -> CheckProfile:
    """Get the default profile for a document type."""
    return DEFAULT_REGISTRY.get(document_type)


def supported_document_types() -> list[DocumentType]:
    """Document types supported by the default registry."""
    return DEFAULT_REGISTRY.document_types()

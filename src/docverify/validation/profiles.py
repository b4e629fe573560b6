"""Check profiles for each supported document type.

Point allocations and pass bars are fixed per check. Checks that are harder to
forge or carry legal weight (a structured ID number, a notarization clause)
are worth more than cosmetic signals such as a seal keyword. Every profile
totals ``PROFILE_TOTAL`` points so a percentage equals the raw score.
"""

from dataclasses import dataclass
from typing import Any

from docverify.exceptions import ProfileError
from docverify.models.document_type import DocumentType
from docverify.models.results import CheckResult
from docverify.validation.checks import Check, ScoreMode, SubSignal
from docverify.validation.matchers import AnyOf, FieldLabel, Keyword, Pattern, keywords

PROFILE_TOTAL = 100

# GHA- followed by exactly 9 digits, a dash, then exactly 1 digit
GHANA_CARD_PIN_REGEX = r"(?<![A-Z0-9])GHA-\d{9}-\d(?!\d)"

# 15/01/1990, 1-6-2020
SLASH_DATE_REGEX = r"(?<!\d)\d{1,2}/\d{1,2}/\d{4}(?!\d)"
DASH_DATE_REGEX = r"(?<!\d)\d{1,2}-\d{1,2}-\d{4}(?!\d)"


@dataclass(frozen=True)
class CheckProfile:
    """Ordered checks that define how one document type is scored."""

    document_type: DocumentType
    checks: tuple[Check, ...]

    def __post_init__(self):
        total = self.max_score
        if total != PROFILE_TOTAL:
            raise ProfileError(
                f"Profile for {self.document_type.value} totals {total} points, "
                f"expected {PROFILE_TOTAL}"
            )
        names = [c.name for c in self.checks]
        if len(names) != len(set(names)):
            raise ProfileError(f"Profile for {self.document_type.value} repeats a check name")

    @property
    def max_score(self) -> int:
        """Sum of check max scores."""
        return sum(c.max_score for c in self.checks)

    def run(self, text: str) -> tuple[CheckResult, ...]:
        """Run every check in profile order."""
        return tuple(check.run(text) for check in self.checks)

    def describe(self) -> dict[str, Any]:
        """Describe the profile for listings and audits."""
        return {
            "document_type": self.document_type.value,
            "max_score": self.max_score,
            "checks": [c.to_dict() for c in self.checks],
        }


_SIGNATURE = keywords("SIGNATURE", "SIGNED")
_REPUBLIC_OF_GHANA = Keyword("REPUBLIC OF GHANA")


STATUTORY_DECLARATION_PROFILE = CheckProfile(
    document_type=DocumentType.STATUTORY_DECLARATION,
    checks=(
        Check(
            name="Document Heading",
            max_score=20,
            pass_bar=15,
            signals=(
                SubSignal("STATUTORY DECLARATION", Keyword("STATUTORY DECLARATION"), 10),
                SubSignal("Republic of Ghana", _REPUBLIC_OF_GHANA, 10),
            ),
        ),
        Check(
            name="Sworn Statement",
            max_score=25,
            pass_bar=20,
            signals=(
                SubSignal("Sworn At", Keyword("SWORN AT"), 8),
                SubSignal("Sworn Before", Keyword("SWORN BEFORE"), 8),
                SubSignal("Made Oath", Keyword("MADE OATH"), 9),
            ),
        ),
        Check(
            name="Commissioner for Oaths",
            max_score=25,
            pass_bar=20,
            signals=(
                SubSignal("Commissioner for Oaths", Keyword("COMMISSIONER FOR OATHS"), 15),
                SubSignal("Signature", _SIGNATURE, 10),
            ),
        ),
        Check(
            name="Official Seal",
            max_score=15,
            pass_bar=15,
            signals=(
                SubSignal("Official seal or stamp", keywords("SEAL", "OFFICIAL SEAL", "STAMP"), 15),
            ),
        ),
        Check(
            name="Declaration Format",
            max_score=15,
            pass_bar=10,
            mode=ScoreMode.BEST,
            signals=(
                SubSignal("I solemnly declare", Keyword("I SOLEMNLY DECLARE"), 15),
                SubSignal("Declaration wording", Keyword("DECLARE"), 8),
            ),
        ),
    ),
)


GHANA_CARD_PROFILE = CheckProfile(
    document_type=DocumentType.GHANA_CARD,
    checks=(
        Check(
            name="Personal ID Number Format",
            max_score=40,
            pass_bar=40,
            signals=(
                SubSignal(
                    "Personal ID Number (GHA-XXXXXXXXX-X)",
                    Pattern(GHANA_CARD_PIN_REGEX, description="GHA-XXXXXXXXX-X"),
                    40,
                ),
            ),
        ),
        Check(
            name="ECOWAS Card Header",
            max_score=30,
            pass_bar=20,
            signals=(
                SubSignal("ECOWAS", keywords("ECOWAS", "CEDEAO"), 10),
                SubSignal("Identity Card", keywords("IDENTITY CARD", "CARTE D' IDENTITE"), 10),
                SubSignal("Republic of Ghana", _REPUBLIC_OF_GHANA, 10),
            ),
        ),
        Check(
            name="Card Information Fields",
            max_score=30,
            pass_bar=20,
            count_label="required fields",
            signals=(
                SubSignal("Surname", FieldLabel("Surname", "Nom"), 3),
                SubSignal("Firstnames", FieldLabel("Firstnames", "First names", "Prénoms"), 3),
                SubSignal("Nationality", FieldLabel("Nationality", "Nationalité"), 3),
                SubSignal("Date of Birth", FieldLabel("Date of Birth", "Date de Naissance"), 3),
                SubSignal("Sex", FieldLabel("Sex", "Sexe"), 3),
                SubSignal("Height", FieldLabel("Height", "Taille"), 3),
                SubSignal(
                    "Document Number",
                    FieldLabel("Document Number", "Numéro du document"),
                    3,
                ),
                SubSignal(
                    "Place of Issuance",
                    FieldLabel("Place of Issuance", "Lieu de délivrance"),
                    3,
                ),
                SubSignal(
                    "Date of Issuance",
                    FieldLabel("Date of Issuance", "Date d'émission"),
                    3,
                ),
                SubSignal(
                    "Date of Expiry",
                    FieldLabel("Date of Expiry", "Date d'expiration"),
                    3,
                ),
            ),
        ),
    ),
)


BIRTH_CERTIFICATE_PROFILE = CheckProfile(
    document_type=DocumentType.BIRTH_CERTIFICATE,
    checks=(
        Check(
            name="Birth Certificate Heading",
            max_score=35,
            pass_bar=25,
            signals=(
                SubSignal("Birth", Keyword("BIRTH"), 12),
                SubSignal("Certificate", Keyword("CERTIFICATE"), 12),
                SubSignal("Ghana", Keyword("GHANA"), 11),
            ),
        ),
        Check(
            name="Registrar Signature",
            max_score=35,
            pass_bar=25,
            signals=(
                SubSignal("Registrar", Keyword("REGISTRAR"), 18),
                SubSignal("Signature", _SIGNATURE, 17),
            ),
        ),
        Check(
            name="Date of Birth Information",
            max_score=30,
            pass_bar=20,
            signals=(
                SubSignal("Date of birth label", keywords("DATE OF BIRTH", "BORN"), 15),
                SubSignal(
                    "Date",
                    AnyOf(
                        Pattern(SLASH_DATE_REGEX, description="DD/MM/YYYY"),
                        Pattern(DASH_DATE_REGEX, description="DD-MM-YYYY"),
                    ),
                    15,
                ),
            ),
        ),
    ),
)


MARRIAGE_CERTIFICATE_PROFILE = CheckProfile(
    document_type=DocumentType.MARRIAGE_CERTIFICATE,
    checks=(
        Check(
            name="Marriage Certificate Heading",
            max_score=30,
            pass_bar=20,
            signals=(
                SubSignal("Marriage", Keyword("MARRIAGE"), 15),
                SubSignal("Certificate", Keyword("CERTIFICATE"), 15),
            ),
        ),
        Check(
            name="Marriage Details",
            max_score=40,
            pass_bar=30,
            signals=(
                SubSignal("Bride", Keyword("BRIDE"), 13),
                SubSignal("Groom", Keyword("GROOM"), 13),
                SubSignal("Date", Pattern(SLASH_DATE_REGEX, description="DD/MM/YYYY"), 14),
            ),
        ),
        Check(
            name="Official Signature",
            max_score=30,
            pass_bar=20,
            signals=(
                SubSignal("Official", keywords("OFFICIAL", "REGISTRAR"), 15),
                SubSignal("Signature", _SIGNATURE, 15),
            ),
        ),
    ),
)


DEFAULT_PROFILES = (
    STATUTORY_DECLARATION_PROFILE,
    GHANA_CARD_PROFILE,
    BIRTH_CERTIFICATE_PROFILE,
    MARRIAGE_CERTIFICATE_PROFILE,
)

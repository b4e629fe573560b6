"""Demonstration document texts.

Each sample is a well-formed document of its type and scores as valid under
the default profiles. ``SampleTextExtractor`` picks a sample from the file
name, which lets the portal and the CLI demo validation without real
uploads or OCR.
"""

from pathlib import Path

from docverify.models.document_type import DocumentType

STATUTORY_DECLARATION_SAMPLE = """\
STATUTORY DECLARATION
Republic of Ghana

I, John Doe, of Accra, do solemnly declare that:

I am the person named in the above application and I wish to change my name
from John Doe to John Smith.

I solemnly declare that the above statement is true to the best of my
knowledge and belief, and I made oath accordingly.

Sworn at Accra this 15th day of January 2024
Sworn before me: Commissioner for Oaths

Signature: ________________
Official Seal: [SEAL]
"""

GHANA_CARD_SAMPLE = """\
ECOWAS IDENTITY CARD
CARTE D' IDENTITE CEDEAO / BILHETE DE IDENTIDADE CEDEAO
REPUBLIC OF GHANA

Surname/Nom: OPPONG
Firstnames/Prénoms: MORRISON
Previous Name(s)/Noms Précédents:
Nationality/Nationalité: GHANAIAN
Date of Birth/Date de Naissance: 12/11/1996
Personal ID Number: GHA-724693385-3
Sex/Sexe: M
Height/Taille(m): 1.7
Document Number/Numéro du document: AQ8497325
Place of Issuance/Lieu de délivrance: ACCRA
Date of Issuance/Date d'émission: 03/08/2020
Date of Expiry/Date d'expiration: 02/08/2030

Card Number: 692123
"""

BIRTH_CERTIFICATE_SAMPLE = """\
BIRTH CERTIFICATE
Republic of Ghana

This is to certify that John Doe was born on 15th January 1990
at Accra, Greater Accra Region, Ghana

Date of Birth: 15/01/1990
Place of Birth: Accra

Registrar's Signature: ________________
Date: 20/01/1990
"""

MARRIAGE_CERTIFICATE_SAMPLE = """\
MARRIAGE CERTIFICATE
Republic of Ghana

This is to certify that John Doe (Groom) and Jane Smith (Bride)
were married on 15th June 2020 at Accra, Ghana

Marriage Date: 15/06/2020
Place: Accra

Official Signature: ________________
Registrar: ________________
"""

SAMPLE_TEXTS: dict[DocumentType, str] = {
    DocumentType.STATUTORY_DECLARATION: STATUTORY_DECLARATION_SAMPLE,
    DocumentType.GHANA_CARD: GHANA_CARD_SAMPLE,
    DocumentType.BIRTH_CERTIFICATE: BIRTH_CERTIFICATE_SAMPLE,
    DocumentType.MARRIAGE_CERTIFICATE: MARRIAGE_CERTIFICATE_SAMPLE,
}

# File name keywords that select a sample; every keyword must appear
_FILENAME_KEYWORDS: list[tuple[tuple[str, ...], DocumentType]] = [
    (("statutory",), DocumentType.STATUTORY_DECLARATION),
    (("declaration",), DocumentType.STATUTORY_DECLARATION),
    (("ghana", "card"), DocumentType.GHANA_CARD),
    (("birth", "certificate"), DocumentType.BIRTH_CERTIFICATE),
    (("marriage", "certificate"), DocumentType.MARRIAGE_CERTIFICATE),
]


def get_sample_text(document_type: DocumentType | str) -> str:
    """Get the demonstration text for a document type."""
    return SAMPLE_TEXTS[DocumentType.parse(document_type)]


def guess_sample_type(file_ref: str | Path) -> DocumentType:
    """Pick a sample type from a file name, defaulting to a statutory declaration."""
    name = Path(file_ref).name.lower()
    for words, document_type in _FILENAME_KEYWORDS:
        if all(word in name for word in words):
            return document_type
    return DocumentType.STATUTORY_DECLARATION


class SampleTextExtractor:
    """Text source that returns a demonstration sample chosen by file name.

    The file does not need to exist.
    """

    def extract_text(self, file_ref: str | Path) -> str:
        return SAMPLE_TEXTS[guess_sample_type(file_ref)]

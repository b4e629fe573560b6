"""Shared document text fixtures."""

import pytest

GHANA_CARD_FULL = """\
ECOWAS IDENTITY CARD
REPUBLIC OF GHANA
Surname: MENSAH
Firstnames: AMA
Nationality: GHANAIAN
Date of Birth: 01/02/1990
Sex: F
Height: 1.6
Document Number: AB1234567
Place of Issuance: KUMASI
Date of Issuance: 01/01/2021
Date of Expiry: 01/01/2031
Personal ID Number: GHA-724693385-3
"""

# Same card with an 8-digit personal ID number
GHANA_CARD_MALFORMED_ID = GHANA_CARD_FULL.replace("GHA-724693385-3", "GHA-72469338-3")

STATUTORY_HEADING_AND_SWORN = """\
STATUTORY DECLARATION
REPUBLIC OF GHANA

Sworn at Accra this 15th day of January 2024.
Sworn before me, having made oath.
"""


@pytest.fixture
def ghana_card_text() -> str:
    return GHANA_CARD_FULL


@pytest.fixture
def malformed_ghana_card_text() -> str:
    return GHANA_CARD_MALFORMED_ID


@pytest.fixture
def partial_declaration_text() -> str:
    return STATUTORY_HEADING_AND_SWORN

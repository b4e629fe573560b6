"""Tests for weighted checks and the built-in check profiles."""

import pytest

from docverify.exceptions import ProfileError
from docverify.models.document_type import DocumentType
from docverify.validation.checks import Check, ScoreMode, SubSignal
from docverify.validation.matchers import Keyword
from docverify.validation.profiles import (
    BIRTH_CERTIFICATE_PROFILE,
    GHANA_CARD_PROFILE,
    MARRIAGE_CERTIFICATE_PROFILE,
    STATUTORY_DECLARATION_PROFILE,
)
from docverify.extraction.samples import SAMPLE_TEXTS


def _check(profile, name: str) -> Check:
    for check in profile.checks:
        if check.name == name:
            return check
    raise KeyError(name)


class TestCheck:
    def _two_signal_check(self, **kwargs) -> Check:
        return Check(
            name="Test",
            max_score=20,
            pass_bar=15,
            signals=(
                SubSignal("Alpha", Keyword("ALPHA"), 10),
                SubSignal("Beta", Keyword("BETA"), 10),
            ),
            **kwargs,
        )

    def test_sum_of_matched_signals(self):
        check = self._two_signal_check()
        result = check.run("alpha beta")

        assert result.score == 20
        assert result.passed
        assert result.matched == ("Alpha", "Beta")
        assert result.details == "Found: Alpha, Beta"

    def test_partial_score_below_bar(self):
        result = self._two_signal_check().run("alpha only")

        assert result.score == 10
        assert not result.passed
        assert result.details == "Found: Alpha; missing: Beta"

    def test_no_signals(self):
        result = self._two_signal_check().run("")

        assert result.score == 0
        assert not result.passed
        assert result.details == "Not found: Alpha, Beta"

    def test_repeated_phrase_counts_once(self):
        result = self._two_signal_check().run("alpha alpha ALPHA alpha")
        assert result.score == 10

    def test_best_mode(self):
        check = Check(
            name="Tiered",
            max_score=15,
            pass_bar=10,
            mode=ScoreMode.BEST,
            signals=(
                SubSignal("Strong", Keyword("STRONG SIGNAL"), 15),
                SubSignal("Weak", Keyword("SIGNAL"), 8),
            ),
        )
        assert check.run("strong signal").score == 15
        assert check.run("signal").score == 8
        assert "scored on Strong" in check.run("strong signal").details

    def test_score_capped_at_max(self):
        check = Check(
            name="Capped",
            max_score=5,
            pass_bar=5,
            signals=(
                SubSignal("A", Keyword("A"), 3),
                SubSignal("B", Keyword("B"), 3),
            ),
        )
        assert check.run("a b").score == 5

    def test_pass_bar_above_max(self):
        with pytest.raises(ProfileError):
            Check(name="Bad", max_score=10, pass_bar=11, signals=(SubSignal("A", Keyword("A"), 10),))

    def test_zero_pass_bar(self):
        with pytest.raises(ProfileError):
            Check(name="Bad", max_score=10, pass_bar=0, signals=(SubSignal("A", Keyword("A"), 10),))

    def test_unreachable_pass_bar(self):
        with pytest.raises(ProfileError):
            Check(name="Bad", max_score=10, pass_bar=10, signals=(SubSignal("A", Keyword("A"), 5),))

    def test_no_signals_rejected(self):
        with pytest.raises(ProfileError):
            Check(name="Bad", max_score=10, pass_bar=5, signals=())

    def test_to_dict(self):
        d = self._two_signal_check().to_dict()

        assert d["name"] == "Test"
        assert d["max_score"] == 20
        assert d["pass_bar"] == 15
        assert d["mode"] == "sum"
        assert d["signals"][0] == {"name": "Alpha", "points": 10, "matcher": '"ALPHA"'}


class TestStatutoryDeclarationChecks:
    def test_heading_both(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Document Heading").run(
            "STATUTORY DECLARATION\nRepublic of Ghana"
        )
        assert result.score == 20
        assert result.passed

    def test_heading_one_fails(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Document Heading").run(
            "Statutory Declaration"
        )
        assert result.score == 10
        assert not result.passed

    def test_sworn_two_of_three(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Sworn Statement").run(
            "Sworn at Accra. Sworn before me."
        )
        assert result.score == 16
        assert not result.passed

    def test_sworn_two_including_oath(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Sworn Statement").run(
            "Sworn at Accra. He made oath."
        )
        assert result.score == 17
        assert not result.passed

    def test_commissioner_without_signature(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Commissioner for Oaths").run(
            "Before me: Commissioner for Oaths"
        )
        assert result.score == 15
        assert not result.passed

    @pytest.mark.parametrize("text", ["[SEAL]", "Official Seal", "Stamp here"])
    def test_seal_variants(self, text):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Official Seal").run(text)
        assert result.score == 15
        assert result.passed

    def test_inflected_wording_scores(self):
        results = {
            r.name: r.score
            for r in STATUTORY_DECLARATION_PROFILE.run(
                "Declared before me. Sealed and stamped. Signatures of witnesses."
            )
        }

        assert results["Official Seal"] == 15
        assert results["Declaration Format"] == 8
        assert results["Commissioner for Oaths"] == 10

    def test_solemn_declaration(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Declaration Format").run(
            "I solemnly declare that the above is true"
        )
        assert result.score == 15
        assert result.passed

    def test_plain_declaration_partial(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Declaration Format").run(
            "I declare that the above is true"
        )
        assert result.score == 8
        assert not result.passed

    def test_heading_word_is_not_declaration_wording(self):
        result = _check(STATUTORY_DECLARATION_PROFILE, "Declaration Format").run(
            "STATUTORY DECLARATION"
        )
        assert result.score == 0


class TestGhanaCardChecks:
    def test_valid_pin(self, ghana_card_text):
        result = _check(GHANA_CARD_PROFILE, "Personal ID Number Format").run(ghana_card_text)
        assert result.score == 40
        assert result.passed

    def test_malformed_pin_all_or_nothing(self, malformed_ghana_card_text):
        result = _check(GHANA_CARD_PROFILE, "Personal ID Number Format").run(
            malformed_ghana_card_text
        )
        assert result.score == 0
        assert not result.passed

    def test_header_french(self):
        result = _check(GHANA_CARD_PROFILE, "ECOWAS Card Header").run("CARTE D' IDENTITE CEDEAO")
        assert result.score == 20
        assert result.passed
        assert result.matched == ("ECOWAS", "Identity Card")

    def test_all_fields(self, ghana_card_text):
        result = _check(GHANA_CARD_PROFILE, "Card Information Fields").run(ghana_card_text)
        assert result.score == 30
        assert result.details.startswith("Found 10/10 required fields: Surname, Firstnames")

    def test_bilingual_sample_fields(self):
        result = _check(GHANA_CARD_PROFILE, "Card Information Fields").run(
            SAMPLE_TEXTS[DocumentType.GHANA_CARD]
        )
        assert result.score == 30

    def test_some_fields(self):
        text = "Surname: A\nNationalité: GHANAIAN\nSexe: M\nTaille: 1.7"
        result = _check(GHANA_CARD_PROFILE, "Card Information Fields").run(text)

        assert result.score == 12
        assert not result.passed
        assert result.details == "Found 4/10 required fields: Surname, Nationality, Sex, Height"

    def test_seven_fields_pass(self):
        text = (
            "Surname Firstnames Nationality Date of Birth Sex Height Document Number"
        )
        result = _check(GHANA_CARD_PROFILE, "Card Information Fields").run(text)
        assert result.score == 21
        assert result.passed

    def test_no_fields(self):
        result = _check(GHANA_CARD_PROFILE, "Card Information Fields").run("nothing here")
        assert result.score == 0
        assert result.details == "Found 0/10 required fields"


class TestBirthCertificateChecks:
    def test_heading(self):
        result = _check(BIRTH_CERTIFICATE_PROFILE, "Birth Certificate Heading").run(
            "BIRTH CERTIFICATE"
        )
        assert result.score == 24
        assert not result.passed

    def test_registrar_only(self):
        result = _check(BIRTH_CERTIFICATE_PROFILE, "Registrar Signature").run("Registrar")
        assert result.score == 18
        assert not result.passed

    @pytest.mark.parametrize("date", ["15/01/1990", "15-01-1990", "1/2/2001"])
    def test_date_formats(self, date):
        result = _check(BIRTH_CERTIFICATE_PROFILE, "Date of Birth Information").run(
            f"Date of Birth: {date}"
        )
        assert result.score == 30

    def test_born_without_date(self):
        result = _check(BIRTH_CERTIFICATE_PROFILE, "Date of Birth Information").run(
            "born on the fifteenth of January"
        )
        assert result.score == 15
        assert not result.passed


class TestMarriageCertificateChecks:
    def test_details(self):
        result = _check(MARRIAGE_CERTIFICATE_PROFILE, "Marriage Details").run(
            "Groom: John\nBride: Jane\nDate: 15/06/2020"
        )
        assert result.score == 40
        assert result.passed

    def test_dash_date_not_accepted(self):
        result = _check(MARRIAGE_CERTIFICATE_PROFILE, "Marriage Details").run(
            "Groom: John\nBride: Jane\nDate: 15-06-2020"
        )
        assert result.score == 26
        assert not result.passed

    def test_official_signature(self):
        result = _check(MARRIAGE_CERTIFICATE_PROFILE, "Official Signature").run(
            "Registrar: ____ Signed"
        )
        assert result.score == 30

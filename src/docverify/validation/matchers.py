"""Matchers that detect a single sub-signal in document text.

Every matcher answers one question, "is this signal present?", and is
independent of how often the signal occurs. Matching is case-insensitive.
"""

import re
import unicodedata
from abc import ABC, abstractmethod


def fold_accents(text: str) -> str:
    """Strip diacritics so that "Prénoms" and "Prenoms" compare equal."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def phrase_to_regex(phrase: str, whole_word: bool = True) -> str:
    """Build a regex for a phrase that starts on a word boundary.

    Words may be separated by any run of whitespace. An apostrophe (French
    elision, "D'") may be followed by optional whitespace, and straight and
    curly apostrophes are interchangeable.

    Args:
        phrase: Phrase such as "COMMISSIONER FOR OATHS"
        whole_word: Require a word boundary after the last word too. When
            False the last word may be inflected ("SEAL" matches "Sealed").

    Returns:
        Regex source string
    """
    words = phrase.split()
    if not words:
        raise ValueError("Phrase must contain at least one word")

    parts = []
    for i, word in enumerate(words):
        escaped = re.escape(word).replace("'", r"['’]\s*")
        if i > 0 and not words[i - 1].endswith("'"):
            parts.append(r"\s+")
        parts.append(escaped)

    prefix = r"\b" if words[0][0].isalnum() else ""
    suffix = r"\b" if whole_word and words[-1][-1].isalnum() else ""
    return prefix + "".join(parts) + suffix


class Matcher(ABC):
    """A presence test for one sub-signal."""

    @abstractmethod
    def matches(self, text: str) -> bool:
        """Return True if the signal is present in text."""

    @abstractmethod
    def describe(self) -> str:
        """Short description of what the matcher looks for."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()})"


class Keyword(Matcher):
    """Keyword or phrase starting on a word boundary.

    The last word may carry a suffix, so "DECLARE" matches "Declared" but not
    "DECLARATION", and "SIGNED" does not match "undersigned".
    """

    def __init__(self, phrase: str):
        self.phrase = phrase
        self._pattern = re.compile(phrase_to_regex(phrase, whole_word=False), re.IGNORECASE)

    def matches(self, text: str) -> bool:
        return self._pattern.search(text) is not None

    def describe(self) -> str:
        return f'"{self.phrase}"'


class Pattern(Matcher):
    """Regular expression, searched anywhere in the text."""

    def __init__(self, regex: str, flags: int = re.IGNORECASE, description: str | None = None):
        self.regex = regex
        self.description = description
        self._pattern = re.compile(regex, flags)

    def matches(self, text: str) -> bool:
        return self._pattern.search(text) is not None

    def describe(self) -> str:
        return self.description or f"/{self.regex}/"


class FieldLabel(Matcher):
    """Form field label with alternative spellings.

    Bilingual documents print the same label in several languages
    ("Surname/Nom"). Any of the spellings counts, and accents are ignored on
    both sides so OCR output without diacritics still matches.
    """

    def __init__(self, label: str, *synonyms: str):
        self.label = label
        self.synonyms = synonyms
        alternatives = "|".join(
            f"(?:{phrase_to_regex(fold_accents(p))})" for p in (label, *synonyms)
        )
        self._pattern = re.compile(alternatives, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        return self._pattern.search(fold_accents(text)) is not None

    def describe(self) -> str:
        return "/".join((self.label, *self.synonyms))


class AnyOf(Matcher):
    """Present when any of the wrapped matchers is present."""

    def __init__(self, *matchers: Matcher):
        if not matchers:
            raise ValueError("AnyOf requires at least one matcher")
        self.matchers = matchers

    def matches(self, text: str) -> bool:
        return any(m.matches(text) for m in self.matchers)

    def describe(self) -> str:
        return " or ".join(m.describe() for m in self.matchers)


def keywords(*phrases: str) -> Matcher:
    """Matcher for any of several keywords."""
    if len(phrases) == 1:
        return Keyword(phrases[0])
    return AnyOf(*(Keyword(p) for p in phrases))

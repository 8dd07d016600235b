from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from wordpoints.errors import InvalidWordError

# lower-case only; callers must lower() a character before the membership test
VOWELS: FrozenSet[str] = frozenset("aeiou")
VOWEL_POINTS = 1
CONSONANT_POINTS = 2


class LetterKind(str, Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"

    @property
    def points(self) -> int:
        return VOWEL_POINTS if self is LetterKind.VOWEL else CONSONANT_POINTS


def classify(char: str) -> LetterKind:
    """Return the kind of a single character.

    Anything outside a/e/i/o/u (either case) is a consonant, digits and
    punctuation included.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidWordError(char, expected="single-character str")
    return LetterKind.VOWEL if char.lower() in VOWELS else LetterKind.CONSONANT

"""Score words by counting vowels (1 point) and consonants (2 points)."""

from .errors import InvalidWordError
from .letters import VOWELS, VOWEL_POINTS, CONSONANT_POINTS, LetterKind, classify
from .scorer import ScoreResult, WordScorer, points_for_word

__all__ = [
    "InvalidWordError",
    "VOWELS",
    "VOWEL_POINTS",
    "CONSONANT_POINTS",
    "LetterKind",
    "classify",
    "ScoreResult",
    "WordScorer",
    "points_for_word",
]

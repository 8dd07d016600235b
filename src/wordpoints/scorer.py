from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from wordpoints.errors import InvalidWordError
from wordpoints.letters import LetterKind, classify
from wordpoints.schemas.report import ScoreReport
from wordpoints.utils.logger_util import get_logger

logger = get_logger(__name__)


@dataclass
class ScoreResult:
    word: str
    vowels: int
    consonants: int
    points: int
    letters: List[Tuple[str, LetterKind]] = field(default_factory=list)


def _require_word(word) -> str:
    if not isinstance(word, str):
        raise InvalidWordError(word)
    return word


def points_for_word(word: str) -> int:
    """Total points for a word: 1 per vowel, 2 per any other character."""
    word = _require_word(word)
    points = sum(classify(ch).points for ch in word)
    logger.debug("points_for_word: len=%s points=%s", len(word), points)
    return points


class WordScorer:
    """Scores words by counting vowels and consonants.

    Stateless; one instance can be shared between threads. `score` gives the
    plain total, `breakdown` keeps the per-letter classification and `report`
    wraps the breakdown in the validated ScoreReport contract.
    """

    def score(self, word: str) -> int:
        return points_for_word(word)

    def breakdown(self, word: str) -> ScoreResult:
        word = _require_word(word)
        letters = [(ch, classify(ch)) for ch in word]
        vowels = sum(1 for _, kind in letters if kind is LetterKind.VOWEL)
        consonants = len(letters) - vowels
        points = sum(kind.points for _, kind in letters)
        logger.debug("breakdown: len=%s vowels=%s consonants=%s points=%s", len(word), vowels, consonants, points)
        return ScoreResult(word=word, vowels=vowels, consonants=consonants, points=points, letters=letters)

    def report(self, word: str) -> ScoreReport:
        res = self.breakdown(word)
        return ScoreReport(word=res.word, vowels=res.vowels, consonants=res.consonants, points=res.points)

    def score_many(self, words: Iterable[str]) -> Dict[str, int]:
        """Score each word; repeated words collapse to a single key."""
        if isinstance(words, str):
            # a bare string would otherwise be scored letter by letter
            raise InvalidWordError(words, expected="iterable of str")
        try:
            it = iter(words)
        except TypeError as exc:
            raise InvalidWordError(words, expected="iterable of str") from exc
        return {w: self.score(w) for w in it}

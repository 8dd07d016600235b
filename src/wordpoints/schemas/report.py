from __future__ import annotations

from typing import Literal
from pydantic import BaseModel, Field, model_validator

from wordpoints.letters import VOWELS, VOWEL_POINTS, CONSONANT_POINTS


class ScoreReport(BaseModel):
    """Contract for one scored word.

    The vowel count is recomputed from the word, the counts must add up to
    the word length and the points must match the per-letter values, so a
    report can't drift from the word it describes.
    """

    version: Literal["v1"] = "v1"
    word: str
    vowels: int = Field(..., ge=0)
    consonants: int = Field(..., ge=0)
    points: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _counts_consistent(self):
        if self.vowels + self.consonants != len(self.word):
            raise ValueError("vowels + consonants must equal the word length")
        actual_vowels = sum(1 for ch in self.word if ch.lower() in VOWELS)
        if self.vowels != actual_vowels:
            raise ValueError(f"vowels {self.vowels} do not match the word (found {actual_vowels})")
        expected = self.vowels * VOWEL_POINTS + self.consonants * CONSONANT_POINTS
        if self.points != expected:
            raise ValueError(f"points {self.points} do not match letter counts (expected {expected})")
        return self

"""Contract models for scored words.

These models are strict: counts and points are cross-checked on construction.
"""

from .report import ScoreReport

__all__ = ["ScoreReport"]

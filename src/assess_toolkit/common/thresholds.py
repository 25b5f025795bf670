"""Centralized score threshold configuration.

These values classify a part's raw score into the aggregate flags stored in
the session state and drive sequential unlocking at render time. They are
fixed for every question; question writers cannot override them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreThresholds:
    """Thresholds for classifying raw part scores."""

    correct: float = 0.98  # Raw score strictly above this counts as correct
    nonzero: float = 0.0  # Raw score strictly above this counts as non-zero

    def is_correct(self, raw: float) -> bool:
        """Return True when ``raw`` is classified as correct."""
        return raw > self.correct

    def is_nonzero(self, raw: float) -> bool:
        """Return True when ``raw`` earned any credit."""
        return raw > self.nonzero


# Global instance for easy import
SCORE_THRESHOLDS = ScoreThresholds()

CORRECT_THRESHOLD = SCORE_THRESHOLDS.correct
NONZERO_THRESHOLD = SCORE_THRESHOLDS.nonzero

# Flag value stored for a part that has not been scored yet
UNSCORED_FLAG = -1

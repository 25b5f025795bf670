"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    ScoreThresholds,
    SCORE_THRESHOLDS,
    CORRECT_THRESHOLD,
    NONZERO_THRESHOLD,
    UNSCORED_FLAG,
)

__all__ = [
    "ScoreThresholds",
    "SCORE_THRESHOLDS",
    "CORRECT_THRESHOLD",
    "NONZERO_THRESHOLD",
    "UNSCORED_FLAG",
]

"""
Module: scoring.merge

Purpose:
    Merge rules applying one Score Engine outcome to the session state.

Key Functions:
    - record_answer(): Attempt count and answer history for a selected part
    - record_raw_score(): Raw score for a selected or previously scored part
    - update_score_flags(): Recompute non-zero / correct flags
    - all_parts_scored(): Completeness against the answer weights

Merge rules:
    Answer history and attempt counts change only for parts selected for
    scoring. Raw scores change for selected parts AND for parts that
    already hold a raw score >= 0, so a subset re-score keeps earlier
    scores fresh without touching attempt bookkeeping of other parts.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from assess_toolkit.common.thresholds import SCORE_THRESHOLDS, UNSCORED_FLAG
from assess_toolkit.core.models.state import FlagValue, PartKey, SessionState
from assess_toolkit.engines.models import ScoreOutcome


def _part_map(section: Dict[int, Any], qn: int) -> Dict[PartKey, Any]:
    """Per-part mapping for ``qn``, replacing a missing or null entry."""
    parts = section.get(qn)
    if not isinstance(parts, dict):
        parts = section[qn] = {}
    return parts

def record_answer(
    state: SessionState,
    qn: int,
    part: PartKey,
    as_given: Any,
    as_number: Any,
    *,
    multipart: bool,
) -> None:
    """
    Count an attempt for ``part`` and store its last answer.

    Multi-part questions store answers in a part-keyed mapping under
    ``qn + 1``; single-part questions store the answer directly.
    """
    attempts = _part_map(state.partattemptn, qn)
    attempts[part] = attempts.get(part, 0) + 1

    key = qn + 1
    if multipart:
        if not isinstance(state.stuanswers.get(key), dict):
            state.stuanswers[key] = {}
        if not isinstance(state.stuanswersval.get(key), dict):
            state.stuanswersval[key] = {}
        state.stuanswers[key][part] = as_given
        state.stuanswersval[key][part] = as_number
    else:
        state.stuanswers[key] = as_given
        state.stuanswersval[key] = as_number


def record_raw_score(
    state: SessionState,
    qn: int,
    part: PartKey,
    raw: float,
    *,
    selected: bool,
) -> bool:
    """
    Store the raw score for ``part`` when selected or already scored.

    Returns:
        True when the stored raw score was written
    """
    existing = state.raw_scores_for(qn).get(part)
    if not (selected or (existing is not None and existing >= 0)):
        return False
    _part_map(state.rawscores, qn)[part] = raw
    return True


def update_score_flags(
    state: SessionState,
    qn: int,
    parts: Sequence[PartKey],
    total_score: float,
) -> None:
    """
    Recompute the aggregate flags stored under ``qn + 1``.

    Multi-part: per part, -1 while no raw score is recorded, else the
    threshold tests on the recorded raw score. Single-part: scalar flags
    from the total credit score.
    """
    key = qn + 1
    if len(parts) > 1:
        raw_scores = state.raw_scores_for(qn)
        nonzero: Dict[PartKey, FlagValue] = {}
        correct: Dict[PartKey, FlagValue] = {}
        for part in parts:
            raw = raw_scores.get(part)
            if raw is None:
                nonzero[part] = UNSCORED_FLAG
                correct[part] = UNSCORED_FLAG
            else:
                nonzero[part] = SCORE_THRESHOLDS.is_nonzero(raw)
                correct[part] = SCORE_THRESHOLDS.is_correct(raw)
        state.scorenonzero[key] = nonzero
        state.scoreiscorrect[key] = correct
    else:
        state.scorenonzero[key] = SCORE_THRESHOLDS.is_nonzero(total_score)
        state.scoreiscorrect[key] = SCORE_THRESHOLDS.is_correct(total_score)


def all_parts_scored(state: SessionState, qn: int, outcome: ScoreOutcome) -> bool:
    """True when every weighted part of ``qn`` has a recorded attempt."""
    return len(state.part_attempts(qn)) == len(outcome.answer_weights)

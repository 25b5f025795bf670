"""
Module: scoring.pipeline

Purpose:
    Apply a scored answer submission to the session state.
    State → Score request → Engine → Merge per part → Flags

Key Functions:
    - score_question(): Main entry point for scoring a submission

Dependencies:
    - engines: Score Engine contract and request builder
    - scoring.merge: Merge rules

Used By:
    - standalone.StandaloneAssessment.score_question

Concurrency:
    Mutates ``state`` in place. Callers must not score the same record
    from two places at once.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from assess_toolkit.core.models.options import ALL_PARTS, PartsToScore, selects_part
from assess_toolkit.core.models.results import ScoreResult
from assess_toolkit.core.models.state import QuestionSetId, SessionState
from assess_toolkit.engines.base import ScoreEngine
from assess_toolkit.engines.models import RequestContext
from assess_toolkit.engines.requests import build_score_request

from .merge import all_parts_scored, record_answer, record_raw_score, update_score_flags

logger = logging.getLogger(__name__)


def score_question(
    state: SessionState,
    qn: int,
    given_answer: Any,
    parts_to_score: PartsToScore = ALL_PARTS,
    *,
    question_data: Mapping[QuestionSetId, Mapping[str, Any]],
    engine: ScoreEngine,
    context: Optional[RequestContext] = None,
) -> ScoreResult:
    """
    Score a submission to question ``qn`` and merge it into ``state``.

    Pipeline:
    1. Check the question has a seed, a set reference and loaded data
    2. Build the score request and invoke the engine
    3. For each part the engine graded: record answer/attempt when
       selected, record raw score when selected or already scored.
       Parts without a raw score are not recorded at all
    4. Derive completeness and recompute the aggregate flags

    Args:
        state: Session state, mutated in place
        qn: 0-based question index
        given_answer: Raw submitted answer
        parts_to_score: ALL_PARTS, or part -> bool selecting which parts
            to record (scores are still computed for every part)
        question_data: Loaded question set definitions by identifier
        engine: Score Engine collaborator
        context: Caller context (a fresh one when None)

    Returns:
        ScoreResult with engine scores, raw scores, errors and the
        completeness flag

    Example:
        >>> result = score_question(state, 0, "5", question_data=data, engine=engine)
        >>> state.rawscores[0][0], state.scoreiscorrect[1]
        (1.0, True)
    """
    context = context or RequestContext()

    if not state.has_question(qn):
        message = f"Question {qn} has no seed or question set in the session state"
        logger.warning(f"Cannot score question {qn}: {message}")
        return ScoreResult(errors=(message,))

    qsid = state.question_set_for(qn)
    data = question_data.get(qsid)
    if data is None:
        message = f"Question set {qsid} for question {qn} is not loaded"
        logger.warning(f"Cannot score question {qn}: {message}")
        return ScoreResult(errors=(message,))

    request = build_score_request(state, qn, given_answer, data, context)
    logger.debug(f"Scoring question {qn} (set {qsid}, attempt {request.attempt_number})")

    outcome = engine.score(request)
    if outcome.errors:
        logger.warning(f"Score engine reported {len(outcome.errors)} error(s) for question {qn}")

    parts = list(outcome.last_answer_as_given)
    for part in parts:
        raw = outcome.raw_scores.get(part)
        if raw is None:
            # Ungraded part: attempts, answer and raw score all stay as they were
            logger.warning(f"Score engine returned no raw score for question {qn} part {part}")
            continue
        selected = selects_part(parts_to_score, part)
        if selected:
            record_answer(
                state,
                qn,
                part,
                outcome.last_answer_as_given[part],
                outcome.last_answer_as_number.get(part),
                multipart=outcome.is_multipart,
            )
        record_raw_score(state, qn, part, raw, selected=selected)

    result = ScoreResult(
        scores=dict(outcome.scores),
        raw=dict(outcome.raw_scores),
        errors=tuple(outcome.errors),
        all_parts_scored=all_parts_scored(state, qn, outcome),
    )
    update_score_flags(state, qn, parts, result.total_score)

    logger.debug(
        f"Question {qn} scored {result.total_score:.3f} "
        f"({len(parts)} part(s), all parts scored: {result.all_parts_scored})"
    )
    return result

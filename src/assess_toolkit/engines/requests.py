"""
Module: engines.requests

Purpose:
    Shape collaborator requests from the session state. Histories are
    deep-copied so a collaborator can never reach back into the caller's
    record.

Key Functions:
    - build_generation_request(): Request for the Question Generator
    - build_score_request(): Request for the Score Engine

Used By:
    - rendering.pipeline
    - scoring.pipeline
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

from assess_toolkit.core.models.options import RenderOptions
from assess_toolkit.core.models.state import PartKey, SessionState

from .models import GenerationRequest, RequestContext, ScoreRequest, SeqPartDone


def build_generation_request(
    state: SessionState,
    qn: int,
    options: RenderOptions,
    question_data: Mapping[str, Any],
    *,
    seq_part_done: SeqPartDone,
    raw_scores: Dict[PartKey, float],
) -> GenerationRequest:
    """
    Build the Question Generator request for question ``qn``.

    Args:
        state: Session state (read only)
        qn: 0-based question index; must have a seed and set reference
        options: Display options
        question_data: Question set definition
        seq_part_done: Done-state map, or True when all parts are shown
        raw_scores: Raw-score view (empty when score markers are hidden)

    Returns:
        GenerationRequest
    """
    return GenerationRequest(
        question_set_id=state.question_set_for(qn),
        question_data=question_data,
        question_number=qn,
        seed=state.seed_for(qn),
        show_hints=options.show_hints,
        show_answer=options.show_answer,
        show_answer_button=options.show_answer,
        attempt_number=state.attempt_number(qn),
        part_attempts=dict(state.part_attempts(qn)),
        all_answers=copy.deepcopy(state.stuanswers),
        all_answers_as_num=copy.deepcopy(state.stuanswersval),
        score_nonzero=copy.deepcopy(state.scorenonzero),
        score_is_correct=copy.deepcopy(state.scoreiscorrect),
        last_raw_scores=dict(raw_scores),
        seq_part_done=seq_part_done if isinstance(seq_part_done, bool) else dict(seq_part_done),
    )


def build_score_request(
    state: SessionState,
    qn: int,
    given_answer: Any,
    question_data: Mapping[str, Any],
    context: RequestContext,
) -> ScoreRequest:
    """
    Build the Score Engine request for a submission to question ``qn``.

    Args:
        state: Session state (read only here)
        qn: 0-based question index; must have a seed and set reference
        given_answer: Raw submitted answer as received from the client
        question_data: Question set definition
        context: Caller identity, rights and random facility

    Returns:
        ScoreRequest with a point value of 1, so credit scores are fractions
    """
    return ScoreRequest(
        question_set_id=state.question_set_for(qn),
        question_data=question_data,
        question_number=qn,
        seed=state.seed_for(qn),
        given_answer=given_answer,
        attempt_number=state.attempt_number(qn),
        all_answers=copy.deepcopy(state.stuanswers),
        all_answers_as_num=copy.deepcopy(state.stuanswersval),
        context=context,
    )

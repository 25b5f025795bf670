"""
Module: rendering.pipeline

Purpose:
    Produce the display payload for one question from the session state.
    State → Done-state → Generate → Extract scripts → Package

Key Functions:
    - render_question(): Main entry point for rendering a question
    - compute_seq_part_done(): Sequential-unlock done state per part
    - select_raw_scores(): Raw-score view passed to the generator

Dependencies:
    - engines: Question Generator contract and request builder
    - rendering.scripts: Script extraction

Used By:
    - standalone.StandaloneAssessment.display_question

Invariants:
    - The session state is never mutated
    - Returned markup contains no script blocks
    - Generation errors are returned, never raised
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from assess_toolkit.common.thresholds import SCORE_THRESHOLDS
from assess_toolkit.config import MISSING_QUESTION_HTML
from assess_toolkit.core.models.options import RenderOptions
from assess_toolkit.core.models.results import RenderResult
from assess_toolkit.core.models.state import PartKey, QuestionSetId, SessionState
from assess_toolkit.engines.base import QuestionGenerator
from assess_toolkit.engines.models import RequestContext, SeqPartDone
from assess_toolkit.engines.requests import build_generation_request

from .scripts import extract_scripts

logger = logging.getLogger(__name__)


def compute_seq_part_done(state: SessionState, qn: int, options: RenderOptions) -> SeqPartDone:
    """
    Derive the sequential-unlock done state for each scored part.

    A part is done when all parts are force-shown, when its last raw
    score is correct, or (score markers hidden) when it has been
    attempted at least once. Never persisted.

    Returns:
        True when ``show_all_parts`` is set, else a part -> bool mapping
        covering every part with a recorded raw score
    """
    if options.show_all_parts:
        return True

    attempts = state.part_attempts(qn)
    done: Dict[PartKey, bool] = {}
    for pn, raw in state.raw_scores_for(qn).items():
        if options.hide_score_markers:
            done[pn] = attempts.get(pn, 0) > 0
        else:
            done[pn] = SCORE_THRESHOLDS.is_correct(raw)
    return done


def select_raw_scores(state: SessionState, qn: int, options: RenderOptions) -> Dict[PartKey, float]:
    """Raw scores shown to the generator (empty when score markers are hidden)."""
    if options.hide_score_markers:
        return {}
    return dict(state.raw_scores_for(qn))


def _missing(qn: int, message: str, placeholder: str) -> RenderResult:
    logger.warning(f"Cannot render question {qn}: {message}")
    return RenderResult(html=placeholder, js_params={}, errors=(message,))


def render_question(
    state: SessionState,
    qn: int,
    options: Optional[RenderOptions] = None,
    *,
    question_data: Mapping[QuestionSetId, Mapping[str, Any]],
    generator: QuestionGenerator,
    context: Optional[RequestContext] = None,
    placeholder: str = MISSING_QUESTION_HTML,
) -> RenderResult:
    """
    Render question ``qn`` for display.

    Pipeline:
    1. Check the question has a seed, a set reference and loaded data
    2. Derive done state and raw-score view
    3. Build the generation request and invoke the generator
    4. Extract scripts into ``js_params["scripts"]``
    5. Attach external references as ``js_params["helps"]``
    6. In review mode attach ``ans`` and ``stuans``

    Args:
        state: Session state (read only)
        qn: 0-based question index
        options: Display options (defaults when None)
        question_data: Loaded question set definitions by identifier
        generator: Question Generator collaborator
        context: Caller context (a fresh one when None)
        placeholder: Markup returned when the question cannot be rendered

    Returns:
        RenderResult. Missing state and generation problems are reported
        in ``errors``.
    """
    options = options or RenderOptions()
    context = context or RequestContext()

    if not state.has_question(qn):
        return _missing(qn, f"Question {qn} has no seed or question set in the session state", placeholder)

    qsid = state.question_set_for(qn)
    data = question_data.get(qsid)
    if data is None:
        return _missing(qn, f"Question set {qsid} for question {qn} is not loaded", placeholder)

    seq_part_done = compute_seq_part_done(state, qn, options)
    raw_scores = select_raw_scores(state, qn, options)

    request = build_generation_request(
        state,
        qn,
        options,
        data,
        seq_part_done=seq_part_done,
        raw_scores=raw_scores,
    )
    logger.debug(
        f"Rendering question {qn} (set {qsid}, seed {request.seed}, attempt {request.attempt_number})"
    )

    question = generator.generate(request, context)
    if question.errors:
        logger.warning(f"Question {qn} generated with {len(question.errors)} error(s)")

    html, scripts = extract_scripts(question.content)

    js_params: Dict[str, Any] = dict(question.js_params)
    if scripts:
        js_params["scripts"] = [script.to_list() for script in scripts]
    js_params["helps"] = list(question.external_references)

    if options.show_answer:
        js_params["ans"] = dict(question.correct_answers)
        js_params["stuans"] = copy.deepcopy(state.last_answer(qn))

    return RenderResult(html=html, js_params=js_params, errors=tuple(question.errors))

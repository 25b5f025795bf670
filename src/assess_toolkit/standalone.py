"""
Module: standalone

Purpose:
    Standalone assessment facade. Holds one session state and the loaded
    question set definitions, and wires the rendering and scoring
    pipelines to the external collaborators.

Key Classes:
    - StandaloneAssessment: set/get state, load question data,
      display and score questions

Dependencies:
    - rendering.pipeline, scoring.pipeline
    - engines: Collaborator interfaces and question set store
    - config.AssessConfig

Typical flow:
    >>> assess = StandaloneAssessment(store, generator, engine)
    >>> assess.set_state(persisted_dict)
    >>> assess.load_question_data()
    >>> payload = assess.display_question(0, RenderOptions())
    >>> result = assess.score_question(0, "5")
    >>> persist(assess.get_state().to_dict())
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from assess_toolkit.config import AssessConfig
from assess_toolkit.core.models.options import ALL_PARTS, PartsToScore, RenderOptions
from assess_toolkit.core.models.results import RenderResult, ScoreResult
from assess_toolkit.core.models.state import QuestionSetId, SessionState
from assess_toolkit.core.utils.serialization import deserialize_state
from assess_toolkit.engines.base import QuestionGenerator, ScoreEngine
from assess_toolkit.engines.models import RequestContext
from assess_toolkit.engines.store import QuestionSetStore
from assess_toolkit.rendering.pipeline import render_question
from assess_toolkit.scoring.pipeline import score_question

logger = logging.getLogger(__name__)


class StandaloneAssessment:
    """
    Render and score questions against a caller-owned session state.

    The state passed to ``set_state`` is kept by reference: scoring
    mutates it in place and ``get_state`` returns the same object.
    """

    def __init__(
        self,
        store: QuestionSetStore,
        generator: QuestionGenerator,
        engine: ScoreEngine,
        *,
        config: Optional[AssessConfig] = None,
    ) -> None:
        self.store = store
        self.generator = generator
        self.engine = engine
        self.config = config or AssessConfig()
        self.state = SessionState()
        self.question_data: Dict[QuestionSetId, Mapping[str, Any]] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    def set_state(self, state: Union[SessionState, Mapping[str, Any]]) -> None:
        """
        Set the session state.

        Args:
            state: A SessionState (kept by reference) or a persisted
                dictionary (validated and deserialized)
        """
        if isinstance(state, SessionState):
            self.state = state
        else:
            self.state = deserialize_state(state)

    def get_state(self) -> SessionState:
        return self.state

    # ─────────────────────────────────────────────────────────────────────────
    # Question Data
    # ─────────────────────────────────────────────────────────────────────────

    def set_question_data(self, qsid: QuestionSetId, data: Mapping[str, Any]) -> None:
        self.question_data[qsid] = data

    def load_question_data(self) -> int:
        """
        Fetch every question set referenced by the state in one batch.

        Returns:
            Number of question sets loaded

        Raises:
            QuestionSetStoreError: If the store is unavailable
        """
        ids = self.state.question_set_ids()
        if not ids:
            return 0
        found = self.store.fetch_many(ids)
        self.question_data.update(found)

        missing = [qsid for qsid in ids if qsid not in found]
        if missing:
            logger.warning(f"Question sets not found in store: {missing}")
        logger.info(f"Loaded {len(found)} of {len(ids)} question sets")
        return len(found)

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def display_question(
        self,
        qn: int,
        options: Union[RenderOptions, Mapping[str, Any], None] = None,
        context: Optional[RequestContext] = None,
    ) -> RenderResult:
        """
        Render question ``qn`` (read only).

        Args:
            qn: 0-based question index
            options: RenderOptions, a mapping of option names, or None
                for defaults with the configured hint budget
            context: Caller context
        """
        if options is None:
            options = RenderOptions(show_hints=self.config.default_show_hints)
        elif not isinstance(options, RenderOptions):
            merged = {"show_hints": self.config.default_show_hints}
            merged.update(options)
            options = RenderOptions.from_mapping(merged)

        return render_question(
            self.state,
            qn,
            options,
            question_data=self.question_data,
            generator=self.generator,
            context=context,
            placeholder=self.config.missing_question_html,
        )

    def score_question(
        self,
        qn: int,
        given_answer: Any,
        parts_to_score: PartsToScore = ALL_PARTS,
        context: Optional[RequestContext] = None,
    ) -> ScoreResult:
        """
        Score a submission to ``qn`` and merge it into the held state.

        Args:
            qn: 0-based question index
            given_answer: Raw submitted answer
            parts_to_score: ALL_PARTS or part -> bool selection
            context: Caller context
        """
        return score_question(
            self.state,
            qn,
            given_answer,
            parts_to_score,
            question_data=self.question_data,
            engine=self.engine,
            context=context,
        )

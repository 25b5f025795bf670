"""
Module: engines.models

Purpose:
    Request and response models exchanged with the external Question
    Generator and Score Engine collaborators, and the explicit request
    context that replaces process-wide caller identity and randomness.

Key Classes:
    - RequestContext: Caller identity, rights and random facility
    - GenerationRequest / GeneratedQuestion: Question Generator contract
    - ScoreRequest / ScoreOutcome: Score Engine contract

Dependencies:
    - dataclasses (std)
    - random (std)

Used By:
    - engines.base: Collaborator interfaces
    - engines.requests: Request builders
    - rendering.pipeline, scoring.pipeline
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from assess_toolkit.core.models.state import PartKey, QuestionSetId

SeqPartDone = Union[bool, Dict[PartKey, bool]]


@dataclass(frozen=True)
class RequestContext:
    """
    Explicit per-call context threaded into rendering and scoring.

    Attributes:
        user_rights: Permission level of the caller (passed to the score engine)
        user_id: Optional caller identity
        rng: Random facility handed to collaborators
    """

    user_rights: int = 0
    user_id: Optional[str] = None
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)


@dataclass(frozen=True)
class GenerationRequest:
    """
    Everything the Question Generator needs to produce one question.

    Answer histories are copies of the full cross-question history; later
    questions may reference answers given to earlier ones.
    """

    question_set_id: QuestionSetId
    question_data: Mapping[str, Any]
    question_number: int
    seed: int
    show_hints: int
    show_answer: bool
    show_answer_button: bool
    attempt_number: int
    part_attempts: Dict[PartKey, int]
    all_answers: Dict[int, Any]
    all_answers_as_num: Dict[int, Any]
    score_nonzero: Dict[int, Any]
    score_is_correct: Dict[int, Any]
    last_raw_scores: Dict[PartKey, float]
    seq_part_done: SeqPartDone
    show_answer_parts: Dict[PartKey, bool] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratedQuestion:
    """
    Question Generator response.

    Attributes:
        content: Generated markup (may contain script blocks)
        js_params: Client parameter bundle
        external_references: Auxiliary resources the client must load
        correct_answers: part -> correct answer representation
        answer_part_weights: Per-part answer weights
        errors: Non-fatal generation errors
    """

    content: str
    js_params: Dict[str, Any] = field(default_factory=dict)
    external_references: Sequence[Any] = ()
    correct_answers: Dict[PartKey, Any] = field(default_factory=dict)
    answer_part_weights: Sequence[float] = ()
    errors: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GeneratedQuestion:
        """Build from a plain response mapping (``html``/``content`` keys accepted)."""
        return cls(
            content=data.get("content", data.get("html", "")) or "",
            js_params=dict(data.get("js_params", data.get("jsparams")) or {}),
            external_references=tuple(data.get("external_references", data.get("helps")) or ()),
            correct_answers=dict(data.get("correct_answers", data.get("ans")) or {}),
            answer_part_weights=tuple(data.get("answer_part_weights", data.get("answeights")) or ()),
            errors=tuple(data.get("errors") or ()),
        )


@dataclass(frozen=True)
class ScoreRequest:
    """Everything the Score Engine needs to grade one submission."""

    question_set_id: QuestionSetId
    question_data: Mapping[str, Any]
    question_number: int
    seed: int
    given_answer: Any
    attempt_number: int
    all_answers: Dict[int, Any]
    all_answers_as_num: Dict[int, Any]
    context: RequestContext
    point_value: float = 1


@dataclass(frozen=True)
class ScoreOutcome:
    """
    Score Engine response.

    Attributes:
        scores: part -> credit score
        raw_scores: part -> raw score in [0, 1]
        last_answer_as_given: part -> answer normalized to stored text form
        last_answer_as_number: part -> answer normalized to numeric form
        answer_weights: Every defined answer weight for the question
        errors: Non-fatal scoring errors
    """

    scores: Dict[PartKey, float] = field(default_factory=dict)
    raw_scores: Dict[PartKey, float] = field(default_factory=dict)
    last_answer_as_given: Dict[PartKey, Any] = field(default_factory=dict)
    last_answer_as_number: Dict[PartKey, Any] = field(default_factory=dict)
    answer_weights: Sequence[float] = ()
    errors: Tuple[str, ...] = ()

    @property
    def part_count(self) -> int:
        """Number of parts the engine reported answers for."""
        return len(self.last_answer_as_given)

    @property
    def is_multipart(self) -> bool:
        return self.part_count > 1

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScoreOutcome:
        """Build from a plain response mapping (camelCase engine keys accepted)."""
        return cls(
            scores=_as_part_map(data.get("scores")),
            raw_scores=_as_part_map(data.get("raw_scores", data.get("rawScores"))),
            last_answer_as_given=_as_part_map(data.get("last_answer_as_given", data.get("lastAnswerAsGiven"))),
            last_answer_as_number=_as_part_map(data.get("last_answer_as_number", data.get("lastAnswerAsNumber"))),
            answer_weights=tuple(data.get("answer_weights", data.get("answeights")) or ()),
            errors=tuple(data.get("errors") or ()),
        )


def _as_part_map(value: Any) -> Dict[PartKey, Any]:
    """Read a part-indexed list or mapping as a dict."""
    if not value:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    return dict(enumerate(value))

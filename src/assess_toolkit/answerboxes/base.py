"""
Module: answerboxes.base

Purpose:
    Shared capability contract for answer-entry widgets. Every variant
    renders an input control bound to a stable field identifier, and
    exposes entry guidance, the correct answer for review mode, client
    parameters and a preview location marker.

Key Classes:
    - AnswerBoxParams: Inputs for one part's answer box
    - AnswerBoxOutput: Generated control and its metadata
    - AnswerBox: Abstract base class for variants
    - ScoreReference: Grader quick-set score target

Used By:
    - answerboxes.text, answerboxes.choices, answerboxes.file_upload
    - answerboxes.registry
"""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from assess_toolkit.config import AssessConfig


@dataclass(frozen=True)
class ScoreReference:
    """
    Grader score target shown next to a submitted answer.

    Attributes:
        element: Base id of the score input being set
        score: Full-credit value, or part -> value for multi-part questions
    """

    element: str
    score: Union[float, Mapping[int, float]]


@dataclass(frozen=True)
class AnswerBoxParams:
    """
    Inputs for generating one part's answer box.

    Attributes:
        answer_type: Declared answer type ("string", "number", "choices", "file")
        question_number: 0-based question index
        part_number: Part index within the question
        is_multipart: Question has more than one part
        last_answer: Student's recorded answer for this part ("" if none)
        writer_vars: Question writer variables (``ansprompt``, ``answer``,
            ``answerboxsize``, ``questions``); each may be scalar or per part
        colorbox: CSS class wrapping the control (score coloring)
        assessment_id: Assessment the answer belongs to, if any
        score_ref: Grader quick-set target, if grading
        config: URL and asset configuration
    """

    answer_type: str
    question_number: int
    part_number: int = 0
    is_multipart: bool = False
    last_answer: Any = ""
    writer_vars: Mapping[str, Any] = field(default_factory=dict)
    colorbox: str = ""
    assessment_id: Optional[Union[int, str]] = None
    score_ref: Optional[ScoreReference] = None
    config: AssessConfig = field(default_factory=AssessConfig)

    @property
    def field_id(self) -> int:
        """
        Stable field identifier.

        ``qn`` for single-part questions, ``(qn + 1) * 1000 + part`` for
        multi-part questions.
        """
        if self.is_multipart:
            return (self.question_number + 1) * 1000 + self.part_number
        return self.question_number

    @property
    def field_name(self) -> str:
        return f"qn{self.field_id}"

    def writer_var(self, name: str, default: Any = None) -> Any:
        """
        Resolve a writer variable for this part.

        List/tuple/mapping values are indexed by part number; scalars
        apply to every part.
        """
        value = self.writer_vars.get(name, default)
        if isinstance(value, (list, tuple)):
            return value[self.part_number] if self.part_number < len(value) else default
        if isinstance(value, Mapping):
            return value.get(self.part_number, default)
        return value


@dataclass(frozen=True)
class AnswerBoxOutput:
    """
    Generated answer box.

    Attributes:
        answer_box: Control markup
        js_params: Client parameters the control needs
        entry_tip: Entry guidance text
        correct_answer: Correct answer text for review mode
        preview_location: Marker id where a preview renders ("" if none)
    """

    answer_box: str
    js_params: Dict[str, Any] = field(default_factory=dict)
    entry_tip: str = ""
    correct_answer: str = ""
    preview_location: str = ""


class AnswerBox(ABC):
    """
    Abstract answer-entry widget.

    Subclasses implement generate(); helpers cover the prompt label and
    colorbox wrapping shared by all variants.
    """

    def __init__(self, params: AnswerBoxParams):
        self.params = params

    @abstractmethod
    def generate(self) -> AnswerBoxOutput:
        """Build the control markup and its metadata."""

    def _label(self) -> str:
        """Prompt label for the control ("" when no ``ansprompt``)."""
        prompt = self.params.writer_var("ansprompt")
        if prompt is None:
            return ""
        return f'<label for="{self.params.field_name}">{prompt}</label>'

    def _wrap_colorbox(self, markup: str) -> str:
        colorbox = self.params.colorbox
        if not colorbox:
            return markup
        return f'<span class="{html.escape(colorbox)}">{markup}</span>'

    def _correct_answer(self) -> str:
        answer = self.params.writer_var("answer")
        return "" if answer is None else str(answer)

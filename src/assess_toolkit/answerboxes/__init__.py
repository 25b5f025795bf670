"""
Module: answerboxes

Purpose:
    Answer-entry widgets dispatched by declared answer type. Every
    variant implements the AnswerBox contract.

Key Classes:
    - AnswerBox, AnswerBoxParams, AnswerBoxOutput
    - TextEntryAnswerBox, MultipleChoiceAnswerBox, FileUploadAnswerBox

Key Functions:
    - get_answer_box(), generate_answer_box(), register_answer_box()
"""

from .base import AnswerBox, AnswerBoxParams, AnswerBoxOutput, ScoreReference
from .text import TextEntryAnswerBox
from .choices import MultipleChoiceAnswerBox
from .file_upload import FileUploadAnswerBox
from .registry import (
    get_answer_box,
    generate_answer_box,
    register_answer_box,
    list_answer_types,
    UnknownAnswerTypeError,
)

__all__ = [
    "AnswerBox",
    "AnswerBoxParams",
    "AnswerBoxOutput",
    "ScoreReference",
    "TextEntryAnswerBox",
    "MultipleChoiceAnswerBox",
    "FileUploadAnswerBox",
    "get_answer_box",
    "generate_answer_box",
    "register_answer_box",
    "list_answer_types",
    "UnknownAnswerTypeError",
]

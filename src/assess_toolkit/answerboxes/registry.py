"""Answer box registry.

Maps declared answer types to AnswerBox variants and constructs the
right variant for a part.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base import AnswerBox, AnswerBoxOutput, AnswerBoxParams
from .choices import MultipleChoiceAnswerBox
from .file_upload import FileUploadAnswerBox
from .text import TextEntryAnswerBox


class UnknownAnswerTypeError(Exception):
    """No answer box is registered for the declared answer type."""


_REGISTRY: Dict[str, Type[AnswerBox]] = {
    "string": TextEntryAnswerBox,
    "number": TextEntryAnswerBox,
    "choices": MultipleChoiceAnswerBox,
    "file": FileUploadAnswerBox,
}


def register_answer_box(answer_type: str, box_cls: Type[AnswerBox]) -> None:
    """Register (or replace) the variant used for ``answer_type``."""
    _REGISTRY[answer_type] = box_cls


def list_answer_types() -> List[str]:
    return sorted(_REGISTRY)


def get_answer_box(params: AnswerBoxParams) -> AnswerBox:
    """
    Construct the answer box variant for ``params.answer_type``.

    Raises:
        UnknownAnswerTypeError: If the type is not registered
    """
    try:
        box_cls = _REGISTRY[params.answer_type]
    except KeyError:
        raise UnknownAnswerTypeError(f"Unknown answer type: {params.answer_type!r}") from None
    return box_cls(params)


def generate_answer_box(params: AnswerBoxParams) -> AnswerBoxOutput:
    """Construct and generate the answer box for one part."""
    return get_answer_box(params).generate()

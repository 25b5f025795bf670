"""
Module: answerboxes.text

Purpose:
    Text-entry answer box for free text ("string") and numeric
    ("number") answers.
"""

from __future__ import annotations

import html

from .base import AnswerBox, AnswerBoxOutput

DEFAULT_BOX_SIZE = 20

_TIPS = {
    "number": "Enter your answer as a number",
    "string": "Enter your answer",
}


def _box_size(value) -> int:
    """Writer-supplied box size, or the default when it is not a positive number."""
    try:
        size = int(value)
    except (TypeError, ValueError):
        return DEFAULT_BOX_SIZE
    return size if size > 0 else DEFAULT_BOX_SIZE


class TextEntryAnswerBox(AnswerBox):
    """Single-line text input pre-filled with the last answer."""

    def generate(self) -> AnswerBoxOutput:
        p = self.params
        size = _box_size(p.writer_var("answerboxsize", DEFAULT_BOX_SIZE))
        value = "" if p.last_answer is None else html.escape(str(p.last_answer))

        control = (
            f'<input type="text" size="{size}" name="{p.field_name}" '
            f'id="{p.field_name}" value="{value}" autocomplete="off" />'
        )

        return AnswerBoxOutput(
            answer_box=self._label() + self._wrap_colorbox(control),
            js_params={p.field_name: {"qtype": p.answer_type}},
            entry_tip=_TIPS.get(p.answer_type, _TIPS["string"]),
            correct_answer=self._correct_answer(),
        )

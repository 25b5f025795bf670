"""
Module: answerboxes.choices

Purpose:
    Multiple-choice answer box. Choices come from the ``questions``
    writer variable; ``answer`` is the index of the correct choice and
    the recorded answer is the index the student picked.
"""

from __future__ import annotations

from typing import List

from .base import AnswerBox, AnswerBoxOutput


class MultipleChoiceAnswerBox(AnswerBox):
    """Radio-button list with the previous choice checked."""

    def _choices(self) -> List[str]:
        choices = self.params.writer_vars.get("questions") or []
        # Multi-part questions give one choice list per part
        if self.params.is_multipart and choices and isinstance(choices[0], (list, tuple)):
            choices = self.params.writer_var("questions") or []
        return [str(c) for c in choices]

    def generate(self) -> AnswerBoxOutput:
        p = self.params
        choices = self._choices()
        last = "" if p.last_answer is None else str(p.last_answer)

        items = []
        for i, text in enumerate(choices):
            checked = ' checked="checked"' if last == str(i) else ""
            item_id = f"{p.field_name}-{i}"
            items.append(
                f'<li><input type="radio" name="{p.field_name}" value="{i}" id="{item_id}"{checked} />'
                f'<label for="{item_id}">{text}</label></li>'
            )
        control = f'<ul class="nomark" id="{p.field_name}">' + "".join(items) + "</ul>"

        return AnswerBoxOutput(
            answer_box=self._label() + self._wrap_colorbox(control),
            js_params={p.field_name: {"qtype": "choices", "count": len(choices)}},
            entry_tip="Select the best answer",
            correct_answer=self._correct_choice(choices),
        )

    def _correct_choice(self, choices: List[str]) -> str:
        answer = self.params.writer_var("answer")
        try:
            index = int(answer)
        except (TypeError, ValueError):
            return ""
        return choices[index] if 0 <= index < len(choices) else ""

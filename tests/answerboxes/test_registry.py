"""
Tests for answer box dispatch by declared answer type.
"""

import pytest

from assess_toolkit.answerboxes import (
    AnswerBox,
    AnswerBoxOutput,
    AnswerBoxParams,
    FileUploadAnswerBox,
    MultipleChoiceAnswerBox,
    TextEntryAnswerBox,
    UnknownAnswerTypeError,
    generate_answer_box,
    get_answer_box,
    list_answer_types,
    register_answer_box,
)
from assess_toolkit.answerboxes import registry


class _MatrixBox(AnswerBox):
    def generate(self) -> AnswerBoxOutput:
        return AnswerBoxOutput(answer_box=f"<table id=\"{self.params.field_name}\"></table>")


@pytest.fixture
def restore_registry():
    saved = dict(registry._REGISTRY)
    yield
    registry._REGISTRY.clear()
    registry._REGISTRY.update(saved)


class TestAnswerBoxRegistry:

    @pytest.mark.parametrize("answer_type, expected", [
        ("string", TextEntryAnswerBox),
        ("number", TextEntryAnswerBox),
        ("choices", MultipleChoiceAnswerBox),
        ("file", FileUploadAnswerBox),
    ])
    def test_get_when_known_type_then_variant(self, answer_type, expected):
        box = get_answer_box(AnswerBoxParams(answer_type=answer_type, question_number=0))
        assert isinstance(box, expected)

    def test_get_when_unknown_type_then_raises(self):
        with pytest.raises(UnknownAnswerTypeError, match="matrix"):
            get_answer_box(AnswerBoxParams(answer_type="matrix", question_number=0))

    def test_register_when_new_type_then_dispatched(self, restore_registry):
        register_answer_box("matrix", _MatrixBox)

        output = generate_answer_box(AnswerBoxParams(answer_type="matrix", question_number=3))

        assert output.answer_box == '<table id="qn3"></table>'
        assert "matrix" in list_answer_types()

    def test_list_when_default_then_sorted_builtins(self):
        assert list_answer_types() == ["choices", "file", "number", "string"]

"""
Tests for the text-entry and multiple-choice answer boxes.
"""

from assess_toolkit.answerboxes.base import AnswerBoxParams
from assess_toolkit.answerboxes.choices import MultipleChoiceAnswerBox
from assess_toolkit.answerboxes.text import TextEntryAnswerBox


class TestAnswerBoxParams:

    def test_field_id_when_single_part_then_question_number(self):
        assert AnswerBoxParams(answer_type="number", question_number=4).field_id == 4

    def test_field_id_when_multipart_then_offset_by_part(self):
        params = AnswerBoxParams(answer_type="number", question_number=0, part_number=2, is_multipart=True)
        assert params.field_id == 1002
        assert params.field_name == "qn1002"

    def test_writer_var_when_list_then_indexed_by_part(self):
        params = AnswerBoxParams(
            answer_type="number", question_number=0, part_number=1,
            writer_vars={"answer": ["3", "4"], "ansprompt": "x ="},
        )
        assert params.writer_var("answer") == "4"
        assert params.writer_var("ansprompt") == "x ="
        assert params.writer_var("missing", "d") == "d"


class TestTextEntryAnswerBox:

    def test_generate_when_number_then_input_and_tip(self):
        params = AnswerBoxParams(answer_type="number", question_number=0, last_answer="5", writer_vars={"answer": 5})

        output = TextEntryAnswerBox(params).generate()

        assert output.answer_box == (
            '<input type="text" size="20" name="qn0" id="qn0" value="5" autocomplete="off" />'
        )
        assert output.entry_tip == "Enter your answer as a number"
        assert output.correct_answer == "5"
        assert output.js_params == {"qn0": {"qtype": "number"}}

    def test_generate_when_last_answer_has_markup_then_escaped(self):
        params = AnswerBoxParams(answer_type="string", question_number=0, last_answer='"><b>')
        box = TextEntryAnswerBox(params).generate().answer_box
        assert 'value="&quot;&gt;&lt;b&gt;"' in box

    def test_generate_when_box_size_not_numeric_then_default(self):
        params = AnswerBoxParams(answer_type="number", question_number=0, writer_vars={"answerboxsize": "wide"})
        assert 'size="20"' in TextEntryAnswerBox(params).generate().answer_box

    def test_generate_when_box_size_given_then_used(self):
        params = AnswerBoxParams(answer_type="string", question_number=1, writer_vars={"answerboxsize": 5})
        output = TextEntryAnswerBox(params).generate()
        assert 'size="5"' in output.answer_box
        assert output.entry_tip == "Enter your answer"


class TestMultipleChoiceAnswerBox:

    def test_generate_when_previous_choice_then_checked(self):
        params = AnswerBoxParams(
            answer_type="choices",
            question_number=0,
            last_answer="1",
            writer_vars={"questions": ["2", "4", "8"], "answer": 1},
        )

        output = MultipleChoiceAnswerBox(params).generate()

        assert output.answer_box.startswith('<ul class="nomark" id="qn0">')
        assert '<input type="radio" name="qn0" value="1" id="qn0-1" checked="checked" />' in output.answer_box
        assert 'value="0" id="qn0-0" />' in output.answer_box
        assert output.correct_answer == "4"
        assert output.js_params == {"qn0": {"qtype": "choices", "count": 3}}
        assert output.entry_tip == "Select the best answer"

    def test_generate_when_multipart_then_choices_for_part(self):
        params = AnswerBoxParams(
            answer_type="choices",
            question_number=0,
            part_number=1,
            is_multipart=True,
            writer_vars={"questions": [["a", "b"], ["c", "d", "e"]], "answer": [0, 2]},
        )

        output = MultipleChoiceAnswerBox(params).generate()

        assert output.js_params["qn1001"]["count"] == 3
        assert output.correct_answer == "e"

    def test_generate_when_answer_not_index_then_no_correct_answer(self):
        params = AnswerBoxParams(
            answer_type="choices", question_number=0, writer_vars={"questions": ["a"], "answer": "x"}
        )
        assert MultipleChoiceAnswerBox(params).generate().correct_answer == ""

"""
Unit Tests for SessionState Model

Tests for lazy accessors and dictionary (de)serialization of the state record.
"""

import pytest

from assess_toolkit.core.models.state import SessionState, STATE_KEYS


class TestSessionStateAccessors:
    """Tests for lazy accessors on SessionState."""

    def test_init_when_no_args_then_all_mappings_empty(self):
        """A fresh state holds no data."""
        state = SessionState()
        for key in STATE_KEYS:
            assert getattr(state, key) == {}

    def test_has_question_when_seed_and_set_present_then_true(self):
        state = SessionState(seeds={0: 42}, qsid={0: 17})
        assert state.has_question(0)

    def test_has_question_when_seed_missing_then_false(self):
        state = SessionState(qsid={0: 17})
        assert not state.has_question(0)

    def test_has_question_when_set_missing_then_false(self):
        state = SessionState(seeds={0: 42})
        assert not state.has_question(0)

    def test_attempt_number_when_never_scored_then_zero(self):
        """Missing attempt data is 'no data yet', not an error."""
        state = SessionState(seeds={0: 42}, qsid={0: 17})
        assert state.attempt_number(0) == 0

    def test_attempt_number_when_parts_attempted_then_returns_max(self):
        state = SessionState(partattemptn={0: {0: 2, 1: 5, 2: 1}})
        assert state.attempt_number(0) == 5

    def test_part_attempts_when_missing_then_empty(self):
        assert SessionState().part_attempts(3) == {}

    def test_raw_scores_for_when_missing_then_empty(self):
        assert SessionState().raw_scores_for(3) == {}

    def test_last_answer_when_recorded_then_reads_one_offset_index(self):
        """Answer history for qn is stored under qn + 1."""
        state = SessionState(stuanswers={1: "5", 2: {0: "x", 1: "y"}})
        assert state.last_answer(0) == "5"
        assert state.last_answer(1) == {0: "x", 1: "y"}
        assert state.last_answer(2) is None

    def test_question_set_ids_when_duplicates_then_distinct_in_order(self):
        state = SessionState(qsid={0: 17, 1: 23, 2: 17})
        assert state.question_set_ids() == [17, 23]

    def test_copy_when_modified_then_original_unchanged(self):
        state = SessionState(rawscores={0: {0: 0.5}})
        clone = state.copy()
        clone.rawscores[0][0] = 1.0
        assert state.rawscores[0][0] == 0.5


class TestSessionStateDict:
    """Tests for to_dict/from_dict."""

    def test_to_dict_when_called_then_uses_legacy_keys(self):
        result = SessionState(seeds={0: 42}).to_dict()
        assert set(result) == set(STATE_KEYS)
        assert result["seeds"] == {0: 42}

    def test_to_dict_when_mutated_after_then_result_not_aliased(self):
        state = SessionState(partattemptn={0: {0: 1}})
        result = state.to_dict()
        state.partattemptn[0][0] = 9
        assert result["partattemptn"][0][0] == 1

    def test_from_dict_when_string_keys_then_converted_to_int(self):
        """JSON object keys come back as ints."""
        state = SessionState.from_dict({
            "seeds": {"0": 42},
            "qsid": {"0": 17},
            "stuanswers": {"1": {"0": "x", "1": "y"}},
            "partattemptn": {"0": {"0": 1, "1": 2}},
            "rawscores": {"0": {"0": 1.0, "1": 0.5}},
        })
        assert state.seeds == {0: 42}
        assert state.stuanswers == {1: {0: "x", 1: "y"}}
        assert state.partattemptn == {0: {0: 1, 1: 2}}
        assert state.rawscores == {0: {0: 1.0, 1: 0.5}}

    def test_from_dict_when_lists_then_read_as_index_mappings(self):
        """Sequential arrays from other encoders load as index -> value."""
        state = SessionState.from_dict({
            "seeds": [42, 7],
            "qsid": [17, 23],
            "partattemptn": [[1], [2, 1]],
            "stuanswers": {"2": ["x", "y"]},
        })
        assert state.seeds == {0: 42, 1: 7}
        assert state.partattemptn == {0: {0: 1}, 1: {0: 2, 1: 1}}
        assert state.stuanswers == {2: {0: "x", 1: "y"}}

    def test_from_dict_when_keys_missing_then_empty_mappings(self):
        state = SessionState.from_dict({"seeds": {"0": 1}})
        assert state.rawscores == {}
        assert state.scoreiscorrect == {}

    def test_from_dict_when_scalar_answer_then_kept_scalar(self):
        """Single-part answers stay scalars."""
        state = SessionState.from_dict({"stuanswers": {"1": "5"}, "stuanswersval": {"1": 5}})
        assert state.stuanswers == {1: "5"}
        assert state.stuanswersval == {1: 5}

    def test_from_dict_when_not_mapping_then_raises_type_error(self):
        with pytest.raises(TypeError, match="Expected mapping or list"):
            SessionState.from_dict({"seeds": 42})

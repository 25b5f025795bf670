"""
Tests for question set stores.
"""

import json
import logging

import pytest

from assess_toolkit.engines.store import (
    InMemoryQuestionSetStore,
    JsonDirectoryQuestionSetStore,
    QuestionSetStoreError,
)


class TestInMemoryQuestionSetStore:

    def test_fetch_when_some_missing_then_only_found_returned(self):
        store = InMemoryQuestionSetStore({17: {"id": 17}})
        store.add(23, {"id": 23})

        assert store.fetch_many([17, 23, 99]) == {17: {"id": 17}, 23: {"id": 23}}

    def test_fetch_when_empty_ids_then_empty(self):
        assert InMemoryQuestionSetStore().fetch_many([]) == {}


class TestJsonDirectoryQuestionSetStore:

    @pytest.fixture
    def store_dir(self, tmp_path):
        (tmp_path / "17.json").write_text(json.dumps({"id": 17, "qtype": "number"}), encoding="utf-8")
        return tmp_path

    def test_fetch_when_file_exists_then_loaded(self, store_dir):
        store = JsonDirectoryQuestionSetStore(store_dir)
        assert store.fetch_many([17]) == {17: {"id": 17, "qtype": "number"}}

    def test_fetch_when_file_missing_then_skipped_with_warning(self, store_dir, caplog):
        store = JsonDirectoryQuestionSetStore(store_dir)

        with caplog.at_level(logging.WARNING):
            found = store.fetch_many([17, 23])

        assert list(found) == [17]
        assert "Question set 23 not found" in caplog.text

    def test_fetch_when_directory_missing_then_raises(self, tmp_path):
        store = JsonDirectoryQuestionSetStore(tmp_path / "absent")
        with pytest.raises(QuestionSetStoreError, match="does not exist"):
            store.fetch_many([17])

    def test_fetch_when_file_corrupt_then_raises(self, store_dir):
        (store_dir / "23.json").write_text("{oops", encoding="utf-8")
        store = JsonDirectoryQuestionSetStore(store_dir)
        with pytest.raises(QuestionSetStoreError, match="Failed to read question set 23"):
            store.fetch_many([23])

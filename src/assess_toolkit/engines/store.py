"""
Module: engines.store

Purpose:
    Keyed lookup of question set definitions. Every identifier referenced
    by a session is fetched in a single batch call.

Key Classes:
    - QuestionSetStore: Abstract batch lookup
    - InMemoryQuestionSetStore: Dict-backed store
    - JsonDirectoryQuestionSetStore: One ``<id>.json`` file per set
    - QuestionSetStoreError: Store unavailable or unreadable

Used By:
    - standalone.StandaloneAssessment.load_question_data
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from assess_toolkit.core.models.state import QuestionSetId

logger = logging.getLogger(__name__)


class QuestionSetStoreError(Exception):
    """Question set store could not be read."""
    pass


class QuestionSetStore(ABC):
    """
    Abstract interface for question set lookup.

    Identifiers that do not exist are simply absent from the result.
    Failure to reach the store raises QuestionSetStoreError.
    """

    @abstractmethod
    def fetch_many(self, ids: Iterable[QuestionSetId]) -> Dict[QuestionSetId, Mapping[str, Any]]:
        """
        Fetch question set definitions.

        Args:
            ids: Question set identifiers

        Returns:
            Mapping of identifier to definition for every id found

        Raises:
            QuestionSetStoreError: If the store is unavailable
        """


class InMemoryQuestionSetStore(QuestionSetStore):
    """Store backed by a plain dict."""

    def __init__(self, question_sets: Optional[Mapping[QuestionSetId, Mapping[str, Any]]] = None):
        self._sets: Dict[QuestionSetId, Mapping[str, Any]] = dict(question_sets or {})

    def add(self, qsid: QuestionSetId, data: Mapping[str, Any]) -> None:
        self._sets[qsid] = data

    def fetch_many(self, ids: Iterable[QuestionSetId]) -> Dict[QuestionSetId, Mapping[str, Any]]:
        return {qsid: self._sets[qsid] for qsid in ids if qsid in self._sets}


class JsonDirectoryQuestionSetStore(QuestionSetStore):
    """
    Store reading one JSON file per question set.

    Layout:
        root/
        ├── 17.json
        └── 42.json
    """

    def __init__(self, root: Path):
        self.root = root

    def fetch_many(self, ids: Iterable[QuestionSetId]) -> Dict[QuestionSetId, Mapping[str, Any]]:
        if not self.root.is_dir():
            raise QuestionSetStoreError(f"Question set directory does not exist: {self.root}")

        found: Dict[QuestionSetId, Mapping[str, Any]] = {}
        for qsid in ids:
            path = self.root / f"{qsid}.json"
            if not path.exists():
                logger.warning(f"Question set {qsid} not found in {self.root}")
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    found[qsid] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise QuestionSetStoreError(f"Failed to read question set {qsid}: {e}") from e
        return found

"""
Module: state

Purpose:
    Provides the SessionState dataclass - the externally persisted record
    holding every per-question, per-part history for one assessment
    attempt. The caller owns the record; the rendering pipeline reads it
    and the scoring pipeline mutates it in place.

Key Functions:
    - SessionState.attempt_number(qn): Highest per-part attempt count
    - SessionState.has_question(qn): Seed and question set present
    - SessionState.to_dict() / SessionState.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - rendering.pipeline
    - scoring.pipeline
    - core.utils.serialization
    - standalone.StandaloneAssessment

Design Deviation from core models:
    Unlike the other models this record is NOT frozen. The scoring
    pipeline merges results into it in place and hands the same object
    back to the caller for persistence.

Indexing quirk:
    ``stuanswers``, ``stuanswersval``, ``scorenonzero`` and
    ``scoreiscorrect`` are keyed by ``qn + 1``. Every other mapping is
    keyed by ``qn``. Previously persisted state depends on this, so it
    must not be normalised away.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Union

QuestionSetId = Hashable
PartKey = int
# Scalar for single-part questions, part-keyed mapping for multi-part ones
AnswerEntry = Union[Any, Dict[PartKey, Any]]
FlagValue = Union[bool, int]

STATE_KEYS = (
    "seeds",
    "qsid",
    "stuanswers",
    "stuanswersval",
    "scorenonzero",
    "scoreiscorrect",
    "partattemptn",
    "rawscores",
)


@dataclass(slots=True)
class SessionState:
    """
    Session state record for one assessment attempt.

    Attributes:
        seeds: qn -> seed controlling randomized generation (immutable once set)
        qsid: qn -> question set identifier (immutable once set)
        stuanswers: (qn+1) -> last answer text, or part -> text when multi-part
        stuanswersval: (qn+1) -> numeric form of the last answer, same shape
        scorenonzero: (qn+1) -> bool, or part -> bool/-1 when multi-part
        scoreiscorrect: (qn+1) -> bool, or part -> bool/-1 when multi-part
        partattemptn: qn -> part -> number of times the part was scored
        rawscores: qn -> part -> most recent raw score in [0, 1]

    Invariants:
        - Missing keys mean "no data yet" and are never an error
        - Attempt counts only grow, and only for parts actually scored

    Example:
        >>> state = SessionState(seeds={0: 42}, qsid={0: 17})
        >>> state.attempt_number(0)
        0
        >>> state.has_question(0)
        True
    """

    seeds: Dict[int, int] = field(default_factory=dict)
    qsid: Dict[int, QuestionSetId] = field(default_factory=dict)
    stuanswers: Dict[int, AnswerEntry] = field(default_factory=dict)
    stuanswersval: Dict[int, AnswerEntry] = field(default_factory=dict)
    scorenonzero: Dict[int, Union[FlagValue, Dict[PartKey, FlagValue]]] = field(default_factory=dict)
    scoreiscorrect: Dict[int, Union[FlagValue, Dict[PartKey, FlagValue]]] = field(default_factory=dict)
    partattemptn: Dict[int, Dict[PartKey, int]] = field(default_factory=dict)
    rawscores: Dict[int, Dict[PartKey, float]] = field(default_factory=dict)

    # ─────────────────────────────────────────────────────────────────────────
    # Lazy Accessors
    # ─────────────────────────────────────────────────────────────────────────

    def seed_for(self, qn: int) -> Optional[int]:
        """Seed for question ``qn``, or None if not set."""
        return self.seeds.get(qn)

    def question_set_for(self, qn: int) -> Optional[QuestionSetId]:
        """Question set identifier for ``qn``, or None if not set."""
        return self.qsid.get(qn)

    def has_question(self, qn: int) -> bool:
        """True when ``qn`` has both a seed and a question set reference."""
        return self.seeds.get(qn) is not None and self.qsid.get(qn) is not None

    def part_attempts(self, qn: int) -> Dict[PartKey, int]:
        """Per-part attempt counts for ``qn`` (empty when never scored)."""
        return self.partattemptn.get(qn) or {}

    def raw_scores_for(self, qn: int) -> Dict[PartKey, float]:
        """Per-part raw scores for ``qn`` (empty when never scored)."""
        return self.rawscores.get(qn) or {}

    def attempt_number(self, qn: int) -> int:
        """
        Highest attempt count across all parts of ``qn``.

        Returns:
            0 when no part has been scored yet
        """
        attempts = self.part_attempts(qn)
        return max(attempts.values()) if attempts else 0

    def last_answer(self, qn: int) -> Optional[AnswerEntry]:
        """Recorded answer for ``qn`` (read from the 1-offset history)."""
        return self.stuanswers.get(qn + 1)

    def question_set_ids(self) -> List[QuestionSetId]:
        """Distinct question set identifiers referenced by this state."""
        seen: List[QuestionSetId] = []
        for qsid in self.qsid.values():
            if qsid is not None and qsid not in seen:
                seen.append(qsid)
        return seen

    def copy(self) -> SessionState:
        """Deep copy of the record."""
        return copy.deepcopy(self)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a plain dictionary using the legacy key names.

        Nested mappings are copied so the result can be stored without
        aliasing the live record.
        """
        return {key: copy.deepcopy(getattr(self, key)) for key in STATE_KEYS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SessionState:
        """
        Deserialize from a dictionary (e.g. parsed JSON).

        Digit-only string keys are converted back to integers and
        sequential lists are read as index -> value mappings, so state
        written by other encoders loads unchanged. Missing keys become
        empty mappings.
        """
        return cls(
            seeds=_index_map(data.get("seeds")),
            qsid=_index_map(data.get("qsid")),
            stuanswers=_index_map(data.get("stuanswers"), nested=True),
            stuanswersval=_index_map(data.get("stuanswersval"), nested=True),
            scorenonzero=_index_map(data.get("scorenonzero"), nested=True),
            scoreiscorrect=_index_map(data.get("scoreiscorrect"), nested=True),
            partattemptn=_index_map(data.get("partattemptn"), nested=True),
            rawscores=_index_map(data.get("rawscores"), nested=True),
        )


def _key(key: Any) -> Any:
    """Convert digit-only string keys to int."""
    if isinstance(key, str) and key.lstrip("-").isdigit():
        return int(key)
    return key


def _index_map(value: Any, *, nested: bool = False) -> Dict[Any, Any]:
    """Normalise a mapping or sequential list into an int-keyed dict."""
    if value is None:
        return {}
    if isinstance(value, (list, tuple)):
        items = enumerate(value)
    elif isinstance(value, Mapping):
        items = value.items()
    else:
        raise TypeError(f"Expected mapping or list, got {type(value).__name__}")

    result: Dict[Any, Any] = {}
    for key, item in items:
        if nested and isinstance(item, (Mapping, list)):
            item = _index_map(item)
        result[_key(key)] = item
    return result

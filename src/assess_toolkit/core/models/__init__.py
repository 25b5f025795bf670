"""
Core Models Package

Data models shared by the rendering and scoring pipelines.

**DESIGN RATIONALE:**

Options and results are frozen dataclasses so a caller can keep them
without worrying about later mutation. SessionState is the one mutable
model: it is the record the scoring pipeline updates in place.
"""

from .state import SessionState, QuestionSetId, PartKey
from .options import RenderOptions, ALL_PARTS, AllParts, PartsToScore, selects_part
from .results import ScriptKind, ScriptEntry, RenderResult, ScoreResult

__all__ = [
    "SessionState",
    "QuestionSetId",
    "PartKey",
    "RenderOptions",
    "ALL_PARTS",
    "AllParts",
    "PartsToScore",
    "selects_part",
    "ScriptKind",
    "ScriptEntry",
    "RenderResult",
    "ScoreResult",
]

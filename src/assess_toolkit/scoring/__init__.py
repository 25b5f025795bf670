"""
Module: scoring

Purpose:
    Mutating transition: apply a Score Engine outcome to the session state.

Key Functions:
    - score_question(): Score one submission and merge it into the state
"""

from .pipeline import score_question
from .merge import record_answer, record_raw_score, update_score_flags, all_parts_scored

__all__ = [
    "score_question",
    "record_answer",
    "record_raw_score",
    "update_score_flags",
    "all_parts_scored",
]

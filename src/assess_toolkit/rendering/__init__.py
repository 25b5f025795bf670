"""
Module: rendering

Purpose:
    Read-only transition: turn the session state into a display payload.

Key Functions:
    - render_question(): Render one question
    - extract_scripts(): Move script blocks out of markup
"""

from .scripts import extract_scripts
from .pipeline import (
    render_question,
    compute_seq_part_done,
    select_raw_scores,
    MISSING_QUESTION_HTML,
)

__all__ = [
    "extract_scripts",
    "render_question",
    "compute_seq_part_done",
    "select_raw_scores",
    "MISSING_QUESTION_HTML",
]

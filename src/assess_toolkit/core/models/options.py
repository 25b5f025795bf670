"""
Module: options

Purpose:
    Caller-supplied options for the two state transitions: RenderOptions
    for displaying a question and the parts-to-score selection used when
    applying a submission.

Key Classes:
    - RenderOptions: Immutable display flags with validation
    - AllParts: Sentinel enum selecting every part for scoring

Key Functions:
    - selects_part(parts_to_score, part): Whether a part is recorded

Used By:
    - rendering.pipeline
    - scoring.pipeline
    - standalone.StandaloneAssessment
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from .state import PartKey

DEFAULT_SHOW_HINTS = 3

# Legacy option names accepted by RenderOptions.from_mapping
_LEGACY_OPTION_NAMES = {
    "showallparts": "show_all_parts",
    "hidescoremarkers": "hide_score_markers",
    "showans": "show_answer",
    "showhints": "show_hints",
}

# Form-style values that switch a flag off
_FALSE_STRINGS = ("", "0", "false", "off", "no")


def _flag(value: Any) -> bool:
    """Read a flag the way form input is read: "0", "false" and "" are off."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class RenderOptions:
    """
    Display options for rendering a question (immutable).

    Attributes:
        show_all_parts: Bypass sequential unlock; every part is done
        hide_score_markers: Hide score coloring, unlock parts by attempts
        show_answer: Include correct answers and the student's last answer
        show_hints: Hint budget passed to the question generator

    Invariants:
        - show_hints >= 0

    Example:
        >>> RenderOptions(show_answer=True).show_hints
        3
    """

    show_all_parts: bool = False
    hide_score_markers: bool = False
    show_answer: bool = False
    show_hints: int = DEFAULT_SHOW_HINTS

    def __post_init__(self) -> None:
        """Validate options on construction."""
        if self.show_hints < 0:
            raise ValueError(f"show_hints must be non-negative: {self.show_hints}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RenderOptions:
        """
        Build options from a plain mapping.

        Accepts both the attribute names and the short legacy names
        (``showallparts``, ``hidescoremarkers``, ``showans``, ``showhints``).
        Unknown keys are ignored.
        """
        if not options:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _LEGACY_OPTION_NAMES.get(key, key)
            if name in ("show_all_parts", "hide_score_markers", "show_answer"):
                kwargs[name] = _flag(value)
            elif name == "show_hints":
                kwargs[name] = int(value)
        return cls(**kwargs)


class AllParts(Enum):
    """Sentinel for scoring every part of a question."""

    ALL = "all"

    def __repr__(self) -> str:
        return "ALL_PARTS"


ALL_PARTS = AllParts.ALL

# ALL_PARTS (or True) records every part; a mapping records only parts mapped to a truthy value
PartsToScore = Union[AllParts, bool, Mapping[PartKey, bool]]


def selects_part(parts_to_score: PartsToScore, part: PartKey) -> bool:
    """
    Check whether ``part`` is selected for recording.

    Args:
        parts_to_score: ALL_PARTS, True, or a part -> bool mapping
        part: Part key reported by the score engine

    Returns:
        True when the part's answer and attempt should be recorded
    """
    if parts_to_score is ALL_PARTS or parts_to_score is True:
        return True
    if isinstance(parts_to_score, Mapping):
        return bool(parts_to_score.get(part))
    return False

"""
Module: results

Purpose:
    Result types returned by the rendering and scoring pipelines, plus
    the structured script directive produced by script extraction.

Key Classes:
    - ScriptKind: "src" (external reference) or "code" (inline body)
    - ScriptEntry: One extracted script directive
    - RenderResult: Markup, client parameters and generation errors
    - ScoreResult: Per-part scores, raw scores, errors, completeness

Used By:
    - rendering.scripts
    - rendering.pipeline
    - scoring.pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .state import PartKey


class ScriptKind(str, Enum):
    """Kind of extracted script directive."""
    SRC = "src"    # External script reference (URL)
    CODE = "code"  # Inline script body

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ScriptEntry:
    """
    A script pulled out of generated markup.

    Attributes:
        kind: SRC for an external reference, CODE for an inline body
        value: Source URL or inline code
    """

    kind: ScriptKind
    value: str

    def to_list(self) -> List[str]:
        """Client wire form: ``[kind, value]``."""
        return [self.kind.value, self.value]


@dataclass(frozen=True)
class RenderResult:
    """
    Display payload for one question.

    Attributes:
        html: Question markup with every script block removed
        js_params: Client parameter bundle (``scripts``, ``helps``,
            and ``ans``/``stuans`` in review mode)
        errors: Non-fatal generation or missing-state errors
    """

    html: str
    js_params: Dict[str, Any] = field(default_factory=dict)
    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no errors were reported."""
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the client payload key names."""
        return {
            "html": self.html,
            "jsparams": self.js_params,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class ScoreResult:
    """
    Outcome of applying one submission to the session state.

    Attributes:
        scores: part -> credit score from the engine
        raw: part -> raw score from the engine
        errors: Non-fatal engine or missing-state errors
        all_parts_scored: Every weighted part has a recorded attempt
    """

    scores: Dict[PartKey, float] = field(default_factory=dict)
    raw: Dict[PartKey, float] = field(default_factory=dict)
    errors: Tuple[str, ...] = ()
    all_parts_scored: bool = False

    @property
    def total_score(self) -> float:
        """Sum of per-part credit scores (always calculated)."""
        return sum(self.scores.values())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the client payload key names."""
        return {
            "scores": dict(self.scores),
            "raw": dict(self.raw),
            "errors": list(self.errors),
            "allans": self.all_parts_scored,
        }

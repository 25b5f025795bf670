"""
Assessment Core Package

Shared data models, validation and serialization for the session state
record and the results of the render/score transitions.

**DESIGN NOTES:**

1. **Externalized State**
   - The caller owns the SessionState and persists it however it likes
   - This package only defines its shape and transition rules

2. **Legacy Layout Preserved**
   - Answer history and flags keyed by question index + 1
   - Scalars for single-part questions, part-keyed mappings otherwise

3. **Derived Values Never Stored**
   - Sequential-unlock done state is recomputed on every render
   - Total score is always summed from part scores
"""

from .models import (
    SessionState,
    RenderOptions,
    ALL_PARTS,
    ScriptKind,
    ScriptEntry,
    RenderResult,
    ScoreResult,
)

__all__ = [
    "SessionState",
    "RenderOptions",
    "ALL_PARTS",
    "ScriptKind",
    "ScriptEntry",
    "RenderResult",
    "ScoreResult",
]

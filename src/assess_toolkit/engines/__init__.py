"""
Module: engines

Purpose:
    Contracts and thin adapters for the external collaborators: the
    Question Generator, the Score Engine and the question set store.

Key Classes:
    - QuestionGenerator, ScoreEngine: Collaborator interfaces
    - RequestContext: Explicit caller context
    - QuestionSetStore: Batch question set lookup

Key Functions:
    - build_generation_request(), build_score_request()
"""

from .models import (
    RequestContext,
    GenerationRequest,
    GeneratedQuestion,
    ScoreRequest,
    ScoreOutcome,
    SeqPartDone,
)
from .base import QuestionGenerator, ScoreEngine
from .requests import build_generation_request, build_score_request
from .store import (
    QuestionSetStore,
    InMemoryQuestionSetStore,
    JsonDirectoryQuestionSetStore,
    QuestionSetStoreError,
)

__all__ = [
    # Models
    "RequestContext",
    "GenerationRequest",
    "GeneratedQuestion",
    "ScoreRequest",
    "ScoreOutcome",
    "SeqPartDone",
    # Interfaces
    "QuestionGenerator",
    "ScoreEngine",
    # Request builders
    "build_generation_request",
    "build_score_request",
    # Store
    "QuestionSetStore",
    "InMemoryQuestionSetStore",
    "JsonDirectoryQuestionSetStore",
    "QuestionSetStoreError",
]

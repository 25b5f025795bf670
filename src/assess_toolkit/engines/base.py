"""
Module: engines.base

Purpose:
    Abstract interfaces for the external collaborators. The algorithms
    behind them (randomized generation, answer grading) live outside this
    package; only the request/response contract matters here.

Key Classes:
    - QuestionGenerator: Produces markup and answer keys from a seed
    - ScoreEngine: Grades a submitted answer

Used By:
    - rendering.pipeline
    - scoring.pipeline
    - standalone.StandaloneAssessment
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import (
    GenerationRequest,
    GeneratedQuestion,
    RequestContext,
    ScoreOutcome,
    ScoreRequest,
)


class QuestionGenerator(ABC):
    """
    Abstract interface for question generation.

    Implementations must be deterministic for a given request: the same
    seed and history produce the same question.
    """

    @abstractmethod
    def generate(self, request: GenerationRequest, context: RequestContext) -> GeneratedQuestion:
        """
        Generate one question.

        Args:
            request: Question data, seed, histories and display flags
            context: Caller context (random facility, identity)

        Returns:
            GeneratedQuestion. Problems in the question source are reported
            in ``errors`` rather than raised.
        """


class ScoreEngine(ABC):
    """Abstract interface for answer grading."""

    @abstractmethod
    def score(self, request: ScoreRequest) -> ScoreOutcome:
        """
        Score one submission.

        Args:
            request: Question data, seed, submitted answer and histories

        Returns:
            ScoreOutcome. Ungradable answers are reported in ``errors``;
            parts that could not be scored are left out of the result.
        """

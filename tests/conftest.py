import pytest
import sys
from pathlib import Path
from typing import List, Optional

# Add src to sys.path so we can import assess_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from assess_toolkit.core.models.state import SessionState
from assess_toolkit.engines.base import QuestionGenerator, ScoreEngine
from assess_toolkit.engines.models import (
    GenerationRequest,
    GeneratedQuestion,
    RequestContext,
    ScoreOutcome,
    ScoreRequest,
)


class FakeGenerator(QuestionGenerator):
    """Deterministic generator recording every request it receives."""

    def __init__(self):
        self.content = '<div class="question">Seed {seed}</div>'
        self.helps: list = []
        self.correct_answers: dict = {0: "5"}
        self.weights: list = [1]
        self.errors: tuple = ()
        self.requests: List[GenerationRequest] = []

    def generate(self, request: GenerationRequest, context: RequestContext) -> GeneratedQuestion:
        self.requests.append(request)
        return GeneratedQuestion(
            content=self.content.format(seed=request.seed),
            js_params={"seed": request.seed},
            external_references=list(self.helps),
            correct_answers=dict(self.correct_answers),
            answer_part_weights=list(self.weights),
            errors=self.errors,
        )

    @property
    def last_request(self) -> Optional[GenerationRequest]:
        return self.requests[-1] if self.requests else None


class ScriptedScoreEngine(ScoreEngine):
    """Score engine returning queued outcomes (the last one repeats)."""

    def __init__(self):
        self.outcomes: List[ScoreOutcome] = []
        self.requests: List[ScoreRequest] = []

    def queue(self, *outcomes: ScoreOutcome) -> "ScriptedScoreEngine":
        self.outcomes.extend(outcomes)
        return self

    def score(self, request: ScoreRequest) -> ScoreOutcome:
        self.requests.append(request)
        if len(self.outcomes) > 1:
            return self.outcomes.pop(0)
        return self.outcomes[0]


def build_outcome(raw: dict, answers: Optional[dict] = None, weights=None, errors=()) -> ScoreOutcome:
    """Outcome where credit equals raw score and answers default to 'a<part>'."""
    answers = answers if answers is not None else {k: f"a{k}" for k in raw}
    return ScoreOutcome(
        scores=dict(raw),
        raw_scores=dict(raw),
        last_answer_as_given=dict(answers),
        last_answer_as_number={k: (float(v) if str(v).replace(".", "", 1).isdigit() else None) for k, v in answers.items()},
        answer_weights=list(weights) if weights is not None else [1 / len(answers)] * len(answers),
        errors=tuple(errors),
    )


# Common test fixtures
@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def engine() -> ScriptedScoreEngine:
    return ScriptedScoreEngine()


@pytest.fixture
def make_outcome():
    """Factory for ScoreOutcome instances."""
    return build_outcome


@pytest.fixture
def question_data() -> dict:
    """Loaded question set definitions keyed by set id."""
    return {
        17: {"id": 17, "qtype": "number", "control": "$answer = 5"},
        23: {"id": 23, "qtype": "multipart", "control": "$anstypes = 'number,number'"},
    }


@pytest.fixture
def single_part_state() -> SessionState:
    """Fresh state with one single-part question (qn 0, seed 42)."""
    return SessionState(seeds={0: 42}, qsid={0: 17})


@pytest.fixture
def multipart_state() -> SessionState:
    """Fresh state with a single-part question 0 and a two-part question 1."""
    return SessionState(seeds={0: 42, 1: 7}, qsid={0: 17, 1: 23})

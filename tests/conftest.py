"""Shared pytest fixtures."""

import os
import tempfile

import pytest

from speccraft.engine import QuestionnaireEngine
from speccraft.stores import JSONSessionStore

SAMPLE_ANSWERS = {
    "feature-overview": "Let readers discuss posts",
    "target-users": "Admin, Guest",
    "business-value": "engagement grows",
    "core-functionality": "create posts, delete posts",
    "user-interactions": "Click reply under a post",
    "data-requirements": "Comment text and author",
    "integrations-needed": "",
    "ui-requirements": "Threaded list under each post",
    "responsive-design": True,
    "accessibility-requirements": "",
    "performance-requirements": "",
    "scalability-needs": "",
    "sensitive-data": False,
    "authentication-required": "Required authentication",
    "security-requirements": "Encrypt at rest",
    "error-scenarios": "Network failure",
    "validation-rules": "",
    "edge-cases": "Deleted parent post",
    "feature-dependencies": "",
    "timeline-constraints": "",
    "success-criteria": "More replies per post",
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores and output."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def store(temp_dir):
    """A JSON session store in a temporary directory."""
    return JSONSessionStore(os.path.join(temp_dir, "sessions.json"))


@pytest.fixture
def sample_answers():
    """Valid answers for every built-in question."""
    return dict(SAMPLE_ANSWERS)


@pytest.fixture
def answer_all():
    """Answer every remaining question from ``SAMPLE_ANSWERS`` plus overrides."""

    def _answer_all(engine: QuestionnaireEngine, **overrides) -> QuestionnaireEngine:
        answers = {**SAMPLE_ANSWERS, **{k.replace("_", "-"): v for k, v in overrides.items()}}
        while (question := engine.get_current_question()) is not None:
            engine.answer_current_question(answers[question.id])
        return engine

    return _answer_all


@pytest.fixture
def completed_engine(answer_all):
    """An engine whose questionnaire is finished with the sample answers."""
    return answer_all(QuestionnaireEngine.new("Comments", "Let readers comment on posts"))

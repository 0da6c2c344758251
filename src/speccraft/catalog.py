# src/speccraft/catalog.py
"""The built-in question catalog.

Questions are grouped by category and sequenced by ``order``; gaps between
order values leave room for dynamically injected follow-up questions.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from speccraft.models import DependencyRule, Question

AUTHENTICATION_OPTIONS = [
    "No authentication needed",
    "Optional authentication",
    "Required authentication",
    "Admin-only access",
]

BASE_QUESTIONS: tuple[Question, ...] = (
    # Overview
    Question(
        id="feature-overview",
        text=(
            "Provide a detailed overview of what this feature should accomplish "
            "and why it's needed."
        ),
        type="textarea",
        required=True,
        category="overview",
        order=1,
    ),
    Question(
        id="target-users",
        text="Who are the primary users of this feature? Describe the user personas.",
        type="textarea",
        required=True,
        category="overview",
        order=2,
    ),
    Question(
        id="business-value",
        text="What business value or problem does this feature solve?",
        type="textarea",
        required=True,
        category="overview",
        order=3,
    ),
    # Functional requirements
    Question(
        id="core-functionality",
        text=(
            "What are the core functions this feature must perform? "
            "List each major capability."
        ),
        type="textarea",
        required=True,
        category="functional",
        order=10,
    ),
    Question(
        id="user-interactions",
        text=(
            "How will users interact with this feature? "
            "Describe the user journey step by step."
        ),
        type="textarea",
        required=True,
        category="functional",
        order=11,
    ),
    Question(
        id="data-requirements",
        text="What data does this feature need to collect, process, or display?",
        type="textarea",
        required=True,
        category="functional",
        order=12,
    ),
    Question(
        id="integrations-needed",
        text=(
            "Does this feature need to integrate with any external services, APIs, "
            "or existing systems?"
        ),
        type="textarea",
        required=False,
        category="functional",
        order=13,
    ),
    # UI/UX
    Question(
        id="ui-requirements",
        text=(
            "Describe the user interface requirements. "
            "What should users see and how should it be organized?"
        ),
        type="textarea",
        required=True,
        category="ui_ux",
        order=20,
    ),
    Question(
        id="responsive-design",
        text="Does this feature need to work on mobile devices?",
        type="boolean",
        required=True,
        category="ui_ux",
        order=21,
    ),
    Question(
        id="accessibility-requirements",
        text="Are there specific accessibility requirements for this feature?",
        type="textarea",
        required=False,
        category="ui_ux",
        order=22,
    ),
    # Performance
    Question(
        id="performance-requirements",
        text="Are there specific performance requirements (load time, response time, etc.)?",
        type="textarea",
        required=False,
        category="performance",
        order=30,
    ),
    Question(
        id="scalability-needs",
        text=(
            "How many users should this feature support? "
            "Any specific scalability requirements?"
        ),
        type="textarea",
        required=False,
        category="performance",
        order=31,
    ),
    # Security & privacy
    Question(
        id="sensitive-data",
        text="Does this feature handle sensitive or personal data?",
        type="boolean",
        required=True,
        category="security",
        order=40,
    ),
    Question(
        id="authentication-required",
        text="Does this feature require user authentication?",
        type="select",
        required=True,
        options=AUTHENTICATION_OPTIONS,
        category="security",
        order=41,
    ),
    Question(
        id="security-requirements",
        text="What specific security requirements does this feature have?",
        type="textarea",
        required=False,
        depends_on=DependencyRule(question_id="sensitive-data", value=True),
        category="security",
        order=42,
    ),
    # Edge cases & error handling
    Question(
        id="error-scenarios",
        text=(
            "What could go wrong with this feature? List potential error scenarios "
            "and how they should be handled."
        ),
        type="textarea",
        required=True,
        category="technical",
        order=50,
    ),
    Question(
        id="validation-rules",
        text="What validation rules should be applied to user inputs?",
        type="textarea",
        required=False,
        category="technical",
        order=51,
    ),
    Question(
        id="edge-cases",
        text=(
            "What edge cases should be considered (empty states, maximum limits, "
            "unusual data, etc.)?"
        ),
        type="textarea",
        required=True,
        category="technical",
        order=52,
    ),
    # Dependencies & constraints
    Question(
        id="feature-dependencies",
        text="Does this feature depend on other features being completed first?",
        type="textarea",
        required=False,
        category="technical",
        order=60,
    ),
    Question(
        id="timeline-constraints",
        text="Are there any timeline constraints or deadlines for this feature?",
        type="textarea",
        required=False,
        category="overview",
        order=61,
    ),
    Question(
        id="success-criteria",
        text=(
            "How will you know this feature is successful? "
            "What are the measurable success criteria?"
        ),
        type="textarea",
        required=True,
        category="overview",
        order=62,
    ),
)


class QuestionCatalog:
    """An ordered view over question definitions.

    Questions are kept sorted ascending by ``order``; ties keep declaration
    order. ``insert`` places a question before the first existing question
    with a strictly greater ``order``.
    """

    def __init__(self, questions: Iterable[Question] = BASE_QUESTIONS) -> None:
        # sorted() is stable, so equal orders keep declaration order
        self._questions: list[Question] = sorted(questions, key=lambda q: q.order)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return any(q.id == question_id for q in self._questions)

    @property
    def questions(self) -> list[Question]:
        return list(self._questions)

    def get(self, question_id: str) -> Question | None:
        for question in self._questions:
            if question.id == question_id:
                return question
        return None

    def insert(self, question: Question) -> int:
        """Insert ``question`` preserving ascending order. Returns its index."""
        for index, existing in enumerate(self._questions):
            if existing.order > question.order:
                self._questions.insert(index, question)
                return index
        self._questions.append(question)
        return len(self._questions) - 1

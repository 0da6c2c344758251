# src/speccraft/engine.py
"""Questionnaire state machine.

The engine walks a Session through the *eligible* questions of a catalog.
Eligibility is never cached: it is a function of the catalog and the
session's current answers, so answering a question can unlock or hide
later questions and the cursor always indexes the freshly computed sequence.

Example:
    engine = QuestionnaireEngine.new("Comments", "Let readers comment on posts")
    while (question := engine.get_current_question()) is not None:
        engine.answer_current_question(ask_somehow(question))
    assert engine.is_complete()
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from speccraft.catalog import BASE_QUESTIONS, QuestionCatalog
from speccraft.exceptions import ValidationError
from speccraft.models import Answer, AnswerValue, Progress, Question, Session

TRUE_STRINGS = frozenset({"true", "yes", "y", "1"})
FALSE_STRINGS = frozenset({"false", "no", "n", "0"})


def coerce_answer(question: Question, raw: Any) -> Any:
    """Normalize transport input into the shape ``question`` expects.

    Boolean questions accept yes/no style strings; multiselect questions
    accept a comma-separated string. Anything else is returned unchanged and
    left for validation to accept or reject.
    """
    if question.type == "boolean" and isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    if question.type == "multiselect" and isinstance(raw, str):
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def _is_empty(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return value is None or value == "" or (isinstance(value, list) and not value)


def _values_match(actual: AnswerValue, expected: str | bool) -> bool:
    # True == 1 and "true" != True in Python; compare types as well as values
    return type(actual) is type(expected) and actual == expected


class QuestionnaireEngine:
    """Drives a Session through the eligible questions of a catalog."""

    def __init__(
        self,
        session: Session,
        questions: Iterable[Question] = BASE_QUESTIONS,
    ) -> None:
        """Wrap ``session``.

        Dynamic questions stored on the session are re-inserted into the
        catalog in the order they were originally added.

        Args:
            session: The session to drive. It is mutated in place.
            questions: Base question definitions (defaults to the built-in catalog).
        """
        self.session = session
        self.catalog = QuestionCatalog(questions)
        for question in session.dynamic_questions:
            self.catalog.insert(question)

    @classmethod
    def new(
        cls,
        feature_title: str,
        feature_description: str = "",
        session_id: str | None = None,
        questions: Iterable[Question] = BASE_QUESTIONS,
    ) -> QuestionnaireEngine:
        """Start an empty questionnaire."""
        session = Session(feature_title=feature_title, feature_description=feature_description)
        if session_id is not None:
            session.id = session_id
        engine = cls(session, questions)
        engine._sync_completion()
        return engine

    @classmethod
    def from_session(
        cls,
        session: Session,
        questions: Iterable[Question] = BASE_QUESTIONS,
    ) -> QuestionnaireEngine:
        """Build an engine over a copy of ``session``."""
        return cls(session.model_copy(deep=True), questions)

    # Eligibility

    def _should_ask(self, question: Question) -> bool:
        rule = question.depends_on
        if rule is None:
            return True
        answer = self.session.answer_for(rule.question_id)
        if answer is None:
            return False
        return _values_match(answer.value, rule.value)

    def eligible_questions(self) -> list[Question]:
        """Catalog questions whose dependency rule (if any) is satisfied."""
        return [q for q in self.catalog if self._should_ask(q)]

    def get_current_question(self) -> Question | None:
        eligible = self.eligible_questions()
        if 0 <= self.session.cursor < len(eligible):
            return eligible[self.session.cursor]
        return None

    # Answers

    def _validate(self, question: Question, value: Any) -> AnswerValue:
        """Check ``value`` against the question's declared type and return it normalized."""
        if _is_empty(value):
            if question.required:
                raise ValidationError("This question is required", question_id=question.id)
            if question.type == "boolean":
                raise ValidationError(
                    f"Question '{question.id}' expects true or false",
                    question_id=question.id,
                )
            return [] if question.type == "multiselect" else ""

        if question.type == "boolean":
            if not isinstance(value, bool):
                raise ValidationError(
                    f"Question '{question.id}' expects true or false, got {value!r}",
                    question_id=question.id,
                )
            return value

        if isinstance(value, bool):
            raise ValidationError(
                f"Question '{question.id}' expects a {question.type} answer, not a boolean",
                question_id=question.id,
            )

        options = question.options or []
        if question.type == "multiselect":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValidationError(
                    f"Question '{question.id}' expects a list of options",
                    question_id=question.id,
                )
            unknown = [v for v in value if v not in options]
            if unknown:
                raise ValidationError(
                    f"Invalid option(s) for '{question.id}': {', '.join(unknown)}. "
                    f"Choose from: {', '.join(options)}",
                    question_id=question.id,
                )
            return list(value)

        if not isinstance(value, str):
            raise ValidationError(
                f"Question '{question.id}' expects a text answer",
                question_id=question.id,
            )
        if question.type == "select" and value not in options:
            raise ValidationError(
                f"Invalid option for '{question.id}': {value}. Choose from: {', '.join(options)}",
                question_id=question.id,
            )
        return value

    def answer_current_question(self, value: Any) -> Answer:
        """Record ``value`` for the current question and advance the cursor.

        Raises:
            ValidationError: No current question, a required value is empty,
                or the value does not fit the question's type.
        """
        question = self.get_current_question()
        if question is None:
            raise ValidationError("No current question to answer")

        normalized = self._validate(question, value)

        answer = Answer(question_id=question.id, value=normalized)
        self.session.answers = [a for a in self.session.answers if a.question_id != question.id]
        self.session.answers.append(answer)
        self.session.cursor += 1
        self.session.touch()
        # eligibility may have changed with this answer
        self._sync_completion()
        return answer

    def get_response(self, question_id: str) -> Answer | None:
        return self.session.answer_for(question_id)

    def get_all_responses(self) -> list[Answer]:
        return list(self.session.answers)

    # Navigation

    def go_to_previous_question(self) -> bool:
        """Step the cursor back by one. Returns False at the first question."""
        if self.session.cursor <= 0:
            return False
        self.session.cursor -= 1
        self.session.touch()
        self._sync_completion()
        return True

    def go_to_question(self, question_id: str) -> bool:
        """Move the cursor to ``question_id`` if it is currently eligible."""
        for index, question in enumerate(self.eligible_questions()):
            if question.id == question_id:
                self.session.cursor = index
                self.session.touch()
                self._sync_completion()
                return True
        return False

    # Progress

    def is_complete(self) -> bool:
        return self.session.cursor >= len(self.eligible_questions())

    def _sync_completion(self) -> None:
        self.session.is_complete = self.is_complete()

    def get_progress(self) -> Progress:
        total = len(self.eligible_questions())
        current = min(len(self.session.answers), total)
        # round half up so 12.5% reports as 13%
        percentage = math.floor(current / total * 100 + 0.5) if total > 0 else 0
        return Progress(current=current, total=total, percentage=percentage)

    def get_unanswered_required_questions(self) -> list[Question]:
        answered = {a.question_id for a in self.session.answers}
        return [q for q in self.eligible_questions() if q.required and q.id not in answered]

    # Catalog extension

    def add_dynamic_question(self, question: Question) -> None:
        """Insert a follow-up question into the catalog and remember it on the session.

        Raises:
            ValidationError: A question with the same id already exists.
        """
        if question.id in self.catalog:
            raise ValidationError(
                f"Question '{question.id}' already exists", question_id=question.id
            )
        self.catalog.insert(question)
        self.session.dynamic_questions.append(question)
        self.session.touch()
        self._sync_completion()

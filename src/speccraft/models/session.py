# src/speccraft/models/session.py
"""Session and answer data models."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from speccraft.models.question import Question

AnswerValue = str | bool | list[str]


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_session_id() -> str:
    return f"questionnaire_{uuid4().hex}"


class Answer(BaseModel):
    """A recorded response to one question."""

    question_id: str
    value: AnswerValue
    timestamp: datetime = Field(default_factory=utc_now)


class Session(BaseModel):
    """The persisted state of one feature's questionnaire.

    ``cursor`` indexes the *eligible* question sequence, which is recomputed
    from the catalog and ``answers`` on every access.
    """

    id: str = Field(default_factory=new_session_id)
    feature_title: str
    feature_description: str = ""
    cursor: int = Field(default=0, ge=0)
    answers: list[Answer] = Field(default_factory=list)
    is_complete: bool = False
    dynamic_questions: list[Question] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        """Bump ``updated_at`` to now."""
        self.updated_at = utc_now()

    def answer_for(self, question_id: str) -> Answer | None:
        for answer in self.answers:
            if answer.question_id == question_id:
                return answer
        return None

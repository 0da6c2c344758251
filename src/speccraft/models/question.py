# src/speccraft/models/question.py
"""Question data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

QuestionType = Literal["text", "textarea", "select", "multiselect", "boolean"]
QuestionCategory = Literal[
    "overview", "functional", "technical", "ui_ux", "performance", "security"
]

SELECT_TYPES: frozenset[str] = frozenset({"select", "multiselect"})


def check_options(question_id: str, question_type: str, options: list[str] | None) -> None:
    """Options are required for select types and forbidden for the others."""
    if question_type in SELECT_TYPES and not options:
        raise ValueError(f"Question '{question_id}' of type {question_type} needs options")
    if question_type not in SELECT_TYPES and options is not None:
        raise ValueError(
            f"Question '{question_id}' of type {question_type} cannot have options"
        )


class DependencyRule(BaseModel):
    """Only ask a question once another question was answered with ``value``."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    value: str | bool


class Question(BaseModel):
    """A single catalog entry of the questionnaire."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    text: str
    type: QuestionType
    required: bool = False
    category: QuestionCategory
    order: int = Field(ge=1)
    options: list[str] | None = None
    depends_on: DependencyRule | None = None

    @model_validator(mode="after")
    def _check_options(self) -> Question:
        check_options(self.id, self.type, self.options)
        return self


class GeneratedQuestion(BaseModel):
    """A follow-up question proposed by an assistant, before it joins a catalog."""

    id: str = Field(min_length=1)
    text: str = Field(min_length=10)
    type: QuestionType
    required: bool = False
    category: QuestionCategory
    reasoning: str = ""
    order: int = Field(default=100, ge=1)
    options: list[str] | None = None

    @model_validator(mode="after")
    def _check_options(self) -> GeneratedQuestion:
        check_options(self.id, self.type, self.options)
        return self

    def to_question(self) -> Question:
        """Convert to a catalog Question (reasoning is dropped)."""
        return Question(
            id=self.id,
            text=self.text,
            type=self.type,
            required=self.required,
            category=self.category,
            order=self.order,
            options=self.options,
        )

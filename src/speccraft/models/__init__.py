# src/speccraft/models/__init__.py
"""Data models for SpecCraft."""

from speccraft.models.question import (
    DependencyRule,
    GeneratedQuestion,
    Question,
    QuestionCategory,
    QuestionType,
)
from speccraft.models.results import (
    CompletenessReport,
    Progress,
    SpecificationResult,
    SpecificationTemplate,
)
from speccraft.models.session import Answer, AnswerValue, Session

__all__ = [
    "Answer",
    "AnswerValue",
    "CompletenessReport",
    "DependencyRule",
    "GeneratedQuestion",
    "Progress",
    "Question",
    "QuestionCategory",
    "QuestionType",
    "Session",
    "SpecificationResult",
    "SpecificationTemplate",
]

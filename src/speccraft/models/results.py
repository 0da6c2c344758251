# src/speccraft/models/results.py
"""Result models returned by the engine, generator and factory."""

from pydantic import BaseModel, Field

from speccraft.models.session import Session


class Progress(BaseModel):
    """How far a session has progressed through its eligible questions."""

    current: int
    total: int
    percentage: int


class SpecificationTemplate(BaseModel):
    """The generated specification as plain-text fields, one list per section."""

    overview: str = ""
    user_stories: list[str] = Field(default_factory=list)
    functional_requirements: list[str] = Field(default_factory=list)
    edge_cases: list[str] = Field(default_factory=list)
    ui_ux_requirements: list[str] = Field(default_factory=list)
    technical_constraints: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class SpecificationResult(BaseModel):
    """Markdown, template and progress bundled for one session."""

    markdown: str
    template: SpecificationTemplate
    session: Session
    is_complete: bool
    completion_percentage: int


class CompletenessReport(BaseModel):
    """Whether every eligible required question has an answer."""

    is_valid: bool
    missing_required_questions: list[str] = Field(default_factory=list)

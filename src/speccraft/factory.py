# src/speccraft/factory.py
"""Convenience functions that combine the engine and the markdown generator."""

from __future__ import annotations

from datetime import date

from speccraft.engine import QuestionnaireEngine
from speccraft.exceptions import PreconditionError
from speccraft.generator import MarkdownGenerator
from speccraft.models import CompletenessReport, Session, SpecificationResult


def create_new_questionnaire(
    feature_title: str, feature_description: str = ""
) -> QuestionnaireEngine:
    """Start a questionnaire for a new feature."""
    return QuestionnaireEngine.new(feature_title, feature_description)


def create_specification_from_session(
    session: Session,
    generated_on: date | None = None,
) -> SpecificationResult:
    """Render ``session`` and report how complete it is.

    Args:
        session: Session to render. It is not modified.
        generated_on: Footer date for the markdown (default: today).

    Returns:
        SpecificationResult with markdown, template and completion state.
    """
    engine = QuestionnaireEngine.from_session(session)
    generator = MarkdownGenerator(engine.session.answers)
    progress = engine.get_progress()

    return SpecificationResult(
        markdown=generator.generate_markdown(session.feature_title, generated_on),
        template=generator.generate_specification_template(),
        session=engine.session,
        is_complete=engine.is_complete(),
        completion_percentage=progress.percentage,
    )


def validate_specification_completeness(session: Session) -> CompletenessReport:
    """List the text of eligible required questions that have no answer."""
    engine = QuestionnaireEngine.from_session(session)
    missing = engine.get_unanswered_required_questions()
    return CompletenessReport(
        is_valid=not missing,
        missing_required_questions=[q.text for q in missing],
    )


def ensure_ready_for_generation(session: Session) -> None:
    """Check that ``session`` may be turned into a specification file.

    Raises:
        PreconditionError: The questionnaire is not finished, or an eligible
            required question has no answer.
    """
    engine = QuestionnaireEngine.from_session(session)
    percentage = engine.get_progress().percentage
    missing = [q.text for q in engine.get_unanswered_required_questions()]

    if not engine.is_complete():
        raise PreconditionError(
            f"Session is not complete ({percentage}% done). Continue answering questions first.",
            completion_percentage=percentage,
            missing=missing,
        )
    if missing:
        raise PreconditionError(
            f"{len(missing)} required question(s) have no answer.",
            completion_percentage=percentage,
            missing=missing,
        )

# src/speccraft/commands/follow_up.py
"""Follow-up commands - prompt for and add assistant-proposed questions.

SpecCraft does not talk to a model. ``follow_up`` returns a prompt for the
client's assistant; the questions it proposes come back through
``add_question`` (one structured question) or ``add_generated_questions``
(the assistant's raw JSON reply).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from speccraft.commands.base import (
    AddQuestionResult,
    FollowUpResult,
    fill_session_result,
    load_engine,
    load_settings,
    resolve_store,
)
from speccraft.exceptions import SpecCraftError, ValidationError
from speccraft.models import GeneratedQuestion, Question
from speccraft.prompts import FollowUpPrompter, parse_generated_questions
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def follow_up(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> FollowUpResult:
    """Build a follow-up question prompt about the latest answer."""
    try:
        settings = load_settings(config_path)
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
        prompter = FollowUpPrompter(settings.max_follow_up_questions)
        prompt = prompter.follow_up_prompt(engine.session)
    except SpecCraftError as e:
        return FollowUpResult(success=False, session_id=session_id, error=str(e))

    return FollowUpResult(
        success=True,
        session_id=session_id,
        prompt=prompt,
        max_questions=settings.max_follow_up_questions,
    )


def _to_question(question: Question | GeneratedQuestion | dict[str, Any]) -> Question:
    if isinstance(question, Question):
        return question
    try:
        if isinstance(question, dict):
            question = GeneratedQuestion.model_validate(question)
        return question.to_question()
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid follow-up question: {e}") from e


def _add(
    session_id: str,
    questions: list[Question],
    store: SessionStore,
) -> AddQuestionResult:
    try:
        engine = load_engine(store, session_id)
        for question in questions:
            engine.add_dynamic_question(question)
    except ValidationError as e:
        return AddQuestionResult(
            success=False, session_id=session_id, error=str(e), question_id=e.question_id
        )
    except SpecCraftError as e:
        return AddQuestionResult(success=False, session_id=session_id, error=str(e))

    store.save(engine.session)
    logger.info("Session %s: added %d follow-up question(s)", session_id, len(questions))

    result = AddQuestionResult(success=True, added=[q.id for q in questions])
    fill_session_result(result, engine)
    return result


def add_question(
    session_id: str,
    question: Question | GeneratedQuestion | dict[str, Any],
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> AddQuestionResult:
    """Insert one follow-up question into a session's catalog.

    Dicts are validated as GeneratedQuestion (order defaults to 100, after
    every built-in question).
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        parsed = _to_question(question)
    except SpecCraftError as e:
        return AddQuestionResult(success=False, session_id=session_id, error=str(e))
    return _add(session_id, [parsed], store)


def add_generated_questions(
    session_id: str,
    response_text: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> AddQuestionResult:
    """Parse an assistant's JSON reply and insert the questions it proposes.

    At most ``max_follow_up_questions`` are taken. Nothing is added if any
    entry is invalid or collides with an existing question id.
    """
    try:
        settings = load_settings(config_path)
        store = resolve_store(store, data_dir, config_path)
        generated = parse_generated_questions(response_text, settings.max_follow_up_questions)
    except SpecCraftError as e:
        return AddQuestionResult(success=False, session_id=session_id, error=str(e))
    return _add(session_id, [g.to_question() for g in generated], store)

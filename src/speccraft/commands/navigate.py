# src/speccraft/commands/navigate.py
"""Navigation commands - move the cursor of a session."""

from __future__ import annotations

import logging
from pathlib import Path

from speccraft.commands.base import (
    NavigationResult,
    fill_session_result,
    load_engine,
    resolve_store,
)
from speccraft.exceptions import NotFoundError, SpecCraftError, ValidationError
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def previous(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> NavigationResult:
    """Step back to the previous eligible question.

    At the first question nothing changes and ``moved`` is False.
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
    except SpecCraftError as e:
        return NavigationResult(success=False, session_id=session_id, error=str(e))

    moved = engine.go_to_previous_question()
    if moved:
        store.save(engine.session)

    result = NavigationResult(success=True, moved=moved)
    fill_session_result(result, engine)
    return result


def goto(
    session_id: str,
    question_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> NavigationResult:
    """Jump to a question that is currently eligible.

    Unknown question ids and questions hidden by an unmet dependency are
    reported as errors.
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
        if question_id not in engine.catalog:
            raise NotFoundError("question", question_id)
        if not engine.go_to_question(question_id):
            raise ValidationError(
                f"Question {question_id} is not available in this session",
                question_id=question_id,
            )
    except ValidationError as e:
        return NavigationResult(
            success=False, session_id=session_id, error=str(e), question_id=e.question_id
        )
    except SpecCraftError as e:
        return NavigationResult(success=False, session_id=session_id, error=str(e))

    store.save(engine.session)
    logger.debug("Session %s: moved to %s", session_id, question_id)

    result = NavigationResult(success=True, moved=True)
    fill_session_result(result, engine)
    return result

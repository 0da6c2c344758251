# src/speccraft/commands/answer.py
"""Answer command - record a response for the current question."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from speccraft.commands.base import AnswerResult, fill_session_result, load_engine, resolve_store
from speccraft.engine import coerce_answer
from speccraft.exceptions import SpecCraftError, ValidationError
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def answer(
    session_id: str,
    value: Any,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> AnswerResult:
    """Answer the session's current question and advance.

    String input is coerced to the question's type first, so "yes" answers
    a boolean question and "a, b" answers a multiselect one.

    Args:
        session_id: Session to answer in
        value: The raw answer
        store: Session store (default: built from config)
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        AnswerResult with the recorded answer and the next question
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
        question = engine.get_current_question()
        if question is None:
            raise ValidationError("No current question to answer")
        recorded = engine.answer_current_question(coerce_answer(question, value))
    except ValidationError as e:
        return AnswerResult(
            success=False,
            session_id=session_id,
            error=str(e),
            question_id=e.question_id,
        )
    except SpecCraftError as e:
        return AnswerResult(success=False, session_id=session_id, error=str(e))

    store.save(engine.session)
    logger.debug("Session %s: answered %s", session_id, recorded.question_id)

    result = AnswerResult(success=True, answered=recorded, answered_question=question)
    fill_session_result(result, engine)
    return result

# src/speccraft/commands/new.py
"""New command - start or resume a questionnaire session."""

from __future__ import annotations

import logging
from pathlib import Path

from speccraft.commands.base import (
    ContinueResult,
    SessionResult,
    fill_session_result,
    load_engine,
    resolve_store,
)
from speccraft.engine import QuestionnaireEngine
from speccraft.exceptions import SpecCraftError
from speccraft.prompts import FollowUpPrompter
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def new(
    title: str,
    description: str = "",
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SessionResult:
    """Create a session for a new feature and store it.

    Args:
        title: Feature title
        description: Short feature description
        store: Session store (default: built from config)
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SessionResult positioned on the first question
    """
    if not title.strip():
        return SessionResult(success=False, error="Feature title must not be empty.")

    try:
        store = resolve_store(store, data_dir, config_path)
    except SpecCraftError as e:
        return SessionResult(success=False, error=str(e))

    engine = QuestionnaireEngine.new(title.strip(), description.strip())
    store.save(engine.session)
    logger.info("Created session %s for %r", engine.session.id, engine.session.feature_title)

    return fill_session_result(SessionResult(success=True), engine)


def continue_session(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ContinueResult:
    """Report where a stored session currently stands.

    While a question is pending, the result also carries two assistant
    prompts for it: one to tailor its wording to the answers so far and one
    to propose an answer from them.

    Returns:
        ContinueResult with the current question, or is_complete set
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
    except SpecCraftError as e:
        return ContinueResult(success=False, session_id=session_id, error=str(e))

    result = ContinueResult(success=True)
    fill_session_result(result, engine)
    if result.question is not None:
        prompter = FollowUpPrompter()
        result.improvement_prompt = prompter.improvement_prompt(engine.session, result.question)
        result.inference_prompt = prompter.inference_prompt(engine.session, result.question)
    return result

# src/speccraft/commands/status.py
"""Status command - snapshot of one session."""

from __future__ import annotations

from pathlib import Path

from speccraft.commands.base import StatusResult, fill_session_result, load_engine, resolve_store
from speccraft.exceptions import SpecCraftError
from speccraft.stores import SessionStore


def status(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatusResult:
    """Get a session's answers, position and progress.

    Args:
        session_id: Session to describe
        store: Session store (default: built from config)
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        StatusResult snapshot
    """
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
    except SpecCraftError as e:
        return StatusResult(success=False, session_id=session_id, error=str(e))

    session = engine.session
    result = StatusResult(
        success=True,
        feature_description=session.feature_description,
        answers=engine.get_all_responses(),
        missing_required=[q.text for q in engine.get_unanswered_required_questions()],
        created_at=session.created_at,
        updated_at=session.updated_at,
    )
    fill_session_result(result, engine)
    return result

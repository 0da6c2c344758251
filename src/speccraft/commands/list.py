# src/speccraft/commands/list.py
"""List command - show stored sessions."""

from __future__ import annotations

from pathlib import Path

from speccraft.commands.base import ListResult, SessionInfo, resolve_store
from speccraft.engine import QuestionnaireEngine
from speccraft.exceptions import SpecCraftError
from speccraft.stores import SessionStore


def list_sessions(
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ListResult:
    """List stored sessions with their progress, oldest first."""
    try:
        store = resolve_store(store, data_dir, config_path)
    except SpecCraftError as e:
        return ListResult(success=False, error=str(e))

    result = ListResult(success=True)
    for session in store.list_sessions():
        engine = QuestionnaireEngine(session)
        result.sessions.append(
            SessionInfo(
                session_id=session.id,
                feature_title=session.feature_title,
                percentage=engine.get_progress().percentage,
                is_complete=engine.is_complete(),
                updated_at=session.updated_at,
            )
        )
    return result

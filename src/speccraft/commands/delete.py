# src/speccraft/commands/delete.py
"""Delete command - remove a stored session."""

from __future__ import annotations

import logging
from pathlib import Path

from speccraft.commands.base import DeleteResult, resolve_store
from speccraft.exceptions import SpecCraftError
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def delete(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> DeleteResult:
    """Delete a session from the store.

    Returns:
        DeleteResult, unsuccessful if the session did not exist
    """
    try:
        store = resolve_store(store, data_dir, config_path)
    except SpecCraftError as e:
        return DeleteResult(success=False, session_id=session_id, error=str(e))

    if not store.delete(session_id):
        return DeleteResult(
            success=False,
            session_id=session_id,
            error=f"Session {session_id} not found",
        )
    logger.info("Deleted session %s", session_id)
    return DeleteResult(success=True, session_id=session_id)

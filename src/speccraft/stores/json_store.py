# src/speccraft/stores/json_store.py
"""JSON file session store."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from speccraft.models import Session
from speccraft.stores.base import SessionStore

logger = logging.getLogger(__name__)


class JSONSessionStore(SessionStore):
    """Keeps every session in a single ``sessions.json`` document.

    The file maps session id to the session's JSON form. Writes go to a
    temporary file that replaces the original, so a crash mid-write leaves
    the previous version intact. Saves and deletes through one instance are
    serialized, so threads sharing the store never drop each other's sessions.
    """

    def __init__(self, path: str) -> None:
        """Initialize the JSON session store."""
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            text = f.read()
        if not text.strip():
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Session file {self.path} does not contain a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f"{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            json.dump(data, f, indent=2)
        try:
            os.replace(f.name, self.path)
        except OSError:
            os.unlink(f.name)
            raise

    def load(self, session_id: str) -> Session | None:
        """Retrieve a session by ID."""
        raw = self._read().get(session_id)
        if raw is None:
            return None
        return Session.model_validate(raw)

    def save(self, session: Session) -> None:
        """Store a session, overwriting if it exists."""
        with self._lock:
            data = self._read()
            data[session.id] = session.model_dump(mode="json")
            self._write(data)
        logger.debug("Saved session %s to %s", session.id, self.path)

    def list_sessions(self) -> list[Session]:
        """List all sessions ordered by creation time."""
        sessions = [Session.model_validate(raw) for raw in self._read().values()]
        return sorted(sessions, key=lambda s: s.created_at)

    def delete(self, session_id: str) -> bool:
        """Delete a session by ID."""
        with self._lock:
            data = self._read()
            if session_id not in data:
                return False
            del data[session_id]
            self._write(data)
        return True

# src/speccraft/stores/sqlite_session.py
"""SQLite session store implementation."""

import logging
import sqlite3
from pathlib import Path

from speccraft.models import Session
from speccraft.stores.base import SessionStore

logger = logging.getLogger(__name__)


class SQLiteSessionStore(SessionStore):
    """SQLite-based session store.

    Each session is one row; the full session is kept as JSON next to a few
    columns used for listing.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite session store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS sessions (
                    id TEXT PRIMARY KEY,
                    feature_title TEXT NOT NULL,
                    is_complete INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    data TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_session_created ON sessions(created_at)")
            conn.commit()

    def load(self, session_id: str) -> Session | None:
        """Retrieve a session by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT data FROM sessions WHERE id = ?", (session_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            return Session.model_validate_json(row[0])

    def save(self, session: Session) -> None:
        """Store a session, overwriting if exists."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO sessions
                    (id, feature_title, is_complete, created_at, updated_at, data)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    session.id,
                    session.feature_title,
                    int(session.is_complete),
                    session.created_at.isoformat(),
                    session.updated_at.isoformat(),
                    session.model_dump_json(),
                ),
            )
            conn.commit()
        logger.debug("Saved session %s to %s", session.id, self.db_path)

    def list_sessions(self) -> list[Session]:
        """List all sessions ordered by creation time."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT data FROM sessions ORDER BY created_at")
            return [Session.model_validate_json(row[0]) for row in cursor.fetchall()]

    def delete(self, session_id: str) -> bool:
        """Delete a session by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
            conn.commit()
            return cursor.rowcount > 0

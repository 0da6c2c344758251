# src/speccraft/stores/base.py
"""Abstract base class for session storage."""

from abc import ABC, abstractmethod

from speccraft.models import Session


class SessionStore(ABC):
    """Abstract base class for questionnaire session persistence.

    Stores perform no conflict detection: when two callers save the same
    session id, the last write wins.
    """

    @abstractmethod
    def load(self, session_id: str) -> Session | None:
        """Retrieve a session by ID. Returns None if not found."""
        ...

    @abstractmethod
    def save(self, session: Session) -> None:
        """Store a session, overwriting any previous version."""
        ...

    @abstractmethod
    def list_sessions(self) -> list[Session]:
        """List all stored sessions, oldest first."""
        ...

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Delete a session. Returns True if it existed."""
        ...

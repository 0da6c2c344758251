"""Storage abstractions for SpecCraft."""

from speccraft.stores.base import SessionStore
from speccraft.stores.json_store import JSONSessionStore
from speccraft.stores.sqlite_session import SQLiteSessionStore

__all__ = [
    "SessionStore",
    "JSONSessionStore",
    "SQLiteSessionStore",
]

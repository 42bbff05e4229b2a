# Area: Store
"""
Storage adapters for the match engine.

This package contains:
- MatchStore, the interface the engine is written against
- MemoryStore for a single-player offline session
- SqliteStore for a host console shared with viewer processes
"""

from .base import MatchStore
from .memory import MemoryStore
from .sqlite_store import SqliteStore
from .database import init_database, get_connection

__all__ = [
    "MatchStore",
    "MemoryStore",
    "SqliteStore",
    "init_database",
    "get_connection",
]

# Area: Store
"""
rumble_engine._store.database — Database Initialization
=======================================================

Handles SQLite database initialization and connection management
for the shared (host + viewers) store. Driver errors that mean the
database could not be reached are surfaced as StorageUnavailable.
"""

import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..errors import StorageUnavailable

logger = logging.getLogger("rumble_engine.store.database")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Seconds a writer waits on a locked database before giving up
BUSY_TIMEOUT_SECONDS = 5.0


def get_connection(
    db_path: str = "rumble.db", timeout: float = BUSY_TIMEOUT_SECONDS
) -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file
        timeout: Busy timeout in seconds

    Returns:
        SQLite connection with row factory set

    Raises:
        StorageUnavailable: If the database file cannot be opened
    """
    try:
        conn = sqlite3.connect(db_path, timeout=timeout)
    except sqlite3.Error as e:
        raise StorageUnavailable("connect", str(e)) from e
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = "rumble.db") -> None:
    """
    Initialize the database with schema.

    Args:
        db_path: Path to the SQLite database file
    """
    conn = get_connection(db_path)
    try:
        with open(SCHEMA_PATH, "r") as f:
            schema = f.read()
        conn.executescript(schema)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    except sqlite3.IntegrityError:
        raise
    except sqlite3.DatabaseError as e:
        raise StorageUnavailable("init_database", str(e)) from e
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Provides common database operations and connection management.
    Each call opens its own connection so separate processes can share
    one database file.
    """

    def __init__(self, db_path: str = "rumble.db"):
        """
        Initialize repository.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        """Get a database connection."""
        return get_connection(self.db_path)

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[sqlite3.Connection]:
        """
        Run several statements as one atomic unit.

        Commits on success, rolls back on any exception, and maps
        driver failures to StorageUnavailable.
        """
        conn = self._get_conn()
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise
        except sqlite3.DatabaseError as e:
            conn.rollback()
            logger.warning(f"Storage failure during {operation}: {e}")
            raise StorageUnavailable(operation, str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Optional[list]:
        """
        Execute a query.

        Args:
            query: SQL query string
            params: Query parameters
            fetch: If True, fetch and return results

        Returns:
            Query results if fetch=True, else None
        """
        with self._transaction(_operation_name(query)) as conn:
            cursor = conn.execute(query, params)
            if fetch:
                return [dict(row) for row in cursor.fetchall()]
            return None

    def _execute_count(self, query: str, params: tuple = ()) -> int:
        """Execute a write and return how many rows it changed."""
        with self._transaction(_operation_name(query)) as conn:
            return conn.execute(query, params).rowcount

    def _execute_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        """Execute query and return single result."""
        results = self._execute(query, params, fetch=True)
        return results[0] if results else None


def _operation_name(query: str) -> str:
    words = query.split()
    return " ".join(words[:3]).lower() if words else "query"

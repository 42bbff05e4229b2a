# Area: Store
"""
rumble_engine._store.repo_awards — Awards Repository
====================================================

Repository for award_records and award_grants. Both tables are
write-once: inserts use INSERT OR IGNORE on the unique key and the
row count tells the caller whether it won.
"""

from typing import Any, Dict, List, Optional
from .database import BaseRepository


class AwardRepository(BaseRepository):
    """
    Repository for award_records and award_grants tables.

    An award record is both the recorded result and the marker that
    its points were handed out. A grant is the marker for one point
    delta to one player.
    """

    def insert_record(
        self, party_code: str, division: Optional[str], outcome_key: str, value: str
    ) -> bool:
        """
        Insert an award record if absent.

        Args:
            party_code: Party identifier
            division: Division value, or None for event-wide outcomes
            outcome_key: Storage string of the outcome key
            value: The recorded result

        Returns:
            True if this call inserted the record, False if it existed
        """
        query = """
            INSERT OR IGNORE INTO award_records
            (party_code, division, outcome_key, value)
            VALUES (?, ?, ?, ?)
        """
        return self._execute_count(
            query, (party_code, division, outcome_key, value)
        ) == 1

    def get_record(self, party_code: str, outcome_key: str) -> Optional[Dict[str, Any]]:
        """Get an award record by key."""
        query = """
            SELECT * FROM award_records
            WHERE party_code = ? AND outcome_key = ?
        """
        return self._execute_one(query, (party_code, outcome_key))

    def get_records(
        self, party_code: str, division: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get award records for a party, optionally for one division."""
        if division is None:
            query = """
                SELECT * FROM award_records WHERE party_code = ?
                ORDER BY rowid
            """
            return self._execute(query, (party_code,), fetch=True) or []
        query = """
            SELECT * FROM award_records
            WHERE party_code = ? AND division = ?
            ORDER BY rowid
        """
        return self._execute(query, (party_code, division), fetch=True) or []

    def insert_grant(
        self,
        party_code: str,
        outcome_key: str,
        player_id: str,
        reason: str,
        delta: int,
    ) -> bool:
        """
        Insert a grant marker and apply its points in one transaction.

        Returns:
            True if the grant was new and the points were applied
        """
        with self._transaction("insert_grant") as conn:
            cursor = conn.execute(
                """
                INSERT OR IGNORE INTO award_grants
                (party_code, outcome_key, player_id, reason, delta)
                VALUES (?, ?, ?, ?, ?)
                """,
                (party_code, outcome_key, player_id, reason, delta),
            )
            if cursor.rowcount != 1:
                return False
            conn.execute(
                """
                INSERT OR IGNORE INTO players (party_code, player_id, display_name)
                VALUES (?, ?, ?)
                """,
                (party_code, player_id, player_id),
            )
            conn.execute(
                """
                UPDATE players SET points = points + ?
                WHERE party_code = ? AND player_id = ?
                """,
                (delta, party_code, player_id),
            )
            return True

    def get_grants(
        self, party_code: str, player_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get grants for a party, optionally for one player."""
        if player_id is None:
            query = "SELECT * FROM award_grants WHERE party_code = ? ORDER BY rowid"
            return self._execute(query, (party_code,), fetch=True) or []
        query = """
            SELECT * FROM award_grants
            WHERE party_code = ? AND player_id = ?
            ORDER BY rowid
        """
        return self._execute(query, (party_code, player_id), fetch=True) or []

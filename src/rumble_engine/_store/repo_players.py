# Area: Store
"""
rumble_engine._store.repo_players — Players Repository
======================================================

Repository for players and their predictions. Points are only ever
changed with a server-side increment.
"""

from typing import Any, Dict, List, Optional, Sequence
from .database import BaseRepository


class PlayerRepository(BaseRepository):
    """
    Repository for players and predictions tables.
    """

    def save_player(self, party_code: str, player_id: str, display_name: str) -> None:
        """
        Save a player, keeping points if the player already exists.

        Args:
            party_code: Party identifier
            player_id: Unique player identifier within the party
            display_name: Name shown on the leaderboard
        """
        query = """
            INSERT INTO players (party_code, player_id, display_name)
            VALUES (?, ?, ?)
            ON CONFLICT (party_code, player_id)
            DO UPDATE SET display_name = excluded.display_name
        """
        self._execute(query, (party_code, player_id, display_name))

    def get_player(self, party_code: str, player_id: str) -> Optional[Dict[str, Any]]:
        """Get a player by ID."""
        query = "SELECT * FROM players WHERE party_code = ? AND player_id = ?"
        return self._execute_one(query, (party_code, player_id))

    def get_all_players(self, party_code: str) -> List[Dict[str, Any]]:
        """Get all players ordered by points, highest first."""
        query = """
            SELECT * FROM players WHERE party_code = ?
            ORDER BY points DESC, display_name
        """
        return self._execute(query, (party_code,), fetch=True) or []

    def increment_points(self, party_code: str, player_id: str, delta: int) -> int:
        """
        Atomically add delta to a player's points.

        Returns:
            The new total
        """
        with self._transaction("increment_points") as conn:
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
            row = conn.execute(
                "SELECT points FROM players WHERE party_code = ? AND player_id = ?",
                (party_code, player_id),
            ).fetchone()
            return row["points"]

    def save_prediction(
        self, party_code: str, player_id: str, outcome_key: str, value: str
    ) -> None:
        """Save or replace a player's prediction for one outcome key."""
        query = """
            INSERT OR REPLACE INTO predictions
            (party_code, player_id, outcome_key, value)
            VALUES (?, ?, ?, ?)
        """
        self._execute(query, (party_code, player_id, outcome_key, value))

    def get_predictions(
        self, party_code: str, outcome_keys: Sequence[str]
    ) -> List[Dict[str, Any]]:
        """Get all predictions for any of the given outcome keys."""
        if not outcome_keys:
            return []
        placeholders = ", ".join("?" for _ in outcome_keys)
        query = f"""
            SELECT * FROM predictions
            WHERE party_code = ? AND outcome_key IN ({placeholders})
            ORDER BY player_id, outcome_key
        """
        return self._execute(query, (party_code, *outcome_keys), fetch=True) or []

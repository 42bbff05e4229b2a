# Area: Store
"""
rumble_engine._store.repo_slots — Slots Repository
==================================================

Repository for the slots table. Entry and elimination writes are
conditional updates so a lost race is detected by the row count
instead of silently overwriting another writer.
"""

from datetime import datetime
from typing import List, Optional

from .database import BaseRepository
from .._engine.slots import Slot, SLOT_COUNT


class SlotRepository(BaseRepository):
    """
    Repository for slots table.

    Rows are created for all 30 numbers of a division the first time
    the division is touched.
    """

    def ensure_division(self, party_code: str, division: str) -> None:
        """Create the 30 empty slot rows for a division if missing."""
        with self._transaction("ensure_division") as conn:
            conn.executemany(
                """
                INSERT OR IGNORE INTO slots (party_code, division, number)
                VALUES (?, ?, ?)
                """,
                [(party_code, division, n) for n in range(1, SLOT_COUNT + 1)],
            )

    def get_slots(self, party_code: str, division: str) -> List[Slot]:
        """
        Get every slot of a division, ordered by number.

        Args:
            party_code: Party identifier
            division: Division value ('mens' or 'womens')

        Returns:
            List of Slot objects
        """
        query = """
            SELECT * FROM slots
            WHERE party_code = ? AND division = ?
            ORDER BY number
        """
        rows = self._execute(query, (party_code, division), fetch=True) or []
        return [_row_to_slot(row) for row in rows]

    def assign_owner(
        self, party_code: str, division: str, number: int, player_id: str
    ) -> bool:
        """Set the owner of a slot that has not entered. Returns True on write."""
        query = """
            UPDATE slots SET owner_player_id = ?
            WHERE party_code = ? AND division = ? AND number = ?
              AND entry_time IS NULL
              AND (owner_player_id IS NULL OR owner_player_id = ?)
        """
        return self._execute_count(
            query, (player_id, party_code, division, number, player_id)
        ) == 1

    def mark_entered(self, party_code: str, division: str, slot: Slot) -> bool:
        """Write an entry only if the slot has not entered yet."""
        query = """
            UPDATE slots
            SET wrestler_name = ?,
                owner_player_id = COALESCE(?, owner_player_id),
                entry_time = ?
            WHERE party_code = ? AND division = ? AND number = ?
              AND entry_time IS NULL
        """
        return self._execute_count(query, (
            slot.wrestler_name,
            slot.owner_player_id,
            _to_text(slot.entry_time),
            party_code, division, slot.number,
        )) == 1

    def mark_eliminated(self, party_code: str, division: str, slot: Slot) -> bool:
        """Write an elimination only if the slot is currently active."""
        query = """
            UPDATE slots
            SET elimination_time = ?, eliminated_by_number = ?
            WHERE party_code = ? AND division = ? AND number = ?
              AND entry_time IS NOT NULL
              AND elimination_time IS NULL
        """
        return self._execute_count(query, (
            _to_text(slot.elimination_time),
            slot.eliminated_by_number,
            party_code, division, slot.number,
        )) == 1


def _to_text(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _from_text(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _row_to_slot(row: dict) -> Slot:
    return Slot(
        number=row["number"],
        wrestler_name=row["wrestler_name"],
        owner_player_id=row["owner_player_id"],
        entry_time=_from_text(row["entry_time"]),
        elimination_time=_from_text(row["elimination_time"]),
        eliminated_by_number=row["eliminated_by_number"],
    )

# Area: Store
"""
rumble_engine._store.sqlite_store — Shared SQLite Store
=======================================================

MatchStore backed by one SQLite file. The host console and any number
of viewer processes can open the same file; atomicity comes from the
conditional SQL writes in the repositories, not from a process lock.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .base import MatchStore
from .database import init_database
from .repo_awards import AwardRepository
from .repo_players import PlayerRepository
from .repo_slots import SlotRepository
from .._engine.slots import Slot

logger = logging.getLogger("rumble_engine.store.sqlite")


class SqliteStore(MatchStore):
    """
    MatchStore over the slots, players, predictions and award tables.

    Args:
        db_path: Path to the SQLite database file
        initialize: Create the schema on construction
    """

    def __init__(self, db_path: str = "rumble.db", initialize: bool = True):
        self.db_path = db_path
        if initialize:
            init_database(db_path)
        self.slots = SlotRepository(db_path)
        self.awards = AwardRepository(db_path)
        self.players = PlayerRepository(db_path)
        self._known_divisions: set = set()

    def _ensure(self, party_code: str, division: str) -> None:
        if (party_code, division) not in self._known_divisions:
            self.slots.ensure_division(party_code, division)
            self._known_divisions.add((party_code, division))
            logger.debug(f"Slot rows ready for {party_code}/{division}")

    def load_slots(self, party_code: str, division: str) -> List[Slot]:
        return self.slots.get_slots(party_code, division)

    def assign_owner(
        self, party_code: str, division: str, number: int, player_id: str
    ) -> bool:
        self._ensure(party_code, division)
        return self.slots.assign_owner(party_code, division, number, player_id)

    def write_entry(self, party_code: str, division: str, slot: Slot) -> bool:
        self._ensure(party_code, division)
        return self.slots.mark_entered(party_code, division, slot)

    def write_elimination(self, party_code: str, division: str, slot: Slot) -> bool:
        return self.slots.mark_eliminated(party_code, division, slot)

    def insert_award(
        self, party_code: str, division: Optional[str], outcome_key: str, value: str
    ) -> bool:
        return self.awards.insert_record(party_code, division, outcome_key, value)

    def get_award(self, party_code: str, outcome_key: str) -> Optional[Dict[str, Any]]:
        return self.awards.get_record(party_code, outcome_key)

    def list_awards(
        self, party_code: str, division: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return self.awards.get_records(party_code, division)

    def insert_grant(
        self, party_code: str, outcome_key: str, player_id: str, reason: str, delta: int
    ) -> bool:
        return self.awards.insert_grant(party_code, outcome_key, player_id, reason, delta)

    def save_player(self, party_code: str, player_id: str, display_name: str) -> None:
        self.players.save_player(party_code, player_id, display_name)

    def get_player(self, party_code: str, player_id: str) -> Optional[Dict[str, Any]]:
        return self.players.get_player(party_code, player_id)

    def list_players(self, party_code: str) -> List[Dict[str, Any]]:
        return self.players.get_all_players(party_code)

    def increment_points(self, party_code: str, player_id: str, delta: int) -> int:
        return self.players.increment_points(party_code, player_id, delta)

    def save_prediction(
        self, party_code: str, player_id: str, outcome_key: str, value: str
    ) -> None:
        self.players.save_prediction(party_code, player_id, outcome_key, value)

    def list_predictions(
        self, party_code: str, outcome_keys: Sequence[str]
    ) -> List[Dict[str, Any]]:
        return self.players.get_predictions(party_code, list(outcome_keys))

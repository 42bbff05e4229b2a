# Area: Store
"""
rumble_engine._store.base — Match Store Interface
=================================================

Abstract base class for the storage adapters the engine runs on.
The engine needs two primitives from any store: an atomic
insert-if-absent on a unique key and an atomic increment of a
player's points. Everything else is plain reads and conditional
slot writes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from .._engine.slots import Slot


class MatchStore(ABC):
    """
    Storage adapter for slots, players, predictions and awards.

    All methods may raise StorageUnavailable. Implementations must make
    insert_award, insert_grant and increment_points atomic with respect
    to every other writer of the same store.
    """

    # ── Slots ────────────────────────────────────────────────

    @abstractmethod
    def load_slots(self, party_code: str, division: str) -> List[Slot]:
        """Return the stored slots of a division (may be fewer than 30)."""

    @abstractmethod
    def assign_owner(
        self, party_code: str, division: str, number: int, player_id: str
    ) -> bool:
        """Set a pending slot's owner. False if entered or owned by another."""

    @abstractmethod
    def write_entry(self, party_code: str, division: str, slot: Slot) -> bool:
        """Persist an entry. False if the slot had already entered."""

    @abstractmethod
    def write_elimination(self, party_code: str, division: str, slot: Slot) -> bool:
        """Persist an elimination. False if the slot was not active."""

    # ── Awards ───────────────────────────────────────────────

    @abstractmethod
    def insert_award(
        self, party_code: str, division: Optional[str], outcome_key: str, value: str
    ) -> bool:
        """Insert-if-absent. True only for the caller that created the record."""

    @abstractmethod
    def get_award(self, party_code: str, outcome_key: str) -> Optional[Dict[str, Any]]:
        """Return the award record for a key, or None."""

    @abstractmethod
    def list_awards(
        self, party_code: str, division: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Return award records, optionally for one division."""

    @abstractmethod
    def insert_grant(
        self, party_code: str, outcome_key: str, player_id: str, reason: str, delta: int
    ) -> bool:
        """Insert a grant marker and apply delta atomically. True if new."""

    # ── Players ──────────────────────────────────────────────

    @abstractmethod
    def save_player(self, party_code: str, player_id: str, display_name: str) -> None:
        """Create or rename a player without touching points."""

    @abstractmethod
    def get_player(self, party_code: str, player_id: str) -> Optional[Dict[str, Any]]:
        """Return the player record, or None."""

    @abstractmethod
    def list_players(self, party_code: str) -> List[Dict[str, Any]]:
        """Return all players, highest points first."""

    @abstractmethod
    def increment_points(self, party_code: str, player_id: str, delta: int) -> int:
        """Atomically add delta to a player's points and return the new total."""

    # ── Predictions ──────────────────────────────────────────

    @abstractmethod
    def save_prediction(
        self, party_code: str, player_id: str, outcome_key: str, value: str
    ) -> None:
        """Save or replace one prediction."""

    @abstractmethod
    def list_predictions(
        self, party_code: str, outcome_keys: Sequence[str]
    ) -> List[Dict[str, Any]]:
        """Return predictions for any of the given keys."""

# Area: Store
"""
rumble_engine._store.memory — Local In-Memory Store
===================================================

MatchStore for a single-player offline session. One lock serialises
every operation, which gives the same insert-if-absent and increment
guarantees as the shared store within one process.
"""

import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .base import MatchStore
from .._engine.slots import Slot


class MemoryStore(MatchStore):
    """
    Dict-backed MatchStore.

    Records returned to callers are copies, so callers cannot mutate
    stored state except through the store's methods.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._slots: Dict[Tuple[str, str, int], Slot] = {}
        self._players: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._predictions: Dict[Tuple[str, str, str], str] = {}
        self._awards: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._grants: Dict[Tuple[str, str, str, str], int] = {}
        self._award_seq = 0

    # ── Slots ────────────────────────────────────────────────

    def load_slots(self, party_code: str, division: str) -> List[Slot]:
        with self._lock:
            found = [
                replace(slot)
                for (party, div, _), slot in self._slots.items()
                if party == party_code and div == division
            ]
        return sorted(found, key=lambda s: s.number)

    def _slot(self, party_code: str, division: str, number: int) -> Slot:
        key = (party_code, division, number)
        if key not in self._slots:
            self._slots[key] = Slot(number=number)
        return self._slots[key]

    def assign_owner(
        self, party_code: str, division: str, number: int, player_id: str
    ) -> bool:
        with self._lock:
            slot = self._slot(party_code, division, number)
            if slot.entry_time is not None:
                return False
            if slot.owner_player_id not in (None, player_id):
                return False
            slot.owner_player_id = player_id
            return True

    def write_entry(self, party_code: str, division: str, slot: Slot) -> bool:
        with self._lock:
            stored = self._slot(party_code, division, slot.number)
            if stored.entry_time is not None:
                return False
            stored.wrestler_name = slot.wrestler_name
            stored.owner_player_id = slot.owner_player_id or stored.owner_player_id
            stored.entry_time = slot.entry_time
            return True

    def write_elimination(self, party_code: str, division: str, slot: Slot) -> bool:
        with self._lock:
            stored = self._slot(party_code, division, slot.number)
            if stored.entry_time is None or stored.elimination_time is not None:
                return False
            stored.elimination_time = slot.elimination_time
            stored.eliminated_by_number = slot.eliminated_by_number
            return True

    # ── Awards ───────────────────────────────────────────────

    def insert_award(
        self, party_code: str, division: Optional[str], outcome_key: str, value: str
    ) -> bool:
        with self._lock:
            key = (party_code, outcome_key)
            if key in self._awards:
                return False
            self._award_seq += 1
            self._awards[key] = {
                "party_code": party_code,
                "division": division,
                "outcome_key": outcome_key,
                "value": value,
                "seq": self._award_seq,
            }
            return True

    def get_award(self, party_code: str, outcome_key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._awards.get((party_code, outcome_key))
            return dict(record) if record else None

    def list_awards(
        self, party_code: str, division: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        with self._lock:
            records = [
                dict(r) for (party, _), r in self._awards.items()
                if party == party_code and (division is None or r["division"] == division)
            ]
        return sorted(records, key=lambda r: r["seq"])

    def insert_grant(
        self, party_code: str, outcome_key: str, player_id: str, reason: str, delta: int
    ) -> bool:
        with self._lock:
            key = (party_code, outcome_key, player_id, reason)
            if key in self._grants:
                return False
            self._grants[key] = delta
            self._player(party_code, player_id)["points"] += delta
            return True

    # ── Players ──────────────────────────────────────────────

    def _player(self, party_code: str, player_id: str) -> Dict[str, Any]:
        key = (party_code, player_id)
        if key not in self._players:
            self._players[key] = {
                "party_code": party_code,
                "player_id": player_id,
                "display_name": player_id,
                "points": 0,
            }
        return self._players[key]

    def save_player(self, party_code: str, player_id: str, display_name: str) -> None:
        with self._lock:
            self._player(party_code, player_id)["display_name"] = display_name

    def get_player(self, party_code: str, player_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            player = self._players.get((party_code, player_id))
            return dict(player) if player else None

    def list_players(self, party_code: str) -> List[Dict[str, Any]]:
        with self._lock:
            players = [dict(p) for (party, _), p in self._players.items() if party == party_code]
        return sorted(players, key=lambda p: (-p["points"], p["display_name"]))

    def increment_points(self, party_code: str, player_id: str, delta: int) -> int:
        with self._lock:
            player = self._player(party_code, player_id)
            player["points"] += delta
            return player["points"]

    # ── Predictions ──────────────────────────────────────────

    def save_prediction(
        self, party_code: str, player_id: str, outcome_key: str, value: str
    ) -> None:
        with self._lock:
            self._predictions[(party_code, player_id, outcome_key)] = value

    def list_predictions(
        self, party_code: str, outcome_keys: Sequence[str]
    ) -> List[Dict[str, Any]]:
        wanted = set(outcome_keys)
        with self._lock:
            found = [
                {"party_code": party, "player_id": player, "outcome_key": key, "value": value}
                for (party, player, key), value in self._predictions.items()
                if party == party_code and key in wanted
            ]
        return sorted(found, key=lambda p: (p["player_id"], p["outcome_key"]))

# Area: Engine
"""
rumble_engine._engine.ledger — Award ledger
===========================================

The single guard against double-awarding. A result is recorded at most
once per (party, outcome key), and every point delta is written with
its own grant marker in the same atomic step as the increment. Points
are never computed client-side and written back.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

from .enums import Division
from .outcome_key import OutcomeKey
from ..errors import InvalidTransition

if TYPE_CHECKING:
    from .._store.base import MatchStore

logger = logging.getLogger("rumble_engine.ledger")


class AwardLedger:
    """
    Idempotent award recording for one party.

    Args:
        store: Storage adapter providing insert-if-absent and increment
        party_code: Party the ledger writes for
    """

    def __init__(self, store: MatchStore, party_code: str):
        self.store = store
        self.party_code = party_code

    def try_record(
        self, division: Optional[Division], key: OutcomeKey, value: str
    ) -> bool:
        """
        Record a result if nobody has recorded it yet.

        Returns:
            True only for the single caller whose insert created the record
        """
        record_key = _checked(division, key).record_key
        created = self.store.insert_award(
            self.party_code,
            division.value if division else None,
            str(record_key),
            value,
        )
        if created:
            logger.info(f"Recorded {record_key} = {value}")
        else:
            logger.debug(f"{record_key} already recorded")
        return created

    def recorded_value(
        self, division: Optional[Division], key: OutcomeKey
    ) -> Optional[str]:
        """The stored result for a key, or None if not recorded."""
        record = self.store.get_award(
            self.party_code, str(_checked(division, key).record_key)
        )
        return record["value"] if record else None

    def apply_points(self, player_id: str, delta: int) -> int:
        """Atomically add delta to a player's points. Returns the new total."""
        total = self.store.increment_points(self.party_code, player_id, delta)
        logger.debug(f"{player_id} {delta:+d} -> {total}")
        return total

    def grant(self, key: OutcomeKey, player_id: str, delta: int, reason: str) -> bool:
        """
        Apply one point delta at most once.

        The grant marker (key, player, reason) and the increment are
        written together, so retrying a half-finished command applies
        only the grants that are still missing.

        Returns:
            True if this call applied the points
        """
        applied = self.store.insert_grant(
            self.party_code, str(key), player_id, reason, delta
        )
        if applied:
            logger.info(f"{player_id} {delta:+d} ({reason}, {key})")
        return applied


def _checked(division: Optional[Division], key: OutcomeKey) -> OutcomeKey:
    if key.division is not division:
        raise InvalidTransition(
            f"Outcome key {key} does not belong to division "
            f"{division.value if division else None}",
            context={"outcome_key": str(key)},
        )
    return key

# Area: Engine
"""
rumble_engine._engine.slots — Slot registry
===========================================

Tracks the 30 numbered entry slots of one division: who owns each
slot, which wrestler entered it and when, and who eliminated them.
Enforces the pending -> active -> eliminated lifecycle. No point
logic lives here.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, Iterable, List, Optional
import logging

from .enums import Division
from ..errors import InvalidTransition, UnknownEliminator
from ..types import SlotSnapshot

logger = logging.getLogger("rumble_engine.slots")

SLOT_COUNT = 30


@dataclass
class Slot:
    """One numbered entry position within a division."""
    number: int
    wrestler_name: Optional[str] = None
    owner_player_id: Optional[str] = None
    entry_time: Optional[datetime] = None
    elimination_time: Optional[datetime] = None
    eliminated_by_number: Optional[int] = None

    @property
    def is_entered(self) -> bool:
        return self.entry_time is not None

    @property
    def is_active(self) -> bool:
        return self.entry_time is not None and self.elimination_time is None

    @property
    def is_eliminated(self) -> bool:
        return self.elimination_time is not None

    def duration(self, reference_time: datetime) -> Optional[float]:
        """Seconds in the ring, measured to elimination or to reference_time."""
        if self.entry_time is None:
            return None
        end = self.elimination_time or reference_time
        return (end - self.entry_time).total_seconds()


class SlotRegistry:
    """
    The 30 slots of one division.

    Built empty at match setup or from a stored snapshot. Mutations
    validate the slot lifecycle and raise instead of corrupting state.
    """

    def __init__(self, division: Division, slots: Optional[Iterable[Slot]] = None):
        self.division = division
        self._slots: Dict[int, Slot] = {n: Slot(number=n) for n in range(1, SLOT_COUNT + 1)}
        for slot in slots or []:
            _check_number(division, slot.number)
            self._slots[slot.number] = replace(slot)
        for slot in self._slots.values():
            if slot.elimination_time is not None and slot.entry_time is None:
                raise InvalidTransition(
                    f"Slot #{slot.number} is eliminated but never entered",
                    context={"division": division.value, "slot": slot.number},
                )

    # ── Queries ──────────────────────────────────────────────

    def get(self, number: int) -> Slot:
        _check_number(self.division, number)
        return self._slots[number]

    def all_slots(self) -> List[Slot]:
        return [self._slots[n] for n in range(1, SLOT_COUNT + 1)]

    def active_slots(self) -> List[Slot]:
        return [s for s in self.all_slots() if s.is_active]

    def entered_slots(self) -> List[Slot]:
        return [s for s in self.all_slots() if s.is_entered]

    def eliminated_slots(self) -> List[Slot]:
        return [s for s in self.all_slots() if s.is_eliminated]

    def find_by_wrestler(self, wrestler_name: str) -> Optional[Slot]:
        wanted = normalize_name(wrestler_name)
        for slot in self.all_slots():
            if slot.wrestler_name and normalize_name(slot.wrestler_name) == wanted:
                return slot
        return None

    def next_entry_number(self) -> Optional[int]:
        """Lowest slot number that has not entered yet."""
        for slot in self.all_slots():
            if not slot.is_entered:
                return slot.number
        return None

    def to_snapshot(
        self, reference_time: datetime, counts: Optional[Dict[int, int]] = None
    ) -> List[SlotSnapshot]:
        """Plain dicts for every slot, durations measured to reference_time."""
        counts = counts or {}
        return [_slot_view(s, counts.get(s.number, 0), reference_time) for s in self.all_slots()]

    # ── Mutations ────────────────────────────────────────────

    def assign_owner(self, number: int, player_id: str) -> Slot:
        slot = self.get(number)
        if slot.is_entered:
            raise InvalidTransition(
                f"Slot #{number} already entered; ownership is locked",
                context={"division": self.division.value, "slot": number},
            )
        if slot.owner_player_id and slot.owner_player_id != player_id:
            raise InvalidTransition(
                f"Slot #{number} is already owned by {slot.owner_player_id}",
                context={"division": self.division.value, "slot": number,
                         "owner": slot.owner_player_id},
            )
        slot.owner_player_id = player_id
        return slot

    def record_entry(
        self,
        number: int,
        wrestler_name: str,
        at: datetime,
        owner_player_id: Optional[str] = None,
    ) -> Slot:
        """Move a slot from pending to active."""
        slot = self.get(number)
        ctx = {"division": self.division.value, "slot": number}
        if slot.is_entered:
            raise InvalidTransition(f"Slot #{number} has already entered", context=ctx)
        if not wrestler_name or not wrestler_name.strip():
            raise InvalidTransition(f"Slot #{number} entry needs a wrestler name", context=ctx)
        existing = self.find_by_wrestler(wrestler_name)
        if existing is not None:
            raise InvalidTransition(
                f"{wrestler_name} already entered at #{existing.number}",
                context={**ctx, "wrestler": wrestler_name},
            )
        if owner_player_id and slot.owner_player_id and slot.owner_player_id != owner_player_id:
            raise InvalidTransition(
                f"Slot #{number} is owned by {slot.owner_player_id}",
                context={**ctx, "owner": slot.owner_player_id},
            )
        slot.wrestler_name = wrestler_name.strip()
        if owner_player_id:
            slot.owner_player_id = owner_player_id
        slot.entry_time = at
        logger.debug(f"[{self.division.value}] #{number} {slot.wrestler_name} entered")
        return slot

    def record_elimination(
        self, number: int, eliminated_by_number: int, at: datetime
    ) -> Slot:
        """Move a slot from active to eliminated."""
        slot = self.get(number)
        ctx = {"division": self.division.value, "slot": number}
        if not slot.is_entered:
            raise InvalidTransition(f"Slot #{number} has not entered", context=ctx)
        if slot.is_eliminated:
            raise InvalidTransition(f"Slot #{number} is already eliminated", context=ctx)
        if at < slot.entry_time:
            raise InvalidTransition(
                f"Slot #{number} cannot be eliminated before it entered", context=ctx
            )
        if (
            not 1 <= eliminated_by_number <= SLOT_COUNT
            or eliminated_by_number == number
            or not self._slots[eliminated_by_number].is_active
        ):
            raise UnknownEliminator(self.division.value, eliminated_by_number, number)
        slot.elimination_time = at
        slot.eliminated_by_number = eliminated_by_number
        logger.debug(
            f"[{self.division.value}] #{number} eliminated by #{eliminated_by_number}"
        )
        return slot


def _check_number(division: Division, number: int) -> None:
    if not isinstance(number, int) or isinstance(number, bool) or not 1 <= number <= SLOT_COUNT:
        raise InvalidTransition(
            f"Slot number must be 1..{SLOT_COUNT}, got {number!r}",
            context={"division": division.value, "slot": number},
        )


def _slot_view(slot: Slot, eliminations: int, reference_time: datetime) -> SlotSnapshot:
    if slot.is_eliminated:
        status = "eliminated"
    elif slot.is_active:
        status = "active"
    else:
        status = "pending"
    return {
        "number": slot.number,
        "wrestler_name": slot.wrestler_name,
        "owner_player_id": slot.owner_player_id,
        "entry_time": slot.entry_time.isoformat() if slot.entry_time else None,
        "elimination_time": (
            slot.elimination_time.isoformat() if slot.elimination_time else None
        ),
        "eliminated_by_number": slot.eliminated_by_number,
        "status": status,
        "duration_seconds": slot.duration(reference_time),
        "eliminations": eliminations,
    }


def normalize_name(name: str) -> str:
    """Case- and whitespace-insensitive form used to compare wrestler names."""
    return " ".join(name.split()).casefold()

# Area: Engine
"""
rumble_engine._engine.stats — Derived match statistics
======================================================

Pure functions over a SlotRegistry snapshot. Every milestone is
recomputed from scratch on each call; nothing here remembers whether a
milestone was already celebrated. The award ledger owns that.

Ties are broken by the lower slot number everywhere so that results do
not depend on iteration order.
"""

from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional

from .slots import Slot, SlotRegistry, SLOT_COUNT

FINAL_FOUR_SIZE = 4
JOBBER_THRESHOLD_SECONDS = 60


def first_elimination(registry: SlotRegistry) -> Optional[Slot]:
    """The eliminated slot with the earliest elimination time."""
    eliminated = registry.eliminated_slots()
    if not eliminated:
        return None
    return min(eliminated, key=lambda s: (s.elimination_time, s.number))


def four_remaining(registry: SlotRegistry) -> Optional[List[Slot]]:
    """The active slots when exactly four are active."""
    active = registry.active_slots()
    if len(active) != FINAL_FOUR_SIZE:
        return None
    return active


def final_four(
    registry: SlotRegistry, require_full_field: bool = True
) -> Optional[List[Slot]]:
    """
    The four slots active at the moment the match first reached four.

    Replays entries and eliminations in time order (entries first on equal
    times, then by slot number), so the result does not depend on whether
    the current view still shows exactly four active.

    Args:
        registry: Division snapshot
        require_full_field: Only count moments after all thirty entered

    Returns:
        The four slots ordered by number, or None if the match has not
        passed through four active yet
    """
    timeline = []
    for slot in registry.entered_slots():
        timeline.append((slot.entry_time, 0, slot.number))
        if slot.is_eliminated:
            timeline.append((slot.elimination_time, 1, slot.number))
    timeline.sort()

    active = set()
    entered = 0
    for _, kind, number in timeline:
        if kind == 0:
            active.add(number)
            entered += 1
        else:
            active.discard(number)
        if len(active) == FINAL_FOUR_SIZE and (
            not require_full_field or entered == SLOT_COUNT
        ):
            return [registry.get(n) for n in sorted(active)]
    return None


def sole_survivor(registry: SlotRegistry) -> Optional[Slot]:
    """The last active slot, once all thirty entrants have been revealed."""
    active = registry.active_slots()
    if len(active) != 1 or len(registry.entered_slots()) != SLOT_COUNT:
        return None
    return active[0]


def elimination_counts(registry: SlotRegistry) -> Dict[int, int]:
    """Eliminations credited to each slot number (only slots with credit)."""
    return dict(Counter(
        s.eliminated_by_number
        for s in registry.eliminated_slots()
        if s.eliminated_by_number is not None
    ))


def most_eliminations(registry: SlotRegistry) -> Optional[Slot]:
    """The slot credited with the most eliminations; lowest number wins ties."""
    counts = elimination_counts(registry)
    if not counts:
        return None
    best = max(counts.values())
    leader = min(number for number, count in counts.items() if count == best)
    return registry.get(leader)


def longest_duration(
    registry: SlotRegistry, reference_time: datetime
) -> Optional[Slot]:
    """
    The entered slot with the longest time in the match.

    Args:
        registry: Division snapshot
        reference_time: The single instant still-active slots are measured
            to. Captured once by the caller.

    Returns:
        The slot with the maximum duration, or None before any entry
    """
    entered = registry.entered_slots()
    if not entered:
        return None
    return min(entered, key=lambda s: (-s.duration(reference_time), s.number))


def is_jobber(slot: Slot, threshold_seconds: float = JOBBER_THRESHOLD_SECONDS) -> bool:
    """True when the slot was eliminated strictly within the threshold."""
    if slot.entry_time is None or slot.elimination_time is None:
        return False
    return (slot.elimination_time - slot.entry_time).total_seconds() < threshold_seconds

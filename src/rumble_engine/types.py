"""
rumble_engine.types — TypedDict schemas for read models
=======================================================

This module documents the exact structure of the dictionaries returned
by the controller's read operations. They are plain JSON-serialisable
data so viewers can render them without importing engine classes.

All types are exported from the main package:

    from rumble_engine import DivisionSnapshot, PlayerStanding

Use __annotations__ to inspect fields:

    >>> PlayerStanding.__annotations__
    {'rank': int, 'player_id': str, 'display_name': str, 'points': int}
"""

from typing import Dict, List, Optional, TypedDict


# ============================================
# snapshot() Output
# ============================================

class SlotSnapshot(TypedDict):
    """One slot as shown to viewers."""
    number: int                         # 1..30
    wrestler_name: Optional[str]        # None until entered
    owner_player_id: Optional[str]
    entry_time: Optional[str]           # ISO-8601 UTC
    elimination_time: Optional[str]     # ISO-8601 UTC
    eliminated_by_number: Optional[int]
    status: str                         # "pending" | "active" | "eliminated"
    duration_seconds: Optional[float]   # measured to the snapshot's reference time
    eliminations: int                   # eliminations credited to this slot


class DivisionSnapshot(TypedDict):
    """Read model of one division.

    Fields
    ------
    party_code : str
        Party the snapshot belongs to.
    division : str
        "mens" or "womens".
    label : str
        Display label, e.g. "Men's".
    state : str
        NOT_STARTED, IN_PROGRESS or COMPLETE.
    reference_time : str
        The single instant active durations were measured to.
    slots : List[SlotSnapshot]
        All 30 slots in number order.
    entered_count / active_count : int
        Slots that have entered / are still in the ring.
    next_entry_number : Optional[int]
        Lowest slot that has not entered, None once all 30 are in.
    first_elimination, most_eliminations, longest_duration, sole_survivor : Optional[int]
        Slot numbers of the derived milestones, None when not reached.
    four_remaining : Optional[List[int]]
        The last four slot numbers while exactly four remain.
    awards : Dict[str, str]
        Recorded award values by outcome key.
    """
    party_code: str
    division: str
    label: str
    state: str
    reference_time: str
    slots: List[SlotSnapshot]
    entered_count: int
    next_entry_number: Optional[int]
    active_count: int
    first_elimination: Optional[int]
    four_remaining: Optional[List[int]]
    most_eliminations: Optional[int]
    longest_duration: Optional[int]
    sole_survivor: Optional[int]
    awards: Dict[str, str]


# ============================================
# leaderboard() Output
# ============================================

class PlayerStanding(TypedDict):
    """A leaderboard row. Players on equal points share a rank."""
    rank: int
    player_id: str
    display_name: str
    points: int

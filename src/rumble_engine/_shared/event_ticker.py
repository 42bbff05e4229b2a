# Area: Shared
"""
rumble_engine._shared.event_ticker — Live match ticker
======================================================

Prints one colored line per domain event, for a host console or a
viewer terminal. Subscribe an EventTicker to an EventNotifier.
"""

from __future__ import annotations
import sys
from typing import Optional, TextIO

from .._engine.notifier import (
    EliminationRecorded,
    EntryRecorded,
    FourRemainingReached,
    IronPersonRecorded,
    MatchEventBase,
    OutcomeRecorded,
    PointsAwarded,
    WinnerDeclared,
)

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Entries
RED = "\033[31m"           # Eliminations
ORANGE = "\033[38;5;208m"  # Milestones
GOLD = "\033[33m"          # Winner
CYAN = "\033[36m"          # Points
RESET = "\033[0m"

# Event type → short label
EVENT_LABELS = {
    "ENTRY_RECORDED": "ENTRY",
    "ELIMINATION_RECORDED": "ELIMINATED",
    "FOUR_REMAINING": "FINAL-FOUR",
    "WINNER_DECLARED": "WINNER",
    "IRON_PERSON_RECORDED": "IRON",
    "OUTCOME_RECORDED": "RESULT",
    "POINTS_AWARDED": "POINTS",
}


class EventTicker:
    """Event subscriber that writes a feed line per event."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream
        self.color = color

    def __call__(self, event: MatchEventBase) -> None:
        color, text = self.describe(event)
        label = EVENT_LABELS.get(event.event_type, event.event_type)
        division = event.division.label if event.division else "Event"
        line = (
            f"{event.occurred_at.strftime('%H:%M:%S')} | {division:7} | "
            f"{label:10} | {text}"
        )
        if self.color:
            line = f"{color}{line}{RESET}"
        print(line, file=self.stream or sys.stdout)

    def describe(self, event: MatchEventBase) -> tuple:
        """Return (color, text) for an event."""
        if isinstance(event, EntryRecorded):
            owner = f" (owner {event.owner_player_id})" if event.owner_player_id else ""
            return GREEN, f"#{event.number} {event.wrestler_name}{owner}"
        if isinstance(event, EliminationRecorded):
            text = (
                f"#{event.number} {event.wrestler_name} by "
                f"#{event.eliminated_by_number} {event.eliminated_by_name} "
                f"after {_clock(event.duration_seconds)}"
            )
            if event.jobber:
                text += " (jobber)"
            return RED, text
        if isinstance(event, FourRemainingReached):
            picks = ", ".join(
                f"#{n} {name}" for n, name in zip(event.numbers, event.wrestler_names)
            )
            return ORANGE, picks
        if isinstance(event, WinnerDeclared):
            return GOLD, f"#{event.number} {event.wrestler_name}"
        if isinstance(event, IronPersonRecorded):
            return ORANGE, (
                f"{event.title}: #{event.number} {event.wrestler_name} "
                f"({_clock(event.duration_seconds)})"
            )
        if isinstance(event, OutcomeRecorded):
            return ORANGE, f"{event.outcome_key} = {event.value}"
        if isinstance(event, PointsAwarded):
            return CYAN, f"{event.player_id} {event.delta:+d} ({event.reason})"
        return RESET, str(event.to_dict())


def _clock(seconds: Optional[float]) -> str:
    if seconds is None:
        return "--:--"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"

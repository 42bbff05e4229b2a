# Area: Engine
"""
rumble_engine._engine.notifier — Domain events and notifier
===========================================================

Typed events for UI and animation layers, and the in-process notifier
that fans them out to subscribers. Events are published only after the
state change they describe is durable; a failing subscriber cannot
undo that state or block the other subscribers.
"""

from collections import deque
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional, Protocol, Tuple
import logging

from .enums import Division

logger = logging.getLogger("rumble_engine.notifier")

DEFAULT_HISTORY_SIZE = 200


# ══════════════════════════════════════════════════════════════
# EVENTS
# ══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class MatchEventBase:
    """
    Fields shared by every domain event.

    Attributes:
        party_code: Party the event belongs to
        division: Division, or None for undercard matches and event-wide props
        occurred_at: When the underlying fact happened (or was recorded)
    """

    party_code: str
    division: Optional[Division]
    occurred_at: datetime

    event_type = "EVENT"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"event_type": self.event_type}
        for f in fields(self):
            data[f.name] = _plain(getattr(self, f.name))
        return data


@dataclass(frozen=True)
class EntryRecorded(MatchEventBase):
    number: int
    wrestler_name: str
    owner_player_id: Optional[str] = None

    event_type = "ENTRY_RECORDED"


@dataclass(frozen=True)
class EliminationRecorded(MatchEventBase):
    number: int
    wrestler_name: str
    eliminated_by_number: int
    eliminated_by_name: str
    duration_seconds: float
    jobber: bool = False

    event_type = "ELIMINATION_RECORDED"


@dataclass(frozen=True)
class FourRemainingReached(MatchEventBase):
    numbers: Tuple[int, ...]
    wrestler_names: Tuple[str, ...]

    event_type = "FOUR_REMAINING"


@dataclass(frozen=True)
class WinnerDeclared(MatchEventBase):
    number: int
    wrestler_name: str
    owner_player_id: Optional[str] = None

    event_type = "WINNER_DECLARED"


@dataclass(frozen=True)
class IronPersonRecorded(MatchEventBase):
    number: int
    wrestler_name: str
    duration_seconds: float
    title: str

    event_type = "IRON_PERSON_RECORDED"


@dataclass(frozen=True)
class OutcomeRecorded(MatchEventBase):
    outcome_key: str
    value: str

    event_type = "OUTCOME_RECORDED"


@dataclass(frozen=True)
class PointsAwarded(MatchEventBase):
    player_id: str
    delta: int
    reason: str
    outcome_key: str

    event_type = "POINTS_AWARDED"


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value


# ══════════════════════════════════════════════════════════════
# NOTIFIER
# ══════════════════════════════════════════════════════════════


class EventSubscriber(Protocol):
    """Anything callable with one event."""

    def __call__(self, event: MatchEventBase) -> None:
        ...


class EventNotifier:
    """
    Delivers domain events to subscribers in registration order.

    Keeps a bounded history of recent events so a late subscriber
    (a viewer that just joined) can catch up.

    Usage:
        notifier = EventNotifier()
        notifier.subscribe(ticker)
        notifier.publish(event)
    """

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE):
        self._subscribers: List[Callable[[MatchEventBase], None]] = []
        self._history: Deque[MatchEventBase] = deque(maxlen=history_size)

    def subscribe(self, callback: EventSubscriber) -> EventSubscriber:
        """Register a subscriber. Returns it so it can be used as a decorator."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)
            logger.debug(f"Subscribed {callback!r}")
        return callback

    def unsubscribe(self, callback: EventSubscriber) -> bool:
        """Remove a subscriber. Returns False if it was not registered."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    def publish(self, event: MatchEventBase) -> None:
        """Deliver an event to every subscriber."""
        self._history.append(event)
        logger.debug(f"{event.event_type}: {event.to_dict()}")
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception(
                    f"Subscriber {callback!r} failed on {event.event_type}"
                )

    def history(self, event_type: Optional[str] = None) -> List[MatchEventBase]:
        """Recent events, oldest first, optionally of one type."""
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.event_type == event_type]

    def clear_history(self) -> None:
        self._history.clear()

"""
rumble_engine — Elimination Match Engine
========================================

Live scoring engine for a 30-entrant elimination match ("battle royal")
watch party. A host records entries and eliminations; the engine
derives the milestones (first elimination, final four, Iron Man/Woman,
most eliminations, winner) and awards points exactly once, even when
commands are retried or delivered twice.

Quick Start (offline, single player):
    from rumble_engine import MatchController, MemoryStore
    controller = MatchController(MemoryStore(), party_code="HOME")
    controller.record_entry("mens", 1, "Cody Rhodes")

Shared party (host + viewers on one database file):
    from rumble_engine import MatchController, SqliteStore
    controller = MatchController(SqliteStore("party.db"), party_code="ABC123")

Events
------
Subscribe to the controller's notifier to drive a UI:

    controller.notifier.subscribe(EventTicker())
"""

from ._engine.controller import MatchController, with_retry
from ._engine.enums import Division, MatchState, OutcomeKind
from ._engine.outcome_key import OutcomeKey
from ._engine.scoring import ScoringTable
from ._engine.slots import Slot, SlotRegistry
from ._engine.ledger import AwardLedger
from ._engine.notifier import (
    EventNotifier,
    MatchEventBase,
    EntryRecorded,
    EliminationRecorded,
    FourRemainingReached,
    WinnerDeclared,
    IronPersonRecorded,
    OutcomeRecorded,
    PointsAwarded,
)
from ._store import MatchStore, MemoryStore, SqliteStore
from ._shared import EventTicker, setup_logging
from ._config import EngineConfig, load_config
from .errors import (
    RumbleEngineError,
    InvalidTransition,
    UnknownEliminator,
    PreconditionFailed,
    MatchAlreadyComplete,
    StorageUnavailable,
    ConfigError,
)
from .types import SlotSnapshot, DivisionSnapshot, PlayerStanding

__all__ = [
    # Main classes
    "MatchController",
    "with_retry",
    "AwardLedger",
    "Slot",
    "SlotRegistry",
    "ScoringTable",
    "OutcomeKey",
    # Enums
    "Division",
    "MatchState",
    "OutcomeKind",
    # Events
    "EventNotifier",
    "MatchEventBase",
    "EntryRecorded",
    "EliminationRecorded",
    "FourRemainingReached",
    "WinnerDeclared",
    "IronPersonRecorded",
    "OutcomeRecorded",
    "PointsAwarded",
    "EventTicker",
    # Stores
    "MatchStore",
    "MemoryStore",
    "SqliteStore",
    # Config and logging
    "EngineConfig",
    "load_config",
    "setup_logging",
    # Errors
    "RumbleEngineError",
    "InvalidTransition",
    "UnknownEliminator",
    "PreconditionFailed",
    "MatchAlreadyComplete",
    "StorageUnavailable",
    "ConfigError",
    # Read models
    "SlotSnapshot",
    "DivisionSnapshot",
    "PlayerStanding",
]
__version__ = "1.0.0"

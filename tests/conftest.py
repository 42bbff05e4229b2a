# Area: Shared Tests
"""Shared fixtures for engine tests."""

import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

from rumble_engine._engine.controller import MatchController
from rumble_engine._engine.notifier import EventNotifier
from rumble_engine._shared.logging_config import disable_ticker_mode
from rumble_engine._store.database import init_database
from rumble_engine._store.memory import MemoryStore
from rumble_engine._store.sqlite_store import SqliteStore

T0 = datetime(2026, 1, 31, 20, 0, tzinfo=timezone.utc)

# Scenario timing: slot n enters at 90 * (n - 1) seconds; every slot
# except the winner is then eliminated by the winner, 30 seconds apart,
# starting at ELIMINATIONS_START.
ENTRY_SPACING = 90
ELIMINATIONS_START = 3000
ELIMINATION_SPACING = 30


def wrestler(number: int) -> str:
    return f"Wrestler {number}"


@pytest.fixture
def at():
    """Timestamp factory: seconds after the bell."""
    def _at(seconds: float) -> datetime:
        return T0 + timedelta(seconds=seconds)
    return _at


@pytest.fixture
def db_path():
    """Create temporary database for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    init_database(path)
    yield path
    os.unlink(path)


@pytest.fixture(params=["memory", "sqlite"])
def store(request, db_path):
    """Each store adapter in turn."""
    if request.param == "memory":
        return MemoryStore()
    return SqliteStore(db_path)


@pytest.fixture
def notifier():
    return EventNotifier()


@pytest.fixture
def controller(store, notifier, at):
    """Controller on the parametrized store with a fixed clock."""
    return MatchController(
        store=store,
        party_code="PARTY1",
        notifier=notifier,
        clock=lambda: at(0),
    )


@pytest.fixture
def memory_controller(notifier, at):
    """Controller on an in-memory store."""
    return MatchController(
        store=MemoryStore(),
        party_code="PARTY1",
        notifier=notifier,
        clock=lambda: at(0),
    )


@pytest.fixture
def enter_all(at):
    """Enter all thirty slots of a division at the scenario times."""
    def _enter_all(controller, division="mens"):
        for n in range(1, 31):
            controller.record_entry(division, n, wrestler(n), at=at(ENTRY_SPACING * (n - 1)))
    return _enter_all


@pytest.fixture
def eliminate_all_but(at):
    """Eliminate every slot except the winner, credited to the winner."""
    def _eliminate_all_but(controller, winner, division="mens"):
        losers = [n for n in range(1, 31) if n != winner]
        for i, n in enumerate(losers):
            controller.record_elimination(
                division, n, winner, at=at(ELIMINATIONS_START + ELIMINATION_SPACING * i)
            )
        return at(ELIMINATIONS_START + ELIMINATION_SPACING * len(losers))
    return _eliminate_all_but


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging and ticker mode after each test."""
    yield
    pkg_logger = logging.getLogger("rumble_engine")
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
    disable_ticker_mode()

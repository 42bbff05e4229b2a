# Area: Engine Tests
"""Tests for the slot registry."""

from datetime import datetime, timedelta, timezone

import pytest

from rumble_engine._engine.enums import Division
from rumble_engine._engine.slots import Slot, SlotRegistry, SLOT_COUNT, normalize_name
from rumble_engine.errors import InvalidTransition, UnknownEliminator

T0 = datetime(2026, 1, 31, 20, 0, tzinfo=timezone.utc)


def at(seconds):
    return T0 + timedelta(seconds=seconds)


@pytest.fixture
def registry():
    return SlotRegistry(Division.MENS)


class TestSlot:
    """Tests for the Slot dataclass."""

    def test_pending_slot(self):
        """Test a fresh slot is neither entered nor active."""
        slot = Slot(number=5)
        assert slot.is_entered is False
        assert slot.is_active is False
        assert slot.is_eliminated is False
        assert slot.duration(at(100)) is None

    def test_active_duration_uses_reference_time(self):
        """Test duration of an active slot is measured to the reference time."""
        slot = Slot(number=2, wrestler_name="A", entry_time=at(10))
        assert slot.is_active is True
        assert slot.duration(at(100)) == 90

    def test_eliminated_duration_ignores_reference_time(self):
        """Test duration of an eliminated slot stops at the elimination."""
        slot = Slot(number=1, wrestler_name="A", entry_time=at(0),
                    elimination_time=at(50), eliminated_by_number=2)
        assert slot.is_active is False
        assert slot.is_eliminated is True
        assert slot.duration(at(1000)) == 50


class TestSlotRegistryQueries:
    """Tests for registry construction and queries."""

    def test_has_thirty_slots(self, registry):
        """Test registry always holds all thirty numbers."""
        assert [s.number for s in registry.all_slots()] == list(range(1, SLOT_COUNT + 1))
        assert registry.active_slots() == []
        assert registry.entered_slots() == []

    def test_loads_stored_slots(self):
        """Test building a registry from stored slot records."""
        stored = [
            Slot(number=3, wrestler_name="C", entry_time=at(0)),
            Slot(number=7, owner_player_id="p1"),
        ]
        registry = SlotRegistry(Division.WOMENS, stored)
        assert registry.get(3).wrestler_name == "C"
        assert registry.get(7).owner_player_id == "p1"
        assert [s.number for s in registry.active_slots()] == [3]

    def test_rejects_eliminated_without_entry(self):
        """Test stored state that breaks the slot invariant is refused."""
        with pytest.raises(InvalidTransition):
            SlotRegistry(Division.MENS, [Slot(number=1, elimination_time=at(5))])

    @pytest.mark.parametrize("number", [0, 31, -1])
    def test_get_out_of_range(self, registry, number):
        """Test slot numbers outside 1..30 are rejected."""
        with pytest.raises(InvalidTransition):
            registry.get(number)

    def test_find_by_wrestler_ignores_case_and_spacing(self, registry):
        """Test wrestler lookup is case and whitespace insensitive."""
        registry.record_entry(4, "Rey  Mysterio", at(0))
        assert registry.find_by_wrestler("rey mysterio").number == 4
        assert registry.find_by_wrestler("Kane") is None

    def test_next_entry_number(self, registry):
        """Test the lowest pending number is reported."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(3, "C", at(10))
        assert registry.next_entry_number() == 2

    def test_normalize_name(self):
        """Test name normalisation."""
        assert normalize_name("  The   Rock ") == "the rock"

    def test_to_snapshot(self, registry):
        """Test the plain view of each slot."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(10))
        registry.record_elimination(2, 1, at(70))
        view = registry.to_snapshot(at(100), {1: 1})
        assert len(view) == SLOT_COUNT
        assert view[0]["status"] == "active"
        assert view[0]["duration_seconds"] == 100
        assert view[0]["eliminations"] == 1
        assert view[1]["status"] == "eliminated"
        assert view[1]["duration_seconds"] == 60
        assert view[1]["eliminated_by_number"] == 1
        assert view[2]["status"] == "pending"
        assert view[2]["duration_seconds"] is None


class TestSlotRegistryEntry:
    """Tests for record_entry."""

    def test_entry_activates_slot(self, registry):
        """Test an entry moves the slot from pending to active."""
        slot = registry.record_entry(1, "Cody Rhodes", at(0), owner_player_id="p1")
        assert slot.is_active
        assert slot.entry_time == at(0)
        assert slot.owner_player_id == "p1"
        assert registry.active_slots() == [slot]

    def test_entry_twice_rejected(self, registry):
        """Test a slot can only enter once."""
        registry.record_entry(1, "Cody Rhodes", at(0))
        with pytest.raises(InvalidTransition):
            registry.record_entry(1, "Cody Rhodes", at(5))

    def test_entry_needs_name(self, registry):
        """Test blank wrestler names are rejected."""
        with pytest.raises(InvalidTransition):
            registry.record_entry(1, "   ", at(0))

    def test_duplicate_wrestler_rejected(self, registry):
        """Test the same wrestler cannot fill two slots."""
        registry.record_entry(1, "Cody Rhodes", at(0))
        with pytest.raises(InvalidTransition):
            registry.record_entry(2, "cody rhodes", at(90))

    def test_entry_keeps_existing_owner(self, registry):
        """Test an entry without owner keeps the pre-assigned owner."""
        registry.assign_owner(5, "p2")
        slot = registry.record_entry(5, "E", at(0))
        assert slot.owner_player_id == "p2"

    def test_entry_with_other_owner_rejected(self, registry):
        """Test an entry cannot hand an owned slot to someone else."""
        registry.assign_owner(5, "p2")
        with pytest.raises(InvalidTransition):
            registry.record_entry(5, "E", at(0), owner_player_id="p3")

    def test_entries_in_any_order(self, registry):
        """Test slots may enter out of numeric order."""
        registry.record_entry(10, "J", at(0))
        registry.record_entry(2, "B", at(10))
        assert [s.number for s in registry.entered_slots()] == [2, 10]


class TestSlotRegistryElimination:
    """Tests for record_elimination."""

    def test_elimination(self, registry):
        """Test an active slot can be eliminated by another active slot."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(90))
        slot = registry.record_elimination(2, 1, at(120))
        assert slot.is_eliminated
        assert slot.eliminated_by_number == 1
        assert [s.number for s in registry.active_slots()] == [1]

    def test_eliminate_pending_rejected(self, registry):
        """Test a slot that never entered cannot be eliminated."""
        registry.record_entry(1, "A", at(0))
        with pytest.raises(InvalidTransition):
            registry.record_elimination(2, 1, at(10))

    def test_eliminate_twice_rejected(self, registry):
        """Test an eliminated slot is never reactivated or re-eliminated."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(0))
        registry.record_elimination(2, 1, at(10))
        with pytest.raises(InvalidTransition):
            registry.record_elimination(2, 1, at(20))

    def test_elimination_before_entry_rejected(self, registry):
        """Test an elimination timestamp cannot precede the entry."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(100))
        with pytest.raises(InvalidTransition):
            registry.record_elimination(2, 1, at(50))

    def test_eliminator_must_be_active(self, registry):
        """Test crediting an eliminated slot raises UnknownEliminator."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(0))
        registry.record_entry(3, "C", at(0))
        registry.record_elimination(1, 2, at(10))
        with pytest.raises(UnknownEliminator) as exc:
            registry.record_elimination(3, 1, at(20))
        assert exc.value.eliminated_by_number == 1
        assert registry.get(3).is_active

    def test_eliminator_must_have_entered(self, registry):
        """Test crediting a pending slot raises UnknownEliminator."""
        registry.record_entry(1, "A", at(0))
        with pytest.raises(UnknownEliminator):
            registry.record_elimination(1, 9, at(10))

    def test_self_elimination_rejected(self, registry):
        """Test a slot cannot be credited with its own elimination."""
        registry.record_entry(1, "A", at(0))
        registry.record_entry(2, "B", at(0))
        with pytest.raises(UnknownEliminator):
            registry.record_elimination(1, 1, at(10))

    def test_eliminator_out_of_range(self, registry):
        """Test an eliminator number outside 1..30 raises UnknownEliminator."""
        registry.record_entry(1, "A", at(0))
        with pytest.raises(UnknownEliminator):
            registry.record_elimination(1, 31, at(10))


class TestSlotRegistryOwnership:
    """Tests for assign_owner."""

    def test_assign_and_reassign_same_player(self, registry):
        """Test assigning the same owner twice is harmless."""
        registry.assign_owner(3, "p1")
        registry.assign_owner(3, "p1")
        assert registry.get(3).owner_player_id == "p1"

    def test_assign_taken_slot_rejected(self, registry):
        """Test a slot owned by another player cannot be taken."""
        registry.assign_owner(3, "p1")
        with pytest.raises(InvalidTransition):
            registry.assign_owner(3, "p2")

    def test_assign_after_entry_rejected(self, registry):
        """Test ownership locks once the slot has entered."""
        registry.record_entry(3, "C", at(0))
        with pytest.raises(InvalidTransition):
            registry.assign_owner(3, "p1")

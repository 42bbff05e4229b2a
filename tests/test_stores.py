# Area: Store Tests
"""Behaviour both store adapters share."""

from rumble_engine._engine.slots import Slot


class TestMatchStoreContract:
    """Tests run against MemoryStore and SqliteStore."""

    def test_slots_round_trip(self, store, at):
        """Test entry and elimination writes are visible on reload."""
        store.assign_owner("PARTY1", "mens", 1, "p1")
        assert store.write_entry("PARTY1", "mens", Slot(1, "A", entry_time=at(0))) is True
        assert store.write_entry("PARTY1", "mens", Slot(2, "B", entry_time=at(90))) is True
        out = Slot(2, "B", entry_time=at(90), elimination_time=at(200), eliminated_by_number=1)
        assert store.write_elimination("PARTY1", "mens", out) is True

        slots = {s.number: s for s in store.load_slots("PARTY1", "mens")}
        assert slots[1].owner_player_id == "p1"
        assert slots[1].entry_time == at(0)
        assert slots[2].eliminated_by_number == 1
        assert slots[2].elimination_time == at(200)

    def test_conditional_writes(self, store, at):
        """Test repeated entries and eliminations report False."""
        slot = Slot(1, "A", entry_time=at(0))
        store.write_entry("PARTY1", "mens", slot)
        assert store.write_entry("PARTY1", "mens", slot) is False
        assert store.assign_owner("PARTY1", "mens", 1, "late") is False

        out = Slot(1, "A", entry_time=at(0), elimination_time=at(9), eliminated_by_number=2)
        assert store.write_elimination("PARTY1", "mens", out) is True
        assert store.write_elimination("PARTY1", "mens", out) is False

    def test_loaded_slots_are_copies(self, store, at):
        """Test mutating a loaded slot does not change the store."""
        store.write_entry("PARTY1", "mens", Slot(1, "A", entry_time=at(0)))
        loaded = [s for s in store.load_slots("PARTY1", "mens") if s.number == 1][0]
        loaded.wrestler_name = "Changed"
        reloaded = [s for s in store.load_slots("PARTY1", "mens") if s.number == 1][0]
        assert reloaded.wrestler_name == "A"

    def test_awards(self, store):
        """Test award records are write-once and listed in order."""
        assert store.insert_award("PARTY1", "mens", "mens:first_elimination", "A") is True
        assert store.insert_award("PARTY1", "mens", "mens:first_elimination", "B") is False
        store.insert_award("PARTY1", None, "match:m1", "X")
        store.insert_award("PARTY1", "mens", "mens:winner", "C")

        assert store.get_award("PARTY1", "mens:first_elimination")["value"] == "A"
        assert store.get_award("PARTY1", "mens:nothing") is None
        assert [r["outcome_key"] for r in store.list_awards("PARTY1", "mens")] == [
            "mens:first_elimination", "mens:winner",
        ]
        assert len(store.list_awards("PARTY1")) == 3

    def test_players_and_leaderboard_order(self, store):
        """Test players list by points then display name."""
        store.save_player("PARTY1", "b", "Bea")
        store.save_player("PARTY1", "a", "Ash")
        store.increment_points("PARTY1", "b", 5)
        store.insert_grant("PARTY1", "match:m1", "ghost", "undercard_winner", 25)

        players = store.list_players("PARTY1")
        assert [(p["player_id"], p["points"]) for p in players] == [
            ("ghost", 25), ("b", 5), ("a", 0),
        ]
        assert store.list_players("PARTY2") == []

    def test_predictions(self, store):
        """Test predictions are replaced per player and key."""
        store.save_prediction("PARTY1", "p1", "mens:winner", "A")
        store.save_prediction("PARTY1", "p1", "mens:winner", "B")
        store.save_prediction("PARTY1", "p2", "mens:first_elimination", "C")

        picks = store.list_predictions("PARTY1", ["mens:winner", "mens:first_elimination"])
        assert [(p["player_id"], p["outcome_key"], p["value"]) for p in picks] == [
            ("p1", "mens:winner", "B"),
            ("p2", "mens:first_elimination", "C"),
        ]
        assert store.list_predictions("PARTY1", []) == []

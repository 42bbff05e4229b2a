# Area: Store Tests
"""Tests for Players Repository."""

import pytest

from rumble_engine._store.repo_players import PlayerRepository


class TestPlayerRepository:
    """Tests for PlayerRepository class."""

    @pytest.fixture
    def repo(self, db_path):
        """Create repository with test database."""
        return PlayerRepository(db_path)

    def test_save_player(self, repo):
        """Test saving a new player."""
        repo.save_player("PARTY1", "p1", "Alex")
        player = repo.get_player("PARTY1", "p1")
        assert player["display_name"] == "Alex"
        assert player["points"] == 0

    def test_save_player_keeps_points(self, repo):
        """Test renaming a player does not reset their points."""
        repo.save_player("PARTY1", "p1", "Alex")
        repo.increment_points("PARTY1", "p1", 30)
        repo.save_player("PARTY1", "p1", "Alexandra")
        player = repo.get_player("PARTY1", "p1")
        assert player["display_name"] == "Alexandra"
        assert player["points"] == 30

    def test_get_player_not_found(self, repo):
        """Test retrieving non-existent player returns None."""
        assert repo.get_player("PARTY1", "nobody") is None

    def test_increment_returns_total(self, repo):
        """Test increments return the new total and create missing players."""
        assert repo.increment_points("PARTY1", "p1", 5) == 5
        assert repo.increment_points("PARTY1", "p1", -2) == 3

    def test_get_all_players_ordering(self, repo):
        """Test players are ordered by points, then name."""
        repo.save_player("PARTY1", "b", "Bea")
        repo.save_player("PARTY1", "a", "Ash")
        repo.save_player("PARTY1", "c", "Cy")
        repo.increment_points("PARTY1", "c", 10)
        repo.save_player("PARTY2", "z", "Zed")

        players = repo.get_all_players("PARTY1")
        assert [p["player_id"] for p in players] == ["c", "a", "b"]

    def test_predictions_replace(self, repo):
        """Test a second prediction for one key replaces the first."""
        repo.save_prediction("PARTY1", "p1", "mens:winner", "A")
        repo.save_prediction("PARTY1", "p1", "mens:winner", "B")
        repo.save_prediction("PARTY1", "p2", "mens:winner", "A")
        repo.save_prediction("PARTY1", "p1", "womens:winner", "C")

        picks = repo.get_predictions("PARTY1", ["mens:winner"])
        assert [(p["player_id"], p["value"]) for p in picks] == [("p1", "B"), ("p2", "A")]

    def test_get_predictions_empty_keys(self, repo):
        """Test asking for no keys returns nothing."""
        assert repo.get_predictions("PARTY1", []) == []

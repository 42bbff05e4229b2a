# Area: Shared Tests
"""Tests for engine configuration loading."""

import json
import os

import pytest
from pydantic import ValidationError

from rumble_engine._config import ENV_MAPPINGS, EngineConfig, load_config
from rumble_engine._engine.scoring import ScoringTable
from rumble_engine.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove RUMBLE_* variables from the environment."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    for name in ScoringTable.model_fields:
        monkeypatch.delenv(f"RUMBLE_SCORE_{name.upper()}", raising=False)


@pytest.fixture
def config_file(tmp_path):
    def _write(data):
        path = tmp_path / "rumble.json"
        path.write_text(json.dumps(data))
        return str(path)
    return _write


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_defaults(self):
        """Test defaults for everything but the party code."""
        config = EngineConfig(party_code="ABC123")
        assert config.db_path == "rumble.db"
        assert config.log_level == "INFO"
        assert config.jobber_threshold_seconds == 60
        assert config.final_four_requires_full_field is True
        assert config.scoring.winner_pick == 50

    def test_party_code_stripped(self):
        assert EngineConfig(party_code="  ABC  ").party_code == "ABC"

    @pytest.mark.parametrize("data", [
        {"party_code": "   "},
        {"party_code": "A", "log_level": "LOUD"},
        {"party_code": "A", "jobber_threshold_seconds": 0},
        {"party_code": "A", "unknown": 1},
        {"party_code": "A", "scoring": {"jobber_penalty": 5}},
    ])
    def test_invalid(self, data):
        """Test invalid values are rejected."""
        with pytest.raises(ValidationError):
            EngineConfig(**data)

    def test_log_level_upper_cased(self):
        assert EngineConfig(party_code="A", log_level="debug").log_level == "DEBUG"


class TestLoadConfig:
    """Tests for load_config layering."""

    def test_file_values(self, config_file):
        """Test values are read from a JSON file."""
        path = config_file({
            "party_code": "FILE1",
            "db_path": "party.db",
            "scoring": {"elimination": 7},
        })
        config = load_config(path, use_dotenv=False)
        assert config.party_code == "FILE1"
        assert config.db_path == "party.db"
        assert config.scoring.elimination == 7
        assert config.scoring.winner_pick == 50

    def test_env_overrides_file(self, config_file, monkeypatch):
        """Test environment variables win over the file."""
        path = config_file({"party_code": "FILE1", "jobber_threshold_seconds": 60})
        monkeypatch.setenv("RUMBLE_PARTY_CODE", "ENV1")
        monkeypatch.setenv("RUMBLE_JOBBER_THRESHOLD_SECONDS", "45")
        monkeypatch.setenv("RUMBLE_FINAL_FOUR_REQUIRES_FULL_FIELD", "false")
        monkeypatch.setenv("RUMBLE_SCORE_WINNER_PICK", "75")

        config = load_config(path, use_dotenv=False)
        assert config.party_code == "ENV1"
        assert config.jobber_threshold_seconds == 45
        assert config.final_four_requires_full_field is False
        assert config.scoring.winner_pick == 75

    def test_overrides_win(self, monkeypatch):
        """Test explicit overrides beat the environment; None is ignored."""
        monkeypatch.setenv("RUMBLE_PARTY_CODE", "ENV1")
        monkeypatch.setenv("RUMBLE_DB_PATH", "env.db")
        config = load_config(
            overrides={"party_code": "CLI1", "db_path": None}, use_dotenv=False
        )
        assert config.party_code == "CLI1"
        assert config.db_path == "env.db"

    def test_missing_party_code(self):
        """Test a missing party code is reported with the field name."""
        with pytest.raises(ConfigError) as exc:
            load_config(use_dotenv=False)
        assert any(e.startswith("party_code") for e in exc.value.context["errors"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "nope.json"), use_dotenv=False)

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(str(path), use_dotenv=False)

    def test_non_object(self, config_file):
        with pytest.raises(ConfigError):
            load_config(config_file([1, 2]), use_dotenv=False)

    def test_dotenv_file(self, tmp_path, monkeypatch):
        """Test a .env file in the working directory is loaded."""
        (tmp_path / ".env").write_text("RUMBLE_PARTY_CODE=DOTENV1\n")
        monkeypatch.chdir(tmp_path)
        try:
            config = load_config()
        finally:
            os.environ.pop("RUMBLE_PARTY_CODE", None)
        assert config.party_code == "DOTENV1"

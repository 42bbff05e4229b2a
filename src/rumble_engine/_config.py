# Area: Shared
"""
rumble_engine._config — Engine Configuration
============================================

Configuration model and loader for the host console.

Values are layered, later layers winning:
    1. Model defaults
    2. JSON config file (--config)
    3. Environment variables (RUMBLE_*), including a .env file
    4. Explicit overrides (CLI flags)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ._engine.scoring import ScoringTable
from .errors import ConfigError

logger = logging.getLogger("rumble_engine.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable → config key
ENV_MAPPINGS = {
    "RUMBLE_PARTY_CODE": "party_code",
    "RUMBLE_DB_PATH": "db_path",
    "RUMBLE_LOG_FILE": "log_file",
    "RUMBLE_LOG_LEVEL": "log_level",
    "RUMBLE_JOBBER_THRESHOLD_SECONDS": "jobber_threshold_seconds",
    "RUMBLE_FINAL_FOUR_REQUIRES_FULL_FIELD": "final_four_requires_full_field",
}

# Per-award point overrides, e.g. RUMBLE_SCORE_WINNER_PICK=75
SCORE_ENV_PREFIX = "RUMBLE_SCORE_"


class EngineConfig(BaseModel):
    """Settings for one party's engine."""

    party_code: str = Field(..., min_length=1)
    db_path: str = "rumble.db"
    log_file: str = "rumble_engine.log"
    log_level: str = "INFO"
    jobber_threshold_seconds: float = Field(60, gt=0)
    final_four_requires_full_field: bool = True
    scoring: ScoringTable = Field(default_factory=ScoringTable)

    model_config = {"extra": "forbid"}

    @field_validator("party_code")
    @classmethod
    def validate_party_code(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("party_code cannot be blank")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return v.upper()


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    use_dotenv: bool = True,
) -> EngineConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values that win over file and environment (None values ignored)
        use_dotenv: Load a .env file into the environment first

    Returns:
        Validated EngineConfig

    Raises:
        ConfigError: If the file is unreadable or validation fails
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config: Dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(
                f"Config file not found: {config_path}",
                context={"config_path": config_path},
            )
        try:
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Could not read config file: {e}",
                context={"config_path": config_path},
            ) from e
        if not isinstance(config, dict):
            raise ConfigError(
                "Config file must contain a JSON object",
                context={"config_path": config_path},
            )

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    scoring = dict(config.get("scoring") or {})
    for name in ScoringTable.model_fields:
        env_key = f"{SCORE_ENV_PREFIX}{name.upper()}"
        if env_key in os.environ:
            scoring[name] = os.environ[env_key]
    if scoring:
        config["scoring"] = scoring

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    try:
        engine_config = EngineConfig(**config)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(
            "Invalid configuration",
            context={"errors": problems},
        ) from e

    logger.debug(f"Loaded config for party {engine_config.party_code}")
    return engine_config

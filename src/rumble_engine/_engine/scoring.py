# Area: Engine
"""
rumble_engine._engine.scoring — Scoring table
=============================================

Point values for every award the engine hands out. The table is
injected into the controller so a party can run with its own values.
Defaults are the values used for the 2026 event.
"""

from pydantic import BaseModel, Field, field_validator


class ScoringTable(BaseModel):
    """Points per award reason."""

    undercard_winner: int = Field(25, description="Correct undercard match pick")
    prop_bet: int = Field(10, description="Correct prop bet pick")
    winner_pick: int = Field(50, description="Predicted the division winner")
    winner_number: int = Field(50, description="Owns the winning slot")
    elimination: int = Field(5, description="Owns the slot credited with an elimination")
    iron_person: int = Field(20, description="Owns the longest-lasting slot")
    final_four: int = Field(10, description="Owns one of the last four slots")
    jobber_penalty: int = Field(-10, description="Owns a slot eliminated within the threshold")
    first_elimination: int = Field(10, description="Predicted the first eliminated wrestler")
    most_eliminations: int = Field(20, description="Predicted the most eliminations leader")
    longest_duration: int = Field(20, description="Predicted the Iron Man/Woman")
    final_four_pick: int = Field(10, description="Per final four pick that made it")
    entrant_guess: int = Field(15, description="Predicted entrant #1 or #30")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("jobber_penalty")
    @classmethod
    def validate_jobber_penalty(cls, v: int) -> int:
        """A penalty never adds points."""
        if v > 0:
            raise ValueError("jobber_penalty must be zero or negative")
        return v

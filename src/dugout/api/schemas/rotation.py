from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from dugout.config.positions import Position, PositionCategory
from dugout.config.settings import max_innings
from dugout.models import InningAssignment, Player, RotationSettings


def check_innings_limit(settings: RotationSettings | None) -> RotationSettings | None:
    """Reject requested settings above the configured inning maximum.

    Stored lineups are not re-checked, so lowering the limit leaves them readable.
    """

    if settings is not None and settings.number_of_innings > max_innings():
        raise ValueError(f"number_of_innings must be at most {max_innings()}")
    return settings


class RotationPreviewRequest(BaseModel):
    players: List[Player]
    rotation_settings: RotationSettings = Field(default_factory=RotationSettings, alias="rotationSettings")

    model_config = {"populate_by_name": True}

    @field_validator("rotation_settings")
    @classmethod
    def _innings_within_limit(cls, value: RotationSettings) -> RotationSettings:
        return check_innings_limit(value)


class UnfilledPositionResponse(BaseModel):
    inning: int
    position: Position


class PlayerSummaryResponse(BaseModel):
    player_id: str
    name: str
    batting_order: int
    innings: int
    positions: Dict[Position, int]
    categories: Dict[PositionCategory, int]


class RotationPreviewResponse(BaseModel):
    field_positions: List[Position]
    rotation: List[List[InningAssignment]]
    unfilled: List[UnfilledPositionResponse]
    summaries: List[PlayerSummaryResponse]


class PositionResponse(BaseModel):
    code: Position
    name: str
    category: PositionCategory


class PlayerStatsResponse(BaseModel):
    lineup_id: str
    player_id: str
    innings: int
    positions: Dict[Position, int]

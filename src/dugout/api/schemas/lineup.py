from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from dugout.models import InningAssignment, Player, RotationSettings, Sport

from .rotation import check_innings_limit


class LineupCreateRequest(BaseModel):
    owner_id: str = Field(..., min_length=1)
    name: str
    sport: Sport = Sport.BASEBALL
    players: List[Player]
    rotation_settings: RotationSettings = Field(default_factory=RotationSettings, alias="rotationSettings")

    model_config = {"populate_by_name": True}

    @field_validator("rotation_settings")
    @classmethod
    def _innings_within_limit(cls, value: RotationSettings) -> RotationSettings:
        return check_innings_limit(value)


class LineupUpdateRequest(BaseModel):
    name: str | None = None
    sport: Sport | None = None
    players: List[Player] | None = None
    rotation_settings: RotationSettings | None = Field(default=None, alias="rotationSettings")

    model_config = {"populate_by_name": True}

    @field_validator("rotation_settings")
    @classmethod
    def _innings_within_limit(cls, value: RotationSettings | None) -> RotationSettings | None:
        return check_innings_limit(value)


class LineupData(BaseModel):
    sport: Sport
    players: List[Player]
    rotation_settings: RotationSettings = Field(..., alias="rotationSettings")
    rotation: List[List[InningAssignment]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class LineupResponse(BaseModel):
    lineup_id: str
    owner_id: str
    name: str
    data: LineupData
    created_at: datetime
    updated_at: datetime


class LineupSummaryResponse(BaseModel):
    lineup_id: str
    owner_id: str
    name: str
    sport: str
    players: int
    innings: int
    created_at: datetime
    updated_at: datetime

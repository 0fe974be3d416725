"""Canonical roster and rotation models shared across planner, storage and API."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from dugout.config.positions import Position


class Sport(str, Enum):
    BASEBALL = "baseball"
    SOFTBALL = "softball"


# Stored lineup documents use camelCase keys; models accept either spelling.
_DOCUMENT_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class Player(BaseModel):
    """One roster entry for a planning run."""

    id: str = Field(..., min_length=1)
    name: str
    position: Position = Position.BENCH
    batting_order: int = Field(..., alias="battingOrder")
    jersey_number: Optional[str] = Field(default=None, alias="jerseyNumber")
    cannot_pitch: bool = Field(default=False, alias="cannotPitch")
    cannot_catch: bool = Field(default=False, alias="cannotCatch")

    model_config = _DOCUMENT_CONFIG

    def can_play(self, position: Position) -> bool:
        if position is Position.PITCHER:
            return not self.cannot_pitch
        if position is Position.CATCHER:
            return not self.cannot_catch
        return True


class RotationSettings(BaseModel):
    number_of_innings: int = Field(default=6, ge=1, alias="numberOfInnings")
    use_pitcher: bool = Field(default=True, alias="usePitcher")
    use_catcher: bool = Field(default=True, alias="useCatcher")

    model_config = _DOCUMENT_CONFIG


class InningAssignment(BaseModel):
    """A single player's position for one inning."""

    inning: int = Field(..., ge=1)
    player_id: str = Field(..., alias="playerId")
    player_name: str = Field(..., alias="playerName")
    position: Position
    batting_order: int = Field(..., alias="battingOrder")
    jersey_number: Optional[str] = Field(default=None, alias="jerseyNumber")

    model_config = _DOCUMENT_CONFIG


Rotation = List[List[InningAssignment]]

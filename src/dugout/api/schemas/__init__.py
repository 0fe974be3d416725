"""Pydantic models for API I/O."""

from .lineup import (
    LineupCreateRequest,
    LineupData,
    LineupResponse,
    LineupSummaryResponse,
    LineupUpdateRequest,
)
from .rotation import (
    PlayerStatsResponse,
    PlayerSummaryResponse,
    PositionResponse,
    RotationPreviewRequest,
    RotationPreviewResponse,
    UnfilledPositionResponse,
)

__all__ = [
    "LineupCreateRequest",
    "LineupData",
    "LineupResponse",
    "LineupSummaryResponse",
    "LineupUpdateRequest",
    "PlayerStatsResponse",
    "PlayerSummaryResponse",
    "PositionResponse",
    "RotationPreviewRequest",
    "RotationPreviewResponse",
    "UnfilledPositionResponse",
]

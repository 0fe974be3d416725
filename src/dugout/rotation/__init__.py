"""Rotation planning, validation, summaries and export."""

from .export import rotation_to_csv, rotation_to_rows
from .planner import (
    RotationPlan,
    UnfilledPosition,
    generate_rotation,
    get_available_positions,
    get_field_positions,
    plan_rotation,
)
from .stats import (
    PlayerRotationSummary,
    get_player_stats,
    summarize_rotation,
    validate_batting_orders,
    validate_player_ids,
)
from .validation import LineupValidationError, ensure_valid_lineup, validate_lineup

__all__ = [
    "LineupValidationError",
    "PlayerRotationSummary",
    "RotationPlan",
    "UnfilledPosition",
    "ensure_valid_lineup",
    "generate_rotation",
    "get_available_positions",
    "get_field_positions",
    "get_player_stats",
    "plan_rotation",
    "rotation_to_csv",
    "rotation_to_rows",
    "summarize_rotation",
    "validate_batting_orders",
    "validate_lineup",
    "validate_player_ids",
]

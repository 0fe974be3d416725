"""Configuration helpers for positions, sports, and runtime limits."""

from .positions import (
    CATEGORY_POSITIONS,
    INFIELD_ORDER,
    OUTFIELD_ORDER,
    POSITION_NAMES,
    Position,
    PositionCategory,
    get_position_category,
    parse_position,
)
from .settings import max_innings, max_lineups_per_owner
from .sports import SportRules, get_sport_rules, iter_sports

__all__ = [
    "CATEGORY_POSITIONS",
    "INFIELD_ORDER",
    "OUTFIELD_ORDER",
    "POSITION_NAMES",
    "Position",
    "PositionCategory",
    "SportRules",
    "get_position_category",
    "get_sport_rules",
    "iter_sports",
    "max_innings",
    "max_lineups_per_owner",
    "parse_position",
]

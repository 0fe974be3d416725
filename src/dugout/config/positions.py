"""Fielding positions and the categories used for rotation fairness."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Tuple


class Position(str, Enum):
    PITCHER = "P"
    CATCHER = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SHORTSTOP = "SS"
    LEFT_FIELD = "LF"
    CENTER_FIELD = "CF"
    RIGHT_FIELD = "RF"
    BENCH = "BENCH"

    def __str__(self) -> str:
        return self.value


class PositionCategory(str, Enum):
    INFIELD = "infield"
    OUTFIELD = "outfield"
    BENCH = "bench"

    def __str__(self) -> str:
        return self.value


# Base infield order; pitcher and catcher are prepended when enabled.
INFIELD_ORDER: Tuple[Position, ...] = (
    Position.FIRST_BASE,
    Position.SECOND_BASE,
    Position.THIRD_BASE,
    Position.SHORTSTOP,
)

OUTFIELD_ORDER: Tuple[Position, ...] = (
    Position.LEFT_FIELD,
    Position.CENTER_FIELD,
    Position.RIGHT_FIELD,
)

_POSITION_CATEGORY: Dict[Position, PositionCategory] = {
    Position.PITCHER: PositionCategory.INFIELD,
    Position.CATCHER: PositionCategory.INFIELD,
    Position.FIRST_BASE: PositionCategory.INFIELD,
    Position.SECOND_BASE: PositionCategory.INFIELD,
    Position.THIRD_BASE: PositionCategory.INFIELD,
    Position.SHORTSTOP: PositionCategory.INFIELD,
    Position.LEFT_FIELD: PositionCategory.OUTFIELD,
    Position.CENTER_FIELD: PositionCategory.OUTFIELD,
    Position.RIGHT_FIELD: PositionCategory.OUTFIELD,
    Position.BENCH: PositionCategory.BENCH,
}

POSITION_NAMES: Mapping[Position, str] = {
    Position.PITCHER: "Pitcher",
    Position.CATCHER: "Catcher",
    Position.FIRST_BASE: "First Base",
    Position.SECOND_BASE: "Second Base",
    Position.THIRD_BASE: "Third Base",
    Position.SHORTSTOP: "Shortstop",
    Position.LEFT_FIELD: "Left Field",
    Position.CENTER_FIELD: "Center Field",
    Position.RIGHT_FIELD: "Right Field",
    Position.BENCH: "Bench",
}

CATEGORY_POSITIONS: Dict[PositionCategory, Tuple[Position, ...]] = {}
for _position, _category in _POSITION_CATEGORY.items():
    CATEGORY_POSITIONS[_category] = CATEGORY_POSITIONS.get(_category, ()) + (_position,)

_POSITION_ALIASES: Mapping[str, Position] = {
    "PITCHER": Position.PITCHER,
    "CATCHER": Position.CATCHER,
    "FIRST": Position.FIRST_BASE,
    "SECOND": Position.SECOND_BASE,
    "THIRD": Position.THIRD_BASE,
    "SHORT": Position.SHORTSTOP,
    "LEFT": Position.LEFT_FIELD,
    "CENTER": Position.CENTER_FIELD,
    "RIGHT": Position.RIGHT_FIELD,
    "BN": Position.BENCH,
    "B": Position.BENCH,
}


def get_position_category(position: Position) -> PositionCategory:
    """Return the fairness category (infield, outfield, bench) of a position."""

    return _POSITION_CATEGORY[Position(position)]


def parse_position(value: str) -> Position:
    """Resolve a position code or common alias, raising ValueError if unknown."""

    token = value.strip().upper()
    if not token:
        raise ValueError("position must not be empty")
    try:
        return Position(token)
    except ValueError:
        pass
    if token in _POSITION_ALIASES:
        return _POSITION_ALIASES[token]
    raise ValueError(f"Unknown position {value!r}")

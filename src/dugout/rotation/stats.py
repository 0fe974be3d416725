"""Roster checks and post-hoc summaries of a generated rotation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from dugout.config.positions import Position, PositionCategory, get_position_category
from dugout.models import InningAssignment, Player


@dataclass
class PlayerRotationSummary:
    player_id: str
    name: str
    batting_order: int
    innings: int = 0
    positions: Dict[Position, int] = field(default_factory=dict)
    categories: Dict[PositionCategory, int] = field(default_factory=dict)


def validate_batting_orders(players: Sequence[Player]) -> bool:
    """True when no two players share a batting order."""

    orders = [player.batting_order for player in players]
    return len(orders) == len(set(orders))


def validate_player_ids(players: Sequence[Player]) -> bool:
    ids = [player.id for player in players]
    return len(ids) == len(set(ids))


def get_player_stats(
    player_id: str,
    rotation: Iterable[Sequence[InningAssignment]],
) -> Dict[Position, int]:
    """Count how many innings ``player_id`` spent at each position."""

    stats: Dict[Position, int] = {}
    for inning in rotation:
        assignment = next((item for item in inning if item.player_id == player_id), None)
        if assignment is None:
            continue
        stats[assignment.position] = stats.get(assignment.position, 0) + 1
    return stats


def summarize_rotation(
    players: Sequence[Player],
    rotation: Sequence[Sequence[InningAssignment]],
) -> List[PlayerRotationSummary]:
    summaries: List[PlayerRotationSummary] = []
    for player in players:
        positions = get_player_stats(player.id, rotation)
        categories: Dict[PositionCategory, int] = {}
        for position, count in positions.items():
            category = get_position_category(position)
            categories[category] = categories.get(category, 0) + count
        summaries.append(
            PlayerRotationSummary(
                player_id=player.id,
                name=player.name,
                batting_order=player.batting_order,
                innings=sum(positions.values()),
                positions=positions,
                categories=categories,
            )
        )
    return summaries

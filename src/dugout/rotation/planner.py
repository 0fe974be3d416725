"""Greedy fielding rotation planner.

Each inning fills the active field positions in a fixed order. For every
position the eligible, not-yet-placed player with the lowest score wins::

    score = 1000 * times_at_this_position + innings_in_this_category

The large weight on the specific position means avoiding a repeat always
beats category balance; category counts only separate players tied on
repeats. Remaining ties fall to roster order, so the output is fully
determined by the inputs. Whoever is left over sits on the bench.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set, Tuple

from dugout.config.positions import (
    INFIELD_ORDER,
    OUTFIELD_ORDER,
    Position,
    PositionCategory,
    get_position_category,
)
from dugout.models import InningAssignment, Player, Rotation, RotationSettings


logger = logging.getLogger(__name__)

_REPEAT_WEIGHT = 1000


@dataclass(frozen=True)
class UnfilledPosition:
    inning: int
    position: Position


@dataclass
class RotationPlan:
    rotation: Rotation
    field_positions: Tuple[Position, ...]
    unfilled: List[UnfilledPosition] = field(default_factory=list)


@dataclass
class _PlannerState:
    """Counters for a single planning run."""

    position_counts: Dict[str, Dict[Position, int]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(int))
    )
    category_counts: Dict[str, Dict[PositionCategory, int]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(int))
    )

    def score(self, player_id: str, position: Position, category: PositionCategory) -> int:
        return (
            _REPEAT_WEIGHT * self.position_counts[player_id][position]
            + self.category_counts[player_id][category]
        )

    def record(self, player_id: str, position: Position, category: PositionCategory) -> None:
        self.position_counts[player_id][position] += 1
        self.category_counts[player_id][category] += 1


def get_field_positions(settings: RotationSettings) -> List[Position]:
    """Active field positions in the order they are filled each inning."""

    positions: List[Position] = []
    if settings.use_pitcher:
        positions.append(Position.PITCHER)
    if settings.use_catcher:
        positions.append(Position.CATCHER)
    positions.extend(INFIELD_ORDER)
    positions.extend(OUTFIELD_ORDER)
    return positions


def get_available_positions(settings: RotationSettings) -> List[Position]:
    """Field positions plus bench, for selection lists."""

    return [*get_field_positions(settings), Position.BENCH]


def _assignment(inning: int, player: Player, position: Position) -> InningAssignment:
    return InningAssignment(
        inning=inning,
        player_id=player.id,
        player_name=player.name,
        position=position,
        batting_order=player.batting_order,
        jersey_number=player.jersey_number,
    )


def _pick_player(
    candidates: Sequence[Player],
    position: Position,
    category: PositionCategory,
    state: _PlannerState,
) -> Player | None:
    best: Player | None = None
    best_score: int | None = None
    for player in candidates:
        score = state.score(player.id, position, category)
        if best_score is None or score < best_score:
            best = player
            best_score = score
    return best


def plan_rotation(players: Sequence[Player], settings: RotationSettings) -> RotationPlan:
    """Build the full rotation and report positions left empty for lack of players."""

    field_positions = tuple(get_field_positions(settings))
    state = _PlannerState()
    rotation: Rotation = []
    unfilled: List[UnfilledPosition] = []

    for inning in range(1, settings.number_of_innings + 1):
        assignments: List[InningAssignment] = []
        placed: Set[str] = set()

        for position in field_positions:
            category = get_position_category(position)
            candidates = [
                player for player in players if player.id not in placed and player.can_play(position)
            ]
            chosen = _pick_player(candidates, position, category, state)
            if chosen is None:
                unfilled.append(UnfilledPosition(inning=inning, position=position))
                continue
            assignments.append(_assignment(inning, chosen, position))
            placed.add(chosen.id)
            state.record(chosen.id, position, category)

        for player in players:
            if player.id in placed:
                continue
            assignments.append(_assignment(inning, player, Position.BENCH))
            state.record(player.id, Position.BENCH, PositionCategory.BENCH)

        assignments.sort(key=lambda item: item.batting_order)
        rotation.append(assignments)

    if unfilled:
        logger.debug(
            "Rotation left %d position slot(s) unfilled across %d innings",
            len(unfilled),
            settings.number_of_innings,
        )

    return RotationPlan(rotation=rotation, field_positions=field_positions, unfilled=unfilled)


def generate_rotation(players: Sequence[Player], settings: RotationSettings) -> Rotation:
    """Return the per-inning assignments for ``players`` under ``settings``."""

    return plan_rotation(players, settings).rotation

"""CSV and row export helpers for generated rotations."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Any, Dict, List, Sequence

from dugout.models import InningAssignment, Player


_MISSING_CELL = "-"


def _grid_headers(innings: int) -> tuple[str, ...]:
    return ("Order", "#", "Player", *(f"Inning {number}" for number in range(1, innings + 1)))


def rotation_to_csv(
    players: Sequence[Player],
    rotation: Sequence[Sequence[InningAssignment]],
) -> str:
    """Render a player-by-inning grid of position codes."""

    lookup: Dict[tuple[int, str], str] = {}
    for index, inning in enumerate(rotation, start=1):
        for assignment in inning:
            lookup[(index, assignment.player_id)] = assignment.position.value

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(_grid_headers(len(rotation)))
    for player in sorted(players, key=lambda item: item.batting_order):
        row: List[Any] = [player.batting_order, player.jersey_number or "", player.name]
        for index in range(1, len(rotation) + 1):
            row.append(lookup.get((index, player.id), _MISSING_CELL))
        writer.writerow(row)
    return buffer.getvalue()


def rotation_to_rows(rotation: Sequence[Sequence[InningAssignment]]) -> List[dict]:
    """Flatten a rotation into JSON-ready assignment rows."""

    return [
        assignment.model_dump(mode="json", by_alias=True)
        for inning in rotation
        for assignment in inning
    ]


__all__ = [
    "rotation_to_csv",
    "rotation_to_rows",
]

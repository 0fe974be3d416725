"""Checks a lineup must pass before a rotation is generated and stored."""

from __future__ import annotations

from typing import List, Sequence

from dugout.models import Player, RotationSettings

from .stats import validate_batting_orders, validate_player_ids


class LineupValidationError(ValueError):
    """Raised when a lineup cannot be saved as submitted."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def validate_lineup(name: str, players: Sequence[Player], settings: RotationSettings) -> List[str]:
    problems: List[str] = []
    if not name.strip():
        problems.append("Please enter a lineup name")
    if not players:
        problems.append("Please add at least one player")
        return problems
    if any(not player.name.strip() for player in players):
        problems.append("All players must have a name")
    if not validate_batting_orders(players):
        problems.append("Each player must have a unique batting order")
    if not validate_player_ids(players):
        problems.append("Each player must have a unique id")
    if settings.use_pitcher and all(player.cannot_pitch for player in players):
        problems.append(
            'You have "Use Pitcher Position" enabled, but all players are marked as '
            '"Cannot pitch". At least one player must be able to pitch.'
        )
    if settings.use_catcher and all(player.cannot_catch for player in players):
        problems.append(
            'You have "Use Catcher Position" enabled, but all players are marked as '
            '"Cannot catch". At least one player must be able to catch.'
        )
    return problems


def ensure_valid_lineup(name: str, players: Sequence[Player], settings: RotationSettings) -> None:
    problems = validate_lineup(name, players, settings)
    if problems:
        raise LineupValidationError(problems)

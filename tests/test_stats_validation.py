import pytest

from dugout.config import Position, PositionCategory
from dugout.models import InningAssignment, Player, RotationSettings
from dugout.rotation import (
    LineupValidationError,
    ensure_valid_lineup,
    generate_rotation,
    get_player_stats,
    summarize_rotation,
    validate_batting_orders,
    validate_lineup,
    validate_player_ids,
)


def _players(*orders: int) -> list[Player]:
    return [
        Player(id=f"p{index}", name=f"Player {index}", batting_order=order)
        for index, order in enumerate(orders, start=1)
    ]


def test_validate_batting_orders():
    assert validate_batting_orders(_players(1, 1, 2)) is False
    assert validate_batting_orders(_players(1, 2, 3)) is True
    assert validate_batting_orders(_players(7, -1, 40)) is True
    assert validate_batting_orders([]) is True


def test_player_stats_sum_to_innings():
    players = _players(*range(1, 11))
    rotation = generate_rotation(players, RotationSettings(number_of_innings=8))
    for player in players:
        assert sum(get_player_stats(player.id, rotation).values()) == 8


def test_player_stats_counts_positions_and_skips_missing():
    def row(inning: int, player_id: str, position: Position) -> InningAssignment:
        return InningAssignment(
            inning=inning,
            player_id=player_id,
            player_name=player_id,
            position=position,
            batting_order=1,
        )

    rotation = [
        [row(1, "a", Position.PITCHER)],
        [row(2, "b", Position.PITCHER)],
        [row(3, "a", Position.PITCHER)],
        [row(4, "a", Position.BENCH)],
    ]
    assert get_player_stats("a", rotation) == {Position.PITCHER: 2, Position.BENCH: 1}
    assert get_player_stats("zzz", rotation) == {}


def test_summarize_rotation_categories():
    players = _players(*range(1, 11))
    rotation = generate_rotation(players, RotationSettings(number_of_innings=6))
    summaries = summarize_rotation(players, rotation)

    assert [summary.player_id for summary in summaries] == [player.id for player in players]
    for summary in summaries:
        assert summary.innings == 6
        assert sum(summary.categories.values()) == 6
    assert sum(summary.categories.get(PositionCategory.BENCH, 0) for summary in summaries) == 6


def test_validate_lineup_happy_path():
    assert validate_lineup("Tigers", _players(1, 2, 3), RotationSettings()) == []


def test_validate_lineup_reports_problems():
    players = [
        Player(id="p1", name=" ", batting_order=1, cannot_pitch=True),
        Player(id="p2", name="B", batting_order=1, cannot_pitch=True),
    ]
    problems = validate_lineup("  ", players, RotationSettings())
    assert problems[0] == "Please enter a lineup name"
    assert "All players must have a name" in problems
    assert "Each player must have a unique batting order" in problems
    assert any("Cannot pitch" in problem for problem in problems)
    assert not any("Cannot catch" in problem for problem in problems)


def test_validate_lineup_ignores_disabled_positions():
    players = [Player(id="p1", name="A", batting_order=1, cannot_pitch=True, cannot_catch=True)]
    settings = RotationSettings(use_pitcher=False, use_catcher=False)
    assert validate_lineup("Solo", players, settings) == []


def test_ensure_valid_lineup_raises_with_problems():
    with pytest.raises(LineupValidationError) as excinfo:
        ensure_valid_lineup("Empty", [], RotationSettings())
    assert excinfo.value.problems == ["Please add at least one player"]
    assert isinstance(excinfo.value, ValueError)


def test_validate_lineup_rejects_shared_player_ids():
    players = [
        Player(id="x", name="A", batting_order=1),
        Player(id="x", name="B", batting_order=2),
        Player(id="y", name="C", batting_order=3),
    ]
    problems = validate_lineup("Tigers", players, RotationSettings())
    assert problems == ["Each player must have a unique id"]
    assert validate_player_ids(players) is False
    assert validate_player_ids(players[1:]) is True

from pathlib import Path

import pytest

from dugout.config import Position
from dugout.ingest import RosterImportError, RosterRow, load_roster_csv, rows_to_players


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "roster.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_roster_csv_defaults(tmp_path: Path):
    path = _write(
        tmp_path,
        "id,name,position,batting_order,jersey_number,cannot_pitch,cannot_catch\n"
        "a1,Avery,ss,2,14,,yes\n"
        "b2,Blake,Pitcher,1,,x,0\n"
        "\n",
    )
    players = load_roster_csv(path)

    assert [player.id for player in players] == ["a1", "b2"]
    assert players[0].position is Position.SHORTSTOP
    assert players[0].jersey_number == "14"
    assert players[0].cannot_catch is True
    assert players[0].cannot_pitch is False
    assert players[1].batting_order == 1
    assert players[1].jersey_number is None
    assert players[1].cannot_pitch is True


def test_load_roster_csv_generates_ids_and_orders(tmp_path: Path):
    path = _write(tmp_path, "First,Last\nRiley,Stone\nQuinn,Park\n")
    players = load_roster_csv(path, mapping={"name": "First|Last"})

    assert [(player.id, player.name, player.batting_order) for player in players] == [
        ("p1", "Riley Stone", 1),
        ("p2", "Quinn Park", 2),
    ]
    assert all(player.position is Position.BENCH for player in players)


def test_rows_to_players_rejects_bad_flag():
    row = RosterRow.from_mapping({"name": "Sam", "cannot_pitch": "maybe"}, {})
    with pytest.raises(RosterImportError, match="cannot_pitch"):
        rows_to_players([row])


def test_rows_to_players_rejects_bad_batting_order():
    row = RosterRow.from_mapping({"name": "Sam", "batting_order": "first"}, {})
    with pytest.raises(RosterImportError, match="batting order"):
        rows_to_players([row])


def test_rows_to_players_requires_name():
    row = RosterRow.from_mapping({"id": "x"}, {})
    with pytest.raises(RosterImportError, match="name is required"):
        rows_to_players([row])


def test_rows_to_players_rejects_unknown_position():
    row = RosterRow.from_mapping({"name": "Sam", "position": "DH"}, {})
    with pytest.raises(RosterImportError, match="Unknown position"):
        rows_to_players([row])


def test_load_roster_csv_rejects_duplicate_ids(tmp_path: Path):
    path = _write(tmp_path, "id,name\nx,Avery\nx,Blake\ny,Casey\n")
    with pytest.raises(RosterImportError, match="Row 2: duplicate player id 'x'"):
        load_roster_csv(path)


def test_generated_id_clashing_with_explicit_id_is_rejected():
    rows = [
        RosterRow.from_mapping({"id": "p2", "name": "Avery"}, {}),
        RosterRow.from_mapping({"name": "Blake"}, {}),
    ]
    with pytest.raises(RosterImportError, match="duplicate player id 'p2'"):
        rows_to_players(rows)


def test_load_roster_csv_wraps_decode_errors(tmp_path: Path):
    path = tmp_path / "roster.csv"
    path.write_bytes(b"name\n\xff\xfe\n")
    with pytest.raises(RosterImportError, match="Unable to read roster"):
        load_roster_csv(path)


def test_load_roster_csv_wraps_missing_file(tmp_path: Path):
    with pytest.raises(RosterImportError, match="Unable to read roster"):
        load_roster_csv(tmp_path / "missing.csv")

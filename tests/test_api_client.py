import importlib.util
from pathlib import Path

import pytest


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "api_client.py"


def _load_client_module():
    spec = importlib.util.spec_from_file_location("dugout_api_client", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_load_players_uses_roster_ingest(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,batting_order,cannot_pitch\nAda,2,yes\nBo,,\n", encoding="utf-8")

    players = _load_client_module().load_players(roster)

    assert players[0] == {
        "id": "p1",
        "name": "Ada",
        "position": "BENCH",
        "battingOrder": 2,
        "jerseyNumber": None,
        "cannotPitch": True,
        "cannotCatch": False,
    }
    assert players[1]["battingOrder"] == 2


def test_load_players_exits_on_bad_batting_order(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,batting_order\nAda,first\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="Could not read roster"):
        _load_client_module().load_players(roster)

"""Helpers to load roster CSVs and emit canonical players."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Set

from pydantic import BaseModel, ValidationError

from dugout.config.positions import Position, parse_position
from dugout.models import Player


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "position": "position",
    "batting_order": "batting_order",
    "jersey_number": "jersey_number",
    "cannot_pitch": "cannot_pitch",
    "cannot_catch": "cannot_catch",
}

_TRUE_TOKENS = {"1", "true", "yes", "y", "x"}
_FALSE_TOKENS = {"", "0", "false", "no", "n"}


class RosterImportError(ValueError):
    """Raised when a roster row cannot be converted to a player."""


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_position: Optional[str] = None
    raw_batting_order: Optional[str] = None
    raw_jersey_number: Optional[str] = None
    raw_cannot_pitch: Optional[str] = None
    raw_cannot_catch: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            spec = mapping.get(key, DEFAULT_ROSTER_MAPPING.get(key))
            if spec is None:
                return default
            if "|" in spec:
                parts = [row.get(col.strip(), "").strip() for col in spec.split("|") if row.get(col.strip())]
                return " ".join(parts) if parts else default
            value = row.get(spec)
            return value.strip() if value is not None else default

        return cls(
            raw_id=extract("player_id"),
            raw_name=extract("name", default="") or "",
            raw_position=extract("position"),
            raw_batting_order=extract("batting_order"),
            raw_jersey_number=extract("jersey_number"),
            raw_cannot_pitch=extract("cannot_pitch"),
            raw_cannot_catch=extract("cannot_catch"),
        )


def _parse_flag(value: Optional[str], *, field: str, row_number: int) -> bool:
    token = (value or "").strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise RosterImportError(f"Row {row_number}: invalid {field} value {value!r}")


def _parse_batting_order(value: Optional[str], *, default: int, row_number: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RosterImportError(f"Row {row_number}: invalid batting order {value!r}") from exc


def rows_to_players(rows: Sequence[RosterRow]) -> List[Player]:
    """Convert mapped rows to players, filling in ids and batting orders by row order."""

    players: List[Player] = []
    seen_ids: Set[str] = set()
    for index, row in enumerate(rows, start=1):
        if not row.raw_name:
            raise RosterImportError(f"Row {index}: player name is required")
        try:
            position = parse_position(row.raw_position) if row.raw_position else Position.BENCH
        except ValueError as exc:
            raise RosterImportError(f"Row {index}: {exc}") from exc
        try:
            player = Player(
                id=row.raw_id or f"p{index}",
                name=row.raw_name,
                position=position,
                batting_order=_parse_batting_order(row.raw_batting_order, default=index, row_number=index),
                jersey_number=row.raw_jersey_number or None,
                cannot_pitch=_parse_flag(row.raw_cannot_pitch, field="cannot_pitch", row_number=index),
                cannot_catch=_parse_flag(row.raw_cannot_catch, field="cannot_catch", row_number=index),
            )
        except ValidationError as exc:
            raise RosterImportError(f"Row {index}: {exc}") from exc
        if player.id in seen_ids:
            raise RosterImportError(f"Row {index}: duplicate player id {player.id!r}")
        seen_ids.add(player.id)
        players.append(player)
    return players


def load_roster_rows(path: Path, mapping: Optional[Mapping[str, str]] = None) -> List[RosterRow]:
    mapping = {**DEFAULT_ROSTER_MAPPING, **(mapping or {})}
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            rows = [
                RosterRow.from_mapping(raw, mapping)
                for raw in reader
                if any((value or "").strip() for value in raw.values())
            ]
    except (UnicodeDecodeError, OSError) as exc:
        raise RosterImportError(f"Unable to read roster {path}: {exc}") from exc
    logger.info("Loaded %d roster rows from %s", len(rows), path)
    return rows


def load_roster_csv(path: Path, mapping: Optional[Mapping[str, str]] = None) -> List[Player]:
    return rows_to_players(load_roster_rows(path, mapping))


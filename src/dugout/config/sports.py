"""Per-sport defaults for lineup creation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass(frozen=True)
class SportRules:
    sport: str
    display_name: str
    default_innings: int


_SPORT_RULES: Dict[str, SportRules] = {
    "baseball": SportRules(
        sport="baseball",
        display_name="Baseball",
        default_innings=6,
    ),
    "softball": SportRules(
        sport="softball",
        display_name="Softball",
        default_innings=6,
    ),
}


def iter_sports() -> Iterable[SportRules]:
    """Return an iterator of all configured sports."""

    return _SPORT_RULES.values()


def get_sport_rules(sport: str) -> SportRules:
    """Fetch rules for a sport, raising KeyError if missing."""

    key = sport.strip().lower()
    if key not in _SPORT_RULES:
        raise KeyError(f"No sport rules configured for sport={sport!r}")
    return _SPORT_RULES[key]

"""Runtime limits read from the environment."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

_MAX_INNINGS_ENV = "DUGOUT_MAX_INNINGS"
_MAX_LINEUPS_ENV = "DUGOUT_MAX_LINEUPS"

_MAX_INNINGS_DEFAULT = 12
_MAX_LINEUPS_DEFAULT = 5


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def max_innings() -> int:
    return _env_int(_MAX_INNINGS_ENV, _MAX_INNINGS_DEFAULT, min_value=1)


def max_lineups_per_owner() -> int:
    """Cap on stored lineups per owner; zero disables the cap."""

    return _env_int(_MAX_LINEUPS_ENV, _MAX_LINEUPS_DEFAULT, min_value=0)

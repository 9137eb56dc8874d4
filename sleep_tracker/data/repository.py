"""
SleepRepository — the single place where SQL lives.

Every other module talks to the repository, never to raw SQL. The
controllers treat it as "the store" and call it from worker threads.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from .models import SleepInterval

logger = logging.getLogger(__name__)


class SleepRepository:
    """Data-access layer wrapping a sqlite3 connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    # ── Writes ──────────────────────────────────────────────────────────────

    def insert(self, interval: SleepInterval) -> SleepInterval:
        cur = self.conn.execute(
            "INSERT INTO sleep_intervals (start_time_ms, end_time_ms, quality_rating) "
            "VALUES (?, ?, ?)",
            (interval.start_time_ms, interval.end_time_ms, interval.quality_rating),
        )
        self.conn.commit()
        return SleepInterval(
            id=cur.lastrowid,
            start_time_ms=interval.start_time_ms,
            end_time_ms=interval.end_time_ms,
            quality_rating=interval.quality_rating,
        )

    def update(self, interval: SleepInterval) -> None:
        if interval.id is None:
            raise ValueError("Cannot update an interval that was never inserted.")
        self.conn.execute(
            """UPDATE sleep_intervals SET
                start_time_ms = ?, end_time_ms = ?, quality_rating = ?
            WHERE id = ?""",
            (
                interval.start_time_ms,
                interval.end_time_ms,
                interval.quality_rating,
                interval.id,
            ),
        )
        self.conn.commit()

    def clear(self) -> None:
        """Delete every interval."""
        self.conn.execute("DELETE FROM sleep_intervals")
        self.conn.commit()
        logger.warning("All sleep data has been cleared.")

    # ── Reads ───────────────────────────────────────────────────────────────

    def get(self, interval_id: int) -> Optional[SleepInterval]:
        row = self.conn.execute(
            "SELECT * FROM sleep_intervals WHERE id = ?", (interval_id,)
        ).fetchone()
        return self._row_to_interval(row) if row else None

    def get_most_recent(self) -> Optional[SleepInterval]:
        row = self.conn.execute(
            "SELECT * FROM sleep_intervals ORDER BY id DESC LIMIT 1"
        ).fetchone()
        return self._row_to_interval(row) if row else None

    def get_all(self) -> List[SleepInterval]:
        """All intervals, newest first."""
        rows = self.conn.execute(
            "SELECT * FROM sleep_intervals ORDER BY id DESC"
        ).fetchall()
        return [self._row_to_interval(r) for r in rows]

    def count(self) -> int:
        row = self.conn.execute("SELECT COUNT(*) FROM sleep_intervals").fetchone()
        return row[0]

    # ── Row mappers ─────────────────────────────────────────────────────────

    @staticmethod
    def _row_to_interval(row: sqlite3.Row) -> SleepInterval:
        return SleepInterval(
            id=row["id"],
            start_time_ms=row["start_time_ms"],
            end_time_ms=row["end_time_ms"],
            quality_rating=row["quality_rating"],
        )


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The repository is the ONLY place raw SQL queries live. The controllers
#   call insert / update / get_most_recent / get_all / clear and get
#   dataclasses back.
#
# Data flow:
#   Controller → asyncio.to_thread(repo.method) → SQL → sqlite3.Row →
#   SleepInterval → back on the event loop
#
# Interviewer-friendly talking points:
#   1. "Most recent" means highest id, not latest start time. Ids are
#      AUTOINCREMENT so insertion order is the order the user pressed Start.
#   2. The repository stays synchronous and unaware of threads. Moving the
#      call off the event loop is the caller's job (services/worker.py).
#   3. Failures surface as sqlite3.Error; translating them into StoreError
#      also happens at the caller, so this file stays swappable for a mock.

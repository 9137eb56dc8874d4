"""
SQLite database initialization and connection management.

Single responsibility: own the connection and create tables.
All actual queries live in SleepRepository.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Default DB lives next to the repo root
DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent.parent / "sleep_tracker.db"

SCHEMA_SQL = """
-- Sleep intervals ------------------------------------------------------------
CREATE TABLE IF NOT EXISTS sleep_intervals (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    start_time_ms   INTEGER NOT NULL,
    end_time_ms     INTEGER NOT NULL,
    quality_rating  INTEGER
);

CREATE INDEX IF NOT EXISTS idx_sleep_intervals_start ON sleep_intervals(start_time_ms);
"""


class Database:
    """Thin wrapper around a SQLite connection."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        self.db_path = db_path or DEFAULT_DB_PATH
        self.conn: Optional[sqlite3.Connection] = None

    # -- lifecycle -----------------------------------------------------------

    def connect(self) -> sqlite3.Connection:
        """Open (or return existing) connection and ensure schema exists."""
        if self.conn is not None:
            return self.conn
        logger.info("Connecting to SQLite at %s", self.db_path)
        # Store calls run on worker threads via asyncio.to_thread
        self.conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")
        self._create_tables()
        return self.conn

    def close(self) -> None:
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.info("Database connection closed.")

    # -- internal ------------------------------------------------------------

    def _create_tables(self) -> None:
        assert self.conn is not None
        self.conn.executescript(SCHEMA_SQL)
        self.conn.commit()
        logger.info("Database schema ensured.")

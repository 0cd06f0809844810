# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from wordbook.repos.schema import ensure_schema
from wordbook.utils.logging import get_logger


log = get_logger("repos.sqlite")


class SQLiteRepo:
    """
    Owns the words database file:
      - connection PRAGMAs
      - one-time schema setup
      - write transactions / read connections
    """
    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._schema_ready = False

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), isolation_level=None)
        conn.row_factory = sqlite3.Row

        conn.execute("PRAGMA foreign_keys = ON;")
        conn.execute("PRAGMA journal_mode = WAL;")
        conn.execute("PRAGMA busy_timeout = 5000;")
        return conn

    def init_schema(self) -> None:
        if self._schema_ready:
            return
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self.tx() as conn:
            ensure_schema(conn)
        self._schema_ready = True
        log.info("schema ready db=%s", self.db_path)

    @contextmanager
    def tx(self) -> Iterator[sqlite3.Connection]:
        conn = self.connect()
        try:
            conn.execute("BEGIN IMMEDIATE;")
            yield conn
            conn.execute("COMMIT;")
        except Exception:
            conn.execute("ROLLBACK;")
            log.exception("SQLite transaction rolled back")
            raise
        finally:
            conn.close()

    @contextmanager
    def read(self) -> Iterator[sqlite3.Connection]:
        conn = self.connect()
        try:
            yield conn
        finally:
            conn.close()

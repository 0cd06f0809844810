# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from wordbook.repos.schema import word_key
from wordbook.repos.sqlite_repo import SQLiteRepo


# (language_code, translation)
TranslationRow = Tuple[str, str]


@dataclass(frozen=True)
class WordsRepo:
    db: SQLiteRepo

    def find_word(self, language_code: str, word: str) -> Optional[dict]:
        """Lookup by (language, word_key(word)): case-insensitive for any script."""
        self.db.init_schema()
        with self.db.read() as conn:
            row = conn.execute(
                """
                SELECT id, language_code, word, created_at
                FROM words
                WHERE language_code = ?
                  AND word_key = ?
                """,
                (language_code, word_key(word)),
            ).fetchone()
            if not row:
                return None
            return self._with_translations(conn, [row])[0]

    def get_word(self, word_id: int) -> Optional[dict]:
        self.db.init_schema()
        with self.db.read() as conn:
            row = conn.execute(
                "SELECT id, language_code, word, created_at FROM words WHERE id = ?",
                (word_id,),
            ).fetchone()
            if not row:
                return None
            return self._with_translations(conn, [row])[0]

    def insert_word(
        self,
        language_code: str,
        word: str,
        translations: Iterable[TranslationRow],
        now_s: str,
    ) -> int:
        """
        Insert a word and its translations in one transaction.
        Raises sqlite3.IntegrityError when the word already exists.
        """
        self.db.init_schema()
        with self.db.tx() as conn:
            cur = conn.execute(
                "INSERT INTO words(language_code, word, word_key, created_at) VALUES(?, ?, ?, ?)",
                (language_code, word, word_key(word), now_s),
            )
            word_id = int(cur.lastrowid)
            conn.executemany(
                """
                INSERT OR IGNORE INTO translations(word_id, language_code, translation)
                VALUES(?, ?, ?)
                """,
                [(word_id, code, text) for code, text in translations],
            )
            return word_id

    def count_words(self) -> int:
        self.db.init_schema()
        with self.db.read() as conn:
            return int(conn.execute("SELECT COUNT(*) FROM words").fetchone()[0])

    def list_words(self, page: int, per_page: int) -> List[dict]:
        """Newest first. page is 1-based."""
        self.db.init_schema()
        offset = (page - 1) * per_page
        with self.db.read() as conn:
            rows = conn.execute(
                """
                SELECT id, language_code, word, created_at
                FROM words
                ORDER BY id DESC
                LIMIT ? OFFSET ?
                """,
                (per_page, offset),
            ).fetchall()
            return self._with_translations(conn, rows)

    @staticmethod
    def _with_translations(conn: sqlite3.Connection, rows: List[sqlite3.Row]) -> List[dict]:
        if not rows:
            return []

        ids = [r["id"] for r in rows]
        marks = ",".join("?" for _ in ids)
        tr_rows = conn.execute(
            f"""
            SELECT word_id, language_code, translation
            FROM translations
            WHERE word_id IN ({marks})
            ORDER BY id
            """,
            ids,
        ).fetchall()

        by_word: Dict[int, List[dict]] = {}
        for t in tr_rows:
            by_word.setdefault(t["word_id"], []).append(
                {"language_code": t["language_code"], "translation": t["translation"]}
            )

        return [
            {
                "id": r["id"],
                "language_code": r["language_code"],
                "word": r["word"],
                "created_at": r["created_at"],
                "translations": by_word.get(r["id"], []),
            }
            for r in rows
        ]

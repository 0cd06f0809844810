# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import sqlite3
from wordbook.utils.logging import get_logger

log = get_logger("repos.schema")


DEFAULT_LANGUAGES = (
    ("da", "Danish"),
    ("de", "German"),
    ("en", "English"),
    ("es", "Spanish"),
    ("fr", "French"),
    ("it", "Italian"),
    ("ja", "Japanese"),
    ("nl", "Dutch"),
    ("pl", "Polish"),
    ("pt", "Portuguese"),
    ("ru", "Russian"),
    ("uk", "Ukrainian"),
    ("zh", "Chinese"),
)


def ensure_schema(conn: sqlite3.Connection) -> None:
    """
    Put all CREATE TABLE / CREATE INDEX setup here.
    Must be idempotent (safe to call multiple times).
    """
    # IMPORTANT: do not set PRAGMAs here that must be per-connection in SQLiteRepo.connect()
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS languages (
            code TEXT PRIMARY KEY,
            name TEXT NOT NULL
        )
        """
    )

    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS words (
            id            INTEGER PRIMARY KEY AUTOINCREMENT,
            language_code TEXT NOT NULL REFERENCES languages(code),
            word          TEXT NOT NULL,
            word_key      TEXT NOT NULL,
            created_at    TEXT NOT NULL
        )
        """
    )
    ensure_word_key(conn)
    conn.execute(
        """
        CREATE UNIQUE INDEX IF NOT EXISTS idx_words_lang_key
            ON words(language_code, word_key)
        """
    )

    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS translations (
            id            INTEGER PRIMARY KEY AUTOINCREMENT,
            word_id       INTEGER NOT NULL REFERENCES words(id) ON DELETE CASCADE,
            language_code TEXT NOT NULL REFERENCES languages(code),
            translation   TEXT NOT NULL,
            UNIQUE(word_id, language_code, translation)
        )
        """
    )
    conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_translations_word
            ON translations(word_id)
        """
    )

    seed_languages(conn)


def seed_languages(conn: sqlite3.Connection) -> None:
    row = conn.execute("SELECT COUNT(*) FROM languages").fetchone()
    if row[0]:
        return
    conn.executemany("INSERT INTO languages(code, name) VALUES(?, ?)", DEFAULT_LANGUAGES)
    log.info("seeded %d default languages", len(DEFAULT_LANGUAGES))


def word_key(word: str) -> str:
    """Unicode-aware comparison key; sqlite NOCASE only folds ASCII."""
    return " ".join((word or "").split()).casefold()


def ensure_word_key(conn: sqlite3.Connection) -> None:
    """Adds and backfills words.word_key on databases created before it existed."""
    cols = {row[1] for row in conn.execute("PRAGMA table_info(words)").fetchall()}
    if "word_key" in cols:
        return

    conn.execute("DROP INDEX IF EXISTS idx_words_lang_word")
    conn.execute("ALTER TABLE words ADD COLUMN word_key TEXT NOT NULL DEFAULT ''")
    rows = conn.execute("SELECT id, word FROM words").fetchall()
    conn.executemany(
        "UPDATE words SET word_key = ? WHERE id = ?",
        [(word_key(r[1]), r[0]) for r in rows],
    )
    log.info("backfilled word_key for %d words", len(rows))

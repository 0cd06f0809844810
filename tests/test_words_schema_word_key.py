from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from wordbook.repos.languages_repo import LanguagesRepo
from wordbook.repos.sqlite_repo import SQLiteRepo
from wordbook.repos.words_repo import WordsRepo
from wordbook.services.words_service import WordsService
from wordbook.utils.errors import DuplicateWordError


def test_old_database_gets_word_key_backfilled(tmp_path: Path):
    db_path = tmp_path / "old.db"
    conn = sqlite3.connect(db_path)
    conn.executescript(
        """
        CREATE TABLE languages (code TEXT PRIMARY KEY, name TEXT NOT NULL);
        INSERT INTO languages(code, name) VALUES ('ru', 'Russian');
        CREATE TABLE words (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            language_code TEXT NOT NULL REFERENCES languages(code),
            word TEXT NOT NULL,
            created_at TEXT NOT NULL
        );
        CREATE UNIQUE INDEX idx_words_lang_word ON words(language_code, word COLLATE NOCASE);
        INSERT INTO words(language_code, word, created_at) VALUES ('ru', 'Дом', '2025-01-01 12:00:00');
        """
    )
    conn.commit()
    conn.close()

    db = SQLiteRepo(db_path)
    svc = WordsService(words=WordsRepo(db), languages=LanguagesRepo(db))

    with pytest.raises(DuplicateWordError):
        svc.create_word("ru", "ДОМ")

    with db.read() as conn:
        row = conn.execute("SELECT word_key FROM words WHERE word = 'Дом'").fetchone()
    assert row["word_key"] == "дом"

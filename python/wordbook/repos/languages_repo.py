from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from wordbook.repos.sqlite_repo import SQLiteRepo


@dataclass(frozen=True)
class Language:
    code: str
    name: str

    def to_dict(self) -> dict:
        return {"code": self.code, "name": self.name}


@dataclass(frozen=True)
class LanguagesRepo:
    db: SQLiteRepo

    def list_languages(self) -> List[Language]:
        self.db.init_schema()
        with self.db.read() as conn:
            rows = conn.execute("SELECT code, name FROM languages ORDER BY name").fetchall()
        return [Language(code=r["code"], name=r["name"]) for r in rows]

    def get(self, code: str) -> Optional[Language]:
        self.db.init_schema()
        with self.db.read() as conn:
            row = conn.execute(
                "SELECT code, name FROM languages WHERE code = lower(trim(?))",
                (code or "",),
            ).fetchone()
        return Language(code=row["code"], name=row["name"]) if row else None

    def exists(self, code: str) -> bool:
        return self.get(code) is not None

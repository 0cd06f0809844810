from __future__ import annotations

from pathlib import Path

import pytest

from wordbook.integrations.words_api import ApiResponse
from wordbook.repos.languages_repo import LanguagesRepo
from wordbook.repos.sqlite_repo import SQLiteRepo
from wordbook.repos.words_repo import WordsRepo
from wordbook.services.words_service import WordsService
from wordbook.utils.config import Config
from wordbook.utils.errors import BackendError


LANGUAGES = [
    {"code": "de", "name": "German"},
    {"code": "en", "name": "English"},
    {"code": "uk", "name": "Ukrainian"},
]


class FakeWordsClient:
    """Stands in for WordsApiClient; records every call."""

    def __init__(self, languages=None):
        self.languages = list(LANGUAGES if languages is None else languages)
        self.created: list[dict] = []
        self.imported: list[str] = []
        self.pages: list[tuple[int, int]] = []
        self.words_down = False
        self.create_status = 201
        self.create_error: BackendError | None = None
        self.import_report = {"imported": 3, "duplicates": 1, "passed": 0, "errors": 2}
        self.import_error: BackendError | None = None

    def get_languages(self):
        return list(self.languages)

    def get_words(self, page=1, per_page=10):
        self.pages.append((page, per_page))
        if self.words_down:
            return []
        return {"data": [], "page": page, "perPage": per_page, "total": 0}

    def create_word(self, payload):
        if self.create_error is not None:
            raise self.create_error
        self.created.append(payload)
        return ApiResponse(status=self.create_status, data={"id": len(self.created), **payload})

    def import_words(self, path):
        if self.import_error is not None:
            raise self.import_error
        self.imported.append(str(path))
        return ApiResponse(status=201, data=dict(self.import_report))


@pytest.fixture
def fake_client() -> FakeWordsClient:
    return FakeWordsClient()


@pytest.fixture
def cfg(tmp_path: Path) -> Config:
    return Config(
        data_dir=tmp_path,
        db_path=tmp_path / "words.db",
        log_path=tmp_path / "wordbook.log",
        log_level="INFO",
        api_base_url="http://testserver",
        api_token=None,
        http_timeout_sec=5,
        http_host="127.0.0.1",
        http_port=8787,
        target_language="uk",
        mother_language="en",
    )


@pytest.fixture
def words_service(tmp_path: Path) -> WordsService:
    db = SQLiteRepo(tmp_path / "w.db")
    return WordsService(
        words=WordsRepo(db),
        languages=LanguagesRepo(db),
        clock=lambda: "2025-01-01 12:00:00",
    )

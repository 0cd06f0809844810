# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wordbook.integrations.words_api import WordsApiClient
from wordbook.repos.languages_repo import LanguagesRepo
from wordbook.repos.sqlite_repo import SQLiteRepo
from wordbook.repos.words_repo import WordsRepo
from wordbook.services.add_word_form import AddWordForm, UserProfile
from wordbook.services.query_cache import QueryCache
from wordbook.services.word_list import WordList
from wordbook.services.words_service import WordsService
from wordbook.utils.config import Config


@dataclass(frozen=True)
class ClientServices:
    client: WordsApiClient
    cache: QueryCache
    words: WordList
    profile: UserProfile

    def new_form(self, *, show_import_button: bool = True) -> AddWordForm:
        return AddWordForm(
            client=self.client,
            cache=self.cache,
            profile=self.profile,
            show_import_button=show_import_button,
        )


def build_server_services(cfg: Config) -> WordsService:
    """
    Server-side wiring:
      - sqlite file + schema
      - repos
      - words service
    """
    sqlite = SQLiteRepo(cfg.db_path)
    sqlite.init_schema()
    return WordsService(words=WordsRepo(sqlite), languages=LanguagesRepo(sqlite))


def build_client_services(cfg: Config, *, client: Optional[WordsApiClient] = None) -> ClientServices:
    """Client-side wiring: one API client and one query cache shared by forms and lists."""
    if client is None:
        client = WordsApiClient(
            base_url=cfg.api_base_url,
            token=cfg.api_token,
            timeout=cfg.http_timeout_sec,
        )
    cache = QueryCache()
    return ClientServices(
        client=client,
        cache=cache,
        words=WordList(client=client, cache=cache),
        profile=UserProfile(
            target_language=cfg.target_language,
            mother_language=cfg.mother_language,
        ),
    )

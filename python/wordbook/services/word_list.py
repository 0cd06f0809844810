from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wordbook.integrations.words_api import WordsApiClient
from wordbook.services.query_cache import QueryCache


WORDS_QUERY = ("words",)


@dataclass(frozen=True)
class WordList:
    client: WordsApiClient
    cache: QueryCache

    def page(self, page: int = 1, per_page: int = 10) -> Any:
        key = WORDS_QUERY + (page, per_page)
        if key in self.cache:
            return self.cache.get(key)

        result = self.client.get_words(page=page, per_page=per_page)
        # get_words answers [] when the request failed; fetch again next time
        if result:
            self.cache.set(key, result)
        return result

    def refresh(self) -> int:
        return self.cache.invalidate_queries(WORDS_QUERY)

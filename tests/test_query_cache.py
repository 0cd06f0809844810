from __future__ import annotations

from wordbook.services.query_cache import QueryCache
from wordbook.services.word_list import WordList


def test_fetch_loads_once_per_key():
    cache = QueryCache()
    calls = []

    def loader():
        calls.append(1)
        return ["house"]

    assert cache.fetch(("words", 1, 10), loader) == ["house"]
    assert cache.fetch(("words", 1, 10), loader) == ["house"]
    assert len(calls) == 1


def test_invalidate_by_prefix():
    cache = QueryCache()
    cache.set(("words", 1, 10), "a")
    cache.set(("words", 2, 10), "b")
    cache.set(("wordsets", 1), "c")
    cache.set(("languages",), "d")

    assert cache.invalidate_queries(("words",)) == 2
    assert ("wordsets", 1) in cache
    assert cache.get(("languages",)) == "d"
    assert cache.invalidate_queries(("words",)) == 0


def test_word_list_reads_through_cache(fake_client):
    words = WordList(client=fake_client, cache=QueryCache())

    words.page(page=2, per_page=5)
    words.page(page=2, per_page=5)
    words.page()
    assert fake_client.pages == [(2, 5), (1, 10)]

    assert words.refresh() == 2
    words.page(page=2, per_page=5)
    assert fake_client.pages[-1] == (2, 5)
    assert len(fake_client.pages) == 3


def test_word_list_does_not_keep_failed_fetch(fake_client):
    words = WordList(client=fake_client, cache=QueryCache())
    fake_client.words_down = True

    assert words.page() == []
    assert ("words", 1, 10) not in words.cache

    fake_client.words_down = False
    assert words.page()["perPage"] == 10
    assert words.page()["perPage"] == 10
    assert fake_client.pages == [(1, 10), (1, 10)]

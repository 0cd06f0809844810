from __future__ import annotations

import json

import pytest
import requests

from wordbook.integrations.words_api import WordsApiClient
from wordbook.utils.errors import BackendError


def _response(status: int, body=None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = b"" if body is None else json.dumps(body).encode("utf-8")
    resp.url = "http://testserver/api/words"
    return resp


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.headers: dict = {}
        self.calls: list[tuple] = []
        self.response = response
        self.error = error

    def _reply(self):
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, params=None, timeout=None):
        self.calls.append(("GET", url, params))
        return self._reply()

    def post(self, url, json=None, files=None, timeout=None):
        if files is not None:
            name, fh, content_type = files["file"]
            files = {"file": (name, fh.read(), content_type)}
        self.calls.append(("POST", url, json if files is None else files))
        return self._reply()


def _client(session: FakeSession, token=None) -> WordsApiClient:
    return WordsApiClient("http://testserver/", token=token, timeout=3, session=session)


def test_get_words_sends_page_and_per_page():
    body = {"data": [{"word": "house"}], "page": 2, "perPage": 5, "total": 6}
    session = FakeSession(_response(200, body))

    assert _client(session).get_words(page=2, per_page=5) == body
    assert session.calls == [("GET", "http://testserver/api/words", {"page": 2, "perPage": 5})]


def test_get_words_defaults():
    session = FakeSession(_response(200, []))
    _client(session).get_words()
    assert session.calls[0][2] == {"page": 1, "perPage": 10}


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("down")),
        FakeSession(_response(500, {"detail": "boom"})),
        FakeSession(_response(200)),
    ],
)
def test_get_words_returns_empty_list_on_failure(session):
    assert _client(session).get_words() == []


def test_create_word_returns_status_and_body():
    session = FakeSession(_response(201, {"id": 1, "word": "house"}))
    resp = _client(session).create_word({"language_code": "en", "word": "house", "translations": []})

    assert resp.status == 201
    assert resp.data["id"] == 1
    assert session.calls[0][2]["word"] == "house"


def test_create_word_raises_on_http_error():
    session = FakeSession(_response(409, {"detail": {"code": "DUPLICATE"}}))

    with pytest.raises(BackendError) as ei:
        _client(session).create_word({"language_code": "en", "word": "house"})

    assert ei.value.status == 409
    assert ei.value.details == {"detail": {"code": "DUPLICATE"}}


def test_create_word_raises_on_transport_error():
    session = FakeSession(error=requests.Timeout("slow"))
    with pytest.raises(BackendError):
        _client(session).create_word({"language_code": "en", "word": "house"})


def test_import_words_uploads_json_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text('[{"language_code": "en", "word": "cat"}]', encoding="utf-8")
    session = FakeSession(_response(201, {"imported": 1, "duplicates": 0, "passed": 0, "errors": 0}))

    resp = _client(session).import_words(path)

    assert resp.status == 201
    method, url, files = session.calls[0]
    assert (method, url) == ("POST", "http://testserver/api/words/import")
    assert files["file"][0] == "words.json"
    assert files["file"][2] == "application/json"
    assert b'"cat"' in files["file"][1]


def test_import_missing_file_is_backend_error(tmp_path):
    session = FakeSession(_response(201, {}))
    with pytest.raises(BackendError):
        _client(session).import_words(tmp_path / "nope.json")
    assert session.calls == []


def test_token_becomes_bearer_header():
    session = FakeSession(_response(200, []))
    _client(session, token="s3cret")
    assert session.headers["Authorization"] == "Bearer s3cret"


def test_get_languages_falls_back_to_empty_list():
    assert _client(FakeSession(_response(200, {"not": "a list"}))).get_languages() == []
    assert _client(FakeSession(error=requests.ConnectionError())).get_languages() == []

# python/wordbook/integrations/words_api.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from wordbook.utils.errors import BackendError
from wordbook.utils.logging import get_logger


log = get_logger("integrations.words_api")

WORDS_ENDPOINT = "/api/words"
WORDS_IMPORT_ENDPOINT = "/api/words/import"
LANGUAGES_ENDPOINT = "/api/languages"


@dataclass(frozen=True)
class ApiResponse:
    status: int
    data: Any


def _decode(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    return resp.json()


class WordsApiClient:
    """HTTP access to the words backend."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 25,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get_words(self, page: int = 1, per_page: int = 10) -> Union[Dict[str, Any], List[Any]]:
        """
        GET /api/words?page=&perPage=

        Never raises: any failure is logged and an empty list returned,
        so list views can always render.
        """
        try:
            resp = self._session.get(
                self._url(WORDS_ENDPOINT),
                params={"page": page, "perPage": per_page},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return _decode(resp) or []
        except (requests.RequestException, ValueError):
            log.exception("Error fetching words page=%s perPage=%s", page, per_page)
            return []

    def get_languages(self) -> List[Dict[str, Any]]:
        try:
            resp = self._session.get(self._url(LANGUAGES_ENDPOINT), timeout=self.timeout)
            resp.raise_for_status()
            data = _decode(resp)
        except (requests.RequestException, ValueError):
            log.exception("Error fetching languages")
            return []
        return data if isinstance(data, list) else []

    def create_word(self, payload: Dict[str, Any]) -> ApiResponse:
        try:
            resp = self._session.post(self._url(WORDS_ENDPOINT), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise BackendError(f"Words API request error: {e}") from e
        return self._checked(resp)

    def import_words(self, path: Union[str, Path]) -> ApiResponse:
        path = Path(path)
        try:
            with path.open("rb") as fh:
                resp = self._session.post(
                    self._url(WORDS_IMPORT_ENDPOINT),
                    files={"file": (path.name, fh, "application/json")},
                    timeout=self.timeout,
                )
        except requests.RequestException as e:
            raise BackendError(f"Words API request error: {e}") from e
        except OSError as e:
            raise BackendError(f"Cannot read import file: {e}", details={"path": str(path)}) from e
        return self._checked(resp)

    @staticmethod
    def _checked(resp: requests.Response) -> ApiResponse:
        try:
            data = _decode(resp)
        except ValueError:
            data = resp.text

        if resp.status_code >= 400:
            raise BackendError(
                f"Words API returned HTTP {resp.status_code}",
                details=data,
                status=resp.status_code,
            )
        return ApiResponse(status=resp.status_code, data=data)

# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from wordbook.repos.languages_repo import LanguagesRepo
from wordbook.repos.schema import word_key
from wordbook.repos.words_repo import WordsRepo
from wordbook.utils.errors import DuplicateWordError, ImportFileError, ValidationError
from wordbook.utils.logging import get_logger


log = get_logger("services.words")

MAX_PER_PAGE = 100


def now_str() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _norm_code(code: Any) -> str:
    return str(code or "").strip().lower()


def _clean_translations(raw: Any) -> List[Tuple[str, str]]:
    """
    Accepts a list of {"language_code", "translation"} objects or a
    {code: text} mapping. Blank entries are dropped, repeats collapse.
    """
    if isinstance(raw, dict):
        items = [{"language_code": k, "translation": v} for k, v in raw.items()]
    elif isinstance(raw, list):
        items = raw
    else:
        items = []

    out: List[Tuple[str, str]] = []
    seen = set()
    for t in items:
        if not isinstance(t, dict):
            continue
        code = _norm_code(t.get("language_code"))
        text = str(t.get("translation") or "").strip()
        if not code or not text:
            continue
        key = (code, text)
        if key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out


@dataclass(frozen=True)
class WordsService:
    words: WordsRepo
    languages: LanguagesRepo
    clock: Callable[[], str] = now_str

    def list_languages(self) -> List[Dict[str, str]]:
        return [lang.to_dict() for lang in self.languages.list_languages()]

    def list_words(self, page: int = 1, per_page: int = 10) -> Dict[str, Any]:
        if page < 1:
            raise ValidationError("page must be >= 1", details={"page": page})
        if per_page < 1 or per_page > MAX_PER_PAGE:
            raise ValidationError(
                f"perPage must be in range 1..{MAX_PER_PAGE}", details={"perPage": per_page}
            )

        return {
            "data": self.words.list_words(page, per_page),
            "page": page,
            "perPage": per_page,
            "total": self.words.count_words(),
        }

    def create_word(self, language_code: str, word: str, translations: Any = None) -> Dict[str, Any]:
        code = _norm_code(language_code)
        term = (word or "").strip()
        if not term:
            raise ValidationError("word must not be empty")
        if not self.languages.exists(code):
            raise ValidationError(f"Unknown language: {language_code}", details={"language_code": language_code})

        cleaned = _clean_translations(translations)
        unknown = sorted({c for c, _ in cleaned if not self.languages.exists(c)})
        if unknown:
            raise ValidationError("Unknown translation language", details={"language_codes": unknown})

        if self.words.find_word(code, term) is not None:
            raise DuplicateWordError(f"Word '{term}' already exists", details={"language_code": code})

        try:
            word_id = self.words.insert_word(code, term, cleaned, self.clock())
        except sqlite3.IntegrityError as e:
            # lost a race with a concurrent insert
            raise DuplicateWordError(f"Word '{term}' already exists", details={"language_code": code}) from e

        log.info("word created id=%s lang=%s word=%r translations=%d", word_id, code, term, len(cleaned))
        return self.words.get_word(word_id)

    def import_words(self, raw: bytes) -> Dict[str, int]:
        """
        Bulk import from a JSON document.

        Counters:
          imported   - stored
          duplicates - already present, or repeated within the file
          passed     - skipped (not an object, blank word, unknown language)
          errors     - storage failed for that item
        """
        items = self._parse_import(raw)
        report = {"imported": 0, "duplicates": 0, "passed": 0, "errors": 0}
        known = {lang.code for lang in self.languages.list_languages()}
        seen = set()

        for idx, item in enumerate(items):
            parsed = self._parse_item(item, known)
            if parsed is None:
                report["passed"] += 1
                continue

            code, term, translations = parsed
            key = (code, word_key(term))
            if key in seen or self.words.find_word(code, term) is not None:
                report["duplicates"] += 1
                continue
            seen.add(key)

            try:
                self.words.insert_word(code, term, translations, self.clock())
            except sqlite3.IntegrityError:
                report["duplicates"] += 1
            except sqlite3.Error:
                log.exception("import: failed to store item #%d word=%r", idx, term)
                report["errors"] += 1
            else:
                report["imported"] += 1

        log.info("import finished %s", report)
        return report

    @staticmethod
    def _parse_import(raw: bytes) -> List[Any]:
        try:
            doc = json.loads(raw.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ImportFileError("Import file is not valid JSON", details={"error": str(e)}) from e

        if isinstance(doc, dict) and isinstance(doc.get("words"), list):
            return doc["words"]
        if isinstance(doc, list):
            return doc
        raise ImportFileError("Import file must be a list of words or {\"words\": [...]}")

    @staticmethod
    def _parse_item(item: Any, known: set) -> Optional[Tuple[str, str, List[Tuple[str, str]]]]:
        if not isinstance(item, dict):
            return None
        code = _norm_code(item.get("language_code"))
        term = str(item.get("word") or "").strip()
        if not term or code not in known:
            return None
        translations = [t for t in _clean_translations(item.get("translations")) if t[0] in known]
        return code, term, translations

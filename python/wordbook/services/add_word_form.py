# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from wordbook.integrations.words_api import WordsApiClient
from wordbook.services.query_cache import QueryCache
from wordbook.services.word_list import WORDS_QUERY
from wordbook.utils.errors import AppError, ValidationError
from wordbook.utils.logging import get_logger


log = get_logger("services.add_word_form")

TRANSLATION_FIELDS = ("language_code", "translation")


@dataclass(frozen=True)
class UserProfile:
    target_language: Optional[str] = None
    mother_language: Optional[str] = None


@dataclass(frozen=True)
class TranslationDraft:
    id: int
    language_code: str = ""
    translation: str = ""

    def is_complete(self) -> bool:
        return self.language_code.strip() != "" and self.translation.strip() != ""


@dataclass(frozen=True)
class Notification:
    open: bool = False
    message: str = ""
    severity: str = "success"


@dataclass
class AddWordForm:
    """
    State behind the "add word" screen.

    Front ends (CLI, editor transport) drive it through the methods below
    and render from its attributes; buttons are disabled through
    can_add_translation / can_submit rather than through error messages.
    """
    client: WordsApiClient
    cache: QueryCache
    profile: UserProfile = field(default_factory=UserProfile)
    show_import_button: bool = True

    languages: List[Dict[str, Any]] = field(default_factory=list)
    selected_language: Optional[Dict[str, Any]] = None
    word: str = ""
    translations: List[TranslationDraft] = field(default_factory=list)
    notification: Notification = field(default_factory=Notification)

    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), init=False, repr=False)

    # -------------------------
    # Languages
    # -------------------------
    def load_languages(self) -> List[Dict[str, Any]]:
        self.languages = self.client.get_languages()

        target = (self.profile.target_language or "").strip().lower()
        if target:
            matched = self.find_language(target)
            if matched is not None:
                self.selected_language = matched
        return self.languages

    def find_language(self, code: str) -> Optional[Dict[str, Any]]:
        code = (code or "").strip().lower()
        for lang in self.languages:
            if str(lang.get("code", "")).lower() == code:
                return lang
        return None

    def select_language(self, code: Optional[str]) -> None:
        if not code:
            self.selected_language = None
            return
        lang = self.find_language(code)
        if lang is None:
            raise ValidationError(f"Unknown language: {code}", details={"language_code": code})
        self.selected_language = lang

    def set_word(self, value: str) -> None:
        self.word = value

    # -------------------------
    # Translations
    # -------------------------
    @property
    def can_add_translation(self) -> bool:
        return len(self.translations) < len(self.languages)

    def add_translation(self) -> Optional[TranslationDraft]:
        # one translation per available language at most
        if not self.can_add_translation:
            return None
        draft = TranslationDraft(id=next(self._ids), language_code=self._default_translation_language())
        self.translations = [*self.translations, draft]
        return draft

    def _default_translation_language(self) -> str:
        mother = self.find_language(self.profile.mother_language or "")
        if mother is None:
            return ""
        code = str(mother["code"])
        if any(t.language_code == code for t in self.translations):
            return ""
        return code

    def remove_translation(self, translation_id: int) -> None:
        self.translations = [t for t in self.translations if t.id != translation_id]

    def update_translation(self, translation_id: int, field_name: str, value: str) -> None:
        if field_name not in TRANSLATION_FIELDS:
            raise ValueError(f"Unknown translation field: {field_name}")
        self.translations = [
            replace(t, **{field_name: value}) if t.id == translation_id else t
            for t in self.translations
        ]

    # -------------------------
    # Submit / import
    # -------------------------
    @property
    def can_submit(self) -> bool:
        return self.word != "" and self.selected_language is not None

    def build_payload(self) -> Dict[str, Any]:
        if self.selected_language is None:
            raise ValidationError("Select a language first")
        return {
            "language_code": self.selected_language["code"],
            "word": self.word,
            "translations": [
                {"language_code": t.language_code, "translation": t.translation}
                for t in self.translations
                if t.is_complete()
            ],
        }

    def submit(self) -> bool:
        """POST the word. Returns True when the backend created it."""
        if not self.can_submit:
            raise ValidationError("Word and language are required")

        payload = self.build_payload()
        try:
            resp = self.client.create_word(payload)
        except AppError:
            log.exception("Error creating word word=%r", self.word)
            self._notify("Error creating word", "error")
            return False

        if resp.status != 201:
            log.warning("create word: unexpected status=%s", resp.status)
            return False

        self._notify("Word created successfully", "success")
        self.cache.invalidate_queries(WORDS_QUERY)
        self.reset()
        return True

    def import_file(self, path: Optional[Union[str, Path]]) -> Optional[Dict[str, Any]]:
        """Bulk import from a JSON file. Returns the backend's counters on success."""
        if not path:
            return None
        if not self.show_import_button:
            log.warning("import refused: import is disabled for this form")
            return None

        try:
            resp = self.client.import_words(path)
        except AppError:
            log.exception("Error importing words path=%s", path)
            self._notify("Error importing words", "error")
            return None

        if resp.status != 201:
            log.warning("import words: unexpected status=%s", resp.status)
            return None

        report = resp.data if isinstance(resp.data, dict) else {}
        self._notify(
            f"{report.get('imported')} words imported successfully. "
            f"{report.get('duplicates')} duplicates. "
            f"{report.get('passed')} passed. "
            f"{report.get('errors')} errors.",
            "success",
        )
        self.cache.invalidate_queries(WORDS_QUERY)
        return report

    # -------------------------
    # Misc
    # -------------------------
    def reset(self) -> None:
        self.word = ""
        self.translations = []

    def close_notification(self) -> None:
        self.notification = Notification()

    def _notify(self, message: str, severity: str) -> None:
        self.notification = Notification(open=True, message=message, severity=severity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.selected_language,
            "word": self.word,
            "translations": [
                {"id": t.id, "language_code": t.language_code, "translation": t.translation}
                for t in self.translations
            ],
            "can_add_translation": self.can_add_translation,
            "can_submit": self.can_submit,
            "show_import_button": self.show_import_button,
            "notification": {
                "open": self.notification.open,
                "message": self.notification.message,
                "severity": self.notification.severity,
            },
        }

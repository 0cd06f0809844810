# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import json
from typing import Any, Optional

from wordbook.services.add_word_form import AddWordForm
from wordbook.services.container import ClientServices, build_client_services
from wordbook.utils.config import load_config
from wordbook.utils.errors import ValidationError
from wordbook.utils.logging import get_logger


log = get_logger("cli")

MODES = ("languages", "list", "add", "import")


def _ok(data: Any) -> dict:
    return {"ok": True, "data": data}


def _fail(message: str, *, code: str = "ERROR", details: Any = None) -> dict:
    err = {"code": code, "message": message}
    if details is not None:
        err["details"] = details
    return {"ok": False, "error": err}


def _form_result(form: AddWordForm, done: bool, data: Any = None) -> dict:
    state = form.to_dict()
    if not done:
        msg = form.notification.message or "Request was not accepted"
        return _fail(msg, code="BACKEND", details=state)
    return _ok({"result": data, "form": state})


def parse_translations(raw: str) -> list[dict]:
    """
    Translations come as JSON: either [{"language_code", "translation"}, ...]
    or {"de": "Haus", "fr": "maison"}.
    """
    if not raw:
        return []
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError("translations must be JSON", details={"raw": raw}) from e

    if isinstance(doc, dict):
        return [{"language_code": k, "translation": v} for k, v in doc.items()]
    if isinstance(doc, list) and all(isinstance(t, dict) for t in doc):
        return doc
    raise ValidationError("translations must be a JSON list or object", details={"raw": raw})


def fill_form(form: AddWordForm, language_code: str, word: str, translations: list[dict]) -> None:
    form.load_languages()
    form.select_language(language_code or (form.selected_language or {}).get("code"))
    form.set_word(word)
    for t in translations:
        draft = form.add_translation()
        if draft is None:
            raise ValidationError("More translations than available languages")
        form.update_translation(draft.id, "language_code", str(t.get("language_code") or ""))
        form.update_translation(draft.id, "translation", str(t.get("translation") or ""))


def dispatch(argv: list[str], services: Optional[ClientServices] = None) -> dict:
    """Business dispatcher: returns JSON-ready dict (ok:true/false)."""
    if len(argv) < 2:
        log.warning("Not enough arguments: argv=%s", argv)
        return _fail("Not enough arguments", code="ARGS", details={"argv": argv})

    mode = argv[1]
    if mode not in MODES:
        log.warning("Unknown mode: %s argv=%s", mode, argv)
        return _fail(f"Unknown mode: {mode}", code="ARGS", details={"argv": argv})

    if mode == "add" and len(argv) < 4:
        return _fail("add: not enough arguments", code="ARGS", details={"argv": argv})
    if mode == "import" and len(argv) < 3:
        return _fail("import: not enough arguments", code="ARGS", details={"argv": argv})

    if services is None:
        cfg = load_config()
        services = build_client_services(cfg)
        default_per_page = cfg.default_per_page
    else:
        default_per_page = 10

    if mode == "languages":
        return _ok(services.client.get_languages())

    if mode == "list":
        try:
            page = int(argv[2]) if len(argv) >= 3 else 1
            per_page = int(argv[3]) if len(argv) >= 4 else default_per_page
        except ValueError:
            return _fail("list: page and perPage must be integers", code="ARGS", details={"argv": argv})
        if page < 1 or per_page < 1:
            return _fail("list: page and perPage must be >= 1", code="ARGS", details={"argv": argv})
        return _ok(services.words.page(page=page, per_page=per_page))

    form = services.new_form()

    if mode == "add":
        language_code, word = argv[2], argv[3]
        try:
            translations = parse_translations(argv[4] if len(argv) >= 5 else "")
            fill_form(form, language_code, word, translations)
            done = form.submit()
        except ValidationError as e:
            return _fail(e.message, code="ARGS", details=e.details)
        log.info("add word=%r done=%s", word, done)
        return _form_result(form, done)

    # mode == "import"
    report = form.import_file(argv[2])
    return _form_result(form, report is not None, report)

from __future__ import annotations

from typing import List

from fastapi import APIRouter, File, Query, Request, UploadFile, status
from pydantic import BaseModel, Field

from wordbook.services.words_service import MAX_PER_PAGE, WordsService

router = APIRouter(prefix="/api/words", tags=["words"])


class TranslationIn(BaseModel):
    language_code: str = ""
    translation: str = ""


class WordCreate(BaseModel):
    language_code: str = Field(..., min_length=1)
    word: str
    translations: List[TranslationIn] = Field(default_factory=list)


def _svc(req: Request) -> WordsService:
    svc = getattr(req.app.state, "words", None)
    if svc is None:
        raise RuntimeError("WordsService is not initialized. Check wordbook.api.app startup handler.")
    return svc


@router.get("")
def list_words(
    req: Request,
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=MAX_PER_PAGE, alias="perPage"),
):
    return _svc(req).list_words(page=page, per_page=per_page)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_word(req: Request, body: WordCreate):
    return _svc(req).create_word(
        language_code=body.language_code,
        word=body.word,
        translations=[t.model_dump() for t in body.translations],
    )


@router.post("/import", status_code=status.HTTP_201_CREATED)
def import_words(req: Request, file: UploadFile = File(...)):
    raw = file.file.read()
    return _svc(req).import_words(raw)

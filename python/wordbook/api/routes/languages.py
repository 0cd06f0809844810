from __future__ import annotations

from fastapi import APIRouter, Request

from wordbook.api.routes.words import _svc

router = APIRouter(prefix="/api/languages", tags=["languages"])


@router.get("")
def list_languages(req: Request):
    return _svc(req).list_languages()

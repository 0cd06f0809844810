# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wordbook.api.routes import languages as languages_routes
from wordbook.api.routes import words as words_routes
from wordbook.services.container import build_server_services
from wordbook.utils.config import Config, load_config
from wordbook.utils.errors import (
    AppError,
    BackendError,
    DuplicateWordError,
    ImportFileError,
    NotFoundError,
    ValidationError,
)
from wordbook.utils.logging import get_logger, setup_logging


log = get_logger("api")

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (ImportFileError, 400),
    (NotFoundError, 404),
    (DuplicateWordError, 409),
    (BackendError, 502),
)


def _status_for(err: AppError) -> int:
    for cls, code in _STATUS_BY_ERROR:
        if isinstance(err, cls):
            return code
    return 500


def _install(app: FastAPI, cfg: Config) -> None:
    setup_logging(cfg.log_path, cfg.log_level)
    app.state.cfg = cfg
    app.state.words = build_server_services(cfg)
    log.info("words API ready db=%s", cfg.db_path)


def create_app(cfg: Optional[Config] = None) -> FastAPI:
    app = FastAPI(title="Wordbook API")
    app.include_router(words_routes.router)
    app.include_router(languages_routes.router)

    if cfg is not None:
        _install(app, cfg)

    @app.on_event("startup")
    def _startup() -> None:
        if getattr(app.state, "words", None) is None:
            _install(app, load_config())

    @app.exception_handler(AppError)
    async def _app_error(req: Request, exc: AppError) -> JSONResponse:
        status = _status_for(exc)
        if status >= 500:
            log.error("request failed path=%s error=%s", req.url.path, exc.to_dict())
        return JSONResponse(status_code=status, content={"detail": exc.to_dict()})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app



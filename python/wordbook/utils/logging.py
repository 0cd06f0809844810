# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "wordbook"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, kind: type, stream=None) -> bool:
    for h in logger.handlers:
        if type(h) is kind and (stream is None or getattr(h, "stream", None) is stream):
            return True
    return False


def setup_logging(log_path: Path, level: str = "INFO", *, stderr: bool = False) -> logging.Logger:
    """
    Configure the wordbook logger once per process.

    Always logs to log_path. stderr=True adds a console handler (server mode);
    the stdio transport leaves it off since its stdout is a JSON channel.
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())

    if not _has_handler(logger, logging.FileHandler):
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if stderr and not _has_handler(logger, logging.StreamHandler, sys.stderr):
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)

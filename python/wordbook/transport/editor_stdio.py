# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

from __future__ import annotations

import json
import sys
from typing import Any, Callable, Dict

from wordbook.utils.config import load_config
from wordbook.utils.logging import get_logger, setup_logging


def _fail(message: str, code: str = "ERROR") -> Dict[str, Any]:
    return {"ok": False, "error": {"code": code, "message": message}}


def run(dispatch: Callable[[list[str]], Dict[str, Any]]) -> None:
    """
    Stdio transport for editor plugins:
      - reads argv (sys.argv)
      - logs start/exceptions
      - prints one strict JSON object to stdout
      - exits with code 0/1
    """
    cfg = load_config()
    setup_logging(cfg.log_path, cfg.log_level)
    log = get_logger("transport")

    argv = sys.argv
    try:
        log.info("transport started argv=%s", argv)

        resp = dispatch(argv)
        if not isinstance(resp, dict) or "ok" not in resp:
            resp = {"ok": True, "data": resp}

        print(json.dumps(resp, ensure_ascii=False))
        sys.exit(0 if resp.get("ok") else 1)

    except SystemExit:
        raise

    except Exception as e:
        log.exception("Unhandled error in transport")
        print(json.dumps(_fail(str(e), code="EXCEPTION"), ensure_ascii=False))
        sys.exit(1)

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name, default)
    if val is None:
        return None
    val = val.strip()
    return val if val else default


def _env_int(name: str, default: int) -> int:
    val = _env(name, None)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError as e:
        raise ConfigError(f"Env {name} must be int", details={"value": val}) from e


def _env_lang(name: str) -> Optional[str]:
    val = _env(name, None)
    return val.lower() if val else None


@dataclass(frozen=True)
class Config:
    # storage
    data_dir: Path
    db_path: Path
    log_path: Path

    # logging
    log_level: str

    # words API the client talks to
    api_base_url: str
    api_token: Optional[str]

    # timeouts
    http_timeout_sec: int

    # words API server bind
    http_host: str
    http_port: int

    # user profile
    target_language: Optional[str] = None
    mother_language: Optional[str] = None

    default_per_page: int = 10


def load_config() -> Config:
    """
    Config is loaded ONLY here.
    Everywhere else in code should accept Config object (dependency injection).
    """
    default_data_dir = Path(_env("WORDBOOK_DATA_DIR", str(Path.home() / ".local" / "share" / "wordbook")))
    data_dir = default_data_dir.expanduser().resolve()

    db_path = Path(_env("WORDBOOK_DB_PATH", str(data_dir / "words.db"))).expanduser().resolve()
    log_path = Path(_env("WORDBOOK_LOG_PATH", str(data_dir / "wordbook.log"))).expanduser().resolve()

    log_level = _env("WORDBOOK_LOG_LEVEL", "INFO").upper()

    api_base_url = (_env("WORDBOOK_API_URL", "http://127.0.0.1:8787") or "").rstrip("/")
    api_token = _env("WORDBOOK_API_TOKEN", None)

    http_timeout_sec = _env_int("WORDBOOK_HTTP_TIMEOUT_SEC", 25)

    http_host = _env("WORDBOOK_HTTP_HOST", "127.0.0.1") or "127.0.0.1"
    http_port = _env_int("WORDBOOK_HTTP_PORT", 8787)

    default_per_page = _env_int("WORDBOOK_PER_PAGE", 10)
    if default_per_page < 1:
        raise ConfigError("Env WORDBOOK_PER_PAGE must be >= 1", details={"value": default_per_page})

    # Ensure directories exist
    data_dir.mkdir(parents=True, exist_ok=True)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    return Config(
        data_dir=data_dir,
        db_path=db_path,
        log_path=log_path,
        log_level=log_level,
        api_base_url=api_base_url,
        api_token=api_token,
        http_timeout_sec=http_timeout_sec,
        http_host=http_host,
        http_port=http_port,
        target_language=_env_lang("WORDBOOK_TARGET_LANGUAGE"),
        mother_language=_env_lang("WORDBOOK_MOTHER_LANGUAGE"),
        default_per_page=default_per_page,
    )

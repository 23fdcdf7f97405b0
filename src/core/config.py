# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DATABASE_URL = "https://zaideih-default-rtdb.firebaseio.com"


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class AppConfig:
    database_url: str = DEFAULT_DATABASE_URL
    catalog_path: str = "Music"
    auth_token: str | None = None
    request_timeout: float = 15.0
    search_delay_ms: int = 300
    volume: float = 0.7
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ

        level = (env.get("ZAIDEIH_LOG_LEVEL") or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"

        return cls(
            database_url=(env.get("ZAIDEIH_DATABASE_URL") or DEFAULT_DATABASE_URL).strip().rstrip("/"),
            catalog_path=(env.get("ZAIDEIH_CATALOG_PATH") or "Music").strip().strip("/"),
            auth_token=(env.get("ZAIDEIH_AUTH_TOKEN") or "").strip() or None,
            request_timeout=max(1.0, _env_float(env, "ZAIDEIH_REQUEST_TIMEOUT", 15.0)),
            search_delay_ms=max(0, _env_int(env, "ZAIDEIH_SEARCH_DELAY_MS", 300)),
            volume=min(1.0, max(0.0, _env_float(env, "ZAIDEIH_VOLUME", 0.7))),
            log_level=level,
        )

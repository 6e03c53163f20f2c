"""
Environment configuration for the PDF2Text Extractor API.

    PORT               development listener port (default 3000)
    HOST               development listener host (default 0.0.0.0)
    APP_ENV            "production" disables the development listener
    LOG_LEVEL          root log level (default INFO)
    LOG_FILE           optional path of an extra log file
    PDF_FETCH_TIMEOUT  optional download timeout in seconds
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    port: int = 3000
    host: str = "0.0.0.0"
    app_env: str = "development"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    fetch_timeout: Optional[float] = None

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        timeout_raw = env.get("PDF_FETCH_TIMEOUT", "").strip()
        fetch_timeout = float(timeout_raw) if timeout_raw else None
        if fetch_timeout is not None and fetch_timeout <= 0:
            raise ValueError(f"PDF_FETCH_TIMEOUT must be positive, got {timeout_raw!r}")

        return cls(
            port=int(env.get("PORT") or 3000),
            host=env.get("HOST") or "0.0.0.0",
            app_env=env.get("APP_ENV") or "development",
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            log_file=env.get("LOG_FILE") or None,
            fetch_timeout=fetch_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()

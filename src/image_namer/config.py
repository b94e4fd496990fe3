"""
Lightweight config loader.

- Loads environment variables from .env at module import.
- Provides a simple Settings wrapper around os.environ with sane defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env once (project root .env)
load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _env(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


def _env_int(key: str, default: int) -> int:
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


class Settings:
    """Thin wrapper over os.environ with defaults and helpers."""

    def __init__(self) -> None:
        # App
        self.app_name: str = _env("APP_NAME", "image-namer") or "image-namer"
        self.environment: str = _env("ENVIRONMENT", "development") or "development"
        self.log_level: str = _env("LOG_LEVEL", "INFO") or "INFO"

        # Name ledger storage
        self.database_url: str = (
            _env("DATABASE_URL", "sqlite:///./data/name_ledger.db") or "sqlite:///./data/name_ledger.db"
        )

        # Generation limits
        self.max_filename_length: int = _env_int("MAX_FILENAME_LENGTH", 255)
        self.max_retries: int = _env_int("MAX_RETRIES", 100)
        self.counter_probe_limit: int = _env_int("COUNTER_PROBE_LIMIT", 1000)
        self.hash_fallback_attempts: int = _env_int("HASH_FALLBACK_ATTEMPTS", 100)

        # Character handling
        self.default_locale: str = _env("DEFAULT_LOCALE", "en") or "en"
        self.strip_diacritics: bool = _env_bool("STRIP_DIACRITICS", False)
        self.ascii_only: bool = _env_bool("ASCII_ONLY", False)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def get_settings() -> Settings:
    return Settings()

"""
Configuration management for TranslateMe.

Everything has a working default: with no environment at all the client
translates English to Spanish through the public MyMemory endpoint and keeps
history in a local SQLite database.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Values are read from the environment or a `.env` file, e.g.:
        TARGET_LANG=fr
        HISTORY_BACKEND=firestore
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ===== Translation provider =====
    provider_base_url: str = "https://api.mymemory.translated.net"
    source_lang: str = "en"
    target_lang: str = "es"
    contact_email: str | None = None  # MyMemory raises the quota for identified callers
    request_timeout_seconds: float = 30

    # ===== History store =====
    history_backend: Literal["memory", "sql", "firestore"] = "sql"
    history_collection: str = "translations"

    # SQL backend (SQLite by default, zero config)
    database_url: str = "sqlite+aiosqlite:///./data/translateme.db"

    # Firestore backend
    firestore_project_id: str | None = None
    google_credentials_path: str | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ===== Derived properties =====

    @property
    def langpair(self) -> str:
        """Language pair in MyMemory's `src|tgt` form."""
        return f"{self.source_lang}|{self.target_lang}"

    @property
    def data_dir(self) -> Path:
        """Get data directory from database URL."""
        if self.database_url.startswith("sqlite"):
            db_path = self.database_url.split("///")[-1]
            return Path(db_path).parent
        return Path("./data")

    # ===== Validators =====

    @field_validator("source_lang", "target_lang")
    @classmethod
    def validate_lang(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("language code must not be empty")
        return v

    @field_validator("provider_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("history_collection")
    @classmethod
    def validate_collection(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("history_collection must not be empty")
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Usage:
        from translateme.config import get_settings
        settings = get_settings()
    """
    return Settings()

# /app/core/config.py

"""
Central runtime configuration.

Values are read from the process environment (a local `.env` file is loaded
first for development). A single `Settings` instance is built at application
start-up and handed to the store and the routers; nothing else in the codebase
reads environment variables directly.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

SESSION_WRITE_MODES = ("background", "confirmed")


def _normalize_database_url(url: str) -> str:
    # Accept the common postgres URL variants handed out by hosting providers.
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg2://", 1)
    if url.startswith("postgresql://") and "+psycopg2" not in url:
        return url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return url


class Settings(BaseModel):
    database_url: str = Field(default="sqlite:///./collab.db")
    store_timeout_seconds: float = Field(default=5.0, gt=0)
    default_access_code: str = Field(default="COLLAB123", min_length=3)
    admin_api_key: Optional[str] = None
    cron_api_key: Optional[str] = None
    chat_max_length: int = Field(default=2000, gt=0)
    session_write_mode: str = Field(default="background")
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("session_write_mode")
    @classmethod
    def _known_write_mode(cls, value: str) -> str:
        if value not in SESSION_WRITE_MODES:
            raise ValueError(f"session_write_mode must be one of {SESSION_WRITE_MODES}")
        return value

    @property
    def admin_key(self) -> Optional[str]:
        """The key guarding user removal: the cron key when set, else the admin key."""
        return self.cron_api_key or self.admin_api_key

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=_normalize_database_url(os.getenv("DATABASE_URL", "sqlite:///./collab.db")),
            store_timeout_seconds=float(os.getenv("STORE_TIMEOUT_SECONDS", "5")),
            default_access_code=os.getenv("DEFAULT_ACCESS_CODE", "COLLAB123"),
            admin_api_key=os.getenv("ADMIN_API_KEY") or None,
            cron_api_key=os.getenv("CRON_API_KEY") or None,
            chat_max_length=int(os.getenv("CHAT_MAX_LENGTH", "2000")),
            session_write_mode=os.getenv("SESSION_WRITE_MODE", "background").lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )

# /tests/test_config.py

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_from_env_reads_and_normalizes(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/collab")
    monkeypatch.setenv("SESSION_WRITE_MODE", "CONFIRMED")
    monkeypatch.setenv("CRON_API_KEY", "cron-key")
    monkeypatch.setenv("ADMIN_API_KEY", "")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings.from_env()
    assert settings.database_url == "postgresql+psycopg2://u:p@db:5432/collab"
    assert settings.session_write_mode == "confirmed"
    assert settings.admin_key == "cron-key"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_unknown_write_mode_is_rejected():
    with pytest.raises(ValidationError):
        Settings(session_write_mode="eventually")

# /app/core/deps.py

from fastapi import Request

from .config import Settings


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the Settings the application was built with."""
    return request.app.state.settings

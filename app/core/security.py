# /app/core/security.py

"""
Shared-secret checks for the administrative routes.

The key may arrive in the `x-api-key` header or the `key` query parameter.
When no key is configured the routes are open (the teacher UI calls them
directly); when one is configured, a missing or different key is rejected.
"""

import hmac
from typing import Optional

from fastapi import Depends, Request

from .config import Settings
from .deps import get_settings


class ApiKeyRejected(Exception):
    """Raised by the key dependencies; rendered as a 401 by the app's handler."""


def supplied_api_key(request: Request) -> Optional[str]:
    return request.query_params.get("key") or request.headers.get("x-api-key")


def api_key_matches(expected: Optional[str], supplied: Optional[str]) -> bool:
    if not expected:
        return True
    if not supplied:
        return False
    return hmac.compare_digest(supplied.encode(), expected.encode())


def require_admin_key(request: Request, settings: Settings = Depends(get_settings)) -> None:
    if not api_key_matches(settings.admin_key, supplied_api_key(request)):
        raise ApiKeyRejected()


def require_cron_key(request: Request, settings: Settings = Depends(get_settings)) -> None:
    if not api_key_matches(settings.cron_api_key, supplied_api_key(request)):
        raise ApiKeyRejected()

# /app/services/access_service.py

"""
Access gate: a single shared code, stored as the `access_code` setting and
compared by value. The code is provisioned with a default on first read.
"""

import logging

from sqlalchemy.exc import IntegrityError

from ..core.errors import InvalidCodeError, ValidationError
from ..models.access_model import AccessCodeResult
from ..models.user_model import AuthResult, UserProfile
from . import user_service
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)

ACCESS_CODE_SETTING_ID = "access_code"
DEFAULT_ACCESS_CODE = "COLLAB123"
MIN_CODE_LENGTH = 3


def get_code(db: DatabaseService, default_code: str = DEFAULT_ACCESS_CODE) -> str:
    setting = db.get_setting(ACCESS_CODE_SETTING_ID)
    if setting is not None:
        return setting.value
    try:
        setting = db.add_setting(ACCESS_CODE_SETTING_ID, default_code)
        logger.info("Provisioned default access code")
    except IntegrityError:
        # Another request provisioned it first; its value stands.
        db.rollback()
        setting = db.get_setting(ACCESS_CODE_SETTING_ID)
    return setting.value


@guarded(AccessCodeResult, "Failed to get access code")
def get_access_code(db: DatabaseService, default_code: str = DEFAULT_ACCESS_CODE) -> AccessCodeResult:
    return AccessCodeResult.ok(code=get_code(db, default_code))


@guarded(AccessCodeResult, "Failed to update access code")
def set_code(db: DatabaseService, new_code: str) -> AccessCodeResult:
    """Replaces the code outright; the previous one stops working immediately."""
    code = (new_code or "").strip()
    if not code:
        raise ValidationError("Access code cannot be empty")
    if len(code) < MIN_CODE_LENGTH:
        raise ValidationError(f"Access code must be at least {MIN_CODE_LENGTH} characters")
    db.save_setting(ACCESS_CODE_SETTING_ID, code)
    logger.info("Access code updated")
    return AccessCodeResult.ok(code=code)


@guarded(AuthResult, "Failed to authenticate")
def authenticate(
    db: DatabaseService,
    code: str,
    name: str,
    default_code: str = DEFAULT_ACCESS_CODE,
) -> AuthResult:
    if not name or not name.strip():
        raise ValidationError("Name is required")
    if code != get_code(db, default_code):
        logger.warning("Rejected sign-in for '%s': invalid access code", name)
        raise InvalidCodeError("Invalid access code")
    user = user_service.upsert_student(db, name)
    return AuthResult.ok(user=UserProfile.model_validate(user))

# /app/services/user_service.py

"""
Identity & points ledger.

Maps a display name to a User row and its point balance. Student ids are
derived from the normalized name, so logging in again with the same name
(in any casing or spacing) reuses the same row. Teacher ids come from the
identity provider and are NOT name-derived, which is why every name-based
lookup here checks both paths.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from ..core.errors import ValidationError
from ..db.models.user_models import User
from ..models.admin_model import DeleteResult
from ..models.user_model import AuthResult, PointsResult, UserProfile, UserRole
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)

STUDENT_ID_PREFIX = "student_"
TEACHER_ID_PREFIX = "teacher_"


# --- HELPER FUNCTIONS ---

def normalize_name(name: str) -> str:
    """'  Ada   Lovelace ' -> 'ada_lovelace'"""
    return re.sub(r"\s+", "_", name.strip().lower())


def student_id_for(name: str) -> str:
    return f"{STUDENT_ID_PREFIX}{normalize_name(name)}"


def teacher_id_for(name: str, external_id: Optional[str] = None, email: Optional[str] = None) -> str:
    if external_id and external_id.strip():
        return external_id.strip()
    return f"{TEACHER_ID_PREFIX}{normalize_name(email or name)}"


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Name is required")
    return name


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _resolve_points_owner(db: DatabaseService, name: str) -> str:
    """An existing teacher with this exact name wins; anyone else is a student."""
    teacher = db.get_teacher_by_name(name)
    if teacher is not None:
        return teacher.id
    return student_id_for(name)


# --- LEDGER OPERATIONS ---

def upsert_student(db: DatabaseService, name: str) -> User:
    """
    Creates the student row on first sight, otherwise refreshes its activity
    timestamp and display name. The latest raw name always wins.
    """
    _require_name(name)
    user_id = student_id_for(name)
    now = _now()
    created = db.insert_user_if_missing({
        "id": user_id,
        "name": name,
        "role": UserRole.STUDENT.value,
        "points": 0,
        "last_active_at": now,
    })
    if created:
        logger.info("Created student %s", user_id)
    return db.update_user(user_id, {"name": name, "last_active_at": now})


def upsert_teacher(
    db: DatabaseService,
    name: str,
    external_id: Optional[str] = None,
    email: Optional[str] = None,
) -> User:
    _require_name(name)
    user_id = teacher_id_for(name, external_id=external_id, email=email)
    now = _now()
    created = db.insert_user_if_missing({
        "id": user_id,
        "name": name,
        "role": UserRole.TEACHER.value,
        "points": 0,
        "email": email,
        "last_active_at": now,
    })
    if created:
        logger.info("Created teacher %s", user_id)
    update = {"name": name, "last_active_at": now}
    if email:
        update["email"] = email
    return db.update_user(user_id, update)


def touch_participant(db: DatabaseService, name: str) -> None:
    """Marks a session viewer as active without turning a teacher into a student."""
    teacher = db.get_teacher_by_name(name)
    if teacher is not None:
        db.update_user(teacher.id, {"last_active_at": _now()})
        return
    upsert_student(db, name)


def increment_points(db: DatabaseService, name: str, commit: bool = True) -> str:
    """
    Adds one point to the row `name` resolves to and returns its id. Missing
    student rows are created with zero points first. The increment itself is a
    single atomic UPDATE, never a read-then-write of the total.
    """
    _require_name(name)
    user_id = _resolve_points_owner(db, name)
    if not db.increment_user_points(user_id, commit=False):
        db.insert_user_if_missing({
            "id": user_id,
            "name": name,
            "role": UserRole.STUDENT.value,
            "points": 0,
            "last_active_at": _now(),
        })
        db.increment_user_points(user_id, commit=False)
    if commit:
        db.commit()
    return user_id


# --- PUBLIC SERVICE FUNCTIONS ---

@guarded(AuthResult, "Failed to sign in teacher")
def sign_in_teacher(
    db: DatabaseService,
    name: str,
    external_id: Optional[str] = None,
    email: Optional[str] = None,
) -> AuthResult:
    user = upsert_teacher(db, name, external_id=external_id, email=email)
    return AuthResult.ok(user=UserProfile.model_validate(user))


@guarded(PointsResult, "Failed to get user points")
def get_points(db: DatabaseService, name: str) -> PointsResult:
    _require_name(name)
    student = db.get_user_by_id(student_id_for(name))
    if student is not None:
        return PointsResult.ok(points=student.points or 0)
    teacher = db.get_teacher_by_name(name)
    if teacher is not None:
        return PointsResult.ok(points=teacher.points or 0)
    return PointsResult.ok(points=0)


@guarded(DeleteResult, "Failed to remove users")
def remove_all(db: DatabaseService) -> DeleteResult:
    count = db.delete_all_users()
    logger.warning("Removed all users (%d rows)", count)
    return DeleteResult.ok(deletedCount=count)


@guarded(DeleteResult, "Failed to remove users")
def remove_by_role(db: DatabaseService, role: str) -> DeleteResult:
    try:
        role = UserRole(role)
    except ValueError:
        raise ValidationError("Invalid role. Must be 'teacher' or 'student'")
    count = db.delete_users_by_role(role.value)
    logger.warning("Removed %d %s users", count, role.value)
    return DeleteResult.ok(deletedCount=count)


@guarded(DeleteResult, "Failed to remove user")
def remove_by_name(db: DatabaseService, name: str) -> DeleteResult:
    """Exact name first (covers teachers), then the derived student id."""
    if name is None or not name.strip():
        raise ValidationError("userName is required")
    count = db.delete_users_by_name(name)
    if count == 0:
        count = db.delete_user_by_id(student_id_for(name))
    logger.warning("Removed user '%s' (%d rows)", name, count)
    return DeleteResult.ok(deletedCount=count)

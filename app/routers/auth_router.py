# /app/routers/auth_router.py

"""
Sign-in endpoints.

Students authenticate with the shared access code and a display name.
Teachers arrive here after the identity provider's consent flow; this router
only records the `(name, email, externalId)` triple it hands over.
"""

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.deps import get_settings
from app.models.user_model import AuthResult, StudentAuthRequest, TeacherAuthRequest
from app.services import access_service, user_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/student", response_model=AuthResult, summary="Sign In a Student with the Access Code")
def authenticate_student(
    payload: StudentAuthRequest,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    return access_service.authenticate(db, payload.code, payload.name, default_code=settings.default_access_code)


@router.post("/teacher", response_model=AuthResult, summary="Record a Teacher Identity")
def authenticate_teacher(payload: TeacherAuthRequest, db: DatabaseService = Depends(get_db_service)):
    return user_service.sign_in_teacher(db, payload.name, external_id=payload.externalId, email=payload.email)

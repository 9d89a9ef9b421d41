# /app/routers/access_router.py

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.deps import get_settings
from app.models.access_model import AccessCodeResult, SetAccessCodeRequest
from app.services import access_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=AccessCodeResult, summary="Get the Current Access Code")
def get_access_code(db: DatabaseService = Depends(get_db_service), settings: Settings = Depends(get_settings)):
    return access_service.get_access_code(db, default_code=settings.default_access_code)


@router.put("", response_model=AccessCodeResult, summary="Replace the Access Code")
def update_access_code(payload: SetAccessCodeRequest, db: DatabaseService = Depends(get_db_service)):
    return access_service.set_code(db, payload.code)

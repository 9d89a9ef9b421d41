# /app/routers/sessions_router.py

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends

from app.core.config import Settings
from app.core.deps import get_settings
from app.db.database import get_store
from app.db.store import Store
from app.models.content_model import (
    ContentResult,
    CreateSessionRequest,
    SessionResult,
    SessionStateResult,
    UpdateContentRequest,
)
from app.models.result_model import ActionResult
from app.services import content_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=SessionResult, summary="Create a Live Session")
def create_session(
    payload: CreateSessionRequest,
    background_tasks: BackgroundTasks,
    db: DatabaseService = Depends(get_db_service),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    In 'background' mode the id is returned before the record is written
    (`confirmed` is false); in 'confirmed' mode the write completes first.
    """
    if settings.session_write_mode == "confirmed":
        return content_service.create_session(db, payload.teacherName)

    result = content_service.reserve_session_id(db, payload.teacherName)
    if result.success:
        background_tasks.add_task(content_service.persist_session_record, store, result.sessionId, payload.teacherName)
    return result


@router.post("/{session_id}/join", response_model=ActionResult, summary="Check that a Session Exists")
def join_session(session_id: str, db: DatabaseService = Depends(get_db_service)):
    return content_service.join_session(db, session_id)


@router.get("/{session_id}", response_model=SessionStateResult, summary="Get Session Content and Recent Chat")
def get_session_state(
    session_id: str,
    userName: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service),
):
    return content_service.get_session_state(db, session_id, user_name=userName)


@router.get("/{session_id}/content", response_model=ContentResult, summary="Get Session Content")
def get_session_content(session_id: str, db: DatabaseService = Depends(get_db_service)):
    return content_service.get_content(db, session_id)


@router.put("/{session_id}/content", response_model=ActionResult, summary="Overwrite Session Content")
def update_session_content(
    session_id: str,
    payload: UpdateContentRequest,
    db: DatabaseService = Depends(get_db_service),
):
    return content_service.update_content(db, session_id, payload.content)

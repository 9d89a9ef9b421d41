# /app/routers/chat_router.py

from fastapi import APIRouter, Depends, Query

from app.core.config import Settings
from app.core.deps import get_settings
from app.models.chat_model import ChatPostRequest, MessagesResult
from app.models.result_model import ActionResult
from app.services import chat_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


# `room_key` is a session id, or "general" for the school-wide room.
@router.get("/{room_key}/messages", response_model=MessagesResult, summary="Get Recent Messages")
def get_messages(
    room_key: str,
    limit: int = Query(chat_service.DEFAULT_HISTORY_LIMIT, ge=1, le=200),
    db: DatabaseService = Depends(get_db_service),
):
    return chat_service.recent_messages(db, room_key, limit=limit)


@router.post("/{room_key}/messages", response_model=ActionResult, summary="Post a Message")
def post_message(
    room_key: str,
    payload: ChatPostRequest,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    return chat_service.post_message(
        db, room_key, payload.text, payload.senderName, max_length=settings.chat_max_length
    )

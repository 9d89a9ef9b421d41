# /app/routers/content_router.py

from fastapi import APIRouter, Depends

from app.models.content_model import ContentResult, ShareContentRequest, ShareResult
from app.services import content_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=ShareResult, summary="Share a Text or File Snippet")
def share_content(payload: ShareContentRequest, db: DatabaseService = Depends(get_db_service)):
    return content_service.share_once(
        db,
        type=payload.type.value,
        content=payload.content,
        sender_name=payload.senderName,
        filename=payload.filename,
        mimetype=payload.mimetype,
        language=payload.language,
    )


@router.get("/{content_id}", response_model=ContentResult, summary="Receive Shared Content by Code")
def receive_content(content_id: str, db: DatabaseService = Depends(get_db_service)):
    return content_service.receive(db, content_id)

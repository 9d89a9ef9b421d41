# /app/services/chat_service.py

import logging
from datetime import datetime, timezone
from typing import List

from ..core.errors import ValidationError
from ..db.models.chat_models import ChatMessage
from ..models.chat_model import ChatMessageOut, MessagesResult, GENERAL_ROOM
from ..models.result_model import ActionResult
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
DEFAULT_MAX_LENGTH = 2000


def to_message_out(message: ChatMessage) -> ChatMessageOut:
    return ChatMessageOut(text=message.text, senderName=message.sender_name, timestamp=message.timestamp)


def fetch_recent(db: DatabaseService, room_key: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[ChatMessageOut]:
    if limit < 1:
        raise ValidationError("limit must be at least 1")
    return [to_message_out(m) for m in db.get_recent_messages(room_key, limit)]


@guarded(ActionResult, "Failed to send message")
def post_message(
    db: DatabaseService,
    room_key: str,
    text: str,
    sender_name: str,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> ActionResult:
    """
    Appends a message to a session room or to the general room. The timestamp
    is assigned here, never taken from the client.
    """
    if not room_key or not room_key.strip():
        raise ValidationError("Room is required")
    if text is None or not text.strip():
        raise ValidationError("Message cannot be empty")
    if len(text) > max_length:
        raise ValidationError(f"Message cannot exceed {max_length} characters")
    if not sender_name or not sender_name.strip():
        raise ValidationError("Sender name is required")

    db.add_chat_message({
        "room_key": room_key,
        "text": text,
        "sender_name": sender_name,
        "timestamp": datetime.now(timezone.utc),
    })
    return ActionResult.ok()


def post_general_message(db: DatabaseService, text: str, sender_name: str, max_length: int = DEFAULT_MAX_LENGTH) -> ActionResult:
    return post_message(db, GENERAL_ROOM, text, sender_name, max_length=max_length)


@guarded(MessagesResult, "Failed to get messages")
def recent_messages(db: DatabaseService, room_key: str, limit: int = DEFAULT_HISTORY_LIMIT) -> MessagesResult:
    """The newest `limit` messages of the room, presented oldest first."""
    return MessagesResult.ok(messages=fetch_recent(db, room_key, limit))

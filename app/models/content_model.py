# /app/models/content_model.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .chat_model import ChatMessageOut
from .result_model import ActionResult


class ContentType(str, Enum):
    TEXT = "text"
    FILE = "file"


class SharedContent(BaseModel):
    """A session or one-off share. File payloads are opaque base64 strings."""
    id: str
    type: ContentType
    content: str
    filename: Optional[str] = None
    mimetype: Optional[str] = None
    language: Optional[str] = None
    senderName: str
    createdAt: Optional[datetime] = None


class CreateSessionRequest(BaseModel):
    teacherName: str = Field(..., min_length=1)


class UpdateContentRequest(BaseModel):
    content: str


class ShareContentRequest(BaseModel):
    type: ContentType
    content: str
    senderName: str = Field(..., min_length=1)
    filename: Optional[str] = None
    mimetype: Optional[str] = None
    language: Optional[str] = None


class SessionResult(ActionResult):
    sessionId: Optional[str] = None
    # False when the write was only submitted and may not be readable yet.
    confirmed: Optional[bool] = None


class ShareResult(ActionResult):
    contentId: Optional[str] = None


class ContentResult(ActionResult):
    content: Optional[SharedContent] = None


class SessionStateResult(ActionResult):
    content: Optional[SharedContent] = None
    messages: List[ChatMessageOut] = Field(default_factory=list)

# /app/models/chat_model.py

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from .result_model import ActionResult

GENERAL_ROOM = "general"


class ChatMessageOut(BaseModel):
    text: str
    senderName: str
    timestamp: datetime


class ChatPostRequest(BaseModel):
    text: str
    senderName: str


class MessagesResult(ActionResult):
    messages: List[ChatMessageOut] = Field(default_factory=list)

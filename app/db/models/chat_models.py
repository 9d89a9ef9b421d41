# /app/db/models/chat_models.py

from sqlalchemy import Column, String, Integer, Text, DateTime, Index

from ..base_class import Base


class ChatMessage(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_room_timestamp", "room_key", "timestamp"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # A session id, or "general" for the school-wide room.
    room_key = Column(String, nullable=False)
    text = Column(Text, nullable=False)
    sender_name = Column(String, nullable=False)
    # Assigned by the repository with microsecond precision so ordering within
    # a single second stays meaningful.
    timestamp = Column(DateTime(timezone=True), nullable=False)

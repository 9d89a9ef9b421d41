# /app/db/models/content_models.py

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from ..base_class import Base


class Content(Base):
    """
    A session or a one-off share. Both live in the same keyspace and share the
    same shape; a session is simply a text record the teacher keeps rewriting.
    """
    __tablename__ = "content"

    id = Column(String, primary_key=True, index=True)
    type = Column(String, nullable=False)  # 'text' or 'file'
    # Raw text, or the base64 payload of a file. Never decoded server-side.
    content = Column(Text, nullable=False, default="")
    filename = Column(String, nullable=True)
    mimetype = Column(String, nullable=True)
    language = Column(String, nullable=True)
    sender_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

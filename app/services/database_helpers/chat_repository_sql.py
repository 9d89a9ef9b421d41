# /app/services/database_helpers/chat_repository_sql.py

from typing import List, Dict
from sqlalchemy.orm import Session

from app.db.models.chat_models import ChatMessage


class ChatRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_message(self, record: Dict) -> ChatMessage:
        new_message = ChatMessage(**record)
        self.db.add(new_message)
        self.db.commit()
        self.db.refresh(new_message)
        return new_message

    def get_recent_messages(self, room_key: str, limit: int) -> List[ChatMessage]:
        """The newest `limit` messages of a room, oldest first."""
        newest_first = (
            self.db.query(ChatMessage)
            .filter(ChatMessage.room_key == room_key)
            .order_by(ChatMessage.timestamp.desc(), ChatMessage.id.desc())
            .limit(limit)
            .all()
        )
        newest_first.reverse()
        return newest_first

    def delete_all_messages(self) -> int:
        count = self.db.query(ChatMessage).delete(synchronize_session=False)
        self.db.commit()
        return count

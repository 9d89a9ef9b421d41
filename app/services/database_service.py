# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.user_models import User
from app.db.models.content_models import Content
from app.db.models.chat_models import ChatMessage
from app.db.models.reward_models import Reward
from app.db.models.setting_models import Setting

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.content_repository_sql import ContentRepositorySQL
from .database_helpers.chat_repository_sql import ChatRepositorySQL
from .database_helpers.reward_repository_sql import RewardRepositorySQL
from .database_helpers.settings_repository_sql import SettingsRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over one repository per collection, all sharing the same
        SQLAlchemy session so a service can span several of them in a single
        transaction.
        """
        self.db_session = db_session
        self.user_repo = UserRepositorySQL(db_session)
        self.content_repo = ContentRepositorySQL(db_session)
        self.chat_repo = ChatRepositorySQL(db_session)
        self.reward_repo = RewardRepositorySQL(db_session)
        self.settings_repo = SettingsRepositorySQL(db_session)

    # --- TRANSACTION CONTROL ---
    def commit(self): self.db_session.commit()
    def rollback(self): self.db_session.rollback()

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str) -> Optional[User]: return self.user_repo.get_user_by_id(user_id)
    def get_teacher_by_name(self, name: str) -> Optional[User]: return self.user_repo.get_teacher_by_name(name)
    def get_all_users(self) -> List[User]: return self.user_repo.get_all_users()
    def insert_user_if_missing(self, record: Dict) -> bool: return self.user_repo.insert_user_if_missing(record)
    def update_user(self, user_id: str, data: Dict) -> Optional[User]: return self.user_repo.update_user(user_id, data)
    def increment_user_points(self, user_id: str, commit: bool = True) -> bool: return self.user_repo.increment_points(user_id, commit=commit)
    def delete_all_users(self) -> int: return self.user_repo.delete_all_users()
    def delete_users_by_role(self, role: str) -> int: return self.user_repo.delete_users_by_role(role)
    def delete_users_by_name(self, name: str) -> int: return self.user_repo.delete_users_by_name(name)
    def delete_user_by_id(self, user_id: str) -> int: return self.user_repo.delete_user_by_id(user_id)

    # --- CONTENT METHODS (DELEGATED) ---
    def get_content_by_id(self, content_id: str) -> Optional[Content]: return self.content_repo.get_content_by_id(content_id)
    def content_exists(self, content_id: str) -> bool: return self.content_repo.content_exists(content_id)
    def add_content(self, record: Dict) -> Content: return self.content_repo.add_content(record)
    def update_content_text(self, content_id: str, text: str) -> bool: return self.content_repo.update_content_text(content_id, text)
    def delete_all_content(self) -> int: return self.content_repo.delete_all_content()

    # --- CHAT METHODS (DELEGATED) ---
    def add_chat_message(self, record: Dict) -> ChatMessage: return self.chat_repo.add_message(record)
    def get_recent_messages(self, room_key: str, limit: int) -> List[ChatMessage]: return self.chat_repo.get_recent_messages(room_key, limit)
    def delete_all_messages(self) -> int: return self.chat_repo.delete_all_messages()

    # --- REWARD METHODS (DELEGATED) ---
    def add_reward(self, record: Dict, commit: bool = True) -> Reward: return self.reward_repo.add_reward(record, commit=commit)
    def get_reward(self, rewarder_name: str, content_id: str) -> Optional[Reward]: return self.reward_repo.get_reward(rewarder_name, content_id)
    def delete_all_rewards(self) -> int: return self.reward_repo.delete_all_rewards()

    # --- SETTINGS METHODS (DELEGATED) ---
    def get_setting(self, setting_id: str) -> Optional[Setting]: return self.settings_repo.get_setting(setting_id)
    def add_setting(self, setting_id: str, value: str) -> Setting: return self.settings_repo.add_setting(setting_id, value)
    def save_setting(self, setting_id: str, value: str) -> Setting: return self.settings_repo.save_setting(setting_id, value)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)

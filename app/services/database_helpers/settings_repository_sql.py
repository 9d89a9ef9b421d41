# /app/services/database_helpers/settings_repository_sql.py

from typing import Optional
from sqlalchemy.orm import Session

from app.db.models.setting_models import Setting


class SettingsRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_setting(self, setting_id: str) -> Optional[Setting]:
        return self.db.query(Setting).filter(Setting.id == setting_id).first()

    def add_setting(self, setting_id: str, value: str) -> Setting:
        setting = Setting(id=setting_id, value=value)
        self.db.add(setting)
        self.db.commit()
        self.db.refresh(setting)
        return setting

    def save_setting(self, setting_id: str, value: str) -> Setting:
        """Overwrites the value, creating the row when it is missing."""
        setting = self.get_setting(setting_id)
        if setting is None:
            return self.add_setting(setting_id, value)
        setting.value = value
        self.db.commit()
        self.db.refresh(setting)
        return setting

# /app/services/database_helpers/content_repository_sql.py

from typing import Dict, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session

from app.db.models.content_models import Content


class ContentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_content_by_id(self, content_id: str) -> Optional[Content]:
        return self.db.query(Content).filter(Content.id == content_id).first()

    def content_exists(self, content_id: str) -> bool:
        return self.db.query(Content.id).filter(Content.id == content_id).first() is not None

    def add_content(self, record: Dict) -> Content:
        new_content = Content(**record)
        self.db.add(new_content)
        self.db.commit()
        self.db.refresh(new_content)
        return new_content

    def update_content_text(self, content_id: str, text: str) -> bool:
        """Overwrites the `content` column only. Returns False on a missing id."""
        result = self.db.execute(
            update(Content)
            .where(Content.id == content_id)
            .values(content=text)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount > 0

    def delete_all_content(self) -> int:
        count = self.db.query(Content).delete(synchronize_session=False)
        self.db.commit()
        return count

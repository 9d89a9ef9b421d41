# /app/services/database_helpers/user_repository_sql.py

"""
Raw SQLAlchemy queries for the `users` table.

Point increments are issued as a single `UPDATE ... SET points = points + 1`
statement so concurrent rewards on the same row can never lose an update.
"""

from typing import List, Dict, Optional
from sqlalchemy import update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.db.models.user_models import User

# Dialects whose INSERT supports ON CONFLICT DO NOTHING.
_UPSERT_INSERTS = {"sqlite": sqlite.insert, "postgresql": postgresql.insert}


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Reads ---

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_teacher_by_name(self, name: str) -> Optional[User]:
        """Exact, case-sensitive name match among teacher rows."""
        return self.db.query(User).filter(User.name == name, User.role == "teacher").first()

    def get_all_users(self) -> List[User]:
        return self.db.query(User).all()

    # --- Writes ---

    def insert_user_if_missing(self, record: Dict) -> bool:
        """
        Inserts `record` unless a row with the same id already exists. Returns
        True when a row was created. Never raises on an existing id.
        """
        dialect = self.db.get_bind().dialect.name
        if dialect in _UPSERT_INSERTS:
            insert = _UPSERT_INSERTS[dialect]
            result = self.db.execute(
                insert(User.__table__).values(**record).on_conflict_do_nothing(index_elements=["id"])
            )
            return result.rowcount > 0
        # Other backends: best-effort check before the insert.
        if self.get_user_by_id(record["id"]) is not None:
            return False
        self.db.add(User(**record))
        self.db.flush()
        return True

    def update_user(self, user_id: str, data: Dict) -> Optional[User]:
        db_user = self.get_user_by_id(user_id)
        if db_user:
            for key, value in data.items():
                setattr(db_user, key, value)
            self.db.commit()
            self.db.refresh(db_user)
        return db_user

    def increment_points(self, user_id: str, amount: int = 1, commit: bool = True) -> bool:
        """Returns False when no row with `user_id` exists."""
        result = self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(points=User.points + amount)
            .execution_options(synchronize_session=False)
        )
        if commit:
            self.db.commit()
        return result.rowcount > 0

    # --- Deletes ---

    def delete_all_users(self) -> int:
        count = self.db.query(User).delete(synchronize_session=False)
        self.db.commit()
        return count

    def delete_users_by_role(self, role: str) -> int:
        count = self.db.query(User).filter(User.role == role).delete(synchronize_session=False)
        self.db.commit()
        return count

    def delete_users_by_name(self, name: str) -> int:
        count = self.db.query(User).filter(User.name == name).delete(synchronize_session=False)
        self.db.commit()
        return count

    def delete_user_by_id(self, user_id: str) -> int:
        count = self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        self.db.commit()
        return count

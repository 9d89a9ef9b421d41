# /app/db/models/user_models.py

"""
SQLAlchemy model for the `users` collection: every teacher and student known
to the system together with their point balance.
"""

from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint
from sqlalchemy.sql import func

from ..base_class import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("points >= 0", name="ck_users_points_non_negative"),
    )

    # Students: "student_<normalized name>". Teachers: the identity provider's
    # subject, or "teacher_<normalized email or name>".
    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    role = Column(String, index=True, nullable=False)  # 'teacher' or 'student'
    points = Column(Integer, nullable=False, default=0)
    email = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_active_at = Column(DateTime(timezone=True), nullable=True)

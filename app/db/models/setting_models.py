# /app/db/models/setting_models.py

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from ..base_class import Base


class Setting(Base):
    __tablename__ = "settings"

    id = Column(String, primary_key=True)  # e.g. "access_code"
    value = Column(String, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

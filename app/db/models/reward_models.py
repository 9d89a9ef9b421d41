# /app/db/models/reward_models.py

from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from ..base_class import Base


class Reward(Base):
    """
    One row per point ever granted with a dedup key. The unique constraint is
    what guarantees at most one reward per rewarder, sender and content item;
    application-level checks are advisory only.
    """
    __tablename__ = "rewards"
    __table_args__ = (
        UniqueConstraint("rewarder_name", "sender_name", "content_id", name="uq_rewards_triple"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    rewarder_name = Column(String, nullable=False, index=True)  # trimmed, lowercased
    sender_name = Column(String, nullable=False)  # trimmed, lowercased
    content_id = Column(String, nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())

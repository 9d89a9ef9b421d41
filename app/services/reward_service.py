# /app/services/reward_service.py

"""
Reward ledger.

At most one point per (rewarder, sender, content item). The uniqueness is
enforced by the store's constraint on the `rewards` table rather than by a
lookup: the reward row is inserted first and the point is only added when
that insert succeeds, both in the same transaction. Two simultaneous identical
requests therefore award exactly one point.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..core.errors import ValidationError
from ..models.reward_model import RewardResult, RewardStatusResult
from . import user_service
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)


@guarded(RewardResult, "Failed to award point")
def try_reward(
    db: DatabaseService,
    sender_name: str,
    rewarder_name: Optional[str] = None,
    content_id: Optional[str] = None,
) -> RewardResult:
    if not sender_name or not sender_name.strip():
        raise ValidationError("Sender name is required")
    if rewarder_name and user_service.normalize_name(rewarder_name) == user_service.normalize_name(sender_name):
        raise ValidationError("Cannot reward yourself")

    if rewarder_name and rewarder_name.strip() and content_id:
        try:
            db.add_reward({
                "rewarder_name": user_service.normalize_name(rewarder_name),
                "sender_name": user_service.normalize_name(sender_name),
                "content_id": content_id,
                "timestamp": datetime.now(timezone.utc),
            }, commit=False)
        except IntegrityError:
            db.rollback()
            logger.info("%s already rewarded %s for %s", rewarder_name, sender_name, content_id)
            return RewardResult.ok(alreadyRewarded=True)

    user_id = user_service.increment_points(db, sender_name, commit=False)
    db.commit()
    logger.info("Awarded 1 point to %s", user_id)
    return RewardResult.ok(alreadyRewarded=False)


@guarded(RewardStatusResult, "Failed to check reward status")
def has_rewarded(db: DatabaseService, rewarder_name: str, content_id: str) -> RewardStatusResult:
    """Advisory only: lets a client disable its reward button ahead of time."""
    if not rewarder_name or not rewarder_name.strip() or not content_id:
        return RewardStatusResult.ok(hasRewarded=False)
    reward = db.get_reward(user_service.normalize_name(rewarder_name), content_id)
    return RewardStatusResult.ok(hasRewarded=reward is not None)

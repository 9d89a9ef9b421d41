# /app/models/reward_model.py

from typing import Optional

from pydantic import BaseModel, Field

from .result_model import ActionResult


class RewardRequest(BaseModel):
    """
    `rewarderName` and `contentId` form the dedup key together with the sender.
    Older clients send only `senderName`; such rewards are never deduplicated.
    """
    senderName: str = Field(..., min_length=1)
    rewarderName: Optional[str] = None
    contentId: Optional[str] = None


class RewardResult(ActionResult):
    alreadyRewarded: Optional[bool] = None


class RewardStatusResult(ActionResult):
    hasRewarded: Optional[bool] = None

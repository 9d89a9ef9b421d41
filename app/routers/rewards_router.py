# /app/routers/rewards_router.py

from fastapi import APIRouter, Depends

from app.models.reward_model import RewardRequest, RewardResult, RewardStatusResult
from app.services import reward_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=RewardResult, summary="Award a Point to a Sender")
def award_point(payload: RewardRequest, db: DatabaseService = Depends(get_db_service)):
    return reward_service.try_reward(
        db,
        sender_name=payload.senderName,
        rewarder_name=payload.rewarderName,
        content_id=payload.contentId,
    )


@router.get("/status", response_model=RewardStatusResult, summary="Check Whether a Reward Was Already Given")
def reward_status(rewarderName: str, contentId: str, db: DatabaseService = Depends(get_db_service)):
    return reward_service.has_rewarded(db, rewarderName, contentId)

# /app/routers/users_router.py

from fastapi import APIRouter, Depends

from app.models.user_model import LeaderboardResult, PointsResult
from app.services import leaderboard_service, user_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/users/points", response_model=PointsResult, summary="Get a User's Point Balance")
def get_user_points(name: str, db: DatabaseService = Depends(get_db_service)):
    return user_service.get_points(db, name)


@router.get("/leaderboard", response_model=LeaderboardResult, summary="Get Teacher and Student Rankings")
def get_leaderboard(db: DatabaseService = Depends(get_db_service)):
    return leaderboard_service.compute(db)

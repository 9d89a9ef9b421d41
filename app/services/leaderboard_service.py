# /app/services/leaderboard_service.py

from ..models.user_model import LeaderboardResult, UserProfile, UserRole
from .database_service import DatabaseService
from .operation_guard import guarded


@guarded(LeaderboardResult, "Failed to get leaderboard")
def compute(db: DatabaseService) -> LeaderboardResult:
    """
    Splits every user by role and ranks each side by points, highest first.
    The sort is stable, so equal scores keep the order the store yielded them
    in; that order is not guaranteed between calls.
    """
    teachers, students = [], []
    for user in db.get_all_users():
        profile = UserProfile.model_validate(user)
        if profile.role == UserRole.TEACHER:
            teachers.append(profile)
        else:
            students.append(profile)

    teachers.sort(key=lambda u: u.points, reverse=True)
    students.sort(key=lambda u: u.points, reverse=True)
    return LeaderboardResult.ok(teachers=teachers, students=students)

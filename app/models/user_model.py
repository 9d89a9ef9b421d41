# /app/models/user_model.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .result_model import ActionResult


class UserRole(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"


class UserProfile(BaseModel):
    """The public view of a User row, as shown on the leaderboard."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    role: UserRole
    points: int = Field(default=0, ge=0)
    createdAt: Optional[datetime] = Field(default=None, validation_alias="created_at")


class StudentAuthRequest(BaseModel):
    code: str
    name: str = Field(..., min_length=1)


class TeacherAuthRequest(BaseModel):
    """The identity triple handed over by the OAuth provider after consent."""
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    externalId: Optional[str] = None


class AuthResult(ActionResult):
    user: Optional[UserProfile] = None


class PointsResult(ActionResult):
    points: Optional[int] = None


class LeaderboardResult(ActionResult):
    teachers: List[UserProfile] = Field(default_factory=list)
    students: List[UserProfile] = Field(default_factory=list)

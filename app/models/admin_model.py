# /app/models/admin_model.py

from typing import Dict, Optional

from pydantic import BaseModel

from .result_model import ActionResult


class RemoveUsersRequest(BaseModel):
    action: Optional[str] = None  # 'all', 'byRole' or 'byName'
    role: Optional[str] = None
    userName: Optional[str] = None


class DeleteResult(ActionResult):
    deletedCount: Optional[int] = None


class PurgeResult(ActionResult):
    deletedCounts: Optional[Dict[str, int]] = None

# /app/services/admin_service.py

"""
Administrative maintenance: bulk user removal and the scheduled purge of
transient data. Both are reached only through the key-protected admin routes.
"""

import logging
from typing import Optional

from ..core.errors import ValidationError
from ..models.admin_model import DeleteResult, PurgeResult
from . import user_service
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)


def remove_users(
    db: DatabaseService,
    action: Optional[str],
    role: Optional[str] = None,
    user_name: Optional[str] = None,
) -> DeleteResult:
    """Dispatches an admin removal request to the matching ledger operation."""
    if action == "all":
        return user_service.remove_all(db)
    if action == "byRole":
        if role not in ("teacher", "student"):
            return DeleteResult.failure(ValidationError.code, "Invalid role. Must be 'teacher' or 'student'")
        return user_service.remove_by_role(db, role)
    if action == "byName":
        if not user_name or not user_name.strip():
            return DeleteResult.failure(ValidationError.code, "userName is required")
        return user_service.remove_by_name(db, user_name)
    return DeleteResult.failure(ValidationError.code, "Invalid action. Use 'all', 'byRole', or 'byName'")


@guarded(PurgeResult, "Failed to clear database")
def clear_transient_data(db: DatabaseService) -> PurgeResult:
    """Deletes all content, messages and rewards. Users and settings survive."""
    counts = {
        "content": db.delete_all_content(),
        "messages": db.delete_all_messages(),
        "rewards": db.delete_all_rewards(),
    }
    logger.warning("Cleared transient data: %s", counts)
    return PurgeResult.ok(deletedCounts=counts)

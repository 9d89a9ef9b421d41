# /app/routers/admin_router.py

"""
Key-protected maintenance endpoints. Unlike the rest of the API these map
failures onto HTTP status codes: 401 for a rejected key, 400 for malformed
input and 500 for store failures.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.errors import ErrorCode
from app.core.security import require_admin_key, require_cron_key
from app.models.admin_model import DeleteResult, PurgeResult, RemoveUsersRequest
from app.models.result_model import ActionResult
from app.services import admin_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _to_response(result: ActionResult) -> JSONResponse:
    if result.success:
        code = status.HTTP_200_OK
    elif result.errorCode == ErrorCode.VALIDATION_ERROR:
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=result.model_dump(mode="json", exclude_none=True))


@router.post(
    "/admin/remove-users",
    response_model=DeleteResult,
    dependencies=[Depends(require_admin_key)],
    summary="Remove Users (all, by role, or by name)",
)
def remove_users(payload: RemoveUsersRequest, db: DatabaseService = Depends(get_db_service)):
    return _to_response(admin_service.remove_users(db, payload.action, role=payload.role, user_name=payload.userName))


@router.get(
    "/admin/remove-users",
    response_model=DeleteResult,
    dependencies=[Depends(require_admin_key)],
    summary="Remove Users via Query Parameters",
)
def remove_users_by_query(
    action: str = "all",
    role: Optional[str] = None,
    userName: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service),
):
    return _to_response(admin_service.remove_users(db, action, role=role, user_name=userName))


@router.api_route(
    "/cron/clear-db",
    methods=["GET", "POST"],
    response_model=PurgeResult,
    dependencies=[Depends(require_cron_key)],
    summary="Purge Content, Messages and Rewards",
)
def clear_database(db: DatabaseService = Depends(get_db_service)):
    return _to_response(admin_service.clear_transient_data(db))

# /app/core/errors.py

"""
The error taxonomy shared by every service.

Services raise these internally; the `guarded` decorator in
`app.services.operation_guard` converts them into failed result objects at the
edge of each public operation, so callers never see an exception.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_CODE = "InvalidCode"
    NOT_FOUND = "NotFound"
    VALIDATION_ERROR = "ValidationError"
    ALREADY_REWARDED = "AlreadyRewarded"
    STORE_UNAVAILABLE = "StoreUnavailable"


class CollabError(Exception):
    code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCodeError(CollabError):
    code = ErrorCode.INVALID_CODE


class NotFoundError(CollabError):
    code = ErrorCode.NOT_FOUND


class ValidationError(CollabError):
    code = ErrorCode.VALIDATION_ERROR


class StoreUnavailableError(CollabError):
    code = ErrorCode.STORE_UNAVAILABLE

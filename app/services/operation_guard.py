# /app/services/operation_guard.py

"""
Makes public service operations total.

`guarded` wraps a service function so that it always returns a result object:
taxonomy errors become failed results carrying their own code, and any store
failure is rolled back, logged and reported as `StoreUnavailable` with the
operation-specific message. Nothing is retried.
"""

import functools
import logging
from typing import Callable, Type

from sqlalchemy.exc import SQLAlchemyError

from ..core.errors import CollabError, ErrorCode
from ..models.result_model import ActionResult
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _find_db(args, kwargs):
    db = kwargs.get("db")
    if isinstance(db, DatabaseService):
        return db
    for arg in args:
        if isinstance(arg, DatabaseService):
            return arg
    return None


def _safe_rollback(db) -> None:
    if db is None:
        return
    try:
        db.rollback()
    except SQLAlchemyError as e:
        logger.warning("Rollback after a failed operation also failed: %s", e)


def guarded(result_cls: Type[ActionResult], failure_message: str) -> Callable:
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CollabError as e:
                _safe_rollback(_find_db(args, kwargs))
                if e.code == ErrorCode.STORE_UNAVAILABLE:
                    logger.error("%s: %s", failure_message, e.message)
                    return result_cls.failure(ErrorCode.STORE_UNAVAILABLE, failure_message)
                logger.info("%s rejected: %s", func.__name__, e.message)
                return result_cls.failure(e.code, e.message)
            except (SQLAlchemyError, TimeoutError) as e:
                _safe_rollback(_find_db(args, kwargs))
                logger.error("%s: %s", failure_message, e)
                return result_cls.failure(ErrorCode.STORE_UNAVAILABLE, failure_message)
        return wrapper
    return decorator

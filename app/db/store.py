# /app/db/store.py

"""
The store client: an explicitly constructed handle around a SQLAlchemy engine.

One `Store` is created by the application lifespan and passed to everything
that needs persistence. It owns its own connect / health-check / close
lifecycle; there is no module-level engine.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .base import Base
from ..core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def _engine_args(database_url: str, timeout_seconds: float) -> dict:
    """Driver-specific arguments that bound every store call by `timeout_seconds`."""
    args = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # 'timeout' bounds how long SQLite waits on a locked database file.
        args["connect_args"] = {"check_same_thread": False, "timeout": timeout_seconds}
        return args
    args["pool_timeout"] = timeout_seconds
    if database_url.startswith("postgresql"):
        args["connect_args"] = {
            "connect_timeout": max(1, int(timeout_seconds)),
            "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
        }
    return args


class Store:
    def __init__(self, database_url: str, timeout_seconds: float = 5.0):
        self.database_url = database_url
        self.timeout_seconds = timeout_seconds
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StoreUnavailableError("Store is not connected")
        return self._engine

    def connect(self) -> "Store":
        """Creates the engine and session factory. Calling it twice is a no-op."""
        if self._engine is not None:
            return self
        try:
            self._engine = create_engine(self.database_url, **_engine_args(self.database_url, self.timeout_seconds))
        except SQLAlchemyError as e:
            logger.error("Could not create store engine: %s", e)
            raise StoreUnavailableError("Failed to connect to the store") from e
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        logger.info("Store connected (%s)", self._engine.url.render_as_string(hide_password=True))
        return self

    def create_all(self) -> None:
        """Creates any missing tables. Existing tables are left untouched."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error("Could not create store tables: %s", e)
            raise StoreUnavailableError("Failed to prepare the store") from e

    def health_check(self) -> bool:
        if self._engine is None:
            return False
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Store health check failed: %s", e)
            return False

    def session(self) -> Session:
        if self._session_factory is None:
            raise StoreUnavailableError("Store is not connected")
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """A session that is always closed, for work outside a request."""
        db_session = self.session()
        try:
            yield db_session
        finally:
            db_session.close()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Store connection closed")
        self._engine = None
        self._session_factory = None

# /app/db/database.py

from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from .store import Store


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the Store created by the application lifespan."""
    return request.app.state.store


# Dependency to get a DB session. This will be used in our API routers.
def get_db(request: Request) -> Iterator[Session]:
    db = get_store(request).session()
    try:
        yield db
    finally:
        db.close()

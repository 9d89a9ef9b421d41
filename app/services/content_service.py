# /app/services/content_service.py

"""
Session/content store.

Sessions and one-off shares are the same record in the same keyspace: a
session is a text record the teacher keeps overwriting (last write wins, no
versioning), a share is written once. File payloads are base64 strings that
are stored and returned untouched.
"""

import logging
import secrets
import string
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..core.errors import CollabError, NotFoundError, StoreUnavailableError, ValidationError
from ..db.models.content_models import Content
from ..db.store import Store
from ..models.content_model import (
    ContentResult,
    ContentType,
    SessionResult,
    SessionStateResult,
    ShareResult,
    SharedContent,
)
from ..models.result_model import ActionResult
from . import chat_service, user_service
from .database_service import DatabaseService
from .operation_guard import guarded

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 8
MAX_ID_ATTEMPTS = 5


# --- HELPER FUNCTIONS ---

def generate_content_id() -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def to_shared_content(record: Content) -> SharedContent:
    return SharedContent(
        id=record.id,
        type=record.type,
        content=record.content or "",
        filename=record.filename,
        mimetype=record.mimetype,
        language=record.language,
        senderName=record.sender_name,
        createdAt=record.created_at,
    )


def _free_content_id(db: DatabaseService) -> str:
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = generate_content_id()
        if not db.content_exists(candidate):
            return candidate
    raise StoreUnavailableError("Could not allocate a content id")


def _insert_with_fresh_id(db: DatabaseService, record: dict) -> Content:
    """Inserts `record` under a new random id, retrying on a primary-key collision."""
    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        candidate = _free_content_id(db)
        try:
            return db.add_content({**record, "id": candidate})
        except IntegrityError:
            db.rollback()
            logger.warning("Content id collision on %s (attempt %d)", candidate, attempt)
    raise StoreUnavailableError("Could not allocate a content id")


def _session_record(teacher_name: str) -> dict:
    return {"type": ContentType.TEXT.value, "content": "", "sender_name": teacher_name}


def _require_content(db: DatabaseService, content_id: str, label: str) -> Content:
    record = db.get_content_by_id(content_id) if content_id else None
    if record is None:
        raise NotFoundError(f"{label} not found")
    return record


# --- SESSIONS ---

@guarded(SessionResult, "Failed to create session")
def create_session(db: DatabaseService, teacher_name: str) -> SessionResult:
    """Synchronous creation: the record is readable as soon as this returns."""
    if not teacher_name or not teacher_name.strip():
        raise ValidationError("Teacher name is required")
    record = _insert_with_fresh_id(db, _session_record(teacher_name))
    logger.info("Session %s created by %s", record.id, teacher_name)
    return SessionResult.ok(sessionId=record.id, confirmed=True)


@guarded(SessionResult, "Failed to create session")
def reserve_session_id(db: DatabaseService, teacher_name: str) -> SessionResult:
    """
    First half of a fire-and-forget creation: picks an id that is currently
    free. The record itself is written later by `persist_session_record`, so a
    read issued right after this returns may still miss it.
    """
    if not teacher_name or not teacher_name.strip():
        raise ValidationError("Teacher name is required")
    return SessionResult.ok(sessionId=_free_content_id(db), confirmed=False)


def persist_session_record(store: Store, session_id: str, teacher_name: str) -> None:
    """Background write for a reserved session id. Failures are logged only."""
    try:
        with store.session_scope() as db_session:
            DatabaseService(db_session).add_content({"id": session_id, **_session_record(teacher_name)})
        logger.info("Session %s created by %s", session_id, teacher_name)
    except (SQLAlchemyError, CollabError) as e:
        logger.error("Error creating session %s: %s", session_id, e)


@guarded(ActionResult, "Failed to join session")
def join_session(db: DatabaseService, session_id: str) -> ActionResult:
    if not (session_id and db.content_exists(session_id)):
        raise NotFoundError("Session not found")
    return ActionResult.ok()


@guarded(ContentResult, "Failed to get content")
def get_content(db: DatabaseService, session_id: str) -> ContentResult:
    return ContentResult.ok(content=to_shared_content(_require_content(db, session_id, "Session")))


@guarded(ActionResult, "Failed to update content")
def update_content(db: DatabaseService, session_id: str, new_text: str) -> ActionResult:
    """Unconditional overwrite of the text; concurrent writers get last-write-wins."""
    if new_text is None:
        raise ValidationError("Content is required")
    record = _require_content(db, session_id, "Session")
    if record.type == ContentType.FILE.value:
        raise ValidationError("File content cannot be modified")
    db.update_content_text(session_id, new_text)
    return ActionResult.ok()


@guarded(SessionStateResult, "Failed to get session state")
def get_session_state(
    db: DatabaseService,
    session_id: str,
    user_name: Optional[str] = None,
    limit: int = chat_service.DEFAULT_HISTORY_LIMIT,
) -> SessionStateResult:
    """Content plus recent chat in one read; also marks the viewer as active."""
    record = _require_content(db, session_id, "Session")
    content = to_shared_content(record)
    messages = chat_service.fetch_recent(db, session_id, limit)
    if user_name and user_name.strip():
        user_service.touch_participant(db, user_name)
    return SessionStateResult.ok(content=content, messages=messages)


# --- ONE-OFF SHARES ---

@guarded(ShareResult, "Failed to send content")
def share_once(
    db: DatabaseService,
    type: str,
    content: str,
    sender_name: str,
    filename: Optional[str] = None,
    mimetype: Optional[str] = None,
    language: Optional[str] = None,
) -> ShareResult:
    try:
        content_type = ContentType(type)
    except ValueError:
        raise ValidationError("Content type must be 'text' or 'file'")
    if not content:
        raise ValidationError("Content is required")
    if not sender_name or not sender_name.strip():
        raise ValidationError("Sender name is required")

    record = _insert_with_fresh_id(db, {
        "type": content_type.value,
        "content": content,
        "sender_name": sender_name,
        "filename": filename or None,
        "mimetype": mimetype or None,
        "language": language or None,
    })
    logger.info("%s shared %s content %s", sender_name, content_type.value, record.id)
    return ShareResult.ok(contentId=record.id)


@guarded(ContentResult, "Failed to receive content")
def receive(db: DatabaseService, content_id: str) -> ContentResult:
    """Reads are repeatable; 'one-off' only means no session wraps the record."""
    return ContentResult.ok(content=to_shared_content(_require_content(db, content_id, "Content")))

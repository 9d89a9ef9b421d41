# /tests/test_chat_service.py

from app.core.errors import ErrorCode
from app.models.chat_model import GENERAL_ROOM
from app.services import chat_service


def test_recent_returns_newest_fifty_oldest_first(db_service):
    for i in range(55):
        assert chat_service.post_message(db_service, "room1234", f"msg {i}", "Ada").success is True

    result = chat_service.recent_messages(db_service, "room1234")
    texts = [m.text for m in result.messages]
    assert len(texts) == 50
    assert texts[0] == "msg 5"
    assert texts[-1] == "msg 54"

    timestamps = [m.timestamp for m in result.messages]
    assert timestamps == sorted(timestamps)


def test_recent_is_idempotent_without_new_posts(db_service):
    for i in range(3):
        chat_service.post_message(db_service, "room1234", f"msg {i}", "Ada")
    first = chat_service.recent_messages(db_service, "room1234")
    second = chat_service.recent_messages(db_service, "room1234")
    assert first.messages == second.messages


def test_rooms_are_isolated(db_service):
    chat_service.post_message(db_service, "room1234", "in session", "Ada")
    chat_service.post_general_message(db_service, "in general", "Grace")

    assert [m.text for m in chat_service.recent_messages(db_service, GENERAL_ROOM).messages] == ["in general"]
    assert [m.text for m in chat_service.recent_messages(db_service, "room1234").messages] == ["in session"]


def test_custom_limit(db_service):
    for i in range(5):
        chat_service.post_message(db_service, "room1234", f"msg {i}", "Ada")
    result = chat_service.recent_messages(db_service, "room1234", limit=2)
    assert [m.text for m in result.messages] == ["msg 3", "msg 4"]


def test_rejects_blank_and_oversized_messages(db_service):
    assert chat_service.post_message(db_service, "room1234", "   ", "Ada").errorCode == ErrorCode.VALIDATION_ERROR
    assert chat_service.post_message(db_service, "room1234", "hi", "").errorCode == ErrorCode.VALIDATION_ERROR
    too_long = chat_service.post_message(db_service, "room1234", "x" * 11, "Ada", max_length=10)
    assert too_long.errorCode == ErrorCode.VALIDATION_ERROR
    assert chat_service.recent_messages(db_service, "room1234").messages == []

# /tests/test_database_service.py

import pytest
from sqlalchemy.exc import IntegrityError


def test_add_and_get_user(db_service):
    db_service.insert_user_if_missing({"id": "student_ada", "name": "Ada", "role": "student", "points": 0})
    db_service.commit()
    user = db_service.get_user_by_id("student_ada")
    assert user is not None
    assert user.name == "Ada"
    assert user.points == 0


def test_insert_user_if_missing_keeps_existing_row(db_service):
    assert db_service.insert_user_if_missing({"id": "student_ada", "name": "Ada", "role": "student", "points": 0}) is True
    db_service.commit()
    assert db_service.insert_user_if_missing({"id": "student_ada", "name": "Other", "role": "student", "points": 0}) is False
    db_service.commit()
    assert db_service.get_user_by_id("student_ada").name == "Ada"


def test_increment_points_on_missing_user_reports_false(db_service):
    assert db_service.increment_user_points("student_ghost") is False


def test_increment_points_is_relative(db_service):
    db_service.insert_user_if_missing({"id": "student_ada", "name": "Ada", "role": "student", "points": 4})
    db_service.commit()
    assert db_service.increment_user_points("student_ada") is True
    assert db_service.increment_user_points("student_ada") is True
    assert db_service.get_user_by_id("student_ada").points == 6


def test_get_teacher_by_name_ignores_students(db_service):
    db_service.insert_user_if_missing({"id": "student_sam", "name": "Sam", "role": "student", "points": 0})
    db_service.insert_user_if_missing({"id": "oauth-1", "name": "Sam", "role": "teacher", "points": 0})
    db_service.commit()
    teacher = db_service.get_teacher_by_name("Sam")
    assert teacher.id == "oauth-1"
    assert db_service.get_teacher_by_name("sam") is None


def test_duplicate_reward_triple_is_rejected_by_the_store(db_service):
    record = {"rewarder_name": "bob", "sender_name": "ada", "content_id": "abc12345"}
    db_service.add_reward(dict(record))
    with pytest.raises(IntegrityError):
        db_service.add_reward(dict(record))
    db_service.rollback()
    assert db_service.get_reward("bob", "abc12345") is not None


def test_update_content_text_on_missing_id(db_service):
    assert db_service.update_content_text("missing1", "hello") is False


def test_save_setting_creates_then_overwrites(db_service):
    db_service.save_setting("access_code", "FIRST")
    db_service.save_setting("access_code", "SECOND")
    assert db_service.get_setting("access_code").value == "SECOND"

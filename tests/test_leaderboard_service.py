# /tests/test_leaderboard_service.py

from app.services import leaderboard_service


def _add(db, user_id, name, role, points):
    db.insert_user_if_missing({"id": user_id, "name": name, "role": role, "points": points})
    db.commit()


def test_students_ranked_by_points_with_ties(db_service):
    _add(db_service, "student_a", "A", "student", 150)
    _add(db_service, "student_b", "B", "student", 90)
    _add(db_service, "student_c", "C", "student", 150)

    result = leaderboard_service.compute(db_service)
    names = [u.name for u in result.students]
    assert set(names[:2]) == {"A", "C"}
    assert names[2] == "B"
    assert result.teachers == []


def test_partition_by_role(db_service):
    _add(db_service, "oauth-1", "Ms Frizzle", "teacher", 3)
    _add(db_service, "oauth-2", "Mr Keating", "teacher", 7)
    _add(db_service, "student_a", "A", "student", 1)

    result = leaderboard_service.compute(db_service)
    assert [u.name for u in result.teachers] == ["Mr Keating", "Ms Frizzle"]
    assert [u.name for u in result.students] == ["A"]


def test_empty_store(db_service):
    result = leaderboard_service.compute(db_service)
    assert result.success is True
    assert result.teachers == [] and result.students == []

# /tests/test_access_service.py

from app.core.errors import ErrorCode
from app.services import access_service


def test_get_code_provisions_default_once(db_service):
    assert access_service.get_code(db_service) == "COLLAB123"
    assert db_service.get_setting("access_code").value == "COLLAB123"
    # A different default is ignored once a code exists.
    assert access_service.get_code(db_service, default_code="OTHER") == "COLLAB123"


def test_set_code_validation(db_service):
    empty = access_service.set_code(db_service, "")
    assert empty.success is False
    assert empty.errorCode == ErrorCode.VALIDATION_ERROR

    short = access_service.set_code(db_service, "ab")
    assert short.success is False
    assert short.errorCode == ErrorCode.VALIDATION_ERROR

    ok = access_service.set_code(db_service, "abc")
    assert ok.success is True
    assert access_service.get_code(db_service) == "abc"


def test_set_code_trims_whitespace(db_service):
    assert access_service.set_code(db_service, "   ").success is False
    access_service.set_code(db_service, "  NEWCODE  ")
    assert access_service.get_code(db_service) == "NEWCODE"


def test_authenticate_requires_exact_code(db_service):
    access_service.set_code(db_service, "Secret")

    wrong_case = access_service.authenticate(db_service, "secret", "Ada")
    assert wrong_case.success is False
    assert wrong_case.errorCode == ErrorCode.INVALID_CODE
    assert db_service.get_all_users() == []

    ok = access_service.authenticate(db_service, "Secret", "Ada")
    assert ok.success is True
    assert ok.user.id == "student_ada"


def test_old_code_stops_working_after_change(db_service):
    assert access_service.authenticate(db_service, "COLLAB123", "Ada").success is True
    access_service.set_code(db_service, "FRESH")
    result = access_service.authenticate(db_service, "COLLAB123", "Ada")
    assert result.errorCode == ErrorCode.INVALID_CODE


def test_authenticate_rejects_blank_name(db_service):
    result = access_service.authenticate(db_service, "COLLAB123", "  ")
    assert result.errorCode == ErrorCode.VALIDATION_ERROR

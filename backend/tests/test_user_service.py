from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from dtos.request.user_request import UserRequest
from exceptions import DateParseError, NotFoundError, StorageError
from services.user_service import UserService


def test_create_user_omits_age(user_service):
    response = user_service.create_user(UserRequest(name="Ada", dob="1990-01-01"))
    assert response.id > 0
    assert response.name == "Ada"
    assert response.dob == "1990-01-01"
    assert response.age is None


def test_get_user_derives_age(user_service):
    created = user_service.create_user(UserRequest(name="Ada", dob="2000-06-15"))
    fetched = user_service.get_user(created.id)
    # conftest clock is 2024-06-15
    assert fetched.age == 24
    assert fetched.dob == "2000-06-15"


def test_get_missing_user_raises_not_found(user_service):
    with pytest.raises(NotFoundError) as exc_info:
        user_service.get_user(999999)
    assert exc_info.value.message == "User not found"


def test_list_users_empty(user_service):
    assert user_service.list_users() == []


def test_list_users_with_ages(user_service):
    user_service.create_user(UserRequest(name="Ada", dob="2000-06-15"))
    user_service.create_user(UserRequest(name="Bob", dob="2000-06-16"))
    users = user_service.list_users()
    assert [(u.name, u.age) for u in users] == [("Ada", 24), ("Bob", 23)]


def test_update_replaces_both_fields(user_service):
    created = user_service.create_user(UserRequest(name="Ada", dob="1990-01-01"))
    updated = user_service.update_user(created.id, UserRequest(name="Grace", dob="1906-12-09"))
    assert updated.age is None
    assert (updated.name, updated.dob) == ("Grace", "1906-12-09")

    fetched = user_service.get_user(created.id)
    assert (fetched.name, fetched.dob) == ("Grace", "1906-12-09")


def test_update_missing_user_raises_not_found(user_service):
    with pytest.raises(NotFoundError):
        user_service.update_user(999999, UserRequest(name="Grace", dob="1906-12-09"))


def test_delete_is_idempotent(user_service):
    created = user_service.create_user(UserRequest(name="Ada", dob="1990-01-01"))
    user_service.delete_user(created.id)
    user_service.delete_user(created.id)
    with pytest.raises(NotFoundError):
        user_service.get_user(created.id)


def test_unvalidated_bad_date_never_reaches_storage():
    session = MagicMock()
    service = UserService(session)
    with pytest.raises(DateParseError):
        service.create_user(UserRequest.model_construct(name="Bob", dob="not-a-date"))
    session.add.assert_not_called()


def test_commit_failure_rolls_back_and_raises_storage_error():
    session = MagicMock()
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("constraint failed"))
    service = UserService(session)

    with pytest.raises(StorageError) as exc_info:
        service.create_user(UserRequest(name="Ada", dob="1990-01-01"))
    assert exc_info.value.details == {"operation": "commit"}
    session.rollback.assert_called_once()


def test_clock_is_read_per_call(db_session):
    today = [date(2024, 6, 14)]
    service = UserService(db_session, today=lambda: today[0])
    created = service.create_user(UserRequest(name="Ada", dob="2000-06-15"))

    assert service.get_user(created.id).age == 23
    today[0] = date(2024, 6, 15)
    assert service.get_user(created.id).age == 24

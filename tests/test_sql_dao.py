import pytest
from sqlalchemy import text

from core.errors import AppError, ErrorMessages
from dao.sql_dao import SqlProfileDAO
from models import Admin, Gender, User, logged_profile
from services import logging_service
from services.auth_service import hash_password, verify_password


@pytest.fixture
def dao(pool):
    return SqlProfileDAO(pool)


def new_user(username="ana", email="ana@example.com", **overrides):
    data = dict(
        email=email,
        username=username,
        password="Secret123",
        name="Ana",
        lastname="Lopez",
        telephone="612345678",
        gender=Gender.FEMALE,
        card="1234567812345678",
    )
    data.update(overrides)
    return User(**data)


def test_register_assigns_id_and_hashes_password(dao, pool):
    user = dao.register(new_user())
    assert user.id > 0
    assert verify_password("Secret123", user.password)

    with pool.connect() as con:
        row = con.execute(
            text("SELECT P_PASSWORD, U_GENDER, U_CARD FROM db_profile JOIN db_user ON P_ID = U_ID WHERE P_ID = :id"),
            {"id": user.id},
        ).one()
    assert row.P_PASSWORD != "Secret123"
    assert row.U_GENDER == "FEMALE"
    assert row.U_CARD == "1234567812345678"


@pytest.mark.parametrize("username,email,message", [
    ("ana", "ana@example.com", ErrorMessages.EMAIL_AND_USERNAME_EXIST),
    ("other", "ana@example.com", ErrorMessages.EMAIL_EXISTS),
    ("ana", "other@example.com", ErrorMessages.USERNAME_EXISTS),
])
def test_register_rejects_duplicates(dao, username, email, message):
    dao.register(new_user())
    with pytest.raises(AppError) as info:
        dao.register(new_user(username=username, email=email))
    assert str(info.value) == message


def test_login_by_username_or_email_sets_logged_profile(dao):
    dao.register(new_user())

    by_username = dao.login("ana", "Secret123")
    assert isinstance(by_username, User)
    assert by_username.gender is Gender.FEMALE
    assert logged_profile.get_profile() == by_username

    by_email = dao.login("ana@example.com", "Secret123")
    assert by_email.id == by_username.id


def test_login_with_wrong_password_returns_none(dao):
    dao.register(new_user())
    assert dao.login("ana", "Wrong1234") is None
    assert dao.login("nobody", "Secret123") is None
    assert logged_profile.get_profile() is None


def test_seeded_admin_logs_in_as_admin(dao, settings):
    profile = dao.login(settings.admin_username, settings.admin_password)
    assert isinstance(profile, Admin)
    assert profile.username == settings.admin_username


def test_get_users_excludes_admins(dao):
    dao.register(new_user())
    dao.register(new_user(username="bea", email="bea@example.com", gender=Gender.MALE))
    users = dao.get_users()
    assert [u.username for u in users] == ["ana", "bea"]
    assert all(isinstance(u, User) for u in users)


def test_update_user_changes_profile_and_user_rows(dao):
    user = dao.register(new_user())
    old_hash = user.password
    user.name = "Anna"
    user.telephone = "699999999"
    user.gender = Gender.OTHER
    user.card = "8765432187654321"
    user.password = old_hash

    assert dao.update_user(user) is True
    stored = dao.get_users()[0]
    assert stored.name == "Anna"
    assert stored.telephone == "699999999"
    assert stored.gender is Gender.OTHER
    assert stored.card == "8765432187654321"
    assert stored.password == old_hash


def test_update_user_with_new_password(dao):
    user = dao.register(new_user())
    user.password = "Changed123"
    dao.update_user(user)
    assert dao.login("ana", "Changed123") is not None
    assert dao.login("ana", "Secret123") is None


def test_update_missing_user_rolls_back(dao):
    ghost = new_user(id=999)
    with pytest.raises(AppError) as info:
        dao.update_user(ghost)
    assert str(info.value) == ErrorMessages.UPDATE_USER


def test_update_admin_is_rejected(dao, settings):
    admin = dao.login(settings.admin_username, settings.admin_password)
    fake = new_user(id=admin.id, name="Changed")
    with pytest.raises(AppError):
        dao.update_user(fake)
    again = dao.login(settings.admin_username, settings.admin_password)
    assert again.name == admin.name


def test_delete_user(dao, pool):
    user = dao.register(new_user())
    assert dao.delete_user(user.id) is True
    assert dao.get_users() == []
    assert dao.delete_user(user.id) is False
    with pool.connect() as con:
        assert con.execute(text("SELECT COUNT(*) FROM db_user")).scalar() == 0


def test_operations_are_audited(dao, pool):
    user = dao.register(new_user())
    dao.login("ana", "Secret123")
    dao.delete_user(user.id)
    actions = [entry.action for entry in logging_service.recent(limit=10, pool=pool)]
    assert actions[:3] == ["DELETE_USER", "LOGIN", "REGISTER_USER"]


def test_connection_timeout_is_reported(pool, monkeypatch):
    from database import connection_thread

    monkeypatch.setattr(connection_thread, "WAIT_ATTEMPTS", 0)
    monkeypatch.setattr(connection_thread.ConnectionThread, "is_ready", lambda self: False)
    dao = SqlProfileDAO(pool)
    with pytest.raises(AppError) as info:
        dao.get_users()
    assert str(info.value) == ErrorMessages.TIMEOUT


def test_register_hashes_a_password_that_looks_like_a_hash(dao):
    typed = hash_password("Other123")
    user = dao.register(new_user(password=typed))

    assert user.password != typed
    assert dao.login("ana", typed) is not None


def test_register_rolls_back_profile_when_user_insert_fails(dao, pool):
    with pytest.raises(AppError) as info:
        dao.register(new_user(card={"not": "bindable"}))
    assert str(info.value) == ErrorMessages.REGISTER_USER

    with pool.connect() as con:
        count = con.execute(
            text("SELECT COUNT(*) FROM db_profile WHERE P_USERNAME = :username"),
            {"username": "ana"},
        ).scalar()
    assert count == 0

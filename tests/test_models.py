import pytest

from core.errors import AppError, ErrorMessages, ValidationError
from models import Admin, Gender, LoggedProfile, Profile, User


def test_user_defaults_and_gender_parsing():
    user = User(email="a@b.com", username="ana", gender="female")
    assert user.id == -1
    assert user.gender is Gender.FEMALE
    assert User(gender=None).gender is Gender.OTHER
    assert User(gender="unknown").gender is Gender.OTHER


def test_profile_is_abstract():
    with pytest.raises(TypeError):
        Profile()


def test_show_and_str():
    user = User(id=3, email="a@b.com", username="ana", card="1234567890123456")
    admin = Admin(id=1, username="root", current_account="ES12")
    assert user.show() == "ana (a@b.com)"
    assert admin.show() == "root [admin]"
    assert "Card: 1234567890123456" in str(user)
    assert "Current account: ES12" in str(admin)
    assert "ID: 3" in str(user)


def test_logged_profile_holds_single_profile():
    logged = LoggedProfile()
    assert logged.get_profile() is None
    first = User(username="one")
    second = Admin(username="two")
    logged.set_profile(first)
    logged.set_profile(second)
    assert logged.get_profile() is second
    assert logged.is_authenticated
    logged.clear()
    assert logged.get_profile() is None


def test_app_error_carries_catalog_message():
    error = AppError(ErrorMessages.TIMEOUT)
    assert str(error) == "Timeout retrieving a connection."
    assert error.message == ErrorMessages.TIMEOUT
    assert isinstance(error, RuntimeError)


def test_validation_error_lists_fields():
    error = ValidationError(["card", "telephone"])
    assert isinstance(error, AppError)
    assert error.fields == ["card", "telephone"]
    assert "Card must be exactly 16 digits" in str(error)

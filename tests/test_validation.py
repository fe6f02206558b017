import pytest

from core.errors import ValidationError
from services import validation


def valid_form(**overrides):
    form = {
        "username": "ana",
        "email": "ana@example.com",
        "password": "Secret123",
        "name": "Ana",
        "lastname": "Lopez",
        "telephone": "612345678",
        "gender": "FEMALE",
        "card": "1234567812345678",
    }
    form.update(overrides)
    return form


@pytest.mark.parametrize("email,expected", [
    ("ana@example.com", True),
    ("a.b+c@mail.co", True),
    ("ana@example", False),
    ("ana.example.com", False),
    ("", False),
])
def test_email(email, expected):
    assert validation.is_valid_email(email) is expected


@pytest.mark.parametrize("password,expected", [
    ("Secret123", True),
    ("secret123", False),
    ("SECRET123", False),
    ("Secretabc", False),
    ("Sec123", False),
])
def test_password(password, expected):
    assert validation.is_valid_password(password) is expected


def test_telephone_and_card_lengths():
    assert validation.is_valid_telephone("612345678")
    assert not validation.is_valid_telephone("61234567")
    assert not validation.is_valid_telephone("61234567a")
    assert validation.is_valid_card("1234567812345678")
    assert not validation.is_valid_card("123456781234567")


def test_join_card_and_digit_filter():
    assert validation.join_card("1234", " 5678", "9012", "3456") == "1234567890123456"
    assert validation.digits_only("12a34-5", 4) == "1234"


def test_signup_accepts_valid_form():
    validation.validate_signup(valid_form())


def test_signup_reports_every_invalid_field():
    form = valid_form(email="bad", telephone="123", password="weak", card="1234", name=" ")
    with pytest.raises(ValidationError) as info:
        validation.validate_signup(form)
    assert set(info.value.fields) == {"email", "telephone", "password", "card", "name"}


def test_profile_update_allows_blank_password():
    validation.validate_profile_update(valid_form(password=""))
    with pytest.raises(ValidationError) as info:
        validation.validate_profile_update(valid_form(password=""), require_password=True)
    assert info.value.fields == ["password"]

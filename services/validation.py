"""Validação dos campos dos formulários de cadastro e edição.

As regras valem só na camada de formulário; os DAOs gravam o que recebem.
"""
from __future__ import annotations

import re
from typing import Mapping

from core.errors import ValidationError

EMAIL_RE = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
TELEPHONE_RE = re.compile(r"^[0-9]{9}$")
PASSWORD_RE = re.compile(r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z]).{8,}$")
CARD_RE = re.compile(r"^[0-9]{16}$")

CARD_GROUP_SIZE = 4
TELEPHONE_LENGTH = 9


def _clean(value) -> str:
    return str(value or "").strip()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(_clean(email)))


def is_valid_telephone(telephone: str) -> bool:
    return bool(TELEPHONE_RE.match(_clean(telephone)))


def is_valid_password(password: str) -> bool:
    return bool(PASSWORD_RE.match(_clean(password)))


def is_valid_card(card: str) -> bool:
    return bool(CARD_RE.match(_clean(card)))


def join_card(*groups: str) -> str:
    return "".join(_clean(g) for g in groups)


def digits_only(value: str, max_length: int) -> str:
    """Filtra a digitação de um campo numérico (telefone ou grupo do cartão)."""
    return re.sub(r"\D", "", value or "")[:max_length]


def _invalid_profile_fields(form: Mapping[str, str], require_password: bool) -> list[str]:
    invalid = []
    for field in ("name", "lastname"):
        if not _clean(form.get(field)):
            invalid.append(field)
    if not is_valid_telephone(form.get("telephone")):
        invalid.append("telephone")
    password = _clean(form.get("password"))
    if (password or require_password) and not is_valid_password(password):
        invalid.append("password")
    if not is_valid_card(form.get("card")):
        invalid.append("card")
    return invalid


def validate_signup(form: Mapping[str, str]) -> None:
    invalid = []
    if not _clean(form.get("username")):
        invalid.append("username")
    if not is_valid_email(form.get("email")):
        invalid.append("email")
    invalid.extend(_invalid_profile_fields(form, require_password=True))
    if invalid:
        raise ValidationError(invalid)


def validate_profile_update(form: Mapping[str, str], require_password: bool = False) -> None:
    invalid = _invalid_profile_fields(form, require_password)
    if invalid:
        raise ValidationError(invalid)


__all__ = [
    "is_valid_email",
    "is_valid_telephone",
    "is_valid_password",
    "is_valid_card",
    "join_card",
    "digits_only",
    "validate_signup",
    "validate_profile_update",
]

"""``ModelDAO`` em memória, usado em testes e para rodar a interface sem banco."""
from __future__ import annotations

import copy
from typing import Dict, List, Optional

from core.errors import AppError, ErrorMessages
from dao.base import ModelDAO, duplicate_message
from models import Admin, LoggedProfile, Profile, User, logged_profile
from services.auth_service import hash_password, prepare_password, verify_password


class MemoryProfileDAO(ModelDAO):
    def __init__(self, logged: Optional[LoggedProfile] = None) -> None:
        self.profiles: Dict[int, Profile] = {}
        self.logged = logged or logged_profile
        self._seq = 1

    def next_id(self) -> int:
        atual = self._seq
        self._seq += 1
        return atual

    def add_admin(self, admin: Admin) -> Admin:
        admin.id = self.next_id()
        admin.password = prepare_password(admin.password)
        self.profiles[admin.id] = admin
        return admin

    def _find(self, credential: str) -> Optional[Profile]:
        return next(
            (p for p in self.profiles.values() if credential in (p.email, p.username)),
            None,
        )

    def register(self, user: User) -> User:
        message = duplicate_message(
            any(p.email == user.email for p in self.profiles.values()),
            any(p.username == user.username for p in self.profiles.values()),
        )
        if message:
            raise AppError(message)
        user.id = self.next_id()
        user.password = hash_password(user.password)
        self.profiles[user.id] = copy.copy(user)
        return user

    def login(self, credential: str, password: str) -> Optional[Profile]:
        profile = self._find(credential)
        if profile is None or not verify_password(password, profile.password):
            return None
        profile = copy.copy(profile)
        self.logged.set_profile(profile)
        return profile

    def get_users(self) -> List[User]:
        return [copy.copy(p) for p in self.profiles.values() if isinstance(p, User)]

    def update_user(self, user: User) -> bool:
        stored = self.profiles.get(user.id)
        if not isinstance(stored, User):
            raise AppError(ErrorMessages.UPDATE_USER)
        if user.password:
            user.password = prepare_password(user.password)
            stored.password = user.password
        stored.name = user.name
        stored.lastname = user.lastname
        stored.telephone = user.telephone
        stored.gender = user.gender
        stored.card = user.card
        return True

    def delete_user(self, user_id: int) -> bool:
        return self.profiles.pop(user_id, None) is not None


__all__ = ["MemoryProfileDAO"]

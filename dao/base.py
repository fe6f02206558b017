"""Interface comum das implementações de acesso a dados."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.errors import ErrorMessages
from models import Profile, User


class ModelDAO(ABC):
    @abstractmethod
    def register(self, user: User) -> User:
        """Cadastra o usuário e devolve o mesmo objeto com o id gerado."""

    @abstractmethod
    def login(self, credential: str, password: str) -> Optional[Profile]:
        """Autentica por email ou username; ``None`` se não houver correspondência."""

    @abstractmethod
    def get_users(self) -> List[User]:
        ...

    @abstractmethod
    def update_user(self, user: User) -> bool:
        ...

    @abstractmethod
    def delete_user(self, user_id: int) -> bool:
        ...


def duplicate_message(email_exists: bool, username_exists: bool) -> Optional[str]:
    if email_exists and username_exists:
        return ErrorMessages.EMAIL_AND_USERNAME_EXIST
    if email_exists:
        return ErrorMessages.EMAIL_EXISTS
    if username_exists:
        return ErrorMessages.USERNAME_EXISTS
    return None


__all__ = ["ModelDAO", "duplicate_message"]

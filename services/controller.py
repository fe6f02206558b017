"""Fachada usada pelas janelas para chegar à camada de dados."""
from __future__ import annotations

import copy
import logging
from typing import List, Mapping, Optional

from core.config import Settings
from core.errors import AppError, ErrorMessages
from dao.base import ModelDAO
from models import Gender, LoggedProfile, Profile, User, logged_profile

logger = logging.getLogger(__name__)


def build_dao(settings: Optional[Settings] = None) -> ModelDAO:
    settings = settings or Settings.from_env()
    if settings.backend == "mongo":
        from dao.mongo_dao import MongoProfileDAO

        return MongoProfileDAO()
    if settings.backend == "memory":
        from dao.memory_dao import MemoryProfileDAO

        return MemoryProfileDAO()

    from dao.sql_dao import SqlProfileDAO
    from database.db import get_pool

    pool = get_pool()
    pool.init_db(settings)
    return SqlProfileDAO(pool, delay=settings.release_delay)


def edited_user(user: User, form: Mapping[str, str]) -> User:
    """Cópia de ``user`` com os campos editáveis do formulário; o original não muda."""
    edited = copy.copy(user)
    edited.password = form.get("password") or user.password
    edited.name = form["name"]
    edited.lastname = form["lastname"]
    edited.telephone = form["telephone"]
    edited.gender = Gender.parse(form.get("gender"))
    edited.card = form["card"]
    return edited


class Controller:
    def __init__(self, dao: Optional[ModelDAO] = None, logged: Optional[LoggedProfile] = None) -> None:
        if dao is None:
            try:
                dao = build_dao()
            except Exception as exc:
                logger.exception("Não foi possível inicializar a camada de dados")
                raise AppError(ErrorMessages.DATABASE) from exc
        self.dao = dao
        self.logged = logged or logged_profile

    def register(self, user: User) -> User:
        return self.dao.register(user)

    def login(self, credential: str, password: str) -> Optional[Profile]:
        return self.dao.login(credential, password)

    def get_users(self) -> List[User]:
        return self.dao.get_users()

    def update_user(self, user: User) -> bool:
        return self.dao.update_user(user)

    def delete_user(self, user_id: int) -> bool:
        return self.dao.delete_user(user_id)

    def current_profile(self) -> Optional[Profile]:
        return self.logged.get_profile()

    def logout(self) -> None:
        self.logged.clear()


__all__ = ["Controller", "build_dao", "edited_user"]

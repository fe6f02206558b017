"""Implementação SQL do ``ModelDAO`` sobre o schema db_profile / db_user / db_admin.

Cadastro, edição e exclusão usam uma conexão obtida pela ``ConnectionThread``;
o login pega a conexão direto do pool. Cadastro e edição gravam as duas tabelas
numa única transação e desfazem tudo se uma das partes falhar.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

from sqlalchemy import delete, or_, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import AppError, ErrorMessages
from dao.base import ModelDAO, duplicate_message
from database.connection_thread import ConnectionThread, wait_for_connection
from database.db import ConnectionPool, get_pool
from models import Admin, Gender, LoggedProfile, Profile, User, logged_profile
from models.records import AdminRecord, ProfileRecord, UserRecord
from services import logging_service
from services.auth_service import hash_password, prepare_password, verify_password

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_user(profile: ProfileRecord, user: Optional[UserRecord]) -> User:
    return User(
        id=profile.id,
        email=profile.email,
        username=profile.username,
        password=profile.password,
        name=profile.name or "",
        lastname=profile.lastname or "",
        telephone=profile.telephone or "",
        gender=Gender.parse(user.gender if user else None),
        card=(user.card if user else "") or "",
    )


def _to_admin(profile: ProfileRecord, admin: AdminRecord) -> Admin:
    return Admin(
        id=profile.id,
        email=profile.email,
        username=profile.username,
        password=profile.password,
        name=profile.name or "",
        lastname=profile.lastname or "",
        telephone=profile.telephone or "",
        current_account=admin.current_account or "",
    )


class SqlProfileDAO(ModelDAO):
    def __init__(
        self,
        pool: Optional[ConnectionPool] = None,
        delay: float = 0.0,
        logged: Optional[LoggedProfile] = None,
    ) -> None:
        self.pool = pool or get_pool()
        self.delay = delay
        self.logged = logged or logged_profile

    # Conexão e transação ---------------------------------------------
    def _with_connection(self, operation: Callable[[Connection], T]) -> T:
        thread = ConnectionThread(self.pool, self.delay)
        thread.start()
        try:
            con = wait_for_connection(thread)
            return operation(con)
        finally:
            thread.release_connection()

    def _transaction(self, con: Connection, error_message: str, work: Callable[[Session], T]) -> T:
        session = self.pool.session(con)
        try:
            result = work(session)
            session.commit()
            return result
        except (SQLAlchemyError, AppError) as exc:
            logger.error("%s (%s)", error_message, exc)
            self._rollback(session)
            raise AppError(error_message) from exc
        finally:
            self._close(session)

    @staticmethod
    def _rollback(session: Session) -> None:
        try:
            session.rollback()
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.ROLLBACK) from exc

    @staticmethod
    def _close(session: Session) -> None:
        try:
            session.close()
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.RESET_AUTOCOMMIT) from exc

    def _audit(self, action: str, details: str, username: Optional[str] = None) -> None:
        if username is None:
            current = self.logged.get_profile()
            username = current.username if current else None
        logging_service.record(action, username, details, pool=self.pool)

    # Operações sobre a conexão -----------------------------------------
    def _check_credentials_existence(self, con: Connection, email: str, username: str) -> Tuple[bool, bool]:
        session = self.pool.session(con)
        try:
            rows = (
                session.query(ProfileRecord.email, ProfileRecord.username)
                .filter(or_(ProfileRecord.email == email, ProfileRecord.username == username))
                .all()
            )
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.VERIFY_CREDENTIALS) from exc
        finally:
            self._close(session)
        email_exists = any(row.email == email for row in rows)
        username_exists = any(row.username == username for row in rows)
        return email_exists, username_exists

    def _insert(self, con: Connection, user: User, password_hash: str) -> int:
        def work(session: Session) -> int:
            profile = ProfileRecord(
                email=user.email,
                username=user.username,
                password=password_hash,
                name=user.name,
                lastname=user.lastname,
                telephone=user.telephone,
            )
            session.add(profile)
            session.flush()
            if profile.id is None:
                raise AppError("Insert failed: no generated key returned.")
            new_id = profile.id
            session.add(UserRecord(id=new_id, gender=user.gender.value, card=user.card))
            session.flush()
            return new_id

        return self._transaction(con, ErrorMessages.REGISTER_USER, work)

    def _select_users(self, con: Connection) -> List[User]:
        session = self.pool.session(con)
        try:
            rows = (
                session.query(ProfileRecord, UserRecord)
                .join(UserRecord, UserRecord.id == ProfileRecord.id)
                .order_by(ProfileRecord.id)
                .all()
            )
            return [_to_user(profile, user) for profile, user in rows]
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.GET_USERS) from exc
        finally:
            self._close(session)

    def _update(self, con: Connection, user: User, password_hash: Optional[str]) -> bool:
        def work(session: Session) -> bool:
            values = {
                "name": user.name,
                "lastname": user.lastname,
                "telephone": user.telephone,
            }
            if password_hash:
                values["password"] = password_hash
            profile_updated = session.execute(
                update(ProfileRecord).where(ProfileRecord.id == user.id).values(**values)
            ).rowcount
            user_updated = session.execute(
                update(UserRecord)
                .where(UserRecord.id == user.id)
                .values(gender=user.gender.value, card=user.card)
            ).rowcount
            if profile_updated == 0 or user_updated == 0:
                raise AppError(ErrorMessages.UPDATE_USER)
            return True

        return self._transaction(con, ErrorMessages.UPDATE_USER, work)

    def _delete(self, con: Connection, user_id: int) -> bool:
        def work(session: Session) -> bool:
            session.execute(delete(UserRecord).where(UserRecord.id == user_id))
            session.execute(delete(AdminRecord).where(AdminRecord.id == user_id))
            deleted = session.execute(delete(ProfileRecord).where(ProfileRecord.id == user_id)).rowcount
            return deleted > 0

        return self._transaction(con, ErrorMessages.DELETE_USER, work)

    def _login_profile(self, con: Connection, credential: str, password: str) -> Optional[Profile]:
        session = self.pool.session(con)
        try:
            row = (
                session.query(ProfileRecord, UserRecord, AdminRecord)
                .outerjoin(UserRecord, UserRecord.id == ProfileRecord.id)
                .outerjoin(AdminRecord, AdminRecord.id == ProfileRecord.id)
                .filter(or_(ProfileRecord.email == credential, ProfileRecord.username == credential))
                .first()
            )
            if row is None:
                return None
            profile, user, admin = row
            if not verify_password(password, profile.password):
                return None
            if user is not None:
                return _to_user(profile, user)
            if admin is not None:
                return _to_admin(profile, admin)
            return None
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.LOGIN) from exc
        finally:
            self._close(session)

    # ModelDAO ------------------------------------------------------------
    def login(self, credential: str, password: str) -> Optional[Profile]:
        try:
            with self.pool.connect() as con:
                profile = self._login_profile(con, credential, password)
        except SQLAlchemyError as exc:
            raise AppError(ErrorMessages.LOGIN) from exc
        if profile is not None:
            self.logged.set_profile(profile)
            self._audit("LOGIN", "Login realizado", username=profile.username)
        return profile

    def register(self, user: User) -> User:
        def operation(con: Connection) -> int:
            email_exists, username_exists = self._check_credentials_existence(con, user.email, user.username)
            message = duplicate_message(email_exists, username_exists)
            if message:
                raise AppError(message)
            return self._insert(con, user, password_hash)

        password_hash = hash_password(user.password)
        user.id = self._with_connection(operation)
        user.password = password_hash
        self._audit("REGISTER_USER", f"Usuário {user.username} cadastrado", username=user.username)
        return user

    def get_users(self) -> List[User]:
        return self._with_connection(self._select_users)

    def update_user(self, user: User) -> bool:
        password_hash = prepare_password(user.password) if user.password else None
        updated = self._with_connection(lambda con: self._update(con, user, password_hash))
        if password_hash:
            user.password = password_hash
        self._audit("UPDATE_USER", f"Usuário {user.id} atualizado")
        return updated

    def delete_user(self, user_id: int) -> bool:
        deleted = self._with_connection(lambda con: self._delete(con, user_id))
        if deleted:
            self._audit("DELETE_USER", f"Perfil {user_id} excluído")
        return deleted


__all__ = ["SqlProfileDAO"]

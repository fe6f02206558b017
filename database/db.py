"""Engine SQLAlchemy com pool de conexões e criação do schema.

O pool segue os parâmetros do DataSource usado antes: 2 conexões iniciais,
no máximo 4 no total e 10 segundos de espera por uma conexão livre.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base
from sqlalchemy.pool import QueuePool

from core.config import Settings
from core.errors import AppError, ErrorMessages

logger = logging.getLogger(__name__)

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2
POOL_TIMEOUT = 10


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class ConnectionPool:
    def __init__(self, url: str) -> None:
        self.url = url
        self.engine = self._create_engine(url)

    @staticmethod
    def _create_engine(url: str) -> Engine:
        parsed = make_url(url)
        connect_args = {}
        is_sqlite = parsed.get_backend_name() == "sqlite"
        if is_sqlite:
            # conexões são abertas numa thread auxiliar e usadas na thread chamadora
            connect_args["check_same_thread"] = False
            if parsed.database and parsed.database != ":memory:":
                Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(
            url,
            poolclass=QueuePool,
            pool_size=POOL_SIZE,
            max_overflow=MAX_OVERFLOW,
            pool_timeout=POOL_TIMEOUT,
            pool_pre_ping=True,
            connect_args=connect_args,
            future=True,
        )
        if is_sqlite:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    def connect(self) -> Connection:
        return self.engine.connect()

    def session(self, connection: Optional[Connection] = None) -> Session:
        return Session(bind=connection or self.engine, autoflush=False, future=True)

    def init_db(self, settings: Optional[Settings] = None) -> None:
        from models import records  # noqa: F401  registra as tabelas no metadata

        try:
            Base.metadata.create_all(self.engine)
            self._seed_default_admin(settings or Settings.from_env())
        except SQLAlchemyError as exc:
            logger.exception("Falha ao criar o schema em %s", self.url)
            raise AppError(ErrorMessages.DATABASE) from exc

    def _seed_default_admin(self, settings: Settings) -> None:
        from models.records import AdminRecord, ProfileRecord
        from services.auth_service import hash_password  # import local para evitar ciclo

        with self.session() as session, session.begin():
            existing = (
                session.query(ProfileRecord)
                .filter(
                    (ProfileRecord.username == settings.admin_username)
                    | (ProfileRecord.email == settings.admin_email)
                )
                .first()
            )
            if existing:
                return
            profile = ProfileRecord(
                email=settings.admin_email,
                username=settings.admin_username,
                password=hash_password(settings.admin_password),
                name="Admin",
                lastname="",
                telephone="",
            )
            session.add(profile)
            session.flush()
            session.add(AdminRecord(id=profile.id, current_account=""))
        logger.info("Administrador padrão '%s' criado", settings.admin_username)

    def dispose(self) -> None:
        self.engine.dispose()


_default_pool: Optional[ConnectionPool] = None


def get_pool() -> ConnectionPool:
    global _default_pool
    if _default_pool is None:
        _default_pool = ConnectionPool(Settings.from_env().db_url)
    return _default_pool


def reset_pool(pool: Optional[ConnectionPool] = None) -> None:
    global _default_pool
    if _default_pool is not None and _default_pool is not pool:
        _default_pool.dispose()
    _default_pool = pool


__all__ = ["Base", "ConnectionPool", "get_pool", "reset_pool"]

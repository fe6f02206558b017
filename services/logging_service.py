"""Registro de auditoria gravado na tabela ``db_log``."""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from core.errors import AppError, ErrorMessages
from database.db import ConnectionPool, get_pool
from models.records import LogRecord

logger = logging.getLogger(__name__)


def record(action: str, username: Optional[str], details: str, pool: Optional[ConnectionPool] = None) -> None:
    pool = pool or get_pool()
    logger.info("%s por %s: %s", action, username or "-", details)
    try:
        with pool.session() as session, session.begin():
            session.add(LogRecord(action=action, username=username, details=details))
    except SQLAlchemyError as exc:
        logger.error("Não foi possível gravar o log de auditoria %s: %s", action, exc)
        raise AppError(ErrorMessages.AUDIT_LOG) from exc


def recent(limit: int = 100, pool: Optional[ConnectionPool] = None) -> List[LogRecord]:
    pool = pool or get_pool()
    with pool.session() as session:
        rows = (
            session.query(LogRecord)
            .order_by(LogRecord.id.desc())
            .limit(limit)
            .all()
        )
        session.expunge_all()
        return rows


__all__ = ["record", "recent"]

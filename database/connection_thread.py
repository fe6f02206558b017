"""Thread auxiliar que pega uma conexão do pool e a segura até ser liberada.

Quem chama espera a conexão ficar pronta com ``wait_for_connection`` (no máximo
50 tentativas de 10 ms) e sempre chama ``release_connection`` ao terminar. Depois
de liberada, a conexão ainda fica com a thread por ``delay`` segundos antes de
voltar ao pool.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from core.errors import AppError, ErrorMessages
from database.db import ConnectionPool

logger = logging.getLogger(__name__)

WAIT_ATTEMPTS = 50
WAIT_INTERVAL = 0.01


class ConnectionThread(threading.Thread):
    def __init__(self, pool: ConnectionPool, delay: float = 0.0) -> None:
        super().__init__(name="connection-thread", daemon=True)
        self.pool = pool
        self.delay = delay
        self._ready = threading.Event()
        self._end = threading.Event()
        self._connection: Optional[Connection] = None
        self._error: Optional[AppError] = None

    def is_ready(self) -> bool:
        return self._ready.is_set()

    def get_connection(self) -> Connection:
        if self._error is not None:
            raise self._error
        if self._connection is None:
            raise AppError(ErrorMessages.TIMEOUT)
        return self._connection

    def release_connection(self) -> None:
        self._end.set()

    def run(self) -> None:
        try:
            self._connection = self.pool.connect()
        except SQLAlchemyError as exc:
            logger.error("Falha ao obter conexão do pool: %s", exc)
            self._error = AppError(f"Error obtaining a connection from pool: {exc}")
            self._ready.set()
            return

        self._ready.set()
        self._end.wait()
        if self.delay > 0:
            time.sleep(self.delay)
        try:
            self._connection.close()
        except SQLAlchemyError as exc:
            logger.error("Falha ao devolver conexão ao pool: %s", exc)
            self._error = AppError(f"Error returning the connection: {exc}")


def wait_for_connection(thread: ConnectionThread) -> Connection:
    attempts = 0
    while not thread.is_ready() and attempts < WAIT_ATTEMPTS:
        time.sleep(WAIT_INTERVAL)
        attempts += 1
    if not thread.is_ready():
        raise AppError(ErrorMessages.TIMEOUT)
    return thread.get_connection()


__all__ = ["ConnectionThread", "wait_for_connection"]

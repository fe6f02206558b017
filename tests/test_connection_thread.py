import time

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from core.errors import AppError, ErrorMessages
from database.connection_thread import ConnectionThread, wait_for_connection
from database.db import MAX_OVERFLOW, POOL_SIZE


def test_thread_hands_out_a_working_connection(pool):
    thread = ConnectionThread(pool)
    thread.start()
    try:
        con = wait_for_connection(thread)
        assert thread.is_ready()
        assert con.execute(text("SELECT 1")).scalar() == 1
    finally:
        thread.release_connection()
    thread.join(timeout=2)
    assert not thread.is_alive()


def test_connection_is_held_for_the_release_delay(pool):
    thread = ConnectionThread(pool, delay=0.2)
    thread.start()
    wait_for_connection(thread)
    started = time.monotonic()
    thread.release_connection()
    thread.join(timeout=2)
    assert time.monotonic() - started >= 0.2
    assert pool.engine.pool.checkedout() == 0


def test_acquisition_error_is_raised_to_caller(pool, monkeypatch):
    def broken_connect():
        raise OperationalError("connect", {}, Exception("refused"))

    monkeypatch.setattr(pool, "connect", broken_connect)
    thread = ConnectionThread(pool)
    thread.start()
    with pytest.raises(AppError) as info:
        wait_for_connection(thread)
    assert str(info.value).startswith("Error obtaining a connection from pool:")
    thread.release_connection()
    thread.join(timeout=2)


def test_wait_times_out_when_thread_never_gets_ready(pool):
    thread = ConnectionThread(pool)
    # a thread que nunca foi iniciada não fica pronta
    with pytest.raises(AppError) as info:
        wait_for_connection(thread)
    assert str(info.value) == ErrorMessages.TIMEOUT


def test_pool_limits_follow_datasource_settings(pool):
    assert pool.engine.pool.size() == POOL_SIZE
    assert POOL_SIZE + MAX_OVERFLOW == 4

"""Pytest configuration and fixtures for the bootstrap tests.

PostgreSQL-only steps are exercised with mocked engines; the DDL itself runs
against SQLite, which accepts every statement of the cricket schema.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest
from sqlalchemy import create_engine, event

from cricket_database.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep env-derived settings and log files inside the test sandbox."""
    for var in ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_ADMIN_NAME", "DB_DRIVER"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, TimedRotatingFileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def sqlite_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'cricket.db'}")

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    yield engine
    engine.dispose()


@pytest.fixture
def transactional_sqlite_engine(tmp_path):
    """SQLite engine where DDL participates in the surrounding transaction.

    pysqlite commits DDL implicitly; taking over BEGIN makes rollback cover
    CREATE TABLE / CREATE INDEX as it does on PostgreSQL.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'cricket_tx.db'}")

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    yield engine
    engine.dispose()

"""Database bootstrap: ensure the target database exists, then apply the schema.

The two steps run strictly in order. A failure in the first step aborts the
run before any DDL is sent; a failure while applying the schema rolls the
whole script back.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import DatabaseSettings, get_settings
from .database import create_admin_engine, create_target_engine
from .ddl import CRICKET_SCHEMA_SQL, SCHEMA_INDEXES, SCHEMA_TABLES
from .exceptions import BootstrapError, DatabaseProvisioningError, SchemaApplicationError
from .utils.sql_script import ScriptStatementError, count_statements, execute_script

logger = logging.getLogger(__name__)

DATABASE_EXISTS_SQL = "SELECT 1 FROM pg_database WHERE datname = :dbname"


class DatabaseStatus(str, Enum):
    CREATED = "created"
    EXISTING = "existing"


class SchemaResult(BaseModel):
    statements_executed: int
    duration_seconds: float = 0.0
    dry_run: bool = False


class BootstrapReport(BaseModel):
    database: str
    database_status: DatabaseStatus
    schema_result: SchemaResult


class SchemaCheck(BaseModel):
    """Presence of the expected schema objects in a database."""

    present_tables: List[str]
    missing_tables: List[str]
    present_indexes: List[str]
    missing_indexes: List[str]

    @property
    def ok(self) -> bool:
        return not self.missing_tables and not self.missing_indexes


def ensure_database_exists(engine: Engine, database_name: str) -> DatabaseStatus:
    """Create ``database_name`` unless the catalog already lists it.

    ``engine`` must point at the administrative database with AUTOCOMMIT
    isolation. The lookup binds the name as a parameter, so only an exact
    ``datname`` match counts as existing.
    """
    if not database_name:
        raise BootstrapError("Target database name must be a non-empty string")

    try:
        with engine.connect() as conn:
            row = conn.execute(text(DATABASE_EXISTS_SQL), {"dbname": database_name}).first()
            if row is not None:
                logger.info(f"Database '{database_name}' already exists")
                return DatabaseStatus.EXISTING

            logger.info(f"Creating database '{database_name}'...")
            quoted = engine.dialect.identifier_preparer.quote_identifier(database_name)
            conn.exec_driver_sql(f"CREATE DATABASE {quoted}")
    except SQLAlchemyError as e:
        raise DatabaseProvisioningError(
            f"Could not ensure database '{database_name}': {e}"
        ) from e

    logger.info(f"Database '{database_name}' created")
    return DatabaseStatus.CREATED


def apply_schema(
    engine: Engine,
    script: str = CRICKET_SCHEMA_SQL,
    dry_run: bool = False,
) -> SchemaResult:
    """Apply the DDL script in a single transaction.

    Commits when every statement succeeds; otherwise the transaction opened by
    ``engine.begin()`` is rolled back and SchemaApplicationError is raised.
    """
    if dry_run:
        count = count_statements(script)
        logger.info(f"Dry run: would execute {count} schema statements")
        return SchemaResult(statements_executed=count, dry_run=True)

    started = time.perf_counter()
    try:
        with engine.begin() as conn:
            executed = execute_script(conn, script)
    except ScriptStatementError as e:
        raise SchemaApplicationError(
            f"Schema creation failed, transaction rolled back: {e}",
            statement_index=e.index,
            statement=e.statement,
        ) from e.cause
    except SQLAlchemyError as e:
        raise SchemaApplicationError(f"Could not connect to target database: {e}") from e

    elapsed = time.perf_counter() - started
    logger.info(f"Cricket schema created successfully ({executed} statements, {elapsed:.2f}s)")
    return SchemaResult(statements_executed=executed, duration_seconds=elapsed)


def verify_schema(engine: Engine) -> SchemaCheck:
    """Report which expected tables and indexes exist in the database."""
    inspector = inspect(engine)
    existing_tables = set(inspector.get_table_names())

    existing_indexes = set()
    for table in SCHEMA_TABLES:
        if table in existing_tables:
            existing_indexes.update(ix["name"] for ix in inspector.get_indexes(table))

    return SchemaCheck(
        present_tables=[t for t in SCHEMA_TABLES if t in existing_tables],
        missing_tables=[t for t in SCHEMA_TABLES if t not in existing_tables],
        present_indexes=[i for i in SCHEMA_INDEXES if i in existing_indexes],
        missing_indexes=[i for i in SCHEMA_INDEXES if i not in existing_indexes],
    )


def run_bootstrap(db_settings: Optional[DatabaseSettings] = None) -> BootstrapReport:
    """Ensure the target database exists, then apply the cricket schema."""
    db_settings = db_settings or get_settings().database
    logger.info(
        f"Bootstrapping database '{db_settings.name}' on {db_settings.host}:{db_settings.port}"
    )

    admin_engine = create_admin_engine(db_settings)
    try:
        status = ensure_database_exists(admin_engine, db_settings.name)
    finally:
        admin_engine.dispose()

    target_engine = create_target_engine(db_settings)
    try:
        schema_result = apply_schema(target_engine)
    finally:
        target_engine.dispose()

    return BootstrapReport(
        database=db_settings.name,
        database_status=status,
        schema_result=schema_result,
    )

"""Database engine management for the bootstrap steps."""

from typing import Optional

from sqlalchemy import create_engine, Engine

from .config import DatabaseSettings, get_settings


def _connect_args(db_settings: DatabaseSettings) -> dict:
    if db_settings.driver.startswith("postgresql"):
        return {"connect_timeout": db_settings.connect_timeout}
    return {}


def create_admin_engine(db_settings: Optional[DatabaseSettings] = None) -> Engine:
    """Engine on the administrative database.

    Uses AUTOCOMMIT isolation since CREATE DATABASE cannot run inside a
    transaction block.
    """
    db_settings = db_settings or get_settings().database
    return create_engine(
        db_settings.admin_url,
        isolation_level="AUTOCOMMIT",
        pool_pre_ping=True,
        connect_args=_connect_args(db_settings),
        echo=False,
    )


def create_target_engine(db_settings: Optional[DatabaseSettings] = None) -> Engine:
    """Engine on the application database."""
    db_settings = db_settings or get_settings().database
    return create_engine(
        db_settings.target_url,
        pool_pre_ping=True,
        connect_args=_connect_args(db_settings),
        echo=False,  # Set to True for SQL debugging
    )

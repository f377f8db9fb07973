# taskmanager/database.py
"""Database engine and per-request session factory using SQLModel."""

import logging
from typing import Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from taskmanager.config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def register_sqlite_functions(target: Engine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` with Python's Unicode folding.

    Title search compares ``lower(title)`` against ``lower(fragment)``, so
    this is what makes "école" match "École".
    """
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


# SQLite connections are used from FastAPI's threadpool.
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)
register_sqlite_functions(engine)


def create_db_and_tables() -> None:
    """Create all tables from SQLModel metadata."""
    logger.info("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database session for FastAPI dependency injection."""
    with Session(engine) as session:
        yield session

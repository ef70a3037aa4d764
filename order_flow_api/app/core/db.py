"""
Database integration.

This module owns the SQLAlchemy engine, the session factory and the
declarative base shared by all ORM models.  It provides a FastAPI
dependency (``get_db``) that opens one session per request and
always closes it, and ``init_db`` which creates missing tables on
application start.  There is no migration system; schema changes
require recreating the database.

SQLite is the default backend.  SQLite does not enforce foreign keys
unless asked to on every connection, so engines created here switch
``PRAGMA foreign_keys`` on through a connect listener.
"""

from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import settings


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys = ON")
    finally:
        cursor.close()


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine for ``database_url``.

    For SQLite URLs the connection is allowed to cross threads (FastAPI
    may run a request on a worker thread) and foreign key enforcement is
    enabled.  Extra keyword arguments are passed to ``create_engine``.
    """
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    else:
        kwargs.setdefault("pool_pre_ping", True)
    engine = create_engine(database_url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = create_db_engine(settings.database_url, echo=settings.debug)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for the duration of one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Importing the models registers their tables on ``Base.metadata``.
    from order_flow_api.app import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)

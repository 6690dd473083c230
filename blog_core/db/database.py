"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration and exposes a
``get_db`` dependency. The engine is created on first use so importing this
module never opens a connection. Callers own the lifecycle of every session
they obtain.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_core.utils.settings import get_database_url, get_settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _sqlite_on_connect(dbapi_connection, connection_record):  # pragma: no cover - trivial
    # SQLite ships with both off; the production store enforces foreign keys
    # and compares LIKE patterns case-sensitively.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA case_sensitive_like=ON")
    cursor.close()


def create_store_engine(url: Optional[str] = None, *, echo: Optional[bool] = None) -> Engine:
    """Create an engine for ``url`` (defaults to the configured database URL)."""
    settings = get_settings()
    if url is None:
        url = get_database_url()
    if echo is None:
        echo = settings.sql_echo

    kwargs: dict = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
            # In-memory SQLite with StaticPool so the schema persists across connections
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
        if settings.pool_size:
            kwargs["pool_size"] = settings.pool_size

    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _sqlite_on_connect)
    logger.debug("Created engine for dialect %s", engine.dialect.name)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    """Create all tables. Intended for tests and local development only."""
    from blog_core.db import models  # local import to avoid circular import at module load
    models.Base.metadata.create_all(bind=engine)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_store_engine()
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = make_session_factory(get_engine())
    return _session_factory


def reset_engine() -> None:
    """Dispose the module engine so the next use rebuilds it from settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db():
    """Dependency to get a database session."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()

"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (local dev and tests).
The engine is built from the Settings object; sessions are request-scoped via get_db.
"""
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from educonnect.config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(cfg: Settings) -> Engine:
    """Create the engine for cfg.database_url. SQLite connections enforce foreign keys."""
    connect_args = {"check_same_thread": False} if cfg.is_sqlite else {}
    eng = create_engine(
        cfg.database_url,
        pool_pre_ping=not cfg.is_sqlite,
        connect_args=connect_args,
        echo=False,  # Set True for SQL logging during development
    )
    if cfg.is_sqlite:
        @event.listens_for(eng, "connect")
        def _sqlite_fk_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return eng


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_sqlite_db():
    """When using SQLite: create tables. PostgreSQL is migrated with Alembic. Call once at app startup."""
    if not settings.is_sqlite:
        return
    # Import all models so they register with Base before create_all
    from educonnect import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("SQLite schema ready (%s)", settings.database_url)


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

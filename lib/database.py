# =============================================================================
# lib/database.py - SQLAlchemy Engine and Sessions
# =============================================================================
# Creates the single engine for the process and hands out sessions.
#
# Usage:
#   from lib.database import SessionLocal, Base
#   with SessionLocal() as db:
#       db.query(...)
#
# FastAPI routes get a per-request session via app.dependencies.get_db.
# =============================================================================

from __future__ import annotations

import logging
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM tables."""


def create_db_engine(url: str | None = None) -> Engine:
    """
    Build an engine for the configured database.

    SQLite needs check_same_thread disabled because FastAPI runs sync
    handlers in a threadpool. Other databases get a bounded pool sized by
    DATABASE_POOL_SIZE.
    """
    url = url or settings.DATABASE_URL

    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


engine = create_db_engine()

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that don't exist yet."""
    # Import tables so they register on Base.metadata
    import core.orm  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")


def session_scope() -> Iterator[Session]:
    """
    Yield a session and always close it.

    Used by FastAPI's get_db dependency.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

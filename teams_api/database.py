"""Database engine, session factory and declarative base."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from teams_api.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all Teams API models."""
    pass


engine: Engine | None = None
SessionLocal = sessionmaker(autoflush=False)


def init_db(database_url=None, **kwargs) -> Engine:
    """Create the engine and verify the store is reachable.

    Raises on failure: a store that cannot be reached at startup is fatal.
    """
    global engine
    url = database_url or settings.database_url
    engine = create_engine(
        url,
        pool_size=kwargs.pop("pool_size", settings.DB_POOL_SIZE),
        max_overflow=kwargs.pop("max_overflow", settings.DB_MAX_OVERFLOW),
        pool_pre_ping=True,
        pool_recycle=3600,
        **kwargs,
    )
    SessionLocal.configure(bind=engine)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")
    return engine


def dispose_db() -> None:
    """Release every pooled connection."""
    global engine
    if engine is not None:
        engine.dispose()
        engine = None


def check_db(db: Session) -> bool:
    """Readiness check: run a trivial query on ``db``."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"DB health check failed: {e}")
        return False


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

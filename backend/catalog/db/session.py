"""Engine and session factory configuration."""

from collections.abc import Generator
import logging
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from catalog.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def engine_options(database_url: str) -> dict[str, Any]:
    """Return pool/connection options suited to the database backend.

    PostgreSQL gets a pre-pinged, recycled connection pool with TCP
    keepalives; other backends (SQLite in tests) use SQLAlchemy defaults.
    """
    if not database_url.startswith("postgresql"):
        return {}
    return {
        "pool_pre_ping": True,  # Test connections before using
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "pool_size": 5,
        "max_overflow": 10,
        "connect_args": {
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        },
    }


def build_engine(database_url: str, echo: bool = False) -> Engine:
    logger.debug(f"Creating engine for {database_url.split('@')[-1]}")
    return create_engine(database_url, echo=echo, **engine_options(database_url))


engine = build_engine(settings.database_url, echo=settings.database_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a transactional session for the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

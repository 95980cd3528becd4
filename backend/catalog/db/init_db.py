"""Database initialization script."""

import logging

from catalog.db import models  # noqa: F401
from catalog.db.base import Base
from catalog.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all catalog tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info(f"Database initialized with tables: {', '.join(Base.metadata.tables)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()

"""Database connection and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Create an engine with connection args suited to the backend."""
    if database_url.startswith("sqlite"):
        # Sessions are handed across threads by the ASGI server
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,        # Number of connections to maintain
        max_overflow=20,     # Maximum overflow connections
        connect_args={"connect_timeout": 10},
    )


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    from . import models  # noqa: F401  (registers tables on Base.metadata)

    Base.metadata.create_all(bind=bind)
    logger.info("database tables ensured", extra={"tables": sorted(Base.metadata.tables)})

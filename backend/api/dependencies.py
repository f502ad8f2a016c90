"""
dependencies.py — FastAPI dependency injection

Provides the per-request collaborators of the event endpoints:
    get_db()               SQLAlchemy session, closed when the request ends
    get_event_repository() EventRepository bound to that session
    get_image_storage()    ImageStorage rooted at settings.upload_dir

Tests swap any of these through app.dependency_overrides.

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_event_repository
    from db.repository import EventRepository

    @router.get("/example")
    def example(repo: EventRepository = Depends(get_event_repository)):
        return repo.list_all()
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from core.config import settings
from core.storage import ImageStorage
from db.database import SessionLocal
from db.repository import EventRepository


def get_db() -> Generator[Session, None, None]:
    """Yield a database session, guaranteed to close after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


def get_image_storage() -> ImageStorage:
    return ImageStorage(settings.upload_dir)


def check_db_connectivity(db: Session) -> None:
    """Execute SELECT 1 to verify the database is reachable.

    Raises:
        RuntimeError: with a descriptive message if the connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        raise RuntimeError(f"Database connectivity check failed: {exc}") from exc

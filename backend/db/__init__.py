"""Database package for the Event API."""

from .database import Base, engine, SessionLocal, init_db
from .models import Event
from .repository import EventRepository

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "init_db",
    "Event",
    "EventRepository",
]

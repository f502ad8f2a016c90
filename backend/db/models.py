"""SQLAlchemy models for the Event API."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from .database import Base


class Event(Base):
    """A scheduled event, optionally with an uploaded image."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(DateTime)

    # Path returned by ImageStorage.save(); not changed by updates
    image_path = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Event(id={self.id}, name='{self.name}', date={self.date})>"

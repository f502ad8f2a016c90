"""Repository over the events table.

Wraps a SQLAlchemy Session behind the small set of operations the event
endpoints need: add, find_by_id, remove, list_all, persist.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Event

logger = logging.getLogger(__name__)


class EventRepository:
    def __init__(self, session: Session):
        self.session = session

    def add(self, event: Event) -> Event:
        """Stage a new event. Its id is assigned on persist()."""
        self.session.add(event)
        return event

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.session.get(Event, event_id)

    def remove(self, event: Event) -> None:
        self.session.delete(event)

    def list_all(self) -> list[Event]:
        return list(self.session.scalars(select(Event).order_by(Event.id)))

    def persist(self, *refresh: Event) -> None:
        """Commit pending changes, then reload the given entities.

        Rolls back before re-raising so the session stays usable for the
        remainder of the request.
        """
        try:
            self.session.commit()
        except Exception:
            logger.error("commit failed, rolling back", exc_info=True)
            self.session.rollback()
            raise
        for event in refresh:
            self.session.refresh(event)

"""
Unit tests for db/repository.py against the in-memory SQLite session.

Run from the project root:
    cd backend
    pytest tests/test_repository.py -v
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from db.models import Event
from db.repository import EventRepository


def _event(name="Event1", **overrides):
    fields = {
        "name": name,
        "description": "Desc",
        "location": "Loc",
        "date": datetime(2025, 6, 15, 18, 30),
    }
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture()
def repo(db_session):
    return EventRepository(db_session)


class TestAddAndPersist:

    def test_id_is_assigned_on_persist(self, repo):
        event = repo.add(_event())
        assert event.id is None

        repo.persist(event)

        assert isinstance(event.id, int)

    def test_ids_are_unique(self, repo):
        events = [repo.add(_event(f"Event{i}")) for i in range(5)]
        repo.persist(*events)

        assert len({e.id for e in events}) == 5

    def test_persisted_event_visible_from_another_session(self, repo, session_factory):
        event = repo.add(_event())
        repo.persist(event)

        other = session_factory()
        try:
            assert other.get(Event, event.id).name == "Event1"
        finally:
            other.close()


class TestFindAndList:

    def test_find_missing_returns_none(self, repo):
        assert repo.find_by_id(999) is None

    def test_find_existing(self, repo):
        event = repo.add(_event("Findable"))
        repo.persist(event)

        assert repo.find_by_id(event.id).name == "Findable"

    def test_list_all_empty(self, repo):
        assert repo.list_all() == []

    def test_list_all_returns_every_event(self, repo):
        events = [repo.add(_event(f"Event{i}")) for i in range(3)]
        repo.persist(*events)

        assert {e.id for e in repo.list_all()} == {e.id for e in events}


class TestRemove:

    def test_remove_then_persist_deletes_row(self, repo):
        event = repo.add(_event())
        repo.persist(event)
        event_id = event.id

        repo.remove(event)
        repo.persist()

        assert repo.find_by_id(event_id) is None
        assert repo.list_all() == []


class TestPersistFailure:

    def test_rolls_back_and_reraises(self, repo):
        repo.add(_event(name=None))

        with pytest.raises(IntegrityError):
            repo.persist()

        # Session is usable again after the rollback
        event = repo.add(_event("After"))
        repo.persist(event)
        assert [e.name for e in repo.list_all()] == ["After"]

    def test_rollback_called_on_commit_error(self):
        session = MagicMock()
        session.commit.side_effect = RuntimeError("db down")
        repo = EventRepository(session)

        with pytest.raises(RuntimeError, match="db down"):
            repo.persist()

        session.rollback.assert_called_once()
        session.refresh.assert_not_called()

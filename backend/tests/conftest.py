"""
conftest.py for backend/tests/

Runs the API against an in-memory SQLite database instead of the configured
DATABASE_URL. Every test gets a fresh schema, and uploaded images are written
to pytest's tmp_path.

Run from the project root:
    cd backend
    pytest tests -v
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add backend/ to sys.path so `api`, `core`, `db` and `schemas` import as top-level packages.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from api.dependencies import get_db, get_image_storage  # noqa: E402
from api.main import app  # noqa: E402
from core.storage import ImageStorage  # noqa: E402
from db.database import init_db  # noqa: E402


# ---------------------------------------------------------------------------
# Database double — one in-memory SQLite connection shared by all sessions
# ---------------------------------------------------------------------------

@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def image_dir(tmp_path):
    return tmp_path / "UploadedImages"


# ---------------------------------------------------------------------------
# API client with dependencies overridden
# ---------------------------------------------------------------------------

@pytest.fixture()
def client(session_factory, image_dir):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_image_storage] = lambda: ImageStorage(image_dir)
    # No context manager: the lifespan (logging setup, create_all on the
    # configured database) is not run for these tests.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def event_form():
    return {
        "name": "Test Event",
        "description": "Test Description",
        "location": "Test Location",
        "date": "2025-06-15T18:30:00",
    }


@pytest.fixture()
def create_event(client):
    """POST an event and return the decoded EventResponse."""
    def _create(**fields):
        data = {
            "name": "Event",
            "description": "Desc",
            "location": "Loc",
            "date": "2025-06-15T18:30:00",
        }
        data.update(fields)
        response = client.post("/api/v1/events", data=data)
        assert response.status_code == 201, response.text
        return response.json()

    return _create

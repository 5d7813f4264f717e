"""
Shared fixtures: an in-memory SQLite store and a TestClient wired to it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from internhub.database import Base
from internhub.main import app
from internhub.store import CollectionStore, get_store


@pytest.fixture
def engine():
    # StaticPool keeps every session on the one in-memory database
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def empty_store(session_factory):
    """A store with no slots at all."""
    db = session_factory()
    yield CollectionStore(db)
    db.close()


@pytest.fixture
def store(session_factory):
    """A store holding the default dataset."""
    db = session_factory()
    yield CollectionStore.open(db)
    db.close()


@pytest.fixture
def client(session_factory, store):
    """TestClient whose requests each get a fresh session on the seeded test database."""

    def override_get_store():
        db = session_factory()
        try:
            yield CollectionStore(db)
        finally:
            db.close()

    app.dependency_overrides[get_store] = override_get_store
    yield TestClient(app)
    app.dependency_overrides.clear()

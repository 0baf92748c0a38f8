"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Force an in-memory SQLite database and the SQL backend; don't inherit from .env
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DATA_BACKEND"] = "sql"


@pytest.fixture
def memory_storage():
    """Empty in-memory storage."""
    from app.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def client(memory_storage) -> TestClient:
    """FastAPI test client reading from the memory_storage fixture."""
    from app.api.deps import get_storage
    from app.main import app

    app.dependency_overrides[get_storage] = lambda: memory_storage
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
def db() -> Session:
    """Session on the in-memory SQLite engine with all tables created; dropped after."""
    import app.models  # noqa: F401
    from app.db.session import Base, SessionLocal, engine

    Base.metadata.create_all(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)

"""Shared test configuration, pytest markers and database fixtures."""

import os

# Must be set before config.settings is first imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["OLLAMA_API_KEY"] = ""

import pytest  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the database or the HTTP app"
    )


@pytest.fixture
def db_session():
    """A session on a fresh in-memory schema."""
    from database import Base, SessionLocal, engine, init_db

    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient whose lifespan creates the schema; tables are dropped afterwards."""
    from fastapi.testclient import TestClient

    from database import Base, engine
    from main import app

    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)

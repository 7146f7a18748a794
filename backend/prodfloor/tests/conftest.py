"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Skip startup seeding in tests

from prodfloor.db import Base, Job, get_db  # noqa: E402
from prodfloor.main import app  # noqa: E402 - must set env vars before importing

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def plain_jobs():
    """Five untyped jobs P1..P5."""
    return [Job(id=i, name=f"P{i}") for i in range(1, 6)]


@pytest.fixture
def typed_jobs():
    """P1..P5 tagged Cat1, Cat2, Cat1, Cat2, Cat3."""
    types = ["Cat1", "Cat2", "Cat1", "Cat2", "Cat3"]
    return [Job(id=i, name=f"P{i}", job_type=t) for i, t in enumerate(types, start=1)]


@pytest.fixture
def stored_jobs(db_session, typed_jobs):
    """Persist the typed jobs."""
    db_session.add_all(typed_jobs)
    db_session.commit()
    return typed_jobs

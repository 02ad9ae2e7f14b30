"""
Pytest fixtures for the test suite.

Data-layer tests use an in-memory SQLite engine and a session that rolls back
after each test, so tests do not affect each other. API tests reuse that
session by overriding the `get_db` dependency.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker


TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Create a fresh in-memory SQLite engine for each test."""
    return create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        echo=False,
    )


@pytest.fixture
def tables(engine):
    """Create all ORM tables on the test engine."""
    from app.db.base import Base
    from app.models import hr  # noqa: F401  (register the employees table)

    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def db_session(tables):
    """
    Provide a Session bound to the test DB; roll back after each test.

    The repository commits, but the outer transaction owned by this fixture
    is what gets rolled back, so the next test starts empty.
    """
    connection = tables.connect()
    transaction = connection.begin()
    TestSession = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        class_=Session,
    )
    session = TestSession()
    yield session
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def client(db_session):
    """
    TestClient wired to the test session.

    Used without a `with` block on purpose: the lifespan (which would create
    tables on the configured database) does not run.
    """
    from app.db.session import get_db
    from app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def ada_payload() -> dict:
    return {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "gender": "female",
        "birthday": "1815-12-10",
        "monthly_salary": 1000,
    }

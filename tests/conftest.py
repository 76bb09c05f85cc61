"""Pytest configuration and fixtures for testing.

This module provides shared fixtures backed by an in-memory SQLite database
for fast and isolated test execution.
"""

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from task_api.api.app import create_app
from task_api.config import Settings
from task_api.models.base import Base

TEST_SECRET = "test-signing-secret-of-sufficient-length"


def make_token(claims=None, secret=TEST_SECRET):
    """Sign a credential the way a client of the API would receive one."""
    if claims is None:
        claims = {"email": "student@example.com"}
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine with the schema in place."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    
    Base.metadata.create_all(bind=engine)
    
    yield engine
    
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing."""
    SessionLocal = sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )
    
    session = SessionLocal()
    
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def settings():
    """Settings pointing at an in-memory database and the test secret."""
    return Settings(
        database_url_override="sqlite:///:memory:",
        jwt_secret=TEST_SECRET,
        app_env="test",
    )


@pytest.fixture(scope="function")
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app):
    """Create a FastAPI test client; entering it runs the application lifespan.
    
    Server exceptions are not re-raised so formatted 500 responses can be
    asserted on.
    """
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def token():
    return make_token()


@pytest.fixture(scope="function")
def token_factory():
    """Return ``make_token`` so tests can sign credentials with custom claims or secrets."""
    return make_token

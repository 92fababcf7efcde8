# File: tests/conftest.py

"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
whose ``get_db`` / ``get_settings`` dependencies point at it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.config import Settings, get_settings
from app.db.init_db import init_db
from app.main import app
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService

TEST_SECRET = "test-secret"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, password_scheme="hmac-sha256")


@pytest.fixture
def service(db, settings):
    return UserService(UserRepository(db), settings)


@pytest.fixture
def client(db, settings):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

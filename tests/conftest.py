"""
pytest fixtures for the Users API test suite.

Every test gets its own application and store, so mutations made by
one test never leak into another.
"""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.store import UserStore
from users_api.app.main import create_app


@pytest.fixture
def settings():
    return Settings(seed_users=True, validate_updates=True, cors_allow_origin="*")


@pytest.fixture
def store():
    return UserStore.seeded()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Builds the app against an in-memory database and session store
# - Shortcuts for registering and logging in
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("SECRET", "test-secret-key-for-sessions")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from lib.session_store import MemorySessionStore
from tests.fakes import FakeDatabase


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    """Empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def app(fake_db, session_store):
    return create_app(database=fake_db, session_store=session_store)


@pytest.fixture
def client(app):
    """Test client with the lifespan running; cookies persist across calls."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """POST /register without following the redirect."""
    def _register(username="alice", email="a@x.com", password="pw1"):
        return client.post(
            "/register",
            data={"username": username, "email": email, "password": password},
            follow_redirects=False,
        )
    return _register


@pytest.fixture
def login(client):
    """POST /login without following the redirect."""
    def _login(username="alice", password="pw1"):
        return client.post(
            "/login",
            data={"username": username, "password": password},
            follow_redirects=False,
        )
    return _login



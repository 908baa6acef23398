# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides a fresh store and app per test (no state leaks between tests)
# - Provides helpers for creating users and todos through the API
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CORS_ORIGINS", "*")
os.environ.setdefault("FREE_PLAN_TODO_LIMIT", "10")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from lib.store import UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory store."""
    return UserStore()


@pytest.fixture
def app(store):
    """Application serving from the test's store."""
    application = create_app(store=store)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient with lifespan events enabled."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_user(client):
    """
    Factory that creates a user through the API.

    Returns the response JSON and fails the test if creation fails.
    """
    def _create_user(name: str = "Ana", username: str = "ana") -> dict:
        response = client.post("/users", json={"name": name, "username": username})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_user


@pytest.fixture
def create_todo(client):
    """
    Factory that creates a todo for a username through the API.

    Returns the response JSON and fails the test if creation fails.
    """
    def _create_todo(
        username: str = "ana",
        title: str = "buy milk",
        deadline: str = "2025-01-01",
    ) -> dict:
        response = client.post(
            "/todos",
            json={"title": title, "deadline": deadline},
            headers={"username": username},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create_todo


@pytest.fixture
def sample_user_data():
    """Sample user request body."""
    return {"name": "Ana", "username": "ana"}


@pytest.fixture
def sample_todo_data():
    """Sample todo request body."""
    return {"title": "buy milk", "deadline": "2025-01-01"}

"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- Mocked MongoDB collections and the EventService built on them
- A FastAPI test client whose EventService dependency is mocked
"""

import os
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from _pytest.config import Config
from fastapi import FastAPI
from fastapi.testclient import TestClient

from event_registry.database import EVENTS_COLLECTION, PARTICIPANTS_COLLECTION
from event_registry.dependencies import get_event_service
from event_registry.main import create_app
from event_registry.services import EventService
from tests.fixtures import make_collection

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (may use external services)")
    config.addinivalue_line("markers", "asyncio: Async tests")


# ============================================================================
# MONGODB FIXTURES
# ============================================================================


@pytest.fixture
def events_collection() -> MagicMock:
    """Provide a mocked ``events`` collection."""
    return make_collection()


@pytest.fixture
def participants_collection() -> MagicMock:
    """Provide a mocked ``participants`` collection."""
    return make_collection()


@pytest.fixture
def mock_database(events_collection: MagicMock, participants_collection: MagicMock) -> MagicMock:
    """Provide a database mock that hands out the mocked collections by name."""
    collections = {
        EVENTS_COLLECTION: events_collection,
        PARTICIPANTS_COLLECTION: participants_collection,
    }
    database = MagicMock()
    database.__getitem__.side_effect = lambda name: collections[name]
    return database


@pytest.fixture
def event_service(mock_database: MagicMock) -> EventService:
    """Provide an EventService over the mocked database."""
    return EventService(mock_database)


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def mock_event_service() -> MagicMock:
    """Provide a mock EventService for router tests."""
    mock = MagicMock(spec=EventService)
    mock.list_events = AsyncMock()
    mock.create_event = AsyncMock()
    mock.get_event_by_id = AsyncMock(return_value=None)
    mock.update_event = AsyncMock(return_value=None)
    mock.delete_event = AsyncMock(return_value=None)
    mock.register_participant = AsyncMock()
    mock.list_participants = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def app(mock_event_service: MagicMock) -> FastAPI:
    """Provide the application with its EventService dependency overridden.

    The lifespan is never entered, so no MongoDB connection is opened.
    """
    application = create_app()
    application.dependency_overrides[get_event_service] = lambda: mock_event_service
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# ============================================================================
# CLEANUP FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables after each test."""
    original_env: dict[str, str] = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)

"""Pytest configuration and shared fixtures for the Folder Store tests."""

import logging
from typing import List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from folder_store.config import Settings
from folder_store.db.connection import db_manager
from folder_store.main import create_app
from folder_store.models.folders import Folder
from folder_store.services.folders import FolderService
from folder_store.sources import InMemoryRecordSource, generate_sample_folders


# Disable logging for cleaner test output
logging.getLogger("folder_store").setLevel(logging.WARNING)


@pytest.fixture(scope="session")
def sample_folders() -> List[Folder]:
    """The generated sample data set."""
    return generate_sample_folders()


@pytest.fixture
def memory_source(sample_folders: List[Folder]) -> InMemoryRecordSource:
    """In-memory record source over the sample data."""
    return InMemoryRecordSource(sample_folders)


@pytest.fixture
def folder_service(memory_source: InMemoryRecordSource) -> FolderService:
    """Folder service over the sample data with no page size limit."""
    return FolderService(memory_source)


@pytest.fixture
def test_settings() -> Settings:
    """Override settings for testing."""
    return Settings(
        host="127.0.0.1",
        port=8001,
        debug=True,
        log_level="ERROR",
        record_source="memory",
        default_page_size=50,
        max_page_size=1000,
        token_format="base64"
    )


@pytest.fixture
def app(test_settings: Settings, memory_source: InMemoryRecordSource) -> FastAPI:
    """Create FastAPI application instance for testing."""
    return create_app(settings=test_settings, source=memory_source)


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    """Create test client for API testing."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_db_manager():
    """Drop any engine a test left on the global database manager."""
    yield
    db_manager.close()

"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from file_summarizer.core.config import ProviderConfig
from file_summarizer.main import app


@pytest.fixture
def test_client() -> TestClient:
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_dependency_overrides():
    """Ensure FastAPI dependency overrides are reset between tests."""
    app.dependency_overrides = {}
    yield
    app.dependency_overrides = {}


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Provider config with a usable API key."""
    return ProviderConfig(api_key="sk-test", model="text-davinci-003", max_tokens=150, temperature=0.5)


@pytest.fixture
def unconfigured_config() -> ProviderConfig:
    """Provider config without an API key."""
    return ProviderConfig(api_key=None)


@pytest.fixture
def mock_provider() -> AsyncMock:
    """Completion provider returning a canned summary.

    Returns:
        AsyncMock: object with an awaitable ``complete`` method
    """
    provider = AsyncMock()
    provider.complete.return_value = "  This is the summary.\n"
    return provider

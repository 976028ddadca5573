"""Pytest fixtures and configuration for searchscape tests.

This module provides shared fixtures for testing the MCP server, the tool
dispatcher, the session store and the image providers.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from searchscape.dispatcher import ToolDispatcher
from searchscape.providers import (
    HuggingFaceInference,
    ImageInferenceProvider,
    ImageSearchProvider,
    UnsplashSearch,
)
from searchscape.sessions import InMemorySessionStore

UNSPLASH_URL = "https://unsplash.test"
HF_URL = "https://hf.test"


# --- Sample Data Fixtures ---


@pytest.fixture
def unsplash_payload() -> dict:
    """A random-photo response as returned by Unsplash."""
    return {
        "id": "abc123",
        "urls": {
            "raw": "http://img/1?raw",
            "regular": "http://img/1",
            "small": "http://img/1?small",
        },
    }


@pytest.fixture
def generated_payload() -> list[dict]:
    """An inference response carrying a generated image."""
    return [{"generated_image": "http://generated/1"}]


# --- Provider Fixtures ---


@pytest.fixture
def unsplash() -> UnsplashSearch:
    """Unsplash provider pointed at a mocked base URL."""
    return UnsplashSearch(access_key="test-unsplash-key", base_url=UNSPLASH_URL)


@pytest.fixture
def huggingface() -> HuggingFaceInference:
    """Hugging Face provider pointed at a mocked base URL."""
    return HuggingFaceInference(api_key="test-hf-key", base_url=HF_URL)


@pytest.fixture
def mock_search_provider() -> ImageSearchProvider:
    """Create a mock search provider that always finds http://img/1."""
    provider = MagicMock(spec=ImageSearchProvider)
    provider.name = "mock-search"
    provider.search = AsyncMock(return_value="http://img/1")
    return provider


@pytest.fixture
def mock_inference_provider() -> ImageInferenceProvider:
    """Create a mock inference provider that returns http://generated/1."""
    provider = MagicMock(spec=ImageInferenceProvider)
    provider.name = "mock-inference"
    provider.transform = AsyncMock(return_value="http://generated/1")
    return provider


@pytest.fixture
def session_store() -> InMemorySessionStore:
    """Create an empty in-memory session store."""
    return InMemorySessionStore()


@pytest.fixture
def dispatcher(session_store, mock_search_provider, mock_inference_provider) -> ToolDispatcher:
    """Dispatcher wired to the mock providers."""
    return ToolDispatcher(
        session_store=session_store,
        search_provider=lambda: mock_search_provider,
        inference_provider=lambda: mock_inference_provider,
    )


@pytest.fixture
def http_dispatcher(session_store, unsplash, huggingface) -> ToolDispatcher:
    """Dispatcher wired to real providers, for use with respx."""
    return ToolDispatcher(
        session_store=session_store,
        search_provider=lambda: unsplash,
        inference_provider=lambda: huggingface,
    )


# --- Settings Override Fixtures ---


@pytest.fixture
def mock_settings(monkeypatch):
    """Override settings with test values."""
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "test-unsplash-key")
    monkeypatch.setenv("HUGGING_FACE_API_KEY", "test-hf-key")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from searchscape.config import Settings

    return Settings()

"""Shared pytest fixtures for A.IDEAL LLM SDK tests."""

import pytest

from aideal_llm_sdk.api.client import set_default_router
from aideal_llm_sdk.config.settings import ProviderClients, RouterSettings
from aideal_llm_sdk.core.routing.router import AIRouter
from aideal_llm_sdk.models.generation import MessageRole, UnifiedMessage
from tests.helpers.mock_responses import (
    make_anthropic_client,
    make_gemini_client,
    make_openai_client,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")
    config.addinivalue_line("markers", "integration: tests spanning router, API and HTTP layers")


@pytest.fixture(autouse=True)
def reset_default_router():
    """Never let one test's default router leak into another."""
    set_default_router(None)
    yield
    set_default_router(None)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "CLAUDE_API_KEY": "test-claude-key",
        "GROK_API_KEY": "test-grok-key",
        "GEMINI_API_KEY": "test-gemini-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def test_settings():
    return RouterSettings(
        openai_api_key="test-openai-key",
        claude_api_key="test-claude-key",
        grok_api_key="test-grok-key",
        gemini_api_key="test-gemini-key",
    )


@pytest.fixture
def sample_messages():
    """System + user conversation."""
    return [
        UnifiedMessage(role=MessageRole.SYSTEM, content="You are a helpful assistant."),
        UnifiedMessage(role=MessageRole.USER, content="What is a good prompt?"),
    ]


@pytest.fixture
def mock_gpt_client():
    """Mock AsyncOpenAI client for GPT."""
    return make_openai_client()


@pytest.fixture
def mock_claude_client():
    """Mock AsyncAnthropic client."""
    return make_anthropic_client()


@pytest.fixture
def mock_grok_client():
    """Mock AsyncOpenAI client pointed at xAI."""
    return make_openai_client()


@pytest.fixture
def mock_gemini_client():
    """Mock google-genai client."""
    return make_gemini_client()


@pytest.fixture
def mock_clients(mock_gpt_client, mock_claude_client, mock_grok_client, mock_gemini_client):
    """All four providers configured."""
    return ProviderClients(
        gpt=mock_gpt_client,
        claude=mock_claude_client,
        grok=mock_grok_client,
        gemini=mock_gemini_client,
    )


@pytest.fixture
def router(mock_clients, test_settings):
    return AIRouter(clients=mock_clients, settings=test_settings)


@pytest.fixture
def gpt_only_router(mock_gpt_client, test_settings):
    """Only GPT configured; every other provider falls back to it."""
    return AIRouter(clients=ProviderClients(gpt=mock_gpt_client), settings=test_settings)
